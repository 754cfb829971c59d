"""Blog posts: public reads and admin writes."""

from typing import Optional

from sabi.models.base import parse_input
from sabi.models.blog_post import (
    DEFAULT_AUTHOR,
    BlogPost,
    CreateBlogPostInput,
    PostStatus,
    UpdateBlogPostInput,
)
from sabi.services.mapping import from_row, from_rows, to_row
from sabi.services.store import CollectionStore
from sabi.utils.errors import NotFoundError, StorageError, ValidationError
from sabi.utils.ids import utc_now
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

RECENT_POSTS_LIMIT = 3

# Postgres unique_violation
_UNIQUE_VIOLATION = "23505"


async def list_published_posts(store: CollectionStore, limit: Optional[int] = None) -> list[BlogPost]:
    rows = await store.list(
        filters={"status": PostStatus.PUBLISHED.value},
        order_by="published_at",
        descending=True,
        limit=limit,
    )
    return from_rows(BlogPost, rows)


async def recent_posts(store: CollectionStore, limit: int = RECENT_POSTS_LIMIT) -> list[BlogPost]:
    return await list_published_posts(store, limit=limit)


async def list_all_posts(store: CollectionStore) -> list[BlogPost]:
    """Drafts included, newest first (back office)."""
    rows = await store.list(order_by="created_at", descending=True)
    return from_rows(BlogPost, rows)


async def get_post(store: CollectionStore, post_id: str) -> BlogPost:
    row = await store.get(post_id)
    if row is None:
        raise NotFoundError(f"Blog not found: {post_id}")
    return from_row(BlogPost, row)


async def get_published_post(store: CollectionStore, slug: str) -> BlogPost:
    rows = await store.list(filters={"slug": slug, "status": PostStatus.PUBLISHED.value}, limit=1)
    if not rows:
        raise NotFoundError(f"Blog not found: {slug}")
    return from_row(BlogPost, rows[0])


async def _ensure_slug_free(store: CollectionStore, slug: str) -> None:
    if await store.list(filters={"slug": slug}, limit=1):
        raise ValidationError("slug", "A blog with this slug already exists")


def _slug_conflict(e: StorageError) -> None:
    # Lost a race with a concurrent writer on the unique index
    if e.code == _UNIQUE_VIOLATION:
        raise ValidationError("slug", "A blog with this slug already exists") from e


async def create_post(store: CollectionStore, data: CreateBlogPostInput) -> BlogPost:
    await _ensure_slug_free(store, data.slug)

    now = utc_now().isoformat()
    row = to_row(BlogPost, {
        **data.model_dump(mode="json"),
        "author": data.author or DEFAULT_AUTHOR,
        "published_at": now if data.status == PostStatus.PUBLISHED else None,
        "created_at": now,
        "updated_at": now,
    })

    try:
        post = from_row(BlogPost, await store.insert(row))
    except StorageError as e:
        _slug_conflict(e)
        raise

    logger.info("Blog post created", post_id=post.id, slug=post.slug, status=post.status.value)
    return post


async def update_post(store: CollectionStore, post_id: str, data: UpdateBlogPostInput) -> BlogPost:
    """
    Apply a partial update.

    published_at is stamped the first time the post becomes published and
    never moves afterwards, even if the post is unpublished and republished.
    """
    existing = await get_post(store, post_id)
    now = utc_now().isoformat()
    changes = {**data.changes(), "updated_at": now}

    if "author" in changes and not changes["author"]:
        changes["author"] = DEFAULT_AUTHOR
    if changes.get("slug") and changes["slug"] != existing.slug:
        await _ensure_slug_free(store, changes["slug"])

    new_status = changes.get("status", existing.status.value)
    if new_status == PostStatus.PUBLISHED.value and existing.published_at is None:
        changes["published_at"] = now

    parse_input(BlogPost, {**existing.model_dump(mode="json"), **changes})

    try:
        row = await store.update(post_id, to_row(BlogPost, changes))
    except StorageError as e:
        _slug_conflict(e)
        raise
    if row is None:
        raise NotFoundError(f"Blog not found: {post_id}")

    if "published_at" in changes:
        logger.info("Blog post published", post_id=post_id, published_at=now)
    return from_row(BlogPost, row)


async def delete_post(store: CollectionStore, post_id: str) -> None:
    if not await store.delete(post_id):
        raise NotFoundError(f"Blog not found: {post_id}")
    logger.info("Blog post deleted", post_id=post_id)
