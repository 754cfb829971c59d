"""Blog post models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from sabi.models.base import CamelModel

DEFAULT_AUTHOR = "Sabi Consults"
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class BlogPost(CamelModel):
    """Blog post; content is editor-produced HTML and is stored untouched."""
    id: str
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: str
    cover_image: Optional[str] = None
    author: str = DEFAULT_AUTHOR
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = Field(None, description="Set once, on first publish")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED


class CreateBlogPostInput(CamelModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    content: str = Field(..., min_length=1)
    cover_image: Optional[str] = None
    author: Optional[str] = None
    status: PostStatus = PostStatus.DRAFT


class UpdateBlogPostInput(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1, pattern=SLUG_PATTERN)
    excerpt: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    cover_image: Optional[str] = None
    author: Optional[str] = None
    status: Optional[PostStatus] = None

    def changes(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)
