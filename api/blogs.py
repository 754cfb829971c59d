"""
Blogs endpoint.

GET     ?slug=<slug>         one published post
        ?recent=true         latest published posts for the home page
        ?id=<id>             one post, drafts included (admin)
        ?scope=all           every post, drafts included (admin)
        otherwise            published posts, newest first
POST                         create (admin)
PUT     ?id=<id>             partial update (admin)
DELETE  ?id=<id>             delete (admin)
"""

from sabi.services import blog_posts
from sabi.services.admin_auth import default_authorizer
from sabi.services.admin_gateway import AdminMutationGateway
from sabi.services.store import CollectionStore, blog_store
from sabi.utils.http import dispatch, json_response, parse_json_body, query_param, require_param, run_async


def get_blog_store() -> CollectionStore:
    return blog_store()


def get_gateway() -> AdminMutationGateway:
    return AdminMutationGateway(default_authorizer, blogs_store=get_blog_store())


def _posts_response(posts) -> dict:
    return json_response(200, {"blogs": [post.to_wire() for post in posts]})


def _get(request):
    store = get_blog_store()

    slug = query_param(request, "slug")
    if slug:
        post = run_async(blog_posts.get_published_post(store, slug))
        return json_response(200, {"blog": post.to_wire()})

    post_id = query_param(request, "id")
    if post_id:
        get_gateway().require_admin(request)
        post = run_async(blog_posts.get_post(store, post_id))
        return json_response(200, {"blog": post.to_wire()})

    if query_param(request, "scope") == "all":
        get_gateway().require_admin(request)
        return _posts_response(run_async(blog_posts.list_all_posts(store)))

    if query_param(request, "recent") in ("true", "1"):
        return _posts_response(run_async(blog_posts.recent_posts(store)))

    return _posts_response(run_async(blog_posts.list_published_posts(store)))


def _post(request):
    post = run_async(get_gateway().create_post(request, parse_json_body(request)))
    return json_response(201, {"blog": post.to_wire()})


def _put(request):
    post_id = require_param(request, "id")
    post = run_async(get_gateway().update_post(request, post_id, parse_json_body(request)))
    return json_response(200, {"blog": post.to_wire()})


def _delete(request):
    post_id = require_param(request, "id")
    run_async(get_gateway().delete_post(request, post_id))
    return json_response(200, {"ok": True})


def handler(request):
    return dispatch(request, {"GET": _get, "POST": _post, "PUT": _put, "DELETE": _delete}, "blogs")
