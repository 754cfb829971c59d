"""
Properties endpoint.

GET     ?id=<id>             one listing
        ?featured=true       featured listings for the home page
        ?scope=all           every listing, any status (admin)
        otherwise            available listings matching type, district,
                             priceRange, minPrice, maxPrice, bedrooms
POST                         create (admin)
PUT     ?id=<id>             partial update (admin)
DELETE  ?id=<id>             delete (admin)
"""

from sabi.services import listings
from sabi.services.admin_auth import default_authorizer
from sabi.services.admin_gateway import AdminMutationGateway
from sabi.services.listing_filter import ListingFilter, featured_listings, search_listings
from sabi.services.store import CollectionStore, listing_store
from sabi.utils.http import dispatch, json_response, parse_json_body, query_param, require_param, run_async


def get_listing_store() -> CollectionStore:
    return listing_store()


def get_gateway() -> AdminMutationGateway:
    return AdminMutationGateway(default_authorizer, listings_store=get_listing_store())


def _list_response(items) -> dict:
    return json_response(200, {"properties": [item.to_wire() for item in items], "count": len(items)})


def _get(request):
    store = get_listing_store()

    listing_id = query_param(request, "id")
    if listing_id:
        listing = run_async(listings.get_listing(store, listing_id))
        return json_response(200, {"property": listing.to_wire()})

    if query_param(request, "featured") in ("true", "1"):
        return _list_response(run_async(featured_listings(store)))

    if query_param(request, "scope") == "all":
        get_gateway().require_admin(request)
        return _list_response(run_async(listings.list_all_listings(store)))

    criteria = ListingFilter.from_query(request.get("query") or {})
    return _list_response(run_async(search_listings(store, criteria)))


def _post(request):
    listing = run_async(get_gateway().create_listing(request, parse_json_body(request)))
    return json_response(201, {"property": listing.to_wire()})


def _put(request):
    listing_id = require_param(request, "id")
    listing = run_async(get_gateway().update_listing(request, listing_id, parse_json_body(request)))
    return json_response(200, {"property": listing.to_wire()})


def _delete(request):
    listing_id = require_param(request, "id")
    run_async(get_gateway().delete_listing(request, listing_id))
    return json_response(200, {"ok": True})


def handler(request):
    return dispatch(request, {"GET": _get, "POST": _post, "PUT": _put, "DELETE": _delete}, "properties")
