"""Map endpoint: render plan (markers and viewport) for the property map."""

from sabi.services import listings
from sabi.services.listing_filter import ListingFilter, count_by_type, search_listings
from sabi.services.map_plan import build_map_plan
from sabi.services.store import CollectionStore, listing_store
from sabi.utils.http import dispatch, json_response, query_param, run_async


def get_listing_store() -> CollectionStore:
    return listing_store()


def _get(request):
    """
    ?id=<id> plans a single selected listing. Any other query is treated
    as search criteria, the same ones the properties grid accepts.
    """
    store = get_listing_store()

    listing_id = query_param(request, "id")
    if listing_id:
        listing = run_async(listings.get_listing(store, listing_id))
        plan = build_map_plan(listing)
        shown = [listing]
    else:
        shown = run_async(search_listings(store, ListingFilter.from_query(request.get("query") or {})))
        plan = build_map_plan(shown)

    return json_response(200, {"plan": plan.to_wire(), "counts": count_by_type(shown)})


def handler(request):
    return dispatch(request, {"GET": _get}, "map")
