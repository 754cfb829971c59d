"""
Property search: the public filter over listings.

Only available listings are ever returned. Every supplied criterion must
match; an unsupplied criterion matches everything. The filter never
rejects input: unknown types or districts simply match nothing, and
malformed price text is ignored (logged) rather than raised.
"""

import re
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel

from sabi.models.listing import Listing, ListingStatus, ListingType
from sabi.services.mapping import from_rows
from sabi.services.store import CollectionStore
from sabi.utils.logging import get_structured_logger, timed

logger = get_structured_logger(__name__)

FEATURED_LIMIT = 4

# Whole amounts up to 18 digits; longer runs count as malformed.
_WHOLE_NUMBER = re.compile(r"\d{1,18}", re.ASCII)


class ListingFilter(BaseModel):
    """Search criteria; None means "not supplied"."""
    type: Optional[str] = None
    district: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    bedrooms: Optional[int] = None

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "ListingFilter":
        """
        Build criteria from page query parameters.

        Accepts type, district, priceRange ("<min>-<max>"), minPrice,
        maxPrice and bedrooms. Explicit minPrice/maxPrice override the
        matching side of priceRange.
        """
        min_price, max_price = parse_price_range(_first(params.get("priceRange")))

        explicit_min = _first(params.get("minPrice"))
        if explicit_min:
            min_price = _parse_amount(explicit_min, "minPrice")
        explicit_max = _first(params.get("maxPrice"))
        if explicit_max:
            max_price = _parse_amount(explicit_max, "maxPrice")

        bedrooms_text = _first(params.get("bedrooms"))
        bedrooms = _parse_amount(bedrooms_text, "bedrooms") if bedrooms_text else None

        return cls(
            type=_first(params.get("type")) or None,
            district=_first(params.get("district")) or None,
            min_price=min_price,
            max_price=max_price,
            bedrooms=bedrooms,
        )


def _first(value: Any) -> Optional[str]:
    """Query parsers may hand over repeated parameters as lists."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    return str(value).strip()


def _parse_amount(text: str, field: str) -> Optional[int]:
    text = text.strip()
    if _WHOLE_NUMBER.fullmatch(text):
        return int(text)
    logger.warning("Ignoring malformed search value", field=field, value=text[:40])
    return None


def parse_price_range(text: Optional[str]) -> tuple[Optional[int], Optional[int]]:
    """
    Parse "<min>-<max>" into inclusive bounds.

    An empty min is 0 and an empty max is unbounded (None). A side that is
    not a whole number is treated as absent. Text without a dash is a
    minimum.
    """
    if not text or not text.strip():
        return None, None

    min_text, dash, max_text = text.strip().partition("-")

    min_price = _parse_amount(min_text, "priceRange.min") if min_text.strip() else 0
    if not dash or not max_text.strip():
        return min_price, None
    return min_price, _parse_amount(max_text, "priceRange.max")


def matches(listing: Listing, criteria: ListingFilter) -> bool:
    """True when the listing is available and meets every supplied criterion."""
    if listing.status != ListingStatus.AVAILABLE:
        return False
    if criteria.type is not None and listing.type.value != criteria.type:
        return False
    if criteria.district is not None and listing.district.casefold() != criteria.district.casefold():
        return False
    if criteria.min_price is not None and listing.price < criteria.min_price:
        return False
    if criteria.max_price is not None and listing.price > criteria.max_price:
        return False
    if criteria.bedrooms is not None and listing.bedrooms != criteria.bedrooms:
        return False
    return True


def filter_listings(listings: Iterable[Listing], criteria: Optional[ListingFilter] = None) -> list[Listing]:
    """Listings matching criteria, in the order given."""
    criteria = criteria or ListingFilter()
    return [listing for listing in listings if matches(listing, criteria)]


def count_by_type(listings: Iterable[Listing]) -> dict[str, int]:
    """Available listings per type, for the map legend."""
    counts = {listing_type.value: 0 for listing_type in ListingType}
    for listing in listings:
        if listing.status == ListingStatus.AVAILABLE:
            counts[listing.type.value] += 1
    return counts


async def _available_listings(store: CollectionStore, **filters: Any) -> list[Listing]:
    rows = await store.list(
        filters={"status": ListingStatus.AVAILABLE.value, **filters},
        order_by="created_at",
        descending=True,
    )
    return from_rows(Listing, rows)


@timed("listing_search")
async def search_listings(store: CollectionStore, criteria: Optional[ListingFilter] = None) -> list[Listing]:
    """Available listings matching criteria, newest first."""
    criteria = criteria or ListingFilter()
    listings = filter_listings(await _available_listings(store), criteria)
    logger.info(
        "Listing search completed",
        criteria=criteria.model_dump(exclude_none=True),
        result_count=len(listings),
    )
    return listings


async def featured_listings(store: CollectionStore, limit: int = FEATURED_LIMIT) -> list[Listing]:
    listings = await _available_listings(store, featured=True)
    return listings[:limit]


async def listings_in_district(store: CollectionStore, district: str) -> list[Listing]:
    return await search_listings(store, ListingFilter(district=district))
