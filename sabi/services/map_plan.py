"""
Map projection: turn listings into markers plus a viewport for the map surface.

Two modes:

* selected - one listing shown on its detail page: one marker with a short
  popup (title, district), centered at a close zoom.
* browse - a list of listings: one marker each with a full popup (type and
  featured badges, price, secondary stat, link). One listing is centered at
  the close zoom, several are fitted to their bounding box with padding, and
  none falls back to the city overview.

Coordinates are passed through untouched; range checks belong to the admin
write path.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence, Union

from sabi.models.listing import Listing, ListingType
from sabi.models.map_plan import (
    Bounds,
    GlyphCategory,
    Marker,
    Popup,
    RenderPlan,
    Viewport,
    ViewportMode,
)

# Abuja nominal centroid
DEFAULT_CENTER = (9.0579, 7.4951)
OVERVIEW_ZOOM = 11
CLOSE_ZOOM = 14
FIT_PADDING = (50, 50)
CURRENCY_SYMBOL = "₦"

_BILLION = Decimal(1_000_000_000)
_MILLION = Decimal(1_000_000)

_GLYPHS = {
    ListingType.HOUSE: GlyphCategory.HOUSE,
    ListingType.LAND: GlyphCategory.LAND,
}

_TYPE_BADGES = {
    ListingType.HOUSE: "House",
    ListingType.LAND: "Land",
}


def glyph_for(listing_type: ListingType) -> GlyphCategory:
    return _GLYPHS[listing_type]


def format_price(value: Union[int, float], currency: str = CURRENCY_SYMBOL) -> str:
    """
    Compact price text.

    >= 1 billion: one decimal with a B suffix; >= 1 million: whole millions
    with an M suffix; anything smaller: comma-grouped digits. Halves round up.
    """
    amount = Decimal(value)
    if amount >= _BILLION:
        billions = (amount / _BILLION).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{currency}{billions}B"
    if amount >= _MILLION:
        millions = (amount / _MILLION).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{currency}{millions}M"
    whole = int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return f"{currency}{whole:,}"


def _format_quantity(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def _bedroom_stat(listing: Listing) -> Optional[str]:
    if listing.bedrooms is None:
        return None
    return f"{listing.bedrooms} Bed" + ("" if listing.bedrooms == 1 else "s")


def _land_stat(listing: Listing) -> Optional[str]:
    if listing.land_size is None:
        return None
    return f"{_format_quantity(listing.land_size)} sqm"


def secondary_stat(listing: Listing) -> Optional[str]:
    """Bedrooms for houses, land size for land; the other one if the preferred is missing."""
    if listing.type == ListingType.HOUSE:
        return _bedroom_stat(listing) or _land_stat(listing)
    return _land_stat(listing) or _bedroom_stat(listing)


def listing_link(listing: Listing) -> str:
    return f"/properties/{listing.id}"


def _marker(listing: Listing, popup: Popup) -> Marker:
    glyph = glyph_for(listing.type)
    return Marker(
        listing_id=listing.id,
        latitude=listing.latitude,
        longitude=listing.longitude,
        glyph=glyph,
        color=glyph.color,
        popup=popup,
    )


def _selected_popup(listing: Listing) -> Popup:
    return Popup(title=listing.title, district=listing.district)


def _browse_popup(listing: Listing) -> Popup:
    return Popup(
        title=listing.title,
        district=listing.district,
        type_badge=_TYPE_BADGES[listing.type],
        featured_badge="Featured" if listing.featured else None,
        price=format_price(listing.price),
        secondary_stat=secondary_stat(listing),
        link=listing_link(listing),
    )


def _centered(latitude: float, longitude: float, zoom: int) -> Viewport:
    return Viewport(mode=ViewportMode.CENTER, center=(latitude, longitude), zoom=zoom)


def bounding_box(listings: Sequence[Listing]) -> Bounds:
    """Smallest box containing every listing coordinate."""
    latitudes = [listing.latitude for listing in listings]
    longitudes = [listing.longitude for listing in listings]
    return Bounds(
        south=min(latitudes),
        west=min(longitudes),
        north=max(latitudes),
        east=max(longitudes),
    )


def build_map_plan(target: Union[Listing, Sequence[Listing], None]) -> RenderPlan:
    """Render plan for one selected listing or for a list of listings."""
    if isinstance(target, Listing):
        return RenderPlan(
            markers=[_marker(target, _selected_popup(target))],
            viewport=_centered(target.latitude, target.longitude, CLOSE_ZOOM),
        )

    listings = list(target or [])
    markers = [_marker(listing, _browse_popup(listing)) for listing in listings]

    if not listings:
        viewport = _centered(*DEFAULT_CENTER, OVERVIEW_ZOOM)
    elif len(listings) == 1:
        viewport = _centered(listings[0].latitude, listings[0].longitude, CLOSE_ZOOM)
    else:
        viewport = Viewport(
            mode=ViewportMode.FIT_BOUNDS,
            bounds=bounding_box(listings),
            padding=FIT_PADDING,
        )

    return RenderPlan(markers=markers, viewport=viewport)
