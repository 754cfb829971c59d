"""Render plan models handed to the map surface."""

from enum import Enum
from typing import Optional

from pydantic import Field

from sabi.models.base import CamelModel


class GlyphCategory(str, Enum):
    """Marker glyph, one per listing type."""
    HOUSE = "house"
    LAND = "land"

    @property
    def color(self) -> str:
        return _GLYPH_COLORS[self]


_GLYPH_COLORS = {
    GlyphCategory.HOUSE: "#0055CC",
    GlyphCategory.LAND: "#059669",
}


class ViewportMode(str, Enum):
    CENTER = "center"
    FIT_BOUNDS = "fit_bounds"


class Bounds(CamelModel):
    south: float
    west: float
    north: float
    east: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east


class Viewport(CamelModel):
    mode: ViewportMode
    center: Optional[tuple[float, float]] = None
    zoom: Optional[int] = None
    bounds: Optional[Bounds] = None
    padding: Optional[tuple[int, int]] = Field(None, description="Pixel margin (x, y) around fitted bounds")


class Popup(CamelModel):
    title: str
    district: str
    type_badge: Optional[str] = None
    featured_badge: Optional[str] = None
    price: Optional[str] = None
    secondary_stat: Optional[str] = None
    link: Optional[str] = None


class Marker(CamelModel):
    listing_id: str
    latitude: float
    longitude: float
    glyph: GlyphCategory
    color: str
    popup: Popup


class RenderPlan(CamelModel):
    markers: list[Marker] = Field(default_factory=list)
    viewport: Viewport
