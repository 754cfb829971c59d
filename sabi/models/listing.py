"""Listing (property) models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from sabi.models.base import CamelModel, blank_to_none
from sabi.utils.ids import generate_id


class ListingType(str, Enum):
    """Closed set of listing types."""
    LAND = "land"
    HOUSE = "house"


class ListingStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    PENDING = "pending"


_OPTIONAL_NUMBERS = ("price", "bedrooms", "bathrooms", "bq", "land_size", "latitude", "longitude")


class Variation(CamelModel):
    """A plot size or unit type within one estate, priced and sold independently."""
    id: str = Field(default_factory=generate_id, description="Variation ID (text)")
    name: str = Field(..., min_length=1, description="e.g. '500 sqm plot'")
    price: Optional[int] = Field(None, ge=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    bq: Optional[int] = Field(None, ge=0, description="Boys' quarters room count")
    land_size: Optional[float] = Field(None, ge=0, description="Land size in sqm")
    units_available: Optional[int] = Field(None, ge=0)
    status: ListingStatus = ListingStatus.AVAILABLE

    @field_validator("price", "bedrooms", "bathrooms", "bq", "land_size", "units_available",
                     mode="before")
    @classmethod
    def _blank_numbers(cls, value):
        return blank_to_none(value)


class Listing(CamelModel):
    """A property offered through the site."""
    id: str = Field(..., description="Listing ID (text)")
    title: str
    description: str = ""
    price: int = Field(..., ge=0, description="Price in whole naira")
    price_label: Optional[str] = Field(None, description="Annotation such as 'Per Plot'")
    type: ListingType
    district: str = Field(..., description="District name (advisory match against the directory)")
    address: str = ""
    latitude: float
    longitude: float
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    bq: Optional[int] = None
    land_size: Optional[float] = None
    images: list[str] = Field(default_factory=list, description="Image URLs, first is the main image")
    features: list[str] = Field(default_factory=list)
    variations: Optional[list[Variation]] = None
    status: ListingStatus = ListingStatus.AVAILABLE
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def main_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    @property
    def is_available(self) -> bool:
        return self.status == ListingStatus.AVAILABLE


class CreateListingInput(CamelModel):
    """Admin payload for a new listing. Coordinates default from the district when omitted."""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: int = Field(..., ge=0)
    price_label: Optional[str] = None
    type: ListingType
    district: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    bq: Optional[int] = Field(None, ge=0)
    land_size: Optional[float] = Field(None, ge=0)
    images: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    variations: Optional[list[Variation]] = None
    status: ListingStatus = ListingStatus.AVAILABLE
    featured: bool = False

    @field_validator(*_OPTIONAL_NUMBERS, mode="before")
    @classmethod
    def _blank_numbers(cls, value):
        return blank_to_none(value)


class UpdateListingInput(CamelModel):
    """Partial update; only fields present in the payload are applied."""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, ge=0)
    price_label: Optional[str] = None
    type: Optional[ListingType] = None
    district: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    bq: Optional[int] = Field(None, ge=0)
    land_size: Optional[float] = Field(None, ge=0)
    images: Optional[list[str]] = None
    features: Optional[list[str]] = None
    variations: Optional[list[Variation]] = None
    status: Optional[ListingStatus] = None
    featured: Optional[bool] = None

    @field_validator(*_OPTIONAL_NUMBERS, mode="before")
    @classmethod
    def _blank_numbers(cls, value):
        return blank_to_none(value)

    def changes(self) -> dict:
        """Fields explicitly sent by the caller."""
        return self.model_dump(mode="json", exclude_unset=True)
