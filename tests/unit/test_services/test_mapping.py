"""Tests for row <-> model mapping."""

import pytest

from sabi.models.inquiry import Inquiry
from sabi.models.listing import Listing
from sabi.models.site_settings import SiteSettings
from sabi.services.mapping import from_row, settings_from_rows, settings_to_rows, to_row
from tests.utils.factories import create_listing_row


@pytest.mark.unit
def test_inquiry_listing_reference_uses_property_id_column():
    row = to_row(Inquiry, {"name": "A", "listing_id": "p1"})

    assert row == {"name": "A", "property_id": "p1"}

    inquiry = from_row(Inquiry, {
        "id": "i1", "name": "A", "email": "a@b.co", "phone": "1", "message": "m",
        "property_id": "p1", "status": "new", "created_at": "2024-12-09T12:00:00+00:00",
    })
    assert inquiry.listing_id == "p1"
    assert inquiry.to_wire()["listingId"] == "p1"


@pytest.mark.unit
def test_listing_variations_round_trip_through_empty_list():
    assert to_row(Listing, {"variations": None}) == {"variations": []}
    assert to_row(Listing, {"price": 1}) == {"price": 1}

    listing = from_row(Listing, create_listing_row(variations=[], images=None, features=None))
    assert listing.variations is None
    assert listing.images == []
    assert listing.features == []


@pytest.mark.unit
def test_listing_variations_are_parsed():
    listing = from_row(Listing, create_listing_row(
        listing_type="land",
        variations=[{"id": "v1", "name": "450 sqm", "price": 40000000, "status": "available"}],
    ))

    assert listing.variations[0].name == "450 sqm"
    assert listing.variations[0].price == 40_000_000


@pytest.mark.unit
def test_settings_rows():
    rows = settings_to_rows({"email": "x@y.com"}, "2024-12-09T12:00:00+00:00")

    assert rows == [{"key": "email", "value": "x@y.com", "updated_at": "2024-12-09T12:00:00+00:00"}]
    assert settings_from_rows(rows).email == "x@y.com"
    assert settings_from_rows([]) == SiteSettings()
