"""Tests for listing models."""

import pytest

from sabi.models.base import parse_input
from sabi.models.listing import (
    CreateListingInput,
    Listing,
    ListingStatus,
    ListingType,
    UpdateListingInput,
    Variation,
)
from sabi.utils.errors import ValidationError
from tests.utils.factories import create_listing_payload


@pytest.mark.unit
def test_create_input_accepts_camel_case_payload():
    data = parse_input(CreateListingInput, create_listing_payload(priceLabel="Per Plot", landSize="600"))

    assert data.price_label == "Per Plot"
    assert data.land_size == 600.0
    assert data.type == ListingType.HOUSE
    assert data.status == ListingStatus.AVAILABLE
    assert data.latitude is None


@pytest.mark.unit
def test_blank_optional_numbers_become_none():
    data = parse_input(CreateListingInput, create_listing_payload(bedrooms="", landSize=" "))

    assert data.bedrooms is None
    assert data.land_size is None


@pytest.mark.unit
def test_unknown_type_is_rejected_on_type_field():
    with pytest.raises(ValidationError) as exc_info:
        parse_input(CreateListingInput, create_listing_payload(type="commercial"))

    assert exc_info.value.field == "type"


@pytest.mark.unit
def test_negative_price_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        parse_input(CreateListingInput, create_listing_payload(price=-1))

    assert exc_info.value.field == "price"


@pytest.mark.unit
def test_non_object_payload_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        parse_input(CreateListingInput, ["not", "an", "object"])

    assert exc_info.value.field is None


@pytest.mark.unit
def test_update_changes_only_sent_fields():
    update = parse_input(UpdateListingInput, {"price": 300000000, "status": "sold", "priceLabel": None})

    assert update.changes() == {"price": 300000000, "status": "sold", "price_label": None}


@pytest.mark.unit
def test_variations_get_ids_and_independent_status():
    data = parse_input(CreateListingInput, create_listing_payload(
        type="land",
        variations=[
            {"name": "500 sqm plot", "price": 50000000, "unitsAvailable": 3},
            {"name": "1000 sqm plot", "price": "", "status": "sold"},
        ],
    ))

    first, second = data.variations
    assert first.id and second.id and first.id != second.id
    assert first.units_available == 3
    assert second.price is None
    assert second.status == ListingStatus.SOLD
    assert data.status == ListingStatus.AVAILABLE


@pytest.mark.unit
def test_variation_needs_a_name():
    with pytest.raises(ValidationError) as exc_info:
        parse_input(Variation, {"name": ""})

    assert exc_info.value.field == "name"


@pytest.mark.unit
def test_listing_main_image_and_availability():
    listing = Listing(
        id="x", title="t", price=1, type="land", district="Jabi", latitude=9.0, longitude=7.4,
        images=["a.jpg", "b.jpg"], status="pending",
    )

    assert listing.main_image == "a.jpg"
    assert listing.is_available is False
    assert listing.to_wire()["priceLabel"] is None
