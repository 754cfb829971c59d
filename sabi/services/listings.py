"""Listing reads and writes (writes are reached only through the admin gateway)."""

from typing import Optional

from sabi.models.base import parse_input
from sabi.models.listing import CreateListingInput, Listing, UpdateListingInput
from sabi.services.districts import ABUJA_DISTRICTS, DistrictDirectory
from sabi.services.mapping import from_row, from_rows, to_row
from sabi.services.store import CollectionStore
from sabi.utils.errors import NotFoundError, ValidationError
from sabi.utils.ids import utc_now
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


async def get_listing(store: CollectionStore, listing_id: str) -> Listing:
    row = await store.get(listing_id)
    if row is None:
        raise NotFoundError(f"Property not found: {listing_id}")
    return from_row(Listing, row)


async def list_all_listings(store: CollectionStore) -> list[Listing]:
    """Every listing regardless of status, newest first (back office)."""
    rows = await store.list(order_by="created_at", descending=True)
    return from_rows(Listing, rows)


def _resolve_coordinates(
    data: CreateListingInput,
    districts: DistrictDirectory,
) -> tuple[float, float]:
    if data.latitude is not None and data.longitude is not None:
        return data.latitude, data.longitude
    if data.latitude is not None or data.longitude is not None:
        missing = "longitude" if data.longitude is None else "latitude"
        raise ValidationError(missing, "Latitude and longitude must be given together")

    defaults = districts.default_coordinates(data.district)
    if defaults is None:
        raise ValidationError("latitude", f"No coordinates given and no reference point for district '{data.district}'")
    return defaults


async def create_listing(
    store: CollectionStore,
    data: CreateListingInput,
    districts: Optional[DistrictDirectory] = None,
) -> Listing:
    latitude, longitude = _resolve_coordinates(data, districts or ABUJA_DISTRICTS)
    now = utc_now().isoformat()

    row = to_row(Listing, {
        **data.model_dump(mode="json"),
        "latitude": latitude,
        "longitude": longitude,
        "created_at": now,
        "updated_at": now,
    })
    listing = from_row(Listing, await store.insert(row))

    logger.info(
        "Listing created",
        listing_id=listing.id,
        listing_type=listing.type.value,
        district=listing.district,
        default_coordinates=data.latitude is None,
    )
    return listing


async def update_listing(store: CollectionStore, listing_id: str, data: UpdateListingInput) -> Listing:
    """
    Apply a partial update.

    The merged record is validated as a whole before a single write, so a
    rejected update leaves the stored listing unchanged.
    """
    existing = await get_listing(store, listing_id)
    changes = {**data.changes(), "updated_at": utc_now().isoformat()}

    parse_input(Listing, {**existing.model_dump(mode="json"), **changes})

    row = await store.update(listing_id, to_row(Listing, changes))
    if row is None:
        raise NotFoundError(f"Property not found: {listing_id}")

    logger.info("Listing updated", listing_id=listing_id, fields=sorted(changes))
    return from_row(Listing, row)


async def delete_listing(store: CollectionStore, listing_id: str) -> None:
    if not await store.delete(listing_id):
        raise NotFoundError(f"Property not found: {listing_id}")
    logger.info("Listing deleted", listing_id=listing_id)
