"""
Mapping between storage rows and entity models.

Storage columns are snake_case and match model field names except where
listed in _COLUMN_RENAMES. The camelCase wire format is handled by the
models' aliases (CamelModel.to_wire), so handlers and services only ever
see the canonical models.
"""

from typing import Any, Iterable, TypeVar

from pydantic import BaseModel

from sabi.models.inquiry import Inquiry
from sabi.models.listing import Listing
from sabi.models.site_settings import SiteSettings

ModelT = TypeVar("ModelT", bound=BaseModel)

# model field -> storage column
_COLUMN_RENAMES: dict[type, dict[str, str]] = {
    Inquiry: {"listing_id": "property_id"},
}


def to_row(model_cls: type[BaseModel], data: dict[str, Any]) -> dict[str, Any]:
    """Convert model fields (full or partial, JSON-mode) into storage columns."""
    renames = _COLUMN_RENAMES.get(model_cls, {})
    row = {renames.get(key, key): value for key, value in data.items()}

    # Variations column is a non-null jsonb array
    if model_cls is Listing and "variations" in row and row["variations"] is None:
        row["variations"] = []

    return row


def from_row(model_cls: type[ModelT], row: dict[str, Any]) -> ModelT:
    """Build a model from a storage row."""
    renames = _COLUMN_RENAMES.get(model_cls, {})
    reverse = {column: field for field, column in renames.items()}
    data = {reverse.get(key, key): value for key, value in row.items()}

    if model_cls is Listing:
        # An empty variation list means "no variations"
        if not data.get("variations"):
            data["variations"] = None
        data["images"] = data.get("images") or []
        data["features"] = data.get("features") or []

    return model_cls.model_validate(data)


def from_rows(model_cls: type[ModelT], rows: Iterable[dict[str, Any]]) -> list[ModelT]:
    return [from_row(model_cls, row) for row in rows]


def settings_from_rows(rows: Iterable[dict[str, Any]]) -> SiteSettings:
    """Overlay stored key/value rows on the default settings; unknown keys are ignored."""
    stored = {
        row["key"]: row["value"]
        for row in rows
        if row.get("key") in SiteSettings.model_fields and row.get("value") is not None
    }
    return SiteSettings(**stored)


def settings_to_rows(changes: dict[str, str], updated_at: str) -> list[dict[str, Any]]:
    return [
        {"key": key, "value": value, "updated_at": updated_at}
        for key, value in changes.items()
    ]
