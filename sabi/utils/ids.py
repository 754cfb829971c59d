"""Identifier and timestamp helpers."""

from datetime import datetime, timezone

from ulid import ULID


def generate_id() -> str:
    """Generate a text-based record ID (ULID format)."""
    return str(ULID())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
