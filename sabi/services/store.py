"""Collection store interface and its Supabase implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from sabi.services.supabase_client import SupabaseClient
from sabi.utils.errors import StorageError
from sabi.utils.ids import generate_id
from sabi.utils.logging import get_structured_logger, log_timing

logger = get_structured_logger(__name__)

PROPERTIES_TABLE = "properties"
INQUIRIES_TABLE = "inquiries"
TEAM_MEMBERS_TABLE = "team_members"
BLOGS_TABLE = "blogs"
SITE_SETTINGS_TABLE = "site_settings"


class CollectionStore(ABC):
    """
    Persistent collection of rows keyed by a generated id.

    Rows are plain dicts with storage (snake_case) column names. Every
    operation raises StorageError when the backend fails.
    """

    id_column: str = "id"

    @abstractmethod
    async def get(self, record_id: str) -> Optional[dict]:
        """Return the row with this id, or None."""

    @abstractmethod
    async def list(
        self,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict]:
        """Return rows whose columns equal every value in filters."""

    @abstractmethod
    async def insert(self, row: dict) -> dict:
        """Insert a row and return it as stored (with its id)."""

    @abstractmethod
    async def update(self, record_id: str, changes: dict) -> Optional[dict]:
        """Apply changes to one row; None if no row has this id."""

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete one row; False if no row had this id."""

    @abstractmethod
    async def upsert(self, rows: list[dict]) -> list[dict]:
        """Insert or replace rows keyed by their id column, in one write."""


def _storage_error(action: str, table: str, error: Exception) -> StorageError:
    code = getattr(error, "code", None)
    logger.error(
        f"Failed to {action}",
        table=table,
        error=str(error),
        code=code,
    )
    return StorageError(f"Failed to {action} in {table}: {error}", code=code)


class SupabaseCollectionStore(CollectionStore):
    """CollectionStore backed by one Supabase table."""

    def __init__(self, table: str, id_column: str = "id", generate_ids: bool = True):
        self.table = table
        self.id_column = id_column
        self.generate_ids = generate_ids

    async def get(self, record_id: str) -> Optional[dict]:
        async with SupabaseClient() as client:
            try:
                with log_timing("store.get", logger=logger, table=self.table):
                    result = client.table(self.table).select("*").eq(self.id_column, record_id).execute()
            except Exception as e:
                raise _storage_error("get row", self.table, e) from e
            return result.data[0] if result.data else None

    async def list(
        self,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict]:
        async with SupabaseClient() as client:
            try:
                query = client.table(self.table).select("*")
                for column, value in (filters or {}).items():
                    query = query.eq(column, value)
                if order_by:
                    query = query.order(order_by, desc=descending)
                if limit:
                    query = query.limit(limit)
                with log_timing("store.list", logger=logger, table=self.table):
                    result = query.execute()
            except Exception as e:
                raise _storage_error("list rows", self.table, e) from e
            return result.data or []

    async def insert(self, row: dict) -> dict:
        if self.generate_ids and not row.get(self.id_column):
            row = {**row, self.id_column: generate_id()}
        async with SupabaseClient() as client:
            try:
                with log_timing("store.insert", logger=logger, table=self.table):
                    result = client.table(self.table).insert(row).execute()
            except Exception as e:
                raise _storage_error("insert row", self.table, e) from e
            if result.data:
                return result.data[0]
            raise StorageError(f"Failed to insert row in {self.table}: no data returned")

    async def update(self, record_id: str, changes: dict) -> Optional[dict]:
        async with SupabaseClient() as client:
            try:
                with log_timing("store.update", logger=logger, table=self.table):
                    result = (
                        client.table(self.table)
                        .update(changes)
                        .eq(self.id_column, record_id)
                        .execute()
                    )
            except Exception as e:
                raise _storage_error("update row", self.table, e) from e
            return result.data[0] if result.data else None

    async def delete(self, record_id: str) -> bool:
        async with SupabaseClient() as client:
            try:
                with log_timing("store.delete", logger=logger, table=self.table):
                    result = client.table(self.table).delete().eq(self.id_column, record_id).execute()
            except Exception as e:
                raise _storage_error("delete row", self.table, e) from e
            return bool(result.data)

    async def upsert(self, rows: list[dict]) -> list[dict]:
        if not rows:
            return []
        async with SupabaseClient() as client:
            try:
                with log_timing("store.upsert", logger=logger, table=self.table, rows=len(rows)):
                    result = client.table(self.table).upsert(rows).execute()
            except Exception as e:
                raise _storage_error("upsert rows", self.table, e) from e
            return result.data or []


def listing_store() -> CollectionStore:
    return SupabaseCollectionStore(PROPERTIES_TABLE)


def inquiry_store() -> CollectionStore:
    return SupabaseCollectionStore(INQUIRIES_TABLE)


def team_store() -> CollectionStore:
    return SupabaseCollectionStore(TEAM_MEMBERS_TABLE)


def blog_store() -> CollectionStore:
    return SupabaseCollectionStore(BLOGS_TABLE)


def settings_store() -> CollectionStore:
    return SupabaseCollectionStore(SITE_SETTINGS_TABLE, id_column="key", generate_ids=False)
