"""Supabase client wrapper with async context manager support."""

from typing import Optional

from supabase import create_client, Client
from supabase.client import ClientOptions

from sabi.utils.config import get_supabase_credentials
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

# Connection handle reused across invocations of a warm serverless instance
_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """Get or create the Supabase client."""
    global _client

    if _client is None:
        url, key = get_supabase_credentials()

        # Service role key: no user session to refresh or persist
        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )

        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", url=url)

    return _client


def close_supabase_client() -> None:
    """Drop the cached client."""
    global _client
    if _client:
        _client = None
        logger.info("Supabase client closed")


class SupabaseClient:
    """Async context manager for Supabase client."""

    def __init__(self):
        self.client: Optional[Client] = None

    async def __aenter__(self) -> Client:
        self.client = get_supabase_client()
        return self.client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            logger.error(
                "Supabase operation error",
                error=str(exc_val),
                type=exc_type.__name__
            )
        return False
