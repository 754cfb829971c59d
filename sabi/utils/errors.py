"""Error handling utilities."""

from typing import Optional


class SabiError(Exception):
    """Base exception for the Sabi Consults backend."""
    status_code = 500

    def to_dict(self) -> dict:
        return {"error": str(self)}


class ValidationError(SabiError):
    """Malformed input, reported against a single field."""
    status_code = 400

    def __init__(self, field: Optional[str], reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}" if field else reason)

    def to_dict(self) -> dict:
        return {"error": self.reason, "field": self.field}


class AuthorizationError(SabiError):
    """Missing or invalid admin session."""
    status_code = 401


class NotFoundError(SabiError):
    """Lookup by id (or slug) with no match."""
    status_code = 404


class StorageError(SabiError):
    """Supabase operation error."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        # Storage details stay in the logs
        return {"error": "storage operation failed"}


class ConfigurationError(SabiError):
    """Required environment configuration is missing."""

    def to_dict(self) -> dict:
        return {"error": "service not configured"}
