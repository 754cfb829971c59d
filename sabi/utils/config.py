"""Environment configuration, read at call time so serverless cold starts pick up changes."""

import os

from sabi.utils.errors import ConfigurationError


# Admin session lifetime (seconds)
SESSION_MAX_AGE_SECONDS = int(os.environ.get("ADMIN_SESSION_MAX_AGE_SECONDS", str(60 * 60 * 24)))


def get_environment() -> str:
    return os.environ.get("ENVIRONMENT", "development").lower()


def is_production() -> bool:
    return get_environment() == "production"


def get_supabase_credentials() -> tuple[str, str]:
    """Return (url, service role key)."""
    url = os.environ.get("SUPABASE_URL", "").strip()
    key = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "").strip()
    if not url or not key:
        raise ConfigurationError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
    return url, key


def get_admin_credentials() -> tuple[str, str]:
    """Return (email, password) of the single back-office admin."""
    email = os.environ.get("ADMIN_EMAIL", "").strip()
    password = os.environ.get("ADMIN_PASSWORD", "")
    if not email or not password:
        raise ConfigurationError("ADMIN_EMAIL and ADMIN_PASSWORD must be set")
    return email, password


def get_session_secret() -> str:
    # Strip to remove any trailing newlines from env var
    secret = os.environ.get("ADMIN_SESSION_SECRET", "").strip()
    if not secret:
        raise ConfigurationError("ADMIN_SESSION_SECRET not set")
    return secret
