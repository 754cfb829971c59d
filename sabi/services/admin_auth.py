"""
Admin credentials and session tokens.

The back office has a single admin whose credentials come from the
environment. A successful login issues an HMAC-SHA256 signed token:

    v1:<issued unix ts>:<hex signature of "v1:<ts>:<admin email>">

carried either in the admin_session cookie or as a Bearer token. The
gateway only sees the resulting capability check, is_authorized(context).
"""

import hmac
import hashlib
import time
from typing import Any, Callable, Mapping, Optional

from sabi.utils.config import (
    SESSION_MAX_AGE_SECONDS,
    get_admin_credentials,
    get_session_secret,
    is_production,
)
from sabi.utils.errors import AuthorizationError, SabiError
from sabi.utils.http import get_header
from sabi.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

SESSION_COOKIE = "admin_session"
TOKEN_VERSION = "v1"

# Request context -> "is this caller an authorized admin"
Authorizer = Callable[[Any], bool]


def _sign(secret: str, issued_at: int, email: str) -> str:
    basestring = f"{TOKEN_VERSION}:{issued_at}:{email}"
    return hmac.new(
        secret.encode('utf-8'),
        basestring.encode('utf-8'),
        hashlib.sha256
    ).hexdigest()


def issue_session_token(now: Optional[int] = None) -> str:
    email, _ = get_admin_credentials()
    issued_at = int(now if now is not None else time.time())
    return f"{TOKEN_VERSION}:{issued_at}:{_sign(get_session_secret(), issued_at, email)}"


def verify_session_token(token: Optional[str], now: Optional[int] = None) -> bool:
    """True for an unexpired token signed with the current secret and admin email."""
    if not token:
        return False

    parts = token.split(":")
    if len(parts) != 3 or parts[0] != TOKEN_VERSION:
        return False

    try:
        issued_at = int(parts[1])
    except ValueError:
        return False

    current = int(now if now is not None else time.time())
    if issued_at > current + 60 or current - issued_at > SESSION_MAX_AGE_SECONDS:
        logger.info("Admin session expired")
        return False

    try:
        email, _ = get_admin_credentials()
        expected = _sign(get_session_secret(), issued_at, email)
    except SabiError as e:
        logger.error(f"Admin session verification unavailable: {e}")
        return False

    return hmac.compare_digest(expected, parts[2])


def login(email: str, password: str) -> str:
    """Check admin credentials and return a new session token."""
    if not email or not password:
        raise AuthorizationError("Email and password are required")

    admin_email, admin_password = get_admin_credentials()
    email_ok = hmac.compare_digest(email.strip().lower().encode(), admin_email.lower().encode())
    password_ok = hmac.compare_digest(password.encode(), admin_password.encode())
    if not (email_ok and password_ok):
        logger.warning("Admin login failed")
        raise AuthorizationError("Invalid credentials")

    logger.info("Admin logged in")
    return issue_session_token()


def session_cookie(token: str) -> str:
    """Set-Cookie value for a fresh session."""
    attributes = [
        f"{SESSION_COOKIE}={token}",
        "Path=/",
        f"Max-Age={SESSION_MAX_AGE_SECONDS}",
        "HttpOnly",
        "SameSite=Lax",
    ]
    if is_production():
        attributes.append("Secure")
    return "; ".join(attributes)


def expired_session_cookie() -> str:
    return f"{SESSION_COOKIE}=; Path=/; Max-Age=0; HttpOnly; SameSite=Lax"


def cookie_token(context: Mapping[str, Any]) -> Optional[str]:
    """
    The admin_session value from the Cookie header.

    Pairs are read one at a time so that an unrelated cookie the parser
    cannot handle (JSON, spaces) does not hide the session.
    """
    raw = get_header(context.get("headers") or {}, "Cookie")
    for pair in raw.split(";"):
        name, sep, value = pair.strip().partition("=")
        if sep and name.strip() == SESSION_COOKIE:
            return value.strip().strip('"') or None
    return None


def bearer_token(context: Mapping[str, Any]) -> Optional[str]:
    raw = get_header(context.get("headers") or {}, "Authorization")
    scheme, _, token = raw.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def cookie_session_authorizer(context: Mapping[str, Any]) -> bool:
    return verify_session_token(cookie_token(context))


def bearer_token_authorizer(context: Mapping[str, Any]) -> bool:
    return verify_session_token(bearer_token(context))


def any_of(*authorizers: Authorizer) -> Authorizer:
    def check(context: Any) -> bool:
        return any(authorizer(context) for authorizer in authorizers)
    return check


default_authorizer: Authorizer = any_of(cookie_session_authorizer, bearer_token_authorizer)
