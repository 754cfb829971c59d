"""Tests for admin login and session tokens."""

import time

import pytest

from sabi.services.admin_auth import (
    SESSION_COOKIE,
    bearer_token,
    cookie_token,
    default_authorizer,
    expired_session_cookie,
    issue_session_token,
    login,
    session_cookie,
    verify_session_token,
)
from sabi.utils.config import SESSION_MAX_AGE_SECONDS
from sabi.utils.errors import AuthorizationError, ConfigurationError


@pytest.mark.unit
def test_issued_token_verifies():
    assert verify_session_token(issue_session_token()) is True


@pytest.mark.unit
def test_token_expires_after_max_age():
    issued = int(time.time()) - SESSION_MAX_AGE_SECONDS - 1

    assert verify_session_token(issue_session_token(now=issued)) is False


@pytest.mark.unit
def test_token_from_the_future_is_rejected():
    issued = int(time.time()) + 3600

    assert verify_session_token(issue_session_token(now=issued)) is False


@pytest.mark.unit
@pytest.mark.parametrize("token", [None, "", "garbage", "v1:abc:def", "v2:1:abc", "v1:1:2:3"])
def test_malformed_tokens_are_rejected(token):
    assert verify_session_token(token) is False


@pytest.mark.unit
def test_tampered_signature_is_rejected():
    version, issued, signature = issue_session_token().split(":")
    forged = f"{version}:{issued}:{'0' * len(signature)}"

    assert verify_session_token(forged) is False


@pytest.mark.unit
def test_rotating_secret_invalidates_tokens(monkeypatch):
    token = issue_session_token()
    monkeypatch.setenv("ADMIN_SESSION_SECRET", "rotated-secret")

    assert verify_session_token(token) is False


@pytest.mark.unit
def test_missing_secret_fails_closed(monkeypatch):
    token = issue_session_token()
    monkeypatch.delenv("ADMIN_SESSION_SECRET")

    assert verify_session_token(token) is False


@pytest.mark.unit
def test_login_success_returns_token():
    token = login("Admin@SabiConsults.com ", "correct-horse-battery")

    assert verify_session_token(token) is True


@pytest.mark.unit
@pytest.mark.parametrize("email,password", [
    ("admin@sabiconsults.com", "wrong"),
    ("someone@else.com", "correct-horse-battery"),
    ("", "correct-horse-battery"),
    ("admin@sabiconsults.com", ""),
])
def test_login_failure(email, password):
    with pytest.raises(AuthorizationError):
        login(email, password)


@pytest.mark.unit
def test_login_without_configuration(monkeypatch):
    monkeypatch.delenv("ADMIN_PASSWORD")

    with pytest.raises(ConfigurationError):
        login("admin@sabiconsults.com", "anything")


@pytest.mark.unit
def test_session_cookie_attributes(monkeypatch):
    cookie = session_cookie("v1:1:abc")

    assert cookie.startswith(f"{SESSION_COOKIE}=v1:1:abc;")
    assert "HttpOnly" in cookie
    assert f"Max-Age={SESSION_MAX_AGE_SECONDS}" in cookie
    assert "Secure" not in cookie

    monkeypatch.setenv("ENVIRONMENT", "production")
    assert "Secure" in session_cookie("v1:1:abc")


@pytest.mark.unit
def test_expired_cookie_clears_session():
    assert "Max-Age=0" in expired_session_cookie()


@pytest.mark.unit
def test_token_extraction_from_headers():
    context = {"headers": {"cookie": f"theme=dark; {SESSION_COOKIE}=v1:1:abc", "AUTHORIZATION": "Bearer tok"}}

    assert cookie_token(context) == "v1:1:abc"
    assert bearer_token(context) == "tok"
    assert cookie_token({"headers": {}}) is None
    assert bearer_token({"headers": {"Authorization": "Basic abc"}}) is None


@pytest.mark.unit
def test_default_authorizer_accepts_cookie_or_bearer():
    token = issue_session_token()

    assert default_authorizer({"headers": {"Cookie": f"{SESSION_COOKIE}={token}"}}) is True
    assert default_authorizer({"headers": {"Authorization": f"Bearer {token}"}}) is True
    assert default_authorizer({"headers": {"Authorization": "Bearer v1:1:nope"}}) is False
    assert default_authorizer({"headers": {}}) is False


@pytest.mark.unit
def test_session_cookie_found_after_unparseable_cookie():
    token = issue_session_token()
    context = {"headers": {"Cookie": f'prefs={{"a": 1}}; {SESSION_COOKIE}={token}'}}

    assert cookie_token(context) == token
    assert default_authorizer(context) is True


@pytest.mark.unit
def test_cleared_session_cookie_is_no_token():
    assert cookie_token({"headers": {"Cookie": f"{SESSION_COOKIE}=; theme=dark"}}) is None
