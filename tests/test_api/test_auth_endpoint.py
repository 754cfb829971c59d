"""Tests for the admin auth endpoint."""

import pytest

from api.auth import handler
from sabi.services.admin_auth import SESSION_COOKIE
from tests.utils.assertions import assert_error_response, assert_valid_response
from tests.utils.helpers import create_vercel_request, response_json


@pytest.mark.unit
def test_login_sets_session_cookie():
    response = handler(create_vercel_request(
        method="POST",
        path="/api/auth",
        body={"email": "admin@sabiconsults.com", "password": "correct-horse-battery"},
    ))

    assert_valid_response(response, 200)
    body = response_json(response)
    assert body["authenticated"] is True
    assert response["headers"]["Set-Cookie"].startswith(f"{SESSION_COOKIE}={body['token']};")


@pytest.mark.unit
def test_login_with_wrong_password():
    response = handler(create_vercel_request(
        method="POST", path="/api/auth", body={"email": "admin@sabiconsults.com", "password": "nope"},
    ))

    assert_error_response(response, 401)
    assert "Set-Cookie" not in response["headers"]


@pytest.mark.unit
def test_session_check_with_cookie():
    login = handler(create_vercel_request(
        method="POST",
        path="/api/auth",
        body={"email": "admin@sabiconsults.com", "password": "correct-horse-battery"},
    ))
    cookie = login["headers"]["Set-Cookie"].split(";")[0]

    checked = handler(create_vercel_request(path="/api/auth", headers={"Cookie": cookie}))
    anonymous = handler(create_vercel_request(path="/api/auth"))

    assert response_json(checked) == {"authenticated": True}
    assert response_json(anonymous) == {"authenticated": False}


@pytest.mark.unit
def test_logout_clears_cookie():
    response = handler(create_vercel_request(method="DELETE", path="/api/auth"))

    assert "Max-Age=0" in response["headers"]["Set-Cookie"]
    assert response_json(response) == {"authenticated": False}
