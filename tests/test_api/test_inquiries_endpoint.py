"""Tests for the inquiries endpoint."""

import pytest
from unittest.mock import patch

from api.inquiries import handler
from tests.utils.assertions import assert_error_response, assert_valid_response
from tests.utils.factories import create_inquiry_payload
from tests.utils.helpers import create_vercel_request, response_json


@pytest.fixture
def patched_store(empty_store):
    with patch('api.inquiries.get_inquiry_store', return_value=empty_store):
        yield empty_store


@pytest.mark.unit
def test_public_submission(patched_store):
    response = handler(create_vercel_request(method="POST", path="/api/inquiries", body=create_inquiry_payload()))

    assert_valid_response(response, 201)
    assert response_json(response)["inquiry"]["status"] == "new"
    assert len(patched_store.rows) == 1


@pytest.mark.unit
def test_invalid_submission(patched_store):
    response = handler(create_vercel_request(
        method="POST", path="/api/inquiries", body=create_inquiry_payload(email="nope"),
    ))

    assert_error_response(response, 400, field="email")
    assert patched_store.rows == {}


@pytest.mark.unit
def test_malformed_json(patched_store):
    response = handler(create_vercel_request(method="POST", path="/api/inquiries", body="{oops"))

    assert_error_response(response, 400)


@pytest.mark.unit
def test_undecodable_body(patched_store):
    response = handler(create_vercel_request(method="POST", path="/api/inquiries", body=b"\xff\xfe{"))

    assert_error_response(response, 400)
    assert patched_store.rows == {}


@pytest.mark.unit
def test_listing_inquiries_is_admin_only(patched_store, admin_headers):
    handler(create_vercel_request(method="POST", path="/api/inquiries", body=create_inquiry_payload()))

    assert_error_response(handler(create_vercel_request(path="/api/inquiries")), 401)

    response = handler(create_vercel_request(path="/api/inquiries", headers=admin_headers))
    assert len(response_json(response)["inquiries"]) == 1


@pytest.mark.unit
def test_status_change(patched_store, admin_headers):
    created = handler(create_vercel_request(method="POST", path="/api/inquiries", body=create_inquiry_payload()))
    inquiry_id = response_json(created)["inquiry"]["id"]

    denied = handler(create_vercel_request(method="PUT", query={"id": inquiry_id}, body={"status": "closed"}))
    assert_error_response(denied, 401)
    assert patched_store.rows[inquiry_id]["status"] == "new"

    response = handler(create_vercel_request(
        method="PUT", query={"id": inquiry_id}, body={"status": "closed"}, headers=admin_headers,
    ))
    assert response_json(response)["inquiry"]["status"] == "closed"
