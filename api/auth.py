"""
Admin auth endpoint.

POST     {"email", "password"} -> session cookie (and token for Bearer use)
GET      {"authenticated": bool} for the current cookie or Bearer token
DELETE   clear the session cookie
"""

from sabi.services.admin_auth import default_authorizer, expired_session_cookie, login, session_cookie
from sabi.utils.http import dispatch, json_response, parse_json_body


def _post(request):
    body = parse_json_body(request)
    if not isinstance(body, dict):
        body = {}
    token = login(str(body.get("email") or ""), str(body.get("password") or ""))
    return json_response(
        200,
        {"authenticated": True, "token": token},
        {"Set-Cookie": session_cookie(token)},
    )


def _get(request):
    return json_response(200, {"authenticated": default_authorizer(request)})


def _delete(request):
    return json_response(200, {"authenticated": False}, {"Set-Cookie": expired_session_cookie()})


def handler(request):
    return dispatch(request, {"GET": _get, "POST": _post, "DELETE": _delete}, "auth")
