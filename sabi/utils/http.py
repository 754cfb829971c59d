"""Helpers shared by the serverless handlers under api/."""

import asyncio
import json
from typing import Any, Callable, Coroutine, Mapping, Optional

from sabi.utils.errors import SabiError, ValidationError
from sabi.utils.logging import correlation_context, get_structured_logger
from sabi.utils.logging_config import LoggingConfig

logger = get_structured_logger(__name__)

Request = Mapping[str, Any]
Response = dict[str, Any]
Route = Callable[[Request], Response]


def json_response(status_code: int, payload: Any, headers: Optional[dict[str, str]] = None) -> Response:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": json.dumps(payload),
    }


def get_header(headers: Optional[Mapping[str, str]], name: str) -> str:
    """Case-insensitive header lookup; "" when absent."""
    lowered = name.lower()
    for key, value in (headers or {}).items():
        if key.lower() == lowered:
            return value or ""
    return ""


def query_param(request: Request, name: str) -> Optional[str]:
    """First value of a query parameter, or None when missing or blank."""
    value = (request.get("query") or {}).get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_json_body(request: Request) -> Any:
    """Decode the request body. An empty body decodes to {}."""
    body = request.get("body")
    if body is None or body == "" or body == b"":
        return {}
    if isinstance(body, (dict, list)):
        return body
    try:
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(None, "Request body is not valid JSON") from e


def require_param(request: Request, name: str) -> str:
    value = query_param(request, name)
    if value is None:
        raise ValidationError(name, f"Query parameter '{name}' is required")
    return value


def run_async(coro: Coroutine) -> Any:
    """Run one request's coroutine to completion on a fresh event loop."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def dispatch(request: Request, routes: dict[str, Route], endpoint: str) -> Response:
    """
    Route a request by method and turn errors into JSON responses.

    SabiError subclasses map to their status code; anything else is
    logged with its traceback and returned as a 500.
    """
    LoggingConfig.ensure_configured()

    headers = request.get("headers") or {}
    incoming_id = get_header(headers, LoggingConfig.LOG_CORRELATION_ID_HEADER) or None
    method = (request.get("method") or "GET").upper()

    with correlation_context(incoming_id) as correlation_id:
        trace = {LoggingConfig.LOG_CORRELATION_ID_HEADER: correlation_id}

        route = routes.get(method)
        if route is None:
            return json_response(
                405,
                {"error": f"Method {method} not allowed"},
                {**trace, "Allow": ", ".join(sorted(routes))},
            )

        try:
            response = route(request)
        except SabiError as e:
            if e.status_code >= 500:
                logger.error(f"{endpoint} failed: {e}", endpoint=endpoint, method=method)
            else:
                logger.info(
                    f"{endpoint} rejected request",
                    endpoint=endpoint,
                    method=method,
                    status_code=e.status_code,
                    reason=str(e),
                )
            return json_response(e.status_code, e.to_dict(), trace)
        except Exception as e:
            logger.error(f"Unexpected error in {endpoint}: {e}", exc_info=True, endpoint=endpoint, method=method)
            return json_response(500, {"error": "internal server error"}, trace)

        response.setdefault("headers", {}).update(trace)
        return response
