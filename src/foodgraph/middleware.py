"""
Request logging middleware
"""

import json
import re
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import REQUEST_ID_HEADER, clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

_OPERATION_PATTERN = re.compile(r"\b(query|mutation|subscription)\s+(\w+)")
_REQUEST_ID_PATTERN = re.compile(r"^[\w.\-]{1,128}$")


def operation_name_from_payload(payload: object) -> str | None:
    """Derive a loggable operation name from a GraphQL request body."""
    if not isinstance(payload, dict):
        return None

    operation_name = payload.get("operationName")
    if isinstance(operation_name, str) and operation_name:
        return operation_name

    query = payload.get("query")
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_PATTERN.search(query)
    return match.group(2) if match else "unnamed_operation"


def incoming_request_id(request: Request) -> str | None:
    """Request id supplied by the caller, if it is safe to log."""
    value = request.headers.get(REQUEST_ID_HEADER)
    if value and _REQUEST_ID_PATTERN.match(value):
        return value
    return None


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH or request.method != "POST":
        return None

    body = await request.body()
    if not body:
        return None
    try:
        return operation_name_from_payload(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id to every log line and log each request's outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(incoming_request_id(request))
        started = time.perf_counter()

        try:
            operation = await extract_graphql_operation_name(request)
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                graphql_operation=operation,
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                graphql_operation=operation,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
