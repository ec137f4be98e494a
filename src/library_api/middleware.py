"""
Request logging middleware.

Every request gets a request id bound to the structlog context. Query
parameter values are never logged, only their names, since GraphQL GET
requests carry the whole operation and its variables in the query string.
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

_OPERATION_RE = re.compile(r"^\s*(query|mutation)\s+(\w+)")


def operation_name_from_query(query: Any) -> str | None:
    """Name a GraphQL document for logs: ``AllBooks``, ``mutation:AddBook``."""
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query:
        return "__introspection"
    match = _OPERATION_RE.search(query)
    if match is None:
        return "unnamed_operation"
    kind, name = match.groups()
    return f"mutation:{name}" if kind == "mutation" else name


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Best-effort GraphQL operation name for GET and POST requests to /graphql."""
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        payload: Any = dict(request.query_params)
    elif request.method == "POST":
        body = await request.body()
        if not body:
            return None
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
    else:
        return None

    if not isinstance(payload, dict):
        return None
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op
    return operation_name_from_query(payload.get("query"))


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id for the duration of each request and log its outcome."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        set_request_context()
        graphql_operation = await extract_graphql_operation_name(request)

        try:
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_param_names=sorted(request.query_params.keys()) or None,
                graphql_operation=graphql_operation,
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
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
