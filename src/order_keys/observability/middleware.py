"""
order_keys.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata, including the key endpoint being called, into structlog contextvars.
- Log one completion line per request with its status code.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from order_keys.observability.logging import get_logger

log = get_logger(__name__)

KEYS_PREFIX = "/v1/keys/"


def endpoint_from_path(path: str) -> str | None:
    """
    Short endpoint name for key routes (`/v1/keys/move` -> `"keys.move"`), else None.
    """

    if not path.startswith(KEYS_PREFIX):
        return None
    name = path[len(KEYS_PREFIX) :].strip("/")
    return f"keys.{name}" if name else None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Ensures every request has a request id
    - Binds request-scoped contextvars for structured logs
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        # Prefer a caller-provided request id so logs line up with the caller's own.
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        endpoint = endpoint_from_path(request.url.path)
        if endpoint is not None:
            structlog.contextvars.bind_contextvars(endpoint=endpoint)
        try:
            response: Response = await call_next(request)
            if endpoint is not None:
                log.info("key_request_completed", status_code=response.status_code)
        finally:
            # Context must not leak into the next request handled on this task.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Health probes are not logged per request; only key endpoints emit a completion line.
