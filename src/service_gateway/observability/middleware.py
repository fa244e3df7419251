"""
service_gateway.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata (including the called service id) into structlog contextvars.
- Emit one access log line per request with status and latency.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from service_gateway.observability.logging import get_logger

SERVICE_CALL_PREFIX = "/api/service/"

log = get_logger(__name__)


def service_id_from_path(path: str) -> str | None:
    if not path.startswith(SERVICE_CALL_PREFIX):
        return None
    service_id = path[len(SERVICE_CALL_PREFIX) :].split("/", 1)[0]
    return service_id or None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with a request id and, for service calls, the service id,
    so dispatcher log lines can be correlated without threading either through.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        service_id = service_id_from_path(request.url.path)
        if service_id is not None:
            structlog.contextvars.bind_contextvars(service_id=service_id)

        started = time.monotonic()
        try:
            response: Response = await call_next(request)
            log.info(
                "request_completed",
                status_code=response.status_code,
                elapsed_ms=round((time.monotonic() - started) * 1000, 1),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Dispatcher log lines (e.g. backend_unavailable) pick up request_id and service_id from here.
