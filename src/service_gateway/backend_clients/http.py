"""
service_gateway.backend_clients.http

HTTP client boundary used by the dispatcher to call real backends.

Responsibilities:
- Build the fixed outbound payload shape.
- Bound each call by a single wall-clock timeout.
- Collapse every failure mode into `BackendUnavailable`.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from service_gateway.catalog import ServiceDescriptor

DEFAULT_PLATFORM = "instagram"
DEFAULT_FOLLOWERS = 10000


class BackendUnavailable(Exception):
    """
    Raised for timeouts, transport errors, non-2xx statuses and bad bodies.
    `detail` is for logs only.
    """

    def __init__(self, service_id: str, detail: str) -> None:
        super().__init__(f"{service_id}: {detail}")
        self.service_id = service_id
        self.detail = detail


def build_payload(content: Any) -> dict[str, Any]:
    return {
        "content": content,
        "platform": DEFAULT_PLATFORM,
        "instagram_followers": DEFAULT_FOLLOWERS,
    }


class BackendClient:
    """
    Outbound boundary to real backends.
    One POST per call; callers see either a JSON object or `BackendUnavailable`.
    """

    def __init__(self, *, http: httpx.AsyncClient, timeout_seconds: float = 30.0) -> None:
        self._http = http
        self._timeout = timeout_seconds

    async def call(self, descriptor: ServiceDescriptor, content: Any) -> dict[str, Any]:
        # httpx timeouts are per phase; wait_for caps the whole exchange.
        try:
            r = await asyncio.wait_for(
                self._http.request(
                    descriptor.http_method.value,
                    descriptor.url,
                    json=build_payload(content),
                    timeout=self._timeout,
                ),
                timeout=self._timeout,
            )
            r.raise_for_status()
            body = r.json()
        except asyncio.TimeoutError as e:
            raise BackendUnavailable(
                descriptor.id, f"timed out after {self._timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise BackendUnavailable(descriptor.id, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise BackendUnavailable(descriptor.id, f"invalid JSON body: {e}") from e

        if not isinstance(body, dict):
            raise BackendUnavailable(
                descriptor.id, f"expected JSON object, got {type(body).__name__}"
            )
        return body


# --- Module Notes -----------------------------------------------------------
# No retries or backoff: one attempt per request, the timeout is the only bound.
