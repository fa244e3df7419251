"""
service_gateway.services.dispatch_service

Service dispatch: decide between the mock path and a real backend call.

Responsibilities:
- Resolve a service id against the static catalog.
- Fabricate mock envelopes without network I/O.
- Call real backends once and normalize the outcome into an envelope.
"""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from service_gateway.backend_clients.http import BackendClient, BackendUnavailable
from service_gateway.catalog import SERVICE_CATALOG, ServiceDescriptor, lookup
from service_gateway.observability.logging import get_logger
from service_gateway.services.envelopes import (
    failure_envelope,
    merge_backend_response,
    mock_envelope,
)

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ServiceRequest:
    # `type` and `lang` are accepted but do not affect routing or payload.
    input: Any = None
    type: Any = None
    lang: Any = None


class Dispatcher:
    """
    Routes a service call to the mock path or to one real backend call.
    Every outcome, including backend failure, comes back as an envelope.
    """

    def __init__(
        self,
        *,
        backend: BackendClient,
        catalog: Mapping[str, ServiceDescriptor] = SERVICE_CATALOG,
        rng: random.Random | None = None,
        mock_output_prefix: str = "Mock: ",
    ) -> None:
        self._backend = backend
        self._catalog = catalog
        self._rng = rng or random.Random()
        self._prefix = mock_output_prefix

    async def handle(self, service_id: str, request: ServiceRequest) -> dict[str, Any]:
        descriptor = lookup(service_id, self._catalog)
        if descriptor is None or descriptor.is_mock:
            log.debug("dispatch_mock", service_id=service_id, known=descriptor is not None)
            return mock_envelope(
                service_id, request.input, prefix=self._prefix, rng=self._rng
            )

        try:
            body = await self._backend.call(descriptor, request.input)
        except BackendUnavailable as e:
            log.warning(
                "backend_unavailable",
                service_id=service_id,
                url=descriptor.url,
                detail=e.detail,
            )
            return failure_envelope(service_id)
        return merge_backend_response(service_id, body)


# --- Module Notes -----------------------------------------------------------
# The catalog is read-only after import, so a single Dispatcher is shared by all requests.
