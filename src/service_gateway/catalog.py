"""
service_gateway.catalog

Static table of backend services reachable through the gateway.

Responsibilities:
- Define the immutable `ServiceDescriptor` record.
- Hold the id -> descriptor mapping used for dispatch.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

MOCK_SENTINEL = "mock"


class HttpMethod(str, enum.Enum):
    POST = "POST"


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """
    How to reach (or mock) one backend.

    `base_url` is either an absolute URL or `MOCK_SENTINEL`.
    """

    id: str
    base_url: str
    path: str = ""
    http_method: HttpMethod = HttpMethod.POST

    @property
    def is_mock(self) -> bool:
        return self.base_url == MOCK_SENTINEL

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"


def build_catalog(*descriptors: ServiceDescriptor) -> Mapping[str, ServiceDescriptor]:
    table: dict[str, ServiceDescriptor] = {}
    for d in descriptors:
        if d.id in table:
            raise ValueError(f"duplicate service id: {d.id}")
        table[d.id] = d
    return MappingProxyType(table)


SERVICE_CATALOG: Mapping[str, ServiceDescriptor] = build_catalog(
    ServiceDescriptor(
        id="content-analyzer",
        base_url="http://localhost:8000",
        path="/api/v1/analyze",
    ),
    ServiceDescriptor(id="caption-generator", base_url=MOCK_SENTINEL),
    ServiceDescriptor(id="hashtag-optimizer", base_url=MOCK_SENTINEL),
    ServiceDescriptor(id="engagement-predictor", base_url=MOCK_SENTINEL),
    ServiceDescriptor(id="translator", base_url=MOCK_SENTINEL),
)


def lookup(
    service_id: str, catalog: Mapping[str, ServiceDescriptor] = SERVICE_CATALOG
) -> ServiceDescriptor | None:
    return catalog.get(service_id)


# --- Module Notes -----------------------------------------------------------
# Adding a backend is a data change here; dispatch code never branches on ids.
