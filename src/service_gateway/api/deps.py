"""
service_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns (dispatcher, health clock).
"""

from __future__ import annotations

from fastapi import Request

from service_gateway.services.clock import HealthClock
from service_gateway.services.dispatch_service import Dispatcher


def dispatcher_from_app(request: Request) -> Dispatcher:
    # Created in the app lifespan (see `service_gateway.api.app.create_app`).
    return request.app.state.dispatcher  # type: ignore[attr-defined]


def health_clock_from_app(request: Request) -> HealthClock:
    return request.app.state.health_clock  # type: ignore[attr-defined]
