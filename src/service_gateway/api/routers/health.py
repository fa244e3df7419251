"""
service_gateway.api.routers.health

Health endpoint.

Responsibilities:
- Liveness probe (`/health`) with an epoch-millisecond timestamp.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from service_gateway.api.deps import health_clock_from_app
from service_gateway.services.clock import HealthClock

router = APIRouter()


@router.get("/health")
async def health(clock: HealthClock = Depends(health_clock_from_app)) -> dict[str, Any]:
    # Liveness only: backends are not probed.
    return {"status": "healthy", "timestamp": clock.tick()}
