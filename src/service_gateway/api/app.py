"""
service_gateway.api.app

FastAPI app factory for the Service Gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open and close the shared outbound HTTP client.
- Mount the static front-end bundle after API routes.
"""

from __future__ import annotations

import random
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from service_gateway import __version__
from service_gateway.api.routers.health import router as health_router
from service_gateway.api.routers.services import router as services_router
from service_gateway.backend_clients.http import BackendClient
from service_gateway.catalog import SERVICE_CATALOG, ServiceDescriptor
from service_gateway.observability.logging import configure_logging, get_logger
from service_gateway.observability.middleware import RequestContextMiddleware
from service_gateway.services.clock import HealthClock
from service_gateway.services.dispatch_service import Dispatcher
from service_gateway.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    catalog: Mapping[str, ServiceDescriptor] = SERVICE_CATALOG,
    rng: random.Random | None = None,
    http: httpx.AsyncClient | None = None,
) -> FastAPI:
    """
    `http` lets callers supply their own outbound client (tests, embedding);
    the app only closes clients it created itself.
    """

    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, services=len(catalog))
        client = http or httpx.AsyncClient()
        app.state.dispatcher = Dispatcher(
            backend=BackendClient(http=client, timeout_seconds=settings.backend_timeout_seconds),
            catalog=catalog,
            rng=rng,
            mock_output_prefix=settings.mock_output_prefix,
        )
        try:
            yield
        finally:
            if http is None:
                await client.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Service Gateway",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.health_clock = HealthClock()

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router, tags=["health"])
    app.include_router(services_router)

    # Registered last so API routes win over files of the same name.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
        log.info("static_mounted", directory=str(static_dir))
    else:
        log.warning("static_dir_missing", directory=str(static_dir))

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; routing decisions stay in `services.dispatch_service`.
