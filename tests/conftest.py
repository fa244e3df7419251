"""
tests.conftest

Shared fixtures for gateway tests.

Responsibilities:
- Provide a small catalog with one real and one mock backend.
- Provide an in-process HTTP client for the FastAPI app with lifespan managed.
"""

from __future__ import annotations

import random
from collections.abc import AsyncIterator

import httpx
import pytest

from service_gateway.api.app import create_app
from service_gateway.catalog import MOCK_SENTINEL, ServiceDescriptor, build_catalog
from service_gateway.settings import Settings

BACKEND_URL = "http://backend.test"
BACKEND_PATH = "/v1/analyze"


@pytest.fixture
def catalog():
    return build_catalog(
        ServiceDescriptor(id="analyzer", base_url=BACKEND_URL, path=BACKEND_PATH),
        ServiceDescriptor(id="captions", base_url=MOCK_SENTINEL),
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(env="test", static_dir=str(tmp_path / "no-static"))


@pytest.fixture
async def client(settings, catalog) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, catalog=catalog, rng=random.Random(1234))

    # ASGITransport does not run lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://gateway") as c:
            yield c
