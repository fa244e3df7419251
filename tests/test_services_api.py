"""
tests.test_services_api

HTTP surface: `/api/service/{service_id}` and static front-end serving.
"""

from __future__ import annotations

import json
import random

import httpx
import pytest
from respx import MockRouter

from service_gateway.api.app import create_app
from service_gateway.services.envelopes import UNAVAILABLE_ERROR
from service_gateway.settings import Settings

from .conftest import BACKEND_PATH, BACKEND_URL


@pytest.mark.asyncio
async def test_mock_service_call(client) -> None:
    r = await client.post("/api/service/captions", json={"input": "sunset", "lang": "en"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["service"] == "captions"
    assert body["output"] == "Mock: sunset"
    assert 200 <= body["metrics"]["processingTime"] <= 699
    assert 90 <= body["metrics"]["accuracy"] <= 99


@pytest.mark.asyncio
async def test_unknown_service_is_mocked(client) -> None:
    r = await client.post("/api/service/does-not-exist", json={"input": "x"})
    assert r.status_code == 200
    assert r.json()["output"] == "Mock: x"


@pytest.mark.asyncio
async def test_missing_input_is_passed_through(client) -> None:
    r = await client.post("/api/service/captions", json={})
    assert r.status_code == 200
    assert r.json()["output"] == "Mock: None"


@pytest.mark.asyncio
async def test_missing_body_is_treated_as_empty(client) -> None:
    r = await client.post("/api/service/captions")
    assert r.status_code == 200
    assert r.json()["output"] == "Mock: None"


@pytest.mark.asyncio
async def test_non_object_body_is_rejected(client) -> None:
    r = await client.post("/api/service/captions", json=["input"])
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_real_backend_success(client, respx_mock: MockRouter) -> None:
    respx_mock.post(f"{BACKEND_URL}{BACKEND_PATH}").mock(
        return_value=httpx.Response(200, json={"foo": "bar"})
    )

    r = await client.post("/api/service/analyzer", json={"input": "caption"})
    assert r.status_code == 200
    assert r.json() == {"success": True, "service": "analyzer", "foo": "bar"}


@pytest.mark.asyncio
async def test_real_backend_failure_still_returns_200(client, respx_mock: MockRouter) -> None:
    respx_mock.post(f"{BACKEND_URL}{BACKEND_PATH}").mock(
        side_effect=httpx.ConnectError("connection refused by 10.0.0.7")
    )

    r = await client.post("/api/service/analyzer", json={"input": "caption"})
    assert r.status_code == 200
    assert r.json() == {"success": False, "error": UNAVAILABLE_ERROR, "service": "analyzer"}
    # Transport detail goes to logs only.
    assert "10.0.0.7" not in r.text


@pytest.mark.asyncio
async def test_cors_headers(client) -> None:
    r = await client.post(
        "/api/service/captions",
        json={"input": "x"},
        headers={"origin": "http://frontend.example"},
    )
    assert r.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_static_front_end_is_served(tmp_path, catalog) -> None:
    static = tmp_path / "marketplace"
    static.mkdir()
    (static / "index.html").write_text("<h1>marketplace</h1>")
    app = create_app(
        settings=Settings(env="test", static_dir=str(static)),
        catalog=catalog,
        rng=random.Random(0),
    )

    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://gateway") as c:
            r = await c.get("/")
            assert r.status_code == 200
            assert "marketplace" in r.text

            # API routes are not shadowed by the static mount.
            r = await c.get("/health")
            assert r.json()["status"] == "healthy"
            r = await c.post("/api/service/captions", json={"input": "x"})
            assert r.json()["success"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("payload", "expected_output"),
    [
        ({"input": 123}, "Mock: 123"),
        ({"input": ["a"]}, "Mock: ['a']"),
        ({"input": "x", "type": 5, "lang": {"code": "en"}}, "Mock: x"),
    ],
)
async def test_non_string_values_pass_through(client, payload, expected_output) -> None:
    r = await client.post("/api/service/captions", json=payload)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["output"] == expected_output


@pytest.mark.asyncio
async def test_non_json_content_type_is_treated_as_empty(client) -> None:
    r = await client.post(
        "/api/service/captions",
        content=b"input=hello",
        headers={"content-type": "text/plain"},
    )
    assert r.status_code == 200
    assert r.json()["output"] == "Mock: None"


@pytest.mark.asyncio
async def test_malformed_json_is_rejected(client) -> None:
    r = await client.post(
        "/api/service/captions",
        content=b'{"input": ',
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_numeric_input_reaches_backend_unchanged(client, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{BACKEND_URL}{BACKEND_PATH}").mock(
        return_value=httpx.Response(200, json={"ok": True})
    )

    r = await client.post("/api/service/analyzer", json={"input": 42})
    assert r.json() == {"success": True, "service": "analyzer", "ok": True}
    assert json.loads(route.calls.last.request.content)["content"] == 42
