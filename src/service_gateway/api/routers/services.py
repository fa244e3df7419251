"""
service_gateway.api.routers.services

Public service-call endpoint.

Responsibilities:
- Accept `{input, type?, lang?}` for a named service.
- Delegate to the Dispatcher and return its envelope with HTTP 200.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from service_gateway.api.deps import dispatcher_from_app
from service_gateway.services.dispatch_service import Dispatcher, ServiceRequest

router = APIRouter(prefix="/api/service", tags=["services"])


class ServiceCallBody(BaseModel):
    # Only the envelope shape is checked; values pass through untouched.
    input: Any = None
    type: Any = None
    lang: Any = None


async def read_call_body(request: Request) -> ServiceCallBody:
    # Non-JSON or empty bodies read as `{}`; a JSON body must be an object.
    if "json" not in request.headers.get("content-type", ""):
        return ServiceCallBody()
    raw = await request.body()
    if not raw.strip():
        return ServiceCallBody()
    try:
        return ServiceCallBody.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False)) from e


@router.post("/{service_id}")
async def call_service(
    service_id: str,
    body: ServiceCallBody = Depends(read_call_body),
    dispatcher: Dispatcher = Depends(dispatcher_from_app),
) -> dict[str, Any]:
    # Failures are reported in-band via `success`.
    request = ServiceRequest(input=body.input, type=body.type, lang=body.lang)
    return await dispatcher.handle(service_id, request)


# --- Module Notes -----------------------------------------------------------
# Routing decisions live in `Dispatcher`; this module only maps HTTP to it.
