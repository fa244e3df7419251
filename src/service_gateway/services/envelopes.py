"""
service_gateway.services.envelopes

Uniform response envelope returned for every service call.

Responsibilities:
- Build mock, failure, and backend-merged envelopes.
- Synthesize placeholder metrics from an injected RNG.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

UNAVAILABLE_ERROR = "Service temporarily unavailable"

PROCESSING_TIME_MS = (200, 699)
ACCURACY_PCT = (90, 99)


@dataclass(frozen=True, slots=True)
class Metrics:
    # Placeholder telemetry: randomly drawn, not measured.
    processing_time: int
    accuracy: int

    def as_dict(self) -> dict[str, int]:
        return {"processingTime": self.processing_time, "accuracy": self.accuracy}


def random_metrics(rng: random.Random) -> Metrics:
    return Metrics(
        processing_time=rng.randint(*PROCESSING_TIME_MS),
        accuracy=rng.randint(*ACCURACY_PCT),
    )


def mock_envelope(
    service_id: str, input_text: Any, *, prefix: str, rng: random.Random
) -> dict[str, Any]:
    return {
        "success": True,
        "service": service_id,
        "output": f"{prefix}{input_text}",
        "metrics": random_metrics(rng).as_dict(),
    }


def failure_envelope(service_id: str) -> dict[str, Any]:
    return {"success": False, "error": UNAVAILABLE_ERROR, "service": service_id}


def merge_backend_response(service_id: str, body: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten backend fields into the top-level envelope.

    Backend keys win over `success`/`service` on collision. Clients depend on
    the flat shape, so keep this the only place that decides it.
    """

    return {"success": True, "service": service_id, **body}


# --- Module Notes -----------------------------------------------------------
# Field names are camelCase on the wire to stay compatible with existing front-ends.
