"""
service_gateway.services.clock

Timestamp source for the health endpoint.
"""

from __future__ import annotations

import time
from collections.abc import Callable


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class HealthClock:
    """
    Epoch-millisecond clock that never repeats or goes backwards,
    even for two reads within the same millisecond or across a wall-clock step.
    """

    def __init__(self, now_ms: Callable[[], int] = _epoch_ms) -> None:
        self._now_ms = now_ms
        self._last = 0

    def tick(self) -> int:
        # Single event loop: read-modify-write needs no lock.
        ts = max(self._now_ms(), self._last + 1)
        self._last = ts
        return ts
