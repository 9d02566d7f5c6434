"""Clock implementations of the TimeSource protocol.

SystemClock reads the wall clock; ManualClock only moves when told to,
which makes expiry testable without real elapsed time.
"""

from __future__ import annotations

import time

from core.errors import ValidationError


def _check_millis(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    return value


class SystemClock:
    # Wall clock, milliseconds since the Unix epoch
    def millis(self) -> int:
        return time.time_ns() // 1_000_000


class ManualClock:
    def __init__(self, *, start_millis: int = 0) -> None:
        self._now = _check_millis(start_millis, "start_millis")

    def millis(self) -> int:
        return self._now

    def advance(self, millis: int) -> None:
        step = _check_millis(millis, "millis")
        if step < 0:
            raise ValidationError("Cannot advance a clock backwards")
        self._now += step

    def set(self, millis: int) -> None:
        self._now = _check_millis(millis, "millis")
