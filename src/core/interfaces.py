"""Core protocol definitions.

Defines the TimeSource protocol consulted by the cache for the current
instant, so real and controllable clocks share a uniform API.
"""

from __future__ import annotations

from typing import Protocol


class TimeSource(Protocol):
    """Contract for anything that can report the current instant."""
    def millis(self) -> int:
        """Current instant in milliseconds since a fixed epoch."""
        ...
