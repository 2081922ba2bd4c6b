"""Port for the high-resolution clock behind console timers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide a monotonic timestamp in seconds."""

    def now(self) -> float: ...


__all__ = ["ClockPort"]
