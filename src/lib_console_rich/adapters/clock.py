"""High-resolution clock adapter backing console timers."""

from __future__ import annotations

import time

from lib_console_rich.application.ports.time import ClockPort


class PerfCounterClock(ClockPort):
    """Concrete clock port returning :func:`time.perf_counter` seconds."""

    def now(self) -> float:
        """Return a monotonic timestamp with the best available resolution."""
        return time.perf_counter()


__all__ = ["PerfCounterClock"]
