"""Protocols the console façade depends on."""

from __future__ import annotations

from .inspector import InspectorPort
from .sink import ClearableSinkPort, SinkPort, is_sink
from .time import ClockPort

__all__ = ["ClearableSinkPort", "ClockPort", "InspectorPort", "SinkPort", "is_sink"]
