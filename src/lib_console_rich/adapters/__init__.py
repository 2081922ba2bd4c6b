"""Concrete adapters for sinks, inspection, the host console, and timing."""

from __future__ import annotations

from .clock import PerfCounterClock
from .host_console import ForwardPolicy, HostConsole
from .inspection import DEFAULT_INSPECT_OPTIONS, RichInspector
from .sinks import ByteStreamSink, HostStderr, HostStdout, WritableSink

__all__ = [
    "ByteStreamSink",
    "DEFAULT_INSPECT_OPTIONS",
    "ForwardPolicy",
    "HostConsole",
    "HostStderr",
    "HostStdout",
    "PerfCounterClock",
    "RichInspector",
    "WritableSink",
]
