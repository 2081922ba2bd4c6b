"""Public package surface of the console façade.

``Console`` is the drop-in replacement for a host console; the sink adapters
let callers route its output wherever they need. A process-wide default
console is available after an explicit :func:`init` call, never as an import
side effect.
"""

from __future__ import annotations

from .adapters import (
    ByteStreamSink,
    ForwardPolicy,
    HostConsole,
    HostStderr,
    HostStdout,
    PerfCounterClock,
    RichInspector,
    WritableSink,
)
from .config import ConsoleConfig, load_console_config
from .console import Console
from .domain import ALIAS_TABLE, CounterNotFoundError, Primitive, Trace
from .runtime import get_console, init, is_initialised, shutdown

__all__ = [
    "ALIAS_TABLE",
    "ByteStreamSink",
    "Console",
    "ConsoleConfig",
    "CounterNotFoundError",
    "ForwardPolicy",
    "HostConsole",
    "HostStderr",
    "HostStdout",
    "PerfCounterClock",
    "Primitive",
    "RichInspector",
    "Trace",
    "WritableSink",
    "get_console",
    "init",
    "is_initialised",
    "load_console_config",
    "shutdown",
]
