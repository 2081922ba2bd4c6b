"""Domain entities and value objects used by the console façade."""

from __future__ import annotations

from .methods import ALIAS_TABLE, Primitive, bind_aliases
from .session import DEFAULT_GROUP_INDENTATION, DEFAULT_LABEL, CounterNotFoundError, SessionState
from .trace import TRACE_LABEL, Trace

__all__ = [
    "ALIAS_TABLE",
    "CounterNotFoundError",
    "DEFAULT_GROUP_INDENTATION",
    "DEFAULT_LABEL",
    "Primitive",
    "SessionState",
    "TRACE_LABEL",
    "Trace",
    "bind_aliases",
]
