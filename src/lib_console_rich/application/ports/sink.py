"""Sink ports describing where formatted console lines are written.

Purpose
-------
Define the narrow write/clear contract the console façade depends on so any
text stream, byte adapter, or test double can receive output.

Contents
--------
* :class:`SinkPort` - runtime-checkable protocol with a ``write`` method.
* :class:`ClearableSinkPort` - sinks that additionally support ``clear``.
* :func:`is_sink` - duck-typed check used by the console constructor.

System Role
-----------
Application boundary between the formatter and the concrete adapters in
:mod:`lib_console_rich.adapters.sinks`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Accept one formatted chunk per call."""

    def write(self, chunk: Any, /) -> Any:
        """Write ``chunk``; the return value is ignored by the console."""


@runtime_checkable
class ClearableSinkPort(SinkPort, Protocol):
    """Sink that can also wipe its display."""

    def clear(self) -> None:
        """Clear the destination."""


def is_sink(candidate: object) -> bool:
    """Return ``True`` when ``candidate`` exposes a callable ``write``.

    >>> import io
    >>> is_sink(io.StringIO()), is_sink({"stdout": None})
    (True, False)
    """

    return callable(getattr(candidate, "write", None))


__all__ = ["ClearableSinkPort", "SinkPort", "is_sink"]
