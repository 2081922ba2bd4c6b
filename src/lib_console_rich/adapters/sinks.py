"""Sink adapters turning formatted lines into bytes for a destination.

Purpose
-------
Provide the writable sinks a console can be built from: a base class with
the ``write(chunk, encoding, callback)`` contract, an adapter for binary
streams, and the default sinks that forward to the host console.

Contents
--------
* :class:`WritableSink` - base class; encodes text and calls ``_write``.
* :class:`ByteStreamSink` - forward raw bytes to a binary destination.
* :class:`HostStdout` / :class:`HostStderr` - forward to :class:`HostConsole`.

System Role
-----------
Implements :class:`~lib_console_rich.application.ports.SinkPort`. Writes are
synchronous: the completion callback fires before ``write`` returns. The
console never closes a sink it was given.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from lib_console_rich.application.ports.sink import ClearableSinkPort

from .host_console import ForwardPolicy, HostConsole

DEFAULT_ENCODING = "utf-8"

Callback = Callable[[], None]


class _BinaryDestination(Protocol):
    def write(self, data: bytes, /) -> Any: ...


def _noop() -> None:
    return None


class WritableSink(ClearableSinkPort):
    """Base sink: normalise ``chunk`` to bytes and hand it to :meth:`_write`.

    Subclasses override :meth:`_write` and must call ``callback`` once the
    data was accepted. :meth:`clear` is a no-op unless overridden.
    """

    def write(self, chunk: str | bytes, encoding: str = DEFAULT_ENCODING, callback: Callback | None = None) -> bool:
        """Encode ``chunk`` with ``encoding`` and forward it.

        Returns ``True`` so callers written against stream-style sinks can
        treat the write as accepted.
        """

        data = chunk if isinstance(chunk, (bytes, bytearray)) else str(chunk).encode(encoding)
        self._write(bytes(data), encoding, callback or _noop)
        return True

    def _write(self, data: bytes, encoding: str, callback: Callback) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        return None


class ByteStreamSink(WritableSink):
    """Forward encoded lines to a binary destination such as ``io.BytesIO``.

    Examples
    --------
    >>> import io
    >>> buffer = io.BytesIO()
    >>> ByteStreamSink(buffer).write("hé\\n")
    True
    >>> buffer.getvalue()
    b'h\\xc3\\xa9\\n'
    """

    def __init__(self, destination: _BinaryDestination) -> None:
        self._destination = destination

    @property
    def destination(self) -> _BinaryDestination:
        return self._destination

    def _write(self, data: bytes, encoding: str, callback: Callback) -> None:
        self._destination.write(data)
        flush = getattr(self._destination, "flush", None)
        if callable(flush):
            flush()
        callback()

    def clear(self) -> None:
        clear = getattr(self._destination, "clear", None)
        if callable(clear):
            clear()


class _HostSink(WritableSink):
    def __init__(self, host: HostConsole | None = None, *, policy: ForwardPolicy = ForwardPolicy.SLICE) -> None:
        self._host = host if host is not None else HostConsole(policy=policy)

    @property
    def host(self) -> HostConsole:
        return self._host


class HostStdout(_HostSink):
    """Default out sink: forwards each line to :meth:`HostConsole.log`."""

    def _write(self, data: bytes, encoding: str, callback: Callback) -> None:
        self._host.log(data.decode(encoding))
        callback()

    def clear(self) -> None:
        self._host.clear()


class HostStderr(_HostSink):
    """Default err sink: forwards each line to :meth:`HostConsole.error`."""

    def _write(self, data: bytes, encoding: str, callback: Callback) -> None:
        self._host.error(data.decode(encoding))
        callback()


__all__ = ["ByteStreamSink", "DEFAULT_ENCODING", "HostStderr", "HostStdout", "WritableSink"]
