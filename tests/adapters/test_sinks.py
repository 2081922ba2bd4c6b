from __future__ import annotations

import io

import pytest

from lib_console_rich.adapters.host_console import ForwardPolicy, HostConsole
from lib_console_rich.adapters.sinks import ByteStreamSink, HostStderr, HostStdout, WritableSink


class _ClearableBuffer(io.BytesIO):
    def __init__(self) -> None:
        super().__init__()
        self.cleared = False

    def clear(self) -> None:
        self.cleared = True


class _RecordingHost(HostConsole):
    def __init__(self) -> None:
        self.logged: list[str] = []
        self.errors: list[str] = []
        self.cleared = 0

    def log(self, text: str) -> None:
        self.logged.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)

    def clear(self) -> None:
        self.cleared += 1


def test_byte_stream_sink_encodes_with_requested_encoding() -> None:
    buffer = io.BytesIO()
    sink = ByteStreamSink(buffer)
    sink.write("é\n", "latin-1")
    assert buffer.getvalue() == b"\xe9\n"


def test_byte_stream_sink_passes_bytes_through() -> None:
    buffer = io.BytesIO()
    ByteStreamSink(buffer).write(b"raw")
    assert buffer.getvalue() == b"raw"


def test_write_invokes_completion_callback_synchronously() -> None:
    calls: list[str] = []
    accepted = ByteStreamSink(io.BytesIO()).write("x\n", "utf-8", lambda: calls.append("done"))
    assert accepted is True
    assert calls == ["done"]


def test_byte_stream_sink_forwards_clear_when_supported() -> None:
    buffer = _ClearableBuffer()
    ByteStreamSink(buffer).clear()
    assert buffer.cleared is True


def test_byte_stream_sink_clear_without_capability_is_noop() -> None:
    ByteStreamSink(io.BytesIO()).clear()


def test_base_sink_requires_write_hook() -> None:
    with pytest.raises(NotImplementedError):
        WritableSink().write("x")


def test_host_stdout_forwards_decoded_text() -> None:
    host = _RecordingHost()
    sink = HostStdout(host)
    sink.write("  line\n")
    sink.clear()
    assert host.logged == ["  line\n"]
    assert host.cleared == 1


def test_host_stderr_forwards_to_error_and_cannot_clear() -> None:
    host = _RecordingHost()
    sink = HostStderr(host)
    sink.write("oops\n")
    sink.clear()
    assert host.errors == ["oops\n"]
    assert host.cleared == 0


def test_host_sinks_build_their_own_host_with_policy() -> None:
    sink = HostStdout(policy=ForwardPolicy.TRIM)
    assert sink.host.policy is ForwardPolicy.TRIM
