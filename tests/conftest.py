from __future__ import annotations

import io
from typing import Iterator

import pytest
from rich.console import Console as RichConsole

from lib_console_rich import runtime
from lib_console_rich.console import Console


class FakeClock:
    """Clock port double advanced manually by tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class RecordingSink:
    """Sink double remembering every chunk and clear call."""

    def __init__(self) -> None:
        self.chunks: list[str] = []
        self.cleared = 0

    def write(self, chunk: str) -> None:
        self.chunks.append(chunk)

    def clear(self) -> None:
        self.cleared += 1

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def record_console() -> RichConsole:
    return RichConsole(file=io.StringIO(), record=True, width=120, color_system=None, force_terminal=False)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def out_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def err_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def console(out_sink: RecordingSink, err_sink: RecordingSink, fake_clock: FakeClock) -> Console:
    return Console(out_sink, err_sink, clock=fake_clock)


@pytest.fixture(autouse=True)
def reset_default_console() -> Iterator[None]:
    try:
        yield
    finally:
        if runtime.is_initialised():
            runtime.shutdown()
