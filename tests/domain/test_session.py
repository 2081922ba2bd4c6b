from __future__ import annotations

import math

import pytest

from lib_console_rich.domain.session import CounterNotFoundError, DEFAULT_LABEL, SessionState


def test_increment_creates_label_at_one() -> None:
    state = SessionState()
    assert state.increment("a") == 1
    assert state.increment("a") == 2
    assert state.increment() == 1
    assert state.counters == {"a": 2, DEFAULT_LABEL: 1}


def test_reset_counter_requires_existing_label() -> None:
    state = SessionState()
    with pytest.raises(CounterNotFoundError) as excinfo:
        state.reset_counter("missing")
    assert excinfo.value.label == "missing"
    assert "missing" in str(excinfo.value)


def test_reset_counter_sets_zero_and_keeps_label() -> None:
    state = SessionState()
    state.increment("a")
    state.reset_counter("a")
    assert state.counters["a"] == 0
    state.reset_counter("a")
    assert state.increment("a") == 1


def test_counter_error_is_a_lookup_error() -> None:
    assert issubclass(CounterNotFoundError, LookupError)


def test_elapsed_uses_start_mark() -> None:
    state = SessionState()
    state.start_timer("t", 10.0)
    assert state.elapsed("t", 12.5) == pytest.approx(2.5)
    assert state.is_running("t")


def test_elapsed_for_unknown_timer_is_nan() -> None:
    assert math.isnan(SessionState().elapsed("nope", 1.0))


def test_stop_timer_removes_label_and_tolerates_missing() -> None:
    state = SessionState()
    state.start_timer("t", 1.0)
    state.stop_timer("t")
    state.stop_timer("t")
    assert not state.is_running("t")


@pytest.mark.parametrize("unit", [1, 2, 4])
def test_groups_move_depth_in_whole_units(unit: int) -> None:
    state = SessionState(indent_unit=unit)
    state.enter_group()
    state.enter_group()
    assert state.indent_depth == 2 * unit
    assert state.indentation == " " * (2 * unit)
    state.exit_group()
    assert state.indent_depth == unit


def test_negative_depth_renders_no_padding() -> None:
    state = SessionState()
    state.exit_group()
    assert state.indent_depth == -2
    assert state.indentation == ""


@pytest.mark.parametrize("unit", [0, -1])
def test_indent_unit_must_be_positive(unit: int) -> None:
    with pytest.raises(ValueError, match="positive"):
        SessionState(indent_unit=unit)
