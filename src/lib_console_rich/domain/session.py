"""Per-console session state: counters, timer marks, and indentation.

Purpose
-------
Hold the mutable bookkeeping behind ``count``/``time``/``group`` so the
console façade stays a thin dispatcher over a small, testable record.

Contents
--------
* :class:`SessionState` - counters, running timers, indentation depth.
* :class:`CounterNotFoundError` - raised when resetting an unknown counter.
* :data:`DEFAULT_LABEL` - label used when callers omit one.

System Role
-----------
Domain layer. Knows nothing about sinks or formatting; the console reads the
values returned here and renders them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DEFAULT_LABEL = "default"
DEFAULT_GROUP_INDENTATION = 2


class CounterNotFoundError(LookupError):
    """Raised by :meth:`SessionState.reset_counter` for labels never counted."""

    def __init__(self, label: str) -> None:
        super().__init__(f'Counter "{label}" doesn\'t exist.')
        self.label = label


@dataclass(slots=True)
class SessionState:
    """Mutable record owned by exactly one console instance.

    Attributes
    ----------
    indent_unit:
        Number of spaces added per ``group`` level. Must be positive.
    indent_depth:
        Current leading whitespace width. Moves only in ``indent_unit`` steps.
    counters:
        Label to count mapping. A label present here has been counted at least
        once (its value may be zero after a reset).
    timers:
        Label to start mark (clock seconds). Presence means "running".

    Examples
    --------
    >>> state = SessionState()
    >>> state.increment("a"), state.increment("a")
    (1, 2)
    >>> state.enter_group(); state.indent_depth
    2
    """

    indent_unit: int = DEFAULT_GROUP_INDENTATION
    indent_depth: int = 0
    counters: dict[str, int] = field(default_factory=dict)
    timers: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.indent_unit <= 0:
            raise ValueError("indent_unit must be positive")

    def increment(self, label: str = DEFAULT_LABEL) -> int:
        """Add one to ``label`` (starting from zero) and return the new value."""

        value = self.counters.get(label, 0) + 1
        self.counters[label] = value
        return value

    def reset_counter(self, label: str = DEFAULT_LABEL) -> None:
        """Put ``label`` back to zero.

        Raises
        ------
        CounterNotFoundError
            When ``label`` was never incremented.
        """

        if label not in self.counters:
            raise CounterNotFoundError(label)
        self.counters[label] = 0

    def start_timer(self, label: str, mark: float) -> None:
        """Record ``mark`` as the start of ``label``, replacing any prior mark."""

        self.timers[label] = mark

    def elapsed(self, label: str, now: float) -> float:
        """Return seconds since ``label`` started, or ``nan`` if it never did.

        >>> SessionState().elapsed("missing", 10.0)
        nan
        """

        start = self.timers.get(label)
        if start is None:
            return math.nan
        return now - start

    def stop_timer(self, label: str) -> None:
        self.timers.pop(label, None)

    def is_running(self, label: str) -> bool:
        return label in self.timers

    def enter_group(self) -> None:
        self.indent_depth += self.indent_unit

    def exit_group(self) -> None:
        # Unmatched exits are not validated; depth may go negative.
        self.indent_depth -= self.indent_unit

    @property
    def indentation(self) -> str:
        """Return the padding prefixed to every line at the current depth."""

        return " " * max(self.indent_depth, 0)


__all__ = ["CounterNotFoundError", "DEFAULT_GROUP_INDENTATION", "DEFAULT_LABEL", "SessionState"]
