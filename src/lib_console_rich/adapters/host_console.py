"""Host console bridge used when callers supply no sinks of their own.

Purpose
-------
Give the default sinks somewhere native to forward to. In a Python host that
is a pair of Rich consoles bound to the process' stdout and stderr.

Contents
--------
* :class:`ForwardPolicy` - how a formatted line is shortened before
  forwarding (drop one trailing break, or strip surrounding whitespace).
* :class:`HostConsole` - ``log``/``error``/``clear`` on top of Rich.

System Role
-----------
Outermost adapter. :class:`~lib_console_rich.adapters.sinks.HostStdout` and
:class:`~lib_console_rich.adapters.sinks.HostStderr` delegate here.
"""

from __future__ import annotations

from enum import Enum

from rich.console import Console


class ForwardPolicy(Enum):
    """Policy applied to text handed to the host console.

    ``SLICE`` removes exactly one trailing line break and keeps group
    indentation intact. ``TRIM`` strips all surrounding whitespace.
    """

    SLICE = "slice"
    TRIM = "trim"

    @classmethod
    def from_name(cls, name: str) -> "ForwardPolicy":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown forward policy: {name!r} (expected 'slice' or 'trim')") from exc

    def apply(self, text: str) -> str:
        """Return ``text`` shortened according to the policy.

        >>> ForwardPolicy.SLICE.apply("  a\\n")
        '  a'
        >>> ForwardPolicy.TRIM.apply("  a\\n")
        'a'
        """

        if self is ForwardPolicy.TRIM:
            return text.strip()
        if text.endswith("\r\n"):
            return text[:-2]
        if text.endswith("\n"):
            return text[:-1]
        return text


class HostConsole:
    """Native console of the host process, rendered through Rich."""

    def __init__(
        self,
        *,
        stdout: Console | None = None,
        stderr: Console | None = None,
        policy: ForwardPolicy = ForwardPolicy.SLICE,
    ) -> None:
        self._stdout = stdout if stdout is not None else Console(highlight=False)
        self._stderr = stderr if stderr is not None else Console(stderr=True, highlight=False)
        self._policy = policy

    @property
    def policy(self) -> ForwardPolicy:
        return self._policy

    def log(self, text: str) -> None:
        """Write ``text`` to stdout without markup or highlighting."""

        self._stdout.out(self._policy.apply(text), highlight=False)

    def error(self, text: str) -> None:
        """Write ``text`` to stderr without markup or highlighting."""

        self._stderr.out(self._policy.apply(text), highlight=False)

    def clear(self) -> None:
        self._stdout.clear()


__all__ = ["ForwardPolicy", "HostConsole"]
