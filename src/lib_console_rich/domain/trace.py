"""Diagnostic value emitted by ``Console.trace``."""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field

TRACE_LABEL = "Trace"


@dataclass(slots=True, frozen=True)
class Trace:
    """Message plus the call stack captured where ``trace`` was invoked.

    ``stack`` holds pre-rendered frame lines as produced by
    :func:`traceback.format_list`.
    """

    message: str
    stack: tuple[str, ...] = field(default_factory=tuple)
    label: str = TRACE_LABEL

    @classmethod
    def capture(cls, message: str, *, skip: int = 1) -> "Trace":
        """Build a trace for the caller, dropping ``skip`` innermost frames."""

        frames = traceback.extract_stack()[: -(skip + 1)]
        return cls(message=message, stack=tuple(traceback.format_list(frames)))

    def render(self) -> str:
        """Return ``"<label>: <message>"`` followed by the stack lines."""

        head = f"{self.label}: {self.message}" if self.message else self.label
        if not self.stack:
            return head
        body = "".join(self.stack).rstrip("\n")
        return f"{head}\n{body}"


__all__ = ["TRACE_LABEL", "Trace"]
