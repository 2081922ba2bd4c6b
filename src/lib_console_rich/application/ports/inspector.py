"""Port for rendering non-string values into human-readable text."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class InspectorPort(Protocol):
    """Render an arbitrary value, honouring optional inspection options."""

    def inspect(self, value: Any, options: Mapping[str, Any] | None = None) -> str:
        """Return the textual form of ``value``."""


__all__ = ["InspectorPort"]
