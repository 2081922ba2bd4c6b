"""Rich-powered inspector implementing :class:`InspectorPort`.

Purpose
-------
Render non-string console arguments (containers, objects, exceptions, traces)
with :func:`rich.pretty.pretty_repr` so nested values wrap and indent the way a
developer console does.

Contents
--------
* :data:`DEFAULT_INSPECT_OPTIONS` - options applied when none are given.
* :class:`RichInspector` - the adapter used by every console by default.

System Role
-----------
Stands in for the host's value inspector. Options mirror the keyword
arguments of ``pretty_repr``; ``depth`` is accepted as an alias of
``max_depth`` for callers used to ``dir(obj, {"depth": 2})``.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Mapping

from rich.pretty import pretty_repr

from lib_console_rich.application.ports.inspector import InspectorPort
from lib_console_rich.domain.trace import Trace

logger = logging.getLogger(__name__)

DEFAULT_INSPECT_OPTIONS: Mapping[str, Any] = {
    "max_width": 80,
    "indent_size": 2,
}

_SUPPORTED = frozenset({"max_width", "indent_size", "max_length", "max_string", "max_depth", "expand_all"})
_ALIASES = {"depth": "max_depth", "width": "max_width"}


def _normalise_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Map aliases onto ``pretty_repr`` keywords and drop unknown keys.

    >>> _normalise_options({"depth": 2, "colors": True})
    {'max_depth': 2}
    """

    resolved: dict[str, Any] = {}
    for key, value in options.items():
        name = _ALIASES.get(key, key)
        if name not in _SUPPORTED:
            logger.debug("ignoring unsupported inspect option %r", key)
            continue
        resolved[name] = value
    return resolved


def _render_exception(error: BaseException) -> str:
    if error.__traceback__ is None:
        return "".join(traceback.format_exception_only(type(error), error)).rstrip("\n")
    return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")


class RichInspector(InspectorPort):
    """Render values with ``pretty_repr`` using instance-level defaults."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        merged = dict(DEFAULT_INSPECT_OPTIONS)
        if options:
            merged.update(options)
        self._options = _normalise_options(merged)

    @property
    def options(self) -> Mapping[str, Any]:
        """Return the effective default options."""

        return dict(self._options)

    def inspect(self, value: Any, options: Mapping[str, Any] | None = None) -> str:
        """Return the textual form of ``value``; per-call ``options`` win.

        Examples
        --------
        >>> RichInspector().inspect({"b": 1})
        "{'b': 1}"
        >>> RichInspector().inspect(ValueError("boom"))
        'ValueError: boom'
        """

        if isinstance(value, Trace):
            return value.render()
        if isinstance(value, BaseException):
            return _render_exception(value)
        effective = self._options
        if options:
            effective = {**effective, **_normalise_options(options)}
        return pretty_repr(value, **effective)


__all__ = ["DEFAULT_INSPECT_OPTIONS", "RichInspector"]
