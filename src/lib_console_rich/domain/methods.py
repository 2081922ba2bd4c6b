"""Alias table mapping console method names onto primitive behaviours.

Purpose
-------
Reduce the wide console surface (``info``, ``warn``, ``profile``, ...) to a
handful of implementations through an explicit, static lookup.

Contents
--------
* :class:`Primitive` - enumeration of canonical behaviours.
* :data:`ALIAS_TABLE` - read-only alias to primitive mapping.
* :func:`bind_aliases` - install the aliases on one console instance.

System Role
-----------
Consumed by :class:`lib_console_rich.console.Console` at construction time.
The resolution happens per instance because the bound methods close over the
instance's sinks and session state.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class Primitive(Enum):
    """Canonical behaviours every alias resolves to."""

    LOG = "log"
    ERROR = "error"
    GROUP = "group"
    EMPTY = "empty"

    @property
    def method_name(self) -> str:
        """Return the console attribute implementing this behaviour."""

        return self.value


# Profiling hooks cannot be emulated outside the host and resolve to no-ops.
ALIAS_TABLE: Mapping[str, Primitive] = MappingProxyType(
    {
        "info": Primitive.LOG,
        "warn": Primitive.LOG,
        "debug": Primitive.LOG,
        "dirxml": Primitive.LOG,
        "table": Primitive.LOG,
        "group_collapsed": Primitive.GROUP,
        "profile": Primitive.EMPTY,
        "profile_end": Primitive.EMPTY,
        "time_stamp": Primitive.EMPTY,
        "create_task": Primitive.EMPTY,
    }
)


def bind_aliases(target: Any, table: Mapping[str, Primitive] = ALIAS_TABLE) -> dict[str, Any]:
    """Attach every alias in ``table`` to ``target`` as a bound method.

    Parameters
    ----------
    target:
        Object exposing one attribute per :class:`Primitive` (``log``,
        ``error``, ``group``, ``empty``).
    table:
        Alias mapping; defaults to :data:`ALIAS_TABLE`.

    Returns
    -------
    dict[str, Any]
        The resolved dispatch table, alias to bound callable.

    Examples
    --------
    >>> class Target:
    ...     def log(self, *args): return ("log", args)
    ...     def error(self, *args): return ("error", args)
    ...     def group(self, *args): return ("group", args)
    ...     def empty(self, *args): return None
    >>> target = Target()
    >>> _ = bind_aliases(target)
    >>> target.warn("x")
    ('log', ('x',))
    """

    resolved: dict[str, Any] = {}
    for alias, primitive in table.items():
        implementation = getattr(target, primitive.method_name)
        setattr(target, alias, implementation)
        resolved[alias] = implementation
    return resolved


__all__ = ["ALIAS_TABLE", "Primitive", "bind_aliases"]
