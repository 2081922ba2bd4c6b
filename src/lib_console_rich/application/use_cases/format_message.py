"""Formatter turning variadic console arguments into one terminated line.

Purpose
-------
Implement the printf-versus-join branching of the console: a string first
argument is a template whose directives consume the following arguments; any
other first argument causes every value to be rendered and space-joined.

Contents
--------
* :func:`format_arguments` - compose the message body (no indentation).
* :func:`indent_lines` - pad every physical line and terminate the payload.
* :func:`render_line` - both steps, as used by the console façade.

System Role
-----------
Application-layer policy. Values that are not strings are always rendered
through an :class:`~lib_console_rich.application.ports.InspectorPort`, never
via ``str()``, so objects and exceptions look the same wherever they appear.

Directives
----------
``%s`` string, ``%d`` number, ``%i`` integer, ``%f`` float, ``%j`` JSON,
``%o``/``%O`` inspected (``%o`` expanded), ``%c`` consumed and dropped, ``%%``
a literal percent sign. A directive with no argument left stays verbatim, and
a template passed without further arguments is returned unchanged.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, Mapping, Sequence

Inspect = Callable[..., str]

_DIRECTIVE = re.compile(r"%([sdifjoOc%])")
_NAN = "NaN"


def _to_number(value: Any) -> int | float:
    """Coerce ``value`` the way ``%d`` expects; unparseable input is ``nan``.

    >>> _to_number("42"), _to_number(True), _to_number("x")
    (42, 1, nan)
    """

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _number_text(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return _NAN
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return str(value)


def _as_string(value: Any, inspect: Inspect) -> str:
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, int, float)):
        return str(value)
    return inspect(value)


def _as_number(value: Any, inspect: Inspect) -> str:
    return _number_text(_to_number(value))


def _as_integer(value: Any, inspect: Inspect) -> str:
    number = _to_number(value)
    if isinstance(number, float):
        if not math.isfinite(number):
            return _NAN
        number = int(number)
    return str(number)


def _as_float(value: Any, inspect: Inspect) -> str:
    return _number_text(float(_to_number(value)))


def _as_json(value: Any, inspect: Inspect) -> str:
    try:
        return json.dumps(value, default=str)
    except ValueError:
        return "[Circular]"
    except TypeError:
        return inspect(value)


def _as_expanded(value: Any, inspect: Inspect) -> str:
    return inspect(value, {"expand_all": True})


def _as_inspected(value: Any, inspect: Inspect) -> str:
    return inspect(value)


def _as_nothing(value: Any, inspect: Inspect) -> str:
    return ""


_CONVERTERS: Mapping[str, Callable[[Any, Inspect], str]] = {
    "s": _as_string,
    "d": _as_number,
    "i": _as_integer,
    "f": _as_float,
    "j": _as_json,
    "o": _as_expanded,
    "O": _as_inspected,
    "c": _as_nothing,
}


def _plain(value: Any, inspect: Inspect) -> str:
    return value if isinstance(value, str) else inspect(value)


def _substitute(template: str, args: Sequence[Any], inspect: Inspect) -> tuple[str, Sequence[Any]]:
    """Fill directives in ``template`` and return the text plus unused args."""

    consumed = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal consumed
        code = match.group(1)
        if code == "%":
            return "%"
        if consumed >= len(args):
            return match.group(0)
        value = args[consumed]
        consumed += 1
        return _CONVERTERS[code](value, inspect)

    text = _DIRECTIVE.sub(_replace, template)
    return text, args[consumed:]


def format_arguments(args: Sequence[Any], inspect: Inspect) -> str:
    """Compose the message body for ``args``.

    Examples
    --------
    >>> format_arguments(("%s=%d", "x", 5), repr)
    'x=5'
    >>> format_arguments(("a", {"b": 1}), repr)
    "a {'b': 1}"
    >>> format_arguments(({"b": 1}, "a"), repr)
    "{'b': 1} a"
    >>> format_arguments((), repr)
    ''
    """

    if not args:
        return ""
    first, rest = args[0], args[1:]
    if not isinstance(first, str):
        return " ".join(_plain(value, inspect) for value in args)
    if not rest:
        return first
    text, leftover = _substitute(first, rest, inspect)
    if leftover:
        text = " ".join([text, *(_plain(value, inspect) for value in leftover)])
    return text


def indent_lines(text: str, indentation: str) -> str:
    """Prefix every line of ``text`` with ``indentation`` and add one ``\\n``.

    >>> indent_lines("a\\nb", "  ")
    '  a\\n  b\\n'
    """

    if indentation:
        text = "\n".join(indentation + line for line in text.split("\n"))
    return text + "\n"


def render_line(args: Sequence[Any], *, inspect: Inspect, indentation: str = "") -> str:
    """Return the sink-ready payload for ``args`` at ``indentation``."""

    return indent_lines(format_arguments(args, inspect), indentation)


__all__ = ["format_arguments", "indent_lines", "render_line"]
