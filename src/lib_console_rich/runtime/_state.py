"""Registry holding the process-wide default :class:`Console`.

Only :mod:`lib_console_rich.runtime` writes here. Each console's session
state stays private to that console; the lock guards only which console is
registered as the default.
"""

from __future__ import annotations

from threading import RLock

from lib_console_rich.console import Console

_DEFAULT_CONSOLE: Console | None = None
_REGISTRY_LOCK = RLock()


def set_console(console: Console) -> None:
    """Register ``console`` as the default returned by ``get_console()``."""

    with _REGISTRY_LOCK:
        global _DEFAULT_CONSOLE
        _DEFAULT_CONSOLE = console


def clear_console() -> None:
    """Forget the default console; its sinks are left untouched."""

    with _REGISTRY_LOCK:
        global _DEFAULT_CONSOLE
        _DEFAULT_CONSOLE = None


def current_console() -> Console:
    """Return the registered default console.

    Raises
    ------
    RuntimeError
        When no default console is registered.
    """

    with _REGISTRY_LOCK:
        if _DEFAULT_CONSOLE is None:
            raise RuntimeError(
                "no default console registered; call lib_console_rich.init() first or construct Console(...) directly"
            )
        return _DEFAULT_CONSOLE


def is_initialised() -> bool:
    """Return ``True`` while a default console is registered."""

    with _REGISTRY_LOCK:
        return _DEFAULT_CONSOLE is not None


__all__ = [
    "clear_console",
    "current_console",
    "is_initialised",
    "set_console",
]
