"""Runtime façade managing the process-wide default console.

Purpose
-------
Expose an explicit lifecycle (`init`, `get_console`, `shutdown`) for the
convenience console many hosts expect, instead of creating one as an import
side effect.

Contents
--------
* ``init`` - build the default console from configuration plus environment
  overrides and register it.
* ``get_console`` / ``is_initialised`` - accessors.
* ``shutdown`` - drop the default console.

System Role
-----------
Outer shell over :class:`lib_console_rich.console.Console`. The default
instance honours the same contract as any constructed console; only its
registration is global.
"""

from __future__ import annotations

from typing import Any, Mapping

from lib_console_rich.application.ports import ClockPort, InspectorPort, SinkPort, is_sink
from lib_console_rich.config import ConsoleConfig, load_console_config
from lib_console_rich.console import Console

from ._state import clear_console, current_console, is_initialised, set_console


def init(
    sink_or_config: SinkPort | ConsoleConfig | Mapping[str, Any] | None = None,
    error_sink: SinkPort | None = None,
    *,
    inspector: InspectorPort | None = None,
    clock: ClockPort | None = None,
) -> Console:
    """Create and register the default console.

    Why
    ---
    Hosts call ``init`` once during startup; library code then reaches the
    same instance through :func:`get_console` without passing it around.

    What
    ----
    Accepts the same arguments as :class:`Console`. Configurations (not plain
    sinks) pass through :func:`load_console_config` first so
    ``CONSOLE_*`` environment variables apply.

    Outputs
    -------
    Console
        The newly registered default console.

    Side Effects
    ------------
    Raises :class:`RuntimeError` if a default console is already registered.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_console_rich.init() cannot be called twice without shutdown(); call lib_console_rich.shutdown() first",
        )

    if is_sink(sink_or_config):
        console = Console(sink_or_config, error_sink, inspector=inspector, clock=clock)
    else:
        if isinstance(sink_or_config, Mapping):
            base = ConsoleConfig.from_mapping(sink_or_config)
        elif sink_or_config is None or isinstance(sink_or_config, ConsoleConfig):
            base = sink_or_config
        else:
            raise TypeError(f"init expects a sink or a configuration, got {type(sink_or_config).__name__}")
        console = Console(load_console_config(base), inspector=inspector, clock=clock)
    set_console(console)
    return console


def get_console() -> Console:
    """Return the default console.

    Raises
    ------
    RuntimeError
        When :func:`init` has not been called.
    """

    return current_console()


def shutdown() -> None:
    """Unregister the default console.

    Caller-supplied sinks are left open; flushing or closing them is the
    caller's concern.

    Raises
    ------
    RuntimeError
        When no default console is registered.
    """

    current_console()
    clear_console()


__all__ = ["get_console", "init", "is_initialised", "shutdown"]
