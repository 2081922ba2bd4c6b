"""Console façade: the familiar ``console.*`` surface over pluggable sinks.

Purpose
-------
Offer ``log``/``error``/``group``/``count``/``time``/... with developer
console semantics while sending every formatted line to caller-supplied
sinks instead of the terminal.

Contents
--------
* :class:`Console` - per-instance session state, alias dispatch, and the
  primitive behaviours every public name resolves to.

System Role
-----------
Composition point of the package: resolves the construction argument into
two sinks, builds the inspector and clock, binds the alias table from
:mod:`lib_console_rich.domain.methods`, and routes formatted payloads from
:mod:`lib_console_rich.application.use_cases.format_message` to the sinks.

Examples
--------
>>> import io
>>> out = io.StringIO()
>>> console = Console(out)
>>> console.group("outer")
>>> console.info("%s=%d", "x", 5)
>>> console.group_end()
>>> console.count("hits")
>>> print(out.getvalue(), end="")
outer
  x=5
hits: 1
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .adapters.clock import PerfCounterClock
from .adapters.host_console import HostConsole
from .adapters.inspection import RichInspector
from .adapters.sinks import HostStderr, HostStdout
from .application.ports import ClockPort, InspectorPort, SinkPort, is_sink
from .application.use_cases.format_message import format_arguments, render_line
from .config import ConsoleConfig
from .domain.methods import ALIAS_TABLE, bind_aliases
from .domain.session import DEFAULT_LABEL, SessionState
from .domain.trace import Trace

logger = logging.getLogger(__name__)

ASSERTION_FAILED = "Assertion failed"

# ``assert`` is reserved in Python; reachable through getattr only.
_KEYWORD_ALIASES = {"assert": "assert_"}


def _coerce_config(options: ConsoleConfig | Mapping[str, Any] | None) -> ConsoleConfig:
    if options is None:
        return ConsoleConfig()
    if isinstance(options, ConsoleConfig):
        return options
    if isinstance(options, Mapping):
        return ConsoleConfig.from_mapping(options)
    raise TypeError(f"Console expects a sink (object with write()) or a configuration, got {type(options).__name__}")


class Console:
    """Drop-in console writing to an out sink and an err sink.

    Parameters
    ----------
    sink_or_config:
        Either an object with a callable ``write`` (used as the out sink), or
        a :class:`ConsoleConfig` / mapping with ``stdout``, ``stderr``,
        ``inspect_options``, ``group_indentation`` and ``forward_policy``.
        ``None`` builds a console on the host sinks.
    error_sink:
        Err sink when ``sink_or_config`` is a sink; defaults to that same sink.
        Ignored for configurations, which carry their own ``stderr``.
    inspector, clock:
        Replacements for the Rich inspector and the perf-counter clock.

    Raises
    ------
    TypeError
        When ``sink_or_config`` is neither a sink nor a configuration.
    """

    def __init__(
        self,
        sink_or_config: SinkPort | ConsoleConfig | Mapping[str, Any] | None = None,
        error_sink: SinkPort | None = None,
        *,
        inspector: InspectorPort | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        if is_sink(sink_or_config):
            stderr = error_sink if error_sink is not None else sink_or_config
            config = ConsoleConfig(stdout=sink_or_config, stderr=stderr)
        else:
            config = _coerce_config(sink_or_config)

        host = HostConsole(policy=config.forward_policy) if config.stdout is None else None
        self._stdout: SinkPort = config.stdout if config.stdout is not None else HostStdout(host)
        if config.stderr is not None:
            self._stderr: SinkPort = config.stderr
        elif config.stdout is not None:
            self._stderr = config.stdout
        else:
            self._stderr = HostStderr(host)

        self._config = config
        self._session = SessionState(indent_unit=config.group_indentation)
        self._inspector: InspectorPort = inspector if inspector is not None else RichInspector(config.inspect_options)
        self._clock: ClockPort = clock if clock is not None else PerfCounterClock()

        self._dispatch = bind_aliases(self, ALIAS_TABLE)
        for alias, target in _KEYWORD_ALIASES.items():
            method = getattr(self, target)
            setattr(self, alias, method)
            self._dispatch[alias] = method
        logger.debug(
            "console ready (stdout=%s, stderr=%s, indent=%d)",
            type(self._stdout).__name__,
            type(self._stderr).__name__,
            config.group_indentation,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def stdout(self) -> SinkPort:
        return self._stdout

    @property
    def stderr(self) -> SinkPort:
        return self._stderr

    @property
    def session(self) -> SessionState:
        """Return the live session record (counters, timers, indentation)."""

        return self._session

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    @property
    def aliases(self) -> Mapping[str, Any]:
        """Return the alias names resolved for this instance."""

        return dict(self._dispatch)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _render(self, args: tuple[Any, ...]) -> str:
        return render_line(args, inspect=self._inspector.inspect, indentation=self._session.indentation)

    def log(self, *args: Any) -> None:
        """Format ``args`` and write the line to the out sink."""

        self._stdout.write(self._render(args))

    def error(self, *args: Any) -> None:
        """Format ``args`` and write the line to the err sink."""

        self._stderr.write(self._render(args))

    def empty(self, *args: Any) -> None:
        """Accept and ignore any arguments (profiling hooks and the like)."""

        return None

    def trace(self, *args: Any) -> None:
        """Write ``"Trace: <message>"`` plus the caller's stack to the err sink."""

        message = format_arguments(args, self._inspector.inspect)
        self.error(Trace.capture(message, skip=1))

    def assert_(self, condition: Any = False, *message: Any) -> None:
        """Write ``message`` to the err sink when ``condition`` is falsy.

        Without a message the line reads ``"Assertion failed"``.
        """

        if condition:
            return
        if message:
            self.error(*message)
        else:
            self.error(ASSERTION_FAILED)

    def dir(self, obj: Any = None, options: Mapping[str, Any] | None = None) -> None:
        """Log ``obj`` inspected with ``options`` merged over instance defaults."""

        self.log(self._inspector.inspect(obj, options))

    def clear(self) -> None:
        """Clear the out sink when it supports clearing; otherwise do nothing."""

        clear = getattr(self._stdout, "clear", None)
        if callable(clear):
            clear()

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    def count(self, label: str = DEFAULT_LABEL) -> None:
        """Increment ``label`` and log ``"<label>: <value>"``."""

        value = self._session.increment(label)
        self.log(f"{label}: {value}")

    def count_reset(self, label: str = DEFAULT_LABEL) -> None:
        """Reset ``label`` to zero and log ``"<label>: 0"``.

        Raises
        ------
        CounterNotFoundError
            When ``label`` was never counted.
        """

        self._session.reset_counter(label)
        self.log(f"{label}: {self._session.counters[label]}")

    # ------------------------------------------------------------------
    # Timers
    # ------------------------------------------------------------------

    def time(self, label: str = DEFAULT_LABEL) -> None:
        """Start (or restart) the timer ``label``."""

        self._session.start_timer(label, self._clock.now())

    def time_log(self, label: str = DEFAULT_LABEL) -> None:
        """Log the seconds elapsed on ``label`` with millisecond precision.

        A label that was never started logs ``"<label>: nans"``.
        """

        if not self._session.is_running(label):
            logger.debug("timer %r read before time() was called", label)
        elapsed = self._session.elapsed(label, self._clock.now())
        self.log(f"{label}: {elapsed:.3f}s")

    def time_end(self, label: str = DEFAULT_LABEL) -> None:
        """Log the elapsed time for ``label``, then stop it."""

        self.time_log(label)
        self._session.stop_timer(label)

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def group(self, *args: Any) -> None:
        """Log ``args`` when given, then indent subsequent lines one level."""

        if args:
            self.log(*args)
        self._session.enter_group()

    def group_end(self) -> None:
        """Remove one level of indentation."""

        self._session.exit_group()
        if self._session.indent_depth < 0:
            logger.debug("group_end() called without a matching group()")


__all__ = ["ASSERTION_FAILED", "Console"]
