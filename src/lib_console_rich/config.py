"""Configuration model, environment overrides, and ``.env`` loading.

Purpose
-------
Describe how a console is assembled (:class:`ConsoleConfig`) and let
deployments tune it through environment variables, optionally sourced from a
nearby ``.env`` file via ``python-dotenv``.

Contents
--------
* :class:`ConsoleConfig` - sinks, inspection defaults, indentation, forward
  policy.
* :func:`load_console_config` - apply ``CONSOLE_*`` environment overrides.
* :func:`enable_dotenv` / :func:`should_use_dotenv` - ``.env`` handling shared
  by the CLI and the default-instance runtime.

System Role
-----------
Outer configuration layer. Explicit constructor arguments are the baseline;
environment variables override them; ``.env`` entries never override variables
already present in the process environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from .adapters.host_console import ForwardPolicy
from .application.ports.sink import SinkPort
from .domain.session import DEFAULT_GROUP_INDENTATION

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "CONSOLE_USE_DOTENV"
GROUP_INDENTATION_ENV_VAR = "CONSOLE_GROUP_INDENTATION"
FORWARD_POLICY_ENV_VAR = "CONSOLE_FORWARD_POLICY"
INSPECT_MAX_WIDTH_ENV_VAR = "CONSOLE_INSPECT_MAX_WIDTH"
INSPECT_MAX_DEPTH_ENV_VAR = "CONSOLE_INSPECT_MAX_DEPTH"

_TRUTHY = {"1", "true", "yes", "on"}

# Accept both the Python spelling and the camelCase keys of the host API.
_MAPPING_KEYS = {
    "stdout": "stdout",
    "stderr": "stderr",
    "inspect_options": "inspect_options",
    "inspectOptions": "inspect_options",
    "group_indentation": "group_indentation",
    "groupIndentation": "group_indentation",
    "forward_policy": "forward_policy",
    "forwardPolicy": "forward_policy",
}


@dataclass(slots=True)
class ConsoleConfig:
    """Construction options for :class:`lib_console_rich.Console`.

    Attributes
    ----------
    stdout, stderr:
        Sinks for normal and diagnostic output. ``None`` selects the host
        console sinks; a missing ``stderr`` falls back to ``stdout``.
    inspect_options:
        Defaults for the value inspector, merged under per-call ``dir``
        options.
    group_indentation:
        Spaces added per ``group`` level.
    forward_policy:
        How default sinks shorten lines before handing them to the host.
    """

    stdout: SinkPort | None = None
    stderr: SinkPort | None = None
    inspect_options: Mapping[str, Any] = field(default_factory=dict)
    group_indentation: int = DEFAULT_GROUP_INDENTATION
    forward_policy: ForwardPolicy = ForwardPolicy.SLICE

    def __post_init__(self) -> None:
        if isinstance(self.forward_policy, str):
            self.forward_policy = ForwardPolicy.from_name(self.forward_policy)
        if self.group_indentation <= 0:
            raise ValueError("group_indentation must be positive")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ConsoleConfig":
        """Build a config from a plain mapping; unknown keys are ignored.

        >>> ConsoleConfig.from_mapping({"groupIndentation": 4}).group_indentation
        4
        """

        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _MAPPING_KEYS.get(key)
            if name is None:
                logger.debug("ignoring unknown console option %r", key)
                continue
            if value is None:
                continue
            values[name] = value
        return cls(**values)


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_console_config(
    base: ConsoleConfig | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ConsoleConfig:
    """Return ``base`` with ``CONSOLE_*`` environment overrides applied.

    Parameters
    ----------
    base:
        Starting configuration; a default :class:`ConsoleConfig` when ``None``.
    environ:
        Mapping to read instead of :data:`os.environ` (used by tests).

    Raises
    ------
    ValueError
        When a variable holds a value that cannot be parsed.

    Examples
    --------
    >>> load_console_config(environ={"CONSOLE_GROUP_INDENTATION": "4"}).group_indentation
    4
    >>> load_console_config(environ={"CONSOLE_FORWARD_POLICY": "trim"}).forward_policy
    <ForwardPolicy.TRIM: 'trim'>
    """

    env = os.environ if environ is None else environ
    config = base if base is not None else ConsoleConfig()
    changes: dict[str, Any] = {}

    raw_indent = env.get(GROUP_INDENTATION_ENV_VAR)
    if raw_indent:
        changes["group_indentation"] = _positive_int(GROUP_INDENTATION_ENV_VAR, raw_indent)

    raw_policy = env.get(FORWARD_POLICY_ENV_VAR)
    if raw_policy:
        changes["forward_policy"] = ForwardPolicy.from_name(raw_policy)

    inspect_options = dict(config.inspect_options)
    raw_width = env.get(INSPECT_MAX_WIDTH_ENV_VAR)
    if raw_width:
        inspect_options["max_width"] = _positive_int(INSPECT_MAX_WIDTH_ENV_VAR, raw_width)
    raw_depth = env.get(INSPECT_MAX_DEPTH_ENV_VAR)
    if raw_depth:
        inspect_options["max_depth"] = _positive_int(INSPECT_MAX_DEPTH_ENV_VAR, raw_depth)
    if inspect_options != dict(config.inspect_options):
        changes["inspect_options"] = inspect_options

    if not changes:
        return config
    return replace(config, **changes)


_DOTENV_LOADED: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the toggle.

    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upward from cwd) once.

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when no file was found.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    found = find_dotenv(usecwd=True)
    if not found:
        logger.debug("no .env file found from %s", Path.cwd())
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    logger.debug("loaded environment from %s", path)
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "ConsoleConfig",
    "DOTENV_ENV_VAR",
    "FORWARD_POLICY_ENV_VAR",
    "GROUP_INDENTATION_ENV_VAR",
    "INSPECT_MAX_DEPTH_ENV_VAR",
    "INSPECT_MAX_WIDTH_ENV_VAR",
    "enable_dotenv",
    "load_console_config",
    "should_use_dotenv",
]
