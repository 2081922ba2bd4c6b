from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_console_rich import cli as cli_module
from lib_console_rich import config as console_config
from lib_console_rich.adapters.host_console import ForwardPolicy
from lib_console_rich.config import ConsoleConfig, load_console_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    console_config._reset_dotenv_state_for_testing()
    yield
    console_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values without overriding call arguments."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("CONSOLE_GROUP_INDENTATION=6\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("CONSOLE_GROUP_INDENTATION", raising=False)

    loaded = console_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["CONSOLE_GROUP_INDENTATION"] == "6"
    assert load_console_config().group_indentation == 6

    os.environ.pop("CONSOLE_GROUP_INDENTATION", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("CONSOLE_FORWARD_POLICY=trim\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("CONSOLE_FORWARD_POLICY", "slice")

    result = console_config.enable_dotenv()

    assert result is not None
    assert os.environ["CONSOLE_FORWARD_POLICY"] == "slice"


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(console_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(console_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {console_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []


def test_environment_overrides_keep_explicit_values_otherwise() -> None:
    base = ConsoleConfig(group_indentation=5, inspect_options={"max_width": 40})
    assert load_console_config(base, environ={}) is base


def test_environment_overrides_inspect_options() -> None:
    base = ConsoleConfig(inspect_options={"indent_size": 4})
    config = load_console_config(
        base,
        environ={"CONSOLE_INSPECT_MAX_WIDTH": "60", "CONSOLE_INSPECT_MAX_DEPTH": "2"},
    )
    assert config.inspect_options == {"indent_size": 4, "max_width": 60, "max_depth": 2}
    assert base.inspect_options == {"indent_size": 4}


def test_invalid_forward_policy_in_environment() -> None:
    with pytest.raises(ValueError, match="Unknown forward policy"):
        load_console_config(environ={"CONSOLE_FORWARD_POLICY": "chop"})


def test_from_mapping_accepts_policy_names_and_ignores_unknown_keys() -> None:
    config = ConsoleConfig.from_mapping({"forward_policy": "trim", "colorMode": "auto"})
    assert config.forward_policy is ForwardPolicy.TRIM


def test_group_indentation_must_be_positive() -> None:
    with pytest.raises(ValueError, match="positive"):
        ConsoleConfig(group_indentation=0)
