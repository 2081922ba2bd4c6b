"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from lib_console_rich import __init__conf__
from lib_console_rich import cli as cli_mod
from lib_console_rich.cli import summary_info


def run_cli(args: list[str] | None = None) -> tuple[int, str, BaseException | None]:
    """Invoke the click group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert f"Info for {__init__conf__.name}" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_cli_demo_exercises_console() -> None:
    exit_code, stdout, exception = run_cli(["demo"])

    assert exception is None
    assert exit_code == 0
    assert "counters" in stdout
    assert "  demo: 1" in stdout
    assert "  demo: 0" in stdout
    assert "  cart has 3 items costing 9.5" in stdout


def test_cli_demo_respects_indent_option() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--indent", "4"])

    assert exit_code == 0
    assert "    demo: 2" in stdout


def test_cli_demo_reports_bad_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONSOLE_GROUP_INDENTATION", "-1")
    exit_code, stdout, _ = run_cli(["demo"])

    assert exit_code != 0
    assert "must be positive" in stdout


def test_main_returns_zero_for_info(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert "Info for" in capsys.readouterr().out


def test_main_returns_exit_code_for_usage_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["demo", "--indent", "0"]) != 0
