"""Click command group exposing metadata and a live console demo.

Purpose
-------
Give packaging checks and operators a quick way to confirm the installation
(`info`) and to see the console façade drive the host terminal (`demo`).

Contents
--------
* :func:`cli` - root group with ``--version`` and ``--use-dotenv`` toggles.
* :func:`info` - print the metadata banner.
* :func:`demo` - exercise counters, timers, groups, and formatting.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Sequence

import click

from . import __init__conf__
from . import config as config_module
from .adapters.host_console import ForwardPolicy
from .config import load_console_config
from .console import Console

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner as a single newline-terminated string."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def run_demo(console: Console) -> None:
    """Drive ``console`` through its main behaviours."""

    console.log("%s %s", __init__conf__.name, __init__conf__.version)
    console.group("counters")
    console.count("demo")
    console.count("demo")
    console.count_reset("demo")
    console.group_end()
    console.group("timers")
    console.time("demo")
    console.time_end("demo")
    console.group_end()
    console.group("formatting")
    console.info("%s has %d items costing %f", "cart", 3, 9.5)
    console.dir({"user": {"name": "ada", "roles": ["admin", "dev"]}})
    console.group_end()
    console.assert_(False, "assertions are written to stderr")


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (defaults to ${config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Console façade utilities; prints the metadata banner without a command."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(config_module.DOTENV_ENV_VAR)
    if config_module.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--indent", type=click.IntRange(min=1), default=None, help="Spaces per group level.")
@click.option(
    "--forward-policy",
    type=click.Choice(["slice", "trim"]),
    default=None,
    help="How lines are shortened before reaching the terminal.",
)
def demo(indent: int | None, forward_policy: str | None) -> None:
    """Run the console through counters, timers, groups, and formatting."""

    try:
        config = load_console_config()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    if indent is not None:
        config = replace(config, group_indentation=indent)
    if forward_policy is not None:
        config = replace(config, forward_policy=ForwardPolicy.from_name(forward_policy))
    run_demo(Console(config))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group without exiting the interpreter.

    Returns
    -------
    int
        Zero on success, the Click exit code otherwise.
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.exceptions.Exit as exit_request:
        return int(exit_request.exit_code)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "run_demo", "summary_info"]
