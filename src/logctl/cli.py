"""Command-line entry point for ``logctl``.

Purpose
-------
Parse the few global options with rich-click, then hand the raw command
vector (``set foo* err``, ``klog -p err msg`` ...) unchanged to the command
router. Exit status and unexpected-error rendering go through
:mod:`lib_cli_exit_tools`.

Contents
--------
* :func:`cli` - rich-click command.
* :func:`main` - console-script entry returning an exit code.
* Traceback preference helpers shared with tests.

System Role
-----------
Presentation layer only: everything after the global options is passed
through without option parsing so ``-help`` and ``-p`` reach the router.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as log_config
from .runtime import run_command

CLICK_CONTEXT_SETTINGS = {
    "help_option_names": ["--help"],
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


@dataclass(frozen=True, slots=True)
class TracebackState:
    """Snapshot of the traceback flags held by :mod:`lib_cli_exit_tools`."""

    traceback: bool
    traceback_force_color: bool


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        traceback=bool(getattr(config, "traceback", False)),
        traceback_force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback = state.traceback
    lib_cli_exit_tools.config.traceback_force_color = state.traceback_force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Show full, coloured tracebacks for unexpected errors when ``enabled``."""

    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@click.command(context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(__init__conf__.version, "--version", prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python tracebacks for unexpected errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running the command.",
)
@click.argument("command", nargs=-1, type=click.UNPROCESSED, metavar="COMMAND [PARAM]...")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, command: tuple[str, ...]) -> None:
    """Inspect and adjust logging context levels.

    Run `logctl help` for the list of commands and levels.
    """

    apply_traceback_preferences(traceback)

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    result = run_command(list(command), settings=log_config.load_settings(), echo=click.echo)
    if result.exit_code:
        raise SystemExit(result.exit_code)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run :func:`cli` through :func:`lib_cli_exit_tools.run_cli`.

    Parameters
    ----------
    argv:
        Optional argument vector (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Reset the traceback flags afterwards so embedding callers keep their
        own preferences.

    Returns
    -------
    int
        ``0`` on success, ``1`` for parameter or runtime errors, ``2`` after
        printing the command reference.
    """

    previous = snapshot_traceback_state()
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            restore_traceback_state(previous)


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
