"""Flat dispatch from the command keyword to its handler.

Purpose
-------
Select the handler named by the first argument, run it with the remaining
arguments and fold its outcome into a :class:`CommandResult` that the CLI
maps onto a process exit status.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from logctl.application.commands import COMMANDS, CommandEnvironment, Echo, usage_text
from logctl.application.ports.kmsg import KernelMessagePort
from logctl.application.ports.library import LoggingLibraryPort
from logctl.domain.errors import CommandFailure, ParameterError
from logctl.observability import log_debug

HELP_COMMANDS = frozenset({"help", "-help"})
SUGGEST_HELP = "Use -help for usage information."

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_HELP = 2


class CommandResult(Enum):
    """Outcome of a dispatched command."""

    OK = "ok"
    PARAM_ERR = "param_err"
    RUN_ERR = "run_err"
    HELP = "help"

    @property
    def exit_code(self) -> int:
        """Return the process exit status; both error kinds share one code."""

        return _EXIT_CODES[self]


_EXIT_CODES = {
    CommandResult.OK: EXIT_SUCCESS,
    CommandResult.PARAM_ERR: EXIT_FAILURE,
    CommandResult.RUN_ERR: EXIT_FAILURE,
    CommandResult.HELP: EXIT_HELP,
}


class CommandRouter:
    """Dispatch ``[command, *args]`` to the matching handler."""

    def __init__(
        self,
        library: LoggingLibraryPort,
        kmsg: KernelMessagePort,
        *,
        echo: Echo,
        prog_name: str = "logctl",
    ) -> None:
        self._env = CommandEnvironment(library=library, kmsg=kmsg, echo=echo)
        self._prog_name = prog_name

    @property
    def environment(self) -> CommandEnvironment:
        return self._env

    def dispatch(self, argv: Sequence[str]) -> CommandResult:
        """Run the command in ``argv`` and report how it ended.

        Parameter errors print their message followed by a hint to consult
        ``-help``; runtime errors print the message only.
        """

        result = self._run(list(argv))
        if result is CommandResult.PARAM_ERR:
            self._env.echo(SUGGEST_HELP)
        return result

    def _run(self, argv: list[str]) -> CommandResult:
        echo = self._env.echo
        if not argv:
            echo("No command specified.")
            return CommandResult.PARAM_ERR

        command, args = argv[0], argv[1:]
        if command in HELP_COMMANDS:
            echo(usage_text(self._prog_name))
            return CommandResult.HELP

        handler = COMMANDS.get(command)
        if handler is None:
            echo(f"Invalid command '{command}'")
            return CommandResult.PARAM_ERR

        log_debug("dispatching command", command=command, argc=len(args))
        try:
            handler(self._env, args)
        except ParameterError as exc:
            echo(str(exc))
            return CommandResult.PARAM_ERR
        except CommandFailure as exc:
            echo(str(exc))
            return CommandResult.RUN_ERR
        return CommandResult.OK


__all__ = [
    "CommandResult",
    "CommandRouter",
    "EXIT_FAILURE",
    "EXIT_HELP",
    "EXIT_SUCCESS",
    "HELP_COMMANDS",
    "SUGGEST_HELP",
]
