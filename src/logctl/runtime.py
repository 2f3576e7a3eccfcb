"""Composition root wiring settings, adapters and the command router.

Purpose
-------
Translate :class:`~logctl.config.Settings` into live collaborators (library
adapter, log sink, kernel message writer) and run a single command. Host
applications call :func:`run_command` with their own library to control
their live logger tree; the CLI calls it with the defaults.

Contents
--------
* :func:`build_sink` - Rich console or journald handler per settings.
* :func:`build_library` - :class:`StdlibLoggingLibrary` with the sink on root.
* :func:`run_command` - dispatch one command and return its result.
"""

from __future__ import annotations

import logging
from typing import Sequence

import click

from logctl import __init__conf__
from logctl.adapters.console.rich_console import RichConsoleHandler
from logctl.adapters.kmsg import KmsgWriter
from logctl.adapters.stdlib_library import StdlibLoggingLibrary
from logctl.adapters.structured.journald import JournaldHandler
from logctl.application.commands import Echo
from logctl.application.ports.kmsg import KernelMessagePort
from logctl.application.ports.library import LoggingLibraryPort
from logctl.application.router import CommandResult, CommandRouter
from logctl.config import Settings, load_settings
from logctl.domain.errors import LogLibError, describe_code


def build_sink(settings: Settings) -> logging.Handler:
    """Return the handler that renders records emitted through the library."""

    if settings.backend == "journald":
        return JournaldHandler(identifier=__init__conf__.shell_command)
    return RichConsoleHandler()


def attach_sink(root: logging.Logger, handler: logging.Handler) -> None:
    """Install ``handler`` on ``root`` unless a sink of the same type is present."""

    if any(type(existing) is type(handler) for existing in root.handlers):
        return
    root.addHandler(handler)


def build_library(settings: Settings, *, root: logging.Logger | None = None) -> StdlibLoggingLibrary:
    """Create the default library adapter and apply the logging config file.

    Raises :class:`LogLibError` when the configuration file cannot be loaded.
    """

    target = root if root is not None else logging.getLogger()
    attach_sink(target, build_sink(settings))
    library = StdlibLoggingLibrary(root=target, max_contexts=settings.max_contexts, config_path=settings.logging_config)
    library.reload_config()
    return library


def run_command(
    argv: Sequence[str],
    *,
    library: LoggingLibraryPort | None = None,
    kmsg: KernelMessagePort | None = None,
    settings: Settings | None = None,
    echo: Echo | None = None,
    prog_name: str = __init__conf__.shell_command,
) -> CommandResult:
    """Run one ``logctl`` command and return its :class:`CommandResult`.

    Without ``library`` the default runtime is built through
    :func:`build_library`, which attaches the configured sink to the process
    root logger and applies the logging config file. Embedders pass their own
    library to keep the host's logging setup untouched.

    Examples
    --------
    >>> lines = []
    >>> run_command(["help"], library=StdlibLoggingLibrary(), echo=lines.append, settings=Settings())
    <CommandResult.HELP: 'help'>
    >>> lines[0].splitlines()[0]
    'logctl COMMAND [PARAM...]'
    """

    resolved = settings if settings is not None else load_settings()
    out = echo if echo is not None else click.echo

    if library is None:
        try:
            library = build_library(resolved)
        except LogLibError as exc:
            out(f"Error loading logging configuration: 0x{exc.code:08X} ({describe_code(exc.code)}) {exc.detail}")
            return CommandResult.RUN_ERR
    if kmsg is None:
        kmsg = KmsgWriter(resolved.kmsg_path)

    router = CommandRouter(library, kmsg, echo=out, prog_name=prog_name)
    return router.dispatch(argv)


__all__ = ["attach_sink", "build_library", "build_sink", "run_command"]
