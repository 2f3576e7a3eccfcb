"""Public package surface for embedding ``logctl`` in host applications.

``run_command`` executes one command (``["set", "app.*", "debug"]``,
``["show"]`` ...) against a logging library, by default the process's own
stdlib logger tree wrapped in :class:`StdlibLoggingLibrary`.
"""

from __future__ import annotations

from .adapters import KmsgWriter, StdlibLoggingLibrary
from .application import CommandResult, CommandRouter, ContextDirectory
from .domain import GLOBAL_CONTEXT_NAME, Facility, LogLibError, Severity
from .runtime import run_command

__all__ = [
    "CommandResult",
    "CommandRouter",
    "ContextDirectory",
    "Facility",
    "GLOBAL_CONTEXT_NAME",
    "KmsgWriter",
    "LogLibError",
    "Severity",
    "StdlibLoggingLibrary",
    "run_command",
]
