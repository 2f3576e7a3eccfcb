"""Package logger for internal diagnostics.

Purpose
    Give every module one shared, quiet-by-default logger. Host applications
    (or ``LOGCTL_LOGGING_CONFIG``) decide where its records go.

System Integration
    Under :class:`~logctl.adapters.stdlib_library.StdlibLoggingLibrary` this
    logger is itself a context named ``logctl``; ``flush`` logs through it.
"""

from __future__ import annotations

import logging
from typing import Any, Final

PACKAGE_LOGGER_NAME: Final[str] = "logctl"

_LOGGER: Final[logging.Logger] = logging.getLogger(PACKAGE_LOGGER_NAME)
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a debug entry with ``fields`` attached as ``extra``."""

    _LOGGER.debug(message, extra={"logctl": dict(fields)})


__all__ = ["PACKAGE_LOGGER_NAME", "get_logger", "log_debug"]
