"""Logging library adapter backed by the :mod:`logging` logger tree.

Purpose
-------
Expose the process-wide stdlib logger hierarchy through
:class:`LoggingLibraryPort`: every instantiated :class:`logging.Logger` is a
context, the root logger is the global context ``<global>``, and context
levels are syslog severities translated with
:meth:`~logctl.domain.levels.Severity.to_python_level`.

Contents
--------
* :data:`MAX_CONTEXT_NAME_LEN` / :data:`DEFAULT_MAX_CONTEXTS` - table limits.
* :class:`StdlibLoggingLibrary` - the adapter.

System Role
-----------
Default collaborator wired by :mod:`logctl.runtime`. Host applications embed
it to control their own live loggers; the console script uses it together
with an optional ``logging.config`` file that ``reconf`` reloads.
"""

from __future__ import annotations

import configparser
import json
import logging
import logging.config
from pathlib import Path
from typing import Any

from logctl.application.ports.library import LoggingLibraryPort
from logctl.domain.control import RELOAD_CONFIG_COMMAND, is_control_message
from logctl.domain.errors import ErrorCode, LogLibError, describe_code
from logctl.domain.levels import Severity
from logctl.domain.patterns import GLOBAL_CONTEXT_ALIAS, GLOBAL_CONTEXT_NAME, WILDCARD
from logctl.observability import log_debug

MAX_CONTEXT_NAME_LEN = 63
DEFAULT_MAX_CONTEXTS = 4096

_LEVEL_NAMES = {
    Severity.EMERG: "EMERG",
    Severity.ALERT: "ALERT",
    Severity.NOTICE: "NOTICE",
    Severity.NONE: "NONE",
}


def register_level_names() -> None:
    """Give the non-stdlib severities readable names in formatted records."""

    for severity, label in _LEVEL_NAMES.items():
        logging.addLevelName(severity.to_python_level(), label)


class StdlibLoggingLibrary(LoggingLibraryPort):
    """Treat the stdlib logger tree as the logging library's context table."""

    def __init__(
        self,
        *,
        root: logging.Logger | None = None,
        max_contexts: int = DEFAULT_MAX_CONTEXTS,
        config_path: str | Path | None = None,
    ) -> None:
        if max_contexts <= 0:
            raise ValueError("max_contexts must be positive")
        self._root = root if root is not None else logging.getLogger()
        self.max_contexts = max_contexts
        self._config_path = Path(config_path) if config_path is not None else None
        self._snapshot: list[logging.Logger] | None = None
        register_level_names()

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    def _loggers(self) -> list[logging.Logger]:
        manager = self._root.manager
        named = [logger for logger in list(manager.loggerDict.values()) if isinstance(logger, logging.Logger)]
        return [self._root, *named]

    def _require_logger(self, handle: Any) -> logging.Logger:
        if not isinstance(handle, logging.Logger):
            raise LogLibError(ErrorCode.INVALID_PARAMETER, f"not a context handle: {handle!r}")
        return handle

    @staticmethod
    def _require_level(level: int) -> Severity:
        try:
            return Severity(level)
        except ValueError:
            raise LogLibError(ErrorCode.INVALID_LEVEL, f"level {level!r}") from None

    def context_count(self) -> int:
        """Return the number of live loggers, root included.

        The list is snapshotted so :meth:`context_at` indexes a stable table.
        """

        self._snapshot = self._loggers()
        return len(self._snapshot)

    def context_at(self, index: int) -> logging.Logger:
        loggers = self._snapshot if self._snapshot is not None else self._loggers()
        if not 0 <= index < len(loggers):
            raise LogLibError(ErrorCode.INVALID_PARAMETER, f"context index {index} out of range")
        return loggers[index]

    def context_name(self, handle: Any) -> str:
        logger = self._require_logger(handle)
        if logger is self._root:
            return GLOBAL_CONTEXT_NAME
        return logger.name

    def context_level(self, handle: Any) -> int:
        """Return the effective severity, following the logger's parents."""

        logger = self._require_logger(handle)
        return int(Severity.from_python_level(logger.getEffectiveLevel()))

    def find_context(self, name: str) -> logging.Logger:
        if name == GLOBAL_CONTEXT_NAME:
            return self._root
        existing = self._root.manager.loggerDict.get(name)
        if not isinstance(existing, logging.Logger):
            raise LogLibError(ErrorCode.CONTEXT_NOT_FOUND, name)
        return existing

    def get_context(self, name: str) -> logging.Logger:
        """Return the logger named ``name``, creating it when it does not exist."""

        try:
            return self.find_context(name)
        except LogLibError:
            pass

        if not name or name == GLOBAL_CONTEXT_ALIAS or WILDCARD in name or len(name) > MAX_CONTEXT_NAME_LEN:
            raise LogLibError(ErrorCode.INVALID_CONTEXT_NAME, name)
        if len(self._loggers()) >= self.max_contexts:
            raise LogLibError(ErrorCode.TOO_MANY_CONTEXTS, f"limit is {self.max_contexts}")

        log_debug("registering context", context=name)
        return self._root.manager.getLogger(name)

    def set_context_level(self, handle: Any, level: int) -> None:
        logger = self._require_logger(handle)
        severity = self._require_level(level)
        logger.setLevel(severity.to_python_level())

    def emit(self, handle: Any, level: int, message: str) -> None:
        """Log ``message`` on ``handle``; control messages on the root are executed."""

        logger = self._require_logger(handle)
        severity = self._require_level(level)
        if severity is Severity.NONE:
            raise LogLibError(ErrorCode.INVALID_LEVEL, "cannot log at level none")

        if logger is self._root and is_control_message(message):
            self._run_control(message)
            return
        logger.log(severity.to_python_level(), "%s", message)

    def _run_control(self, message: str) -> None:
        if message != RELOAD_CONFIG_COMMAND:
            raise LogLibError(ErrorCode.INVALID_PARAMETER, f"unknown control message {message!r}")
        self.reload_config()

    def reload_config(self) -> None:
        """Re-apply the configured ``logging.config`` file.

        ``.json`` files go through :func:`logging.config.dictConfig`, anything
        else through :func:`logging.config.fileConfig`. Existing loggers are
        kept so context handles stay valid. Without a configured file this is
        a no-op.
        """

        if self._config_path is None:
            log_debug("no logging configuration file to reload")
            return

        path = self._config_path
        try:
            if path.suffix.lower() == ".json":
                config = json.loads(path.read_text(encoding="utf-8"))
                config.setdefault("disable_existing_loggers", False)
                logging.config.dictConfig(config)
            else:
                if not path.is_file():
                    raise FileNotFoundError(f"no such file: {path}")
                logging.config.fileConfig(path, disable_existing_loggers=False)
        except (OSError, ValueError, KeyError, TypeError, AttributeError, ImportError, configparser.Error) as exc:
            raise LogLibError(ErrorCode.CONFIG_RELOAD_FAILED, f"{path}: {exc}") from exc
        self._snapshot = None
        log_debug("logging configuration reloaded", path=str(path))

    def error_string(self, code: int) -> str:
        return describe_code(code)


__all__ = ["DEFAULT_MAX_CONTEXTS", "MAX_CONTEXT_NAME_LEN", "StdlibLoggingLibrary", "register_level_names"]
