"""Rich-powered console sink for records emitted through the stdlib library.

Purpose
-------
Render log records (including those produced by ``logctl log``/``flush``)
as one styled line per record, with styles keyed by syslog severity.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping.
* :class:`RichConsoleHandler` - :class:`logging.Handler` installed by
  :mod:`logctl.runtime` when ``LOGCTL_BACKEND=console``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Mapping, MutableMapping

from rich.console import Console

from logctl.domain.levels import Severity
from logctl.domain.patterns import GLOBAL_CONTEXT_NAME

_STYLE_MAP: Mapping[Severity, str] = {
    Severity.DEBUG: "dim",
    Severity.INFO: "cyan",
    Severity.NOTICE: "bold cyan",
    Severity.WARNING: "yellow",
    Severity.ERR: "red",
    Severity.CRIT: "bold red",
    Severity.ALERT: "bold red",
    Severity.EMERG: "bold white on red",
}

#: Default Rich styles keyed by :class:`Severity`.


def context_label(record: logging.LogRecord) -> str:
    return GLOBAL_CONTEXT_NAME if record.name == "root" else record.name


class RichConsoleHandler(logging.Handler):
    """Print records with Rich, honouring colour overrides and style themes."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[Severity | str, str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level=level)
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            severity = Severity.from_name(key) if isinstance(key, str) else key
            merged[severity] = value
        self._style_map = merged

    def emit(self, record: logging.LogRecord) -> None:
        try:
            severity = Severity.from_record_level(record.levelno)
            style = "" if self._no_color else self._style_map.get(severity, "")
            self._console.print(self.format_line(record, severity), style=style, highlight=False, markup=False)
        except Exception:
            self.handleError(record)

    @staticmethod
    def format_line(record: logging.LogRecord, severity: Severity) -> str:
        """Return the console line for ``record``.

        Examples
        --------
        >>> record = logging.LogRecord("app", 25, __file__, 1, "hello", None, None)
        >>> record.created = 0.0
        >>> RichConsoleHandler.format_line(record, Severity.NOTICE)
        '1970-01-01T00:00:00+00:00  NOTICE app - hello'
        """

        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        return f"{timestamp} {severity.label.upper():>7} {context_label(record)} - {record.getMessage()}"


__all__ = ["RichConsoleHandler", "context_label"]
