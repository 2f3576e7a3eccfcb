"""Journald sink that forwards records with uppercase structured fields.

Purpose
-------
Send records emitted through the stdlib library to systemd-journald with the
syslog ``PRIORITY`` derived from their severity, so ``logctl log`` ends up in
the system journal when ``LOGCTL_BACKEND=journald``.

Contents
--------
* :class:`JournaldHandler` - :class:`logging.Handler` calling
  ``systemd.journal.send`` (or a supplied sender).
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from logctl.adapters.console.rich_console import context_label
from logctl.domain.levels import Severity

Sender = Callable[..., None]


def _default_sender(**fields: Any) -> None:  # pragma: no cover - depends on systemd
    """Proxy to :func:`systemd.journal.send`, raising if unavailable."""
    try:
        from systemd import journal
    except ImportError as exc:  # pragma: no cover - executed only when systemd missing
        raise RuntimeError("systemd.journal is not available") from exc
    journal.send(**fields)


class JournaldHandler(logging.Handler):
    """Emit records via ``systemd.journal.send``."""

    def __init__(self, *, sender: Sender | None = None, identifier: str = "logctl", level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self._sender = sender or _default_sender
        self._identifier = identifier

    def emit(self, record: logging.LogRecord) -> None:
        try:
            fields = self.build_fields(record)
            self._sender(**fields)
        except Exception:
            self.handleError(record)

    def build_fields(self, record: logging.LogRecord) -> dict[str, Any]:
        """Construct the journald field dictionary for ``record``.

        Examples
        --------
        >>> record = logging.LogRecord("app.http", logging.ERROR, "svc.py", 7, "boom", None, None)
        >>> fields = JournaldHandler(sender=lambda **_: None).build_fields(record)
        >>> fields["MESSAGE"], fields["PRIORITY"], fields["LOGCTL_CONTEXT"]
        ('boom', 3, 'app.http')
        """

        severity = Severity.from_record_level(record.levelno)
        return {
            "MESSAGE": record.getMessage(),
            "PRIORITY": int(severity),
            "SYSLOG_IDENTIFIER": self._identifier,
            "LOGCTL_CONTEXT": context_label(record),
            "LOGGER_LEVEL": severity.label.upper(),
            "CODE_FILE": record.pathname,
            "CODE_LINE": record.lineno,
            "CODE_FUNC": record.funcName or "",
            "THREAD_NAME": record.threadName or "",
        }


__all__ = ["JournaldHandler"]
