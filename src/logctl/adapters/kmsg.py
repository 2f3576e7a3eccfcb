"""Kernel message adapter implementing :class:`KernelMessagePort`.

Purpose
-------
Write single lines to ``/dev/kmsg`` (or a configured substitute) so ``klog``
can inject entries into the kernel ring buffer.

System Role
-----------
The device is opened for each line and closed on every exit path; failures
are reported with the phase (opening or writing) and the OS reason.
"""

from __future__ import annotations

import os
from pathlib import Path

from logctl.application.ports.kmsg import KernelMessagePort
from logctl.domain.errors import KernelMessageError

DEFAULT_KMSG_PATH = Path("/dev/kmsg")


def _reason(exc: OSError | UnicodeError) -> str:
    if isinstance(exc, OSError) and exc.errno is not None:
        return os.strerror(exc.errno)
    return str(exc)


class KmsgWriter(KernelMessagePort):
    """Append ``<priority>message`` lines to the kernel message device."""

    def __init__(self, path: str | Path = DEFAULT_KMSG_PATH) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @staticmethod
    def format_line(message: str, priority: int | None = None) -> str:
        """Return the line written for ``message``.

        >>> KmsgWriter.format_line("hi", 3)
        '<3>hi\\n'
        >>> KmsgWriter.format_line("hi")
        'hi\\n'
        """

        prefix = f"<{priority}>" if priority is not None and priority >= 0 else ""
        return f"{prefix}{message}\n"

    def write_line(self, message: str, *, priority: int | None = None) -> None:
        """Open the device, write one line, close it.

        Undecodable argument bytes (carried as lone surrogates) are written
        back out unchanged.
        """

        line = self.format_line(message, priority)
        try:
            stream = self._path.open("w", encoding="utf-8", errors="surrogateescape")
        except OSError as exc:
            raise KernelMessageError("opening", str(self._path), _reason(exc)) from exc

        with stream:
            try:
                stream.write(line)
                stream.flush()
            except (OSError, UnicodeError) as exc:
                raise KernelMessageError("writing", str(self._path), _reason(exc)) from exc


__all__ = ["DEFAULT_KMSG_PATH", "KmsgWriter"]
