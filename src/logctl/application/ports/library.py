"""Port describing the logging library whose context table is controlled.

Purpose
-------
Define the narrow set of operations the command handlers need from a logging
library: enumerate, look up, create, adjust and emit. Keeping them behind a
protocol lets the engine run against the stdlib adapter in production and a
fake in tests.

Contents
--------
* :class:`LoggingLibraryPort` - runtime-checkable protocol; every method raises
  :class:`~logctl.domain.errors.LogLibError` on failure.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggingLibraryPort(Protocol):
    """Operations consumed from the external logging library."""

    max_contexts: int

    def context_count(self) -> int:
        """Return the number of contexts currently known."""

    def context_at(self, index: int) -> Any:
        """Return the opaque handle of the context at ``index``."""

    def context_name(self, handle: Any) -> str:
        """Return the name of ``handle``."""

    def context_level(self, handle: Any) -> int:
        """Return the enabled severity of ``handle`` as a raw integer."""

    def find_context(self, name: str) -> Any:
        """Return the handle named exactly ``name`` without creating it."""

    def get_context(self, name: str) -> Any:
        """Return the handle named ``name``, registering it when missing."""

    def set_context_level(self, handle: Any, level: int) -> None:
        """Change the enabled severity of ``handle``."""

    def emit(self, handle: Any, level: int, message: str) -> None:
        """Log ``message`` on ``handle`` at ``level``."""

    def error_string(self, code: int) -> str:
        """Render a library error code as a short debug string."""


__all__ = ["LoggingLibraryPort"]
