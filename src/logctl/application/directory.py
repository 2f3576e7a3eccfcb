"""Enumerate and look up logging contexts through the library port.

Purpose
-------
Turn the library's index-based context table into a filtered, bounded and
deterministically sorted :class:`~logctl.domain.contexts.ContextSet`, and
offer a direct lookup for single, non-wildcard names.

Contents
--------
* :class:`ContextDirectory` - ``list_contexts``, ``find_exact``, ``level_of``.
"""

from __future__ import annotations

from typing import Any

from logctl.application.ports.library import LoggingLibraryPort
from logctl.domain.contexts import ContextRecord, ContextSet
from logctl.domain.errors import ErrorCode, LogLibError
from logctl.domain.patterns import is_wildcard, matches, resolve_alias
from logctl.observability import log_debug


class ContextDirectory:
    """Read-only view over the contexts known to a logging library."""

    def __init__(self, library: LoggingLibraryPort) -> None:
        self._library = library

    @property
    def library(self) -> LoggingLibraryPort:
        return self._library

    def list_contexts(self, pattern: str | None = None) -> ContextSet:
        """Return all contexts whose name matches ``pattern``, sorted by name.

        Raises
        ------
        LogLibError
            When the count is not positive, when any handle or name cannot be
            fetched (no partial result is returned), or when more contexts
            match than the library claims to support.
        """

        count = self._library.context_count()
        if count <= 0:
            raise LogLibError(ErrorCode.UNKNOWN, f"library reported {count} contexts")

        records = ContextSet(capacity=self._library.max_contexts)
        for index in range(count):
            handle = self._library.context_at(index)
            name = self._library.context_name(handle)
            if not matches(name, pattern):
                continue
            records.append(ContextRecord(handle=handle, name=name))

        records.sort_by_name()
        log_debug("enumerated contexts", pattern=pattern, total=count, matched=len(records))
        return records

    def find_exact(self, name: str) -> Any:
        """Return the handle for a single non-wildcard context name.

        The ``"."`` alias is resolved first; wildcard names never resolve.
        """

        resolved = resolve_alias(name)
        if is_wildcard(resolved):
            raise LogLibError(ErrorCode.CONTEXT_NOT_FOUND, f"{resolved!r} is a pattern")
        return self._library.find_context(resolved)

    def level_of(self, record: ContextRecord) -> int:
        return self._library.context_level(record.handle)


__all__ = ["ContextDirectory"]
