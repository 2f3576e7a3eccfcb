"""Context snapshots and the bounded, sortable set produced by enumeration.

Purpose
-------
Hold the transient ``{handle, name}`` pairs captured while enumerating the
logging library so commands can filter, sort and report them.

Contents
--------
* :class:`ContextRecord` - immutable snapshot of one context.
* :class:`ContextSet` - bounded sequence with an explicit overflow check and a
  case-insensitive stable sort.

System Role
-----------
Mirrors the role of the ring buffer in a logging runtime: a bounded in-memory
collection whose limits are enforced rather than silently applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .errors import ContextSetOverflow


@dataclass(slots=True, frozen=True)
class ContextRecord:
    """Snapshot of a context captured during a single enumeration."""

    handle: Any
    name: str


def _sort_key(record: ContextRecord) -> bytes:
    # ASCII-only fold, independent of the process locale.
    return record.name.encode("utf-8", "surrogateescape").lower()


class ContextSet:
    """Ordered collection of :class:`ContextRecord` bounded by ``capacity``.

    The set holds ``capacity`` records plus one guard entry; appending past
    the guard raises :class:`ContextSetOverflow` instead of truncating.

    Examples
    --------
    >>> records = ContextSet(capacity=4)
    >>> for name in ("Zeta", "alpha", "Beta"):
    ...     records.append(ContextRecord(handle=None, name=name))
    >>> records.sort_by_name()
    >>> records.names()
    ['alpha', 'Beta', 'Zeta']
    """

    def __init__(self, *, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._records: list[ContextRecord] = []

    @property
    def capacity(self) -> int:
        """Return the number of contexts the library supports."""

        return self._capacity

    @property
    def limit(self) -> int:
        """Return the hard limit including the guard entry."""

        return self._capacity + 1

    def append(self, record: ContextRecord) -> None:
        """Append ``record`` or raise when the guard entry is already used."""

        if len(self._records) >= self.limit:
            raise ContextSetOverflow(self._capacity)
        self._records.append(record)

    def sort_by_name(self) -> None:
        """Sort in place by case-insensitive name; ties keep enumeration order."""

        self._records.sort(key=_sort_key)

    def names(self) -> list[str]:
        return [record.name for record in self._records]

    def __iter__(self) -> Iterator[ContextRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> ContextRecord:
        return self._records[index]


__all__ = ["ContextRecord", "ContextSet"]
