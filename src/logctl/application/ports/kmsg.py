"""Port for the kernel message interface used by ``klog``."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KernelMessagePort(Protocol):
    """Write single lines to the kernel log."""

    def write_line(self, message: str, *, priority: int | None = None) -> None:
        """Write ``message`` prefixed with ``<priority>`` when one is given.

        Raises :class:`~logctl.domain.errors.KernelMessageError` when the
        device cannot be opened or written.
        """


__all__ = ["KernelMessagePort"]
