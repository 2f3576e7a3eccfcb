"""Protocols describing the collaborators the command engine depends on."""

from __future__ import annotations

from .kmsg import KernelMessagePort
from .library import LoggingLibraryPort

__all__ = ["KernelMessagePort", "LoggingLibraryPort"]
