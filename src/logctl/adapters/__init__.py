"""Concrete adapters: stdlib logging library, kernel messages, log sinks."""

from __future__ import annotations

from .console.rich_console import RichConsoleHandler
from .kmsg import KmsgWriter
from .stdlib_library import StdlibLoggingLibrary
from .structured.journald import JournaldHandler

__all__ = ["JournaldHandler", "KmsgWriter", "RichConsoleHandler", "StdlibLoggingLibrary"]
