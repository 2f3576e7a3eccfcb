from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Callable

import pytest
from rich.console import Console

from logctl.application.router import CommandRouter
from logctl.domain.errors import ErrorCode, KernelMessageError, LogLibError, describe_code
from logctl.domain.levels import Severity
from logctl.domain.patterns import GLOBAL_CONTEXT_NAME


@dataclass
class FakeContext:
    name: str
    level: int = int(Severity.INFO)


class FakeLibrary:
    """In-memory context table implementing ``LoggingLibraryPort``.

    Every call is recorded in ``calls``; ``fail(operation)`` makes that
    operation raise, ``fail_set_for`` makes ``set_context_level`` raise for
    the listed context names.
    """

    def __init__(self, *names: str, max_contexts: int = 16, with_global: bool = True) -> None:
        self.max_contexts = max_contexts
        self.contexts: list[FakeContext] = []
        if with_global:
            self.contexts.append(FakeContext(GLOBAL_CONTEXT_NAME, int(Severity.WARNING)))
        self.contexts.extend(FakeContext(name) for name in names)
        self.calls: list[str] = []
        self.level_calls: list[tuple[str, int]] = []
        self.emitted: list[tuple[str, int, str]] = []
        self.fail_set_for: set[str] = set()
        self._failures: dict[str, int] = {}

    def fail(self, operation: str, code: int = ErrorCode.UNKNOWN) -> None:
        self._failures[operation] = int(code)

    def names(self) -> list[str]:
        return [context.name for context in self.contexts]

    def level_named(self, name: str) -> int:
        return self._lookup(name).level

    def _track(self, operation: str) -> None:
        self.calls.append(operation)
        code = self._failures.get(operation)
        if code is not None:
            raise LogLibError(code, f"{operation} failed")

    def _lookup(self, name: str) -> FakeContext:
        for context in self.contexts:
            if context.name == name:
                return context
        raise LogLibError(ErrorCode.CONTEXT_NOT_FOUND, name)

    def context_count(self) -> int:
        self._track("context_count")
        return len(self.contexts)

    def context_at(self, index: int) -> FakeContext:
        self._track("context_at")
        if not 0 <= index < len(self.contexts):
            raise LogLibError(ErrorCode.INVALID_PARAMETER, str(index))
        return self.contexts[index]

    def context_name(self, handle: FakeContext) -> str:
        self._track("context_name")
        return handle.name

    def context_level(self, handle: FakeContext) -> int:
        self._track("context_level")
        return handle.level

    def find_context(self, name: str) -> FakeContext:
        self._track("find_context")
        return self._lookup(name)

    def get_context(self, name: str) -> FakeContext:
        self._track("get_context")
        try:
            return self._lookup(name)
        except LogLibError:
            context = FakeContext(name)
            self.contexts.append(context)
            return context

    def set_context_level(self, handle: FakeContext, level: int) -> None:
        self._track("set_context_level")
        self.level_calls.append((handle.name, level))
        if handle.name in self.fail_set_for:
            raise LogLibError(ErrorCode.UNKNOWN, handle.name)
        handle.level = level

    def emit(self, handle: FakeContext, level: int, message: str) -> None:
        self._track("emit")
        self.emitted.append((handle.name, level, message))

    def error_string(self, code: int) -> str:
        return describe_code(code)


class FakeKmsg:
    """Kernel message port that records lines or raises a prepared error."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, int | None]] = []
        self.error: KernelMessageError | None = None

    def write_line(self, message: str, *, priority: int | None = None) -> None:
        if self.error is not None:
            raise self.error
        self.lines.append((message, priority))


@pytest.fixture
def make_library() -> type[FakeLibrary]:
    return FakeLibrary


@pytest.fixture
def fake_kmsg() -> FakeKmsg:
    return FakeKmsg()


@pytest.fixture
def console_lines() -> list[str]:
    return []


@pytest.fixture
def make_router(fake_kmsg: FakeKmsg, console_lines: list[str]) -> Callable[[FakeLibrary], CommandRouter]:
    def factory(library: FakeLibrary) -> CommandRouter:
        return CommandRouter(library, fake_kmsg, echo=console_lines.append)

    return factory


@pytest.fixture
def isolated_root() -> logging.Logger:
    """Root logger with a private manager so tests never touch the global tree."""

    root = logging.RootLogger(logging.WARNING)
    root.manager = logging.Manager(root)
    return root


@pytest.fixture
def record_console() -> Console:
    return Console(file=io.StringIO(), record=True, force_terminal=False, color_system=None, width=200)


@pytest.fixture
def restore_root_handlers():
    """Drop handlers that a test attached to the process-wide root logger."""

    root = logging.getLogger()
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
