"""Error vocabulary shared by the directory, the handlers and the adapters.

Purpose
-------
Separate the two user-facing failure kinds: parameter errors (bad or missing
arguments, detected locally) and runtime errors (the logging library or the
kernel message device rejected a well-formed request).

Contents
--------
* :class:`ErrorCode` - numeric library error codes with debug strings.
* :class:`LogLibError` / :class:`ContextSetOverflow` - library failures.
* :class:`KernelMessageError` - kernel message device failures.
* :class:`ParameterError` / :class:`CommandFailure` - handler outcomes mapped
  to exit codes by the router.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Library error codes rendered as ``0x%08X`` in diagnostics."""

    NONE = 0
    UNKNOWN = 1
    INVALID_PARAMETER = 2
    CONTEXT_NOT_FOUND = 3
    INVALID_CONTEXT_NAME = 4
    INVALID_LEVEL = 5
    TOO_MANY_CONTEXTS = 6
    CONFIG_RELOAD_FAILED = 7

    @property
    def debug_string(self) -> str:
        return _DEBUG_STRINGS[self]


_DEBUG_STRINGS = {
    ErrorCode.NONE: "None",
    ErrorCode.UNKNOWN: "Unknown",
    ErrorCode.INVALID_PARAMETER: "InvalidParameter",
    ErrorCode.CONTEXT_NOT_FOUND: "ContextNotFound",
    ErrorCode.INVALID_CONTEXT_NAME: "InvalidContextName",
    ErrorCode.INVALID_LEVEL: "InvalidLevel",
    ErrorCode.TOO_MANY_CONTEXTS: "TooManyContexts",
    ErrorCode.CONFIG_RELOAD_FAILED: "ConfigReloadFailed",
}


def describe_code(code: int) -> str:
    """Return the debug string for ``code``; unknown codes render generically."""

    try:
        return ErrorCode(code).debug_string
    except ValueError:
        return f"Err{code}"


class LogLibError(Exception):
    """Raised by a logging library adapter when a request fails."""

    def __init__(self, code: int, detail: str | None = None) -> None:
        self.code = int(code)
        self.detail = detail
        message = f"0x{self.code:08X} ({describe_code(self.code)})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ContextSetOverflow(LogLibError):
    """The enumeration produced more contexts than the bounded set can hold."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(ErrorCode.UNKNOWN, f"more than {capacity} contexts enumerated")


class KernelMessageError(Exception):
    """Opening or writing the kernel message device failed."""

    def __init__(self, phase: str, path: str, reason: str) -> None:
        self.phase = phase
        self.path = path
        self.reason = reason
        super().__init__(f"Error {phase} {path}: {reason}")


class ParameterError(Exception):
    """Malformed, missing, extra or semantically invalid command arguments."""


class CommandFailure(Exception):
    """A well-formed command failed while talking to an external collaborator."""


__all__ = [
    "CommandFailure",
    "ContextSetOverflow",
    "ErrorCode",
    "KernelMessageError",
    "LogLibError",
    "ParameterError",
    "describe_code",
]
