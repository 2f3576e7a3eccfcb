"""Domain entities and value objects used by the context control engine."""

from __future__ import annotations

from .contexts import ContextRecord, ContextSet
from .errors import (
    CommandFailure,
    ContextSetOverflow,
    ErrorCode,
    KernelMessageError,
    LogLibError,
    ParameterError,
)
from .levels import Facility, Severity
from .patterns import GLOBAL_CONTEXT_NAME

__all__ = [
    "CommandFailure",
    "ContextRecord",
    "ContextSet",
    "ContextSetOverflow",
    "ErrorCode",
    "Facility",
    "GLOBAL_CONTEXT_NAME",
    "KernelMessageError",
    "LogLibError",
    "ParameterError",
    "Severity",
]
