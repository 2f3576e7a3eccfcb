"""Application layer: context directory, argument slots, handlers, router."""

from __future__ import annotations

from .commands import CommandEnvironment
from .directory import ContextDirectory
from .router import CommandResult, CommandRouter

__all__ = ["CommandEnvironment", "CommandResult", "CommandRouter", "ContextDirectory"]
