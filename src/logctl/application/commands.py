"""Command handlers for ``def``, ``set``, ``show``, ``log``, ``klog``,
``flush``, ``reconf`` and the usage text printed by ``help``.

Purpose
-------
Each handler declares its argument slots, lets :class:`SlotGrammar` consume
the arguments, then talks to the logging library (or the kernel message
device) and prints human-readable status lines.

Contents
--------
* :class:`CommandEnvironment` - collaborators shared by all handlers.
* ``cmd_*`` handlers - raise :class:`ParameterError` or
  :class:`CommandFailure`; return ``None`` on success.
* :func:`usage_text` - the help screen.

System Role
-----------
Sits between :class:`~logctl.application.router.CommandRouter` and the ports.
Handlers never catch anything but library and kernel-message errors, which
they translate into runtime failures carrying the library's error code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from logctl.application.directory import ContextDirectory
from logctl.application.ports.kmsg import KernelMessagePort
from logctl.application.ports.library import LoggingLibraryPort
from logctl.application.slots import (
    CONTEXT_MISSING,
    Flag,
    Slot,
    SlotGrammar,
    level_slot,
    message_slot,
    name_slot,
)
from logctl.domain.contexts import ContextRecord
from logctl.domain.control import RELOAD_CONFIG_COMMAND
from logctl.domain.errors import CommandFailure, KernelMessageError, LogLibError, ParameterError
from logctl.domain.levels import Severity, display_level
from logctl.domain.patterns import GLOBAL_CONTEXT_NAME, is_wildcard
from logctl.observability import PACKAGE_LOGGER_NAME, log_debug

Echo = Callable[[str], None]

FLUSH_CONTEXT_NAME = PACKAGE_LOGGER_NAME
FLUSH_MESSAGE = "Manually Flushing Buffers"


@dataclass(slots=True)
class CommandEnvironment:
    """Collaborators handed to every command handler."""

    library: LoggingLibraryPort
    kmsg: KernelMessagePort
    echo: Echo

    @property
    def directory(self) -> ContextDirectory:
        return ContextDirectory(self.library)


def _library_failure(env: CommandEnvironment, prefix: str, exc: LogLibError) -> CommandFailure:
    return CommandFailure(f"{prefix}: 0x{exc.code:08X} ({env.library.error_string(exc.code)})")


def cmd_def(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``def <context> [<level>]`` - define a context that does not exist yet."""

    directory = env.directory

    def undefined(name: str) -> str:
        try:
            directory.find_exact(name)
        except LogLibError:
            return name
        raise ParameterError(f"Context '{name}' is already defined.")

    grammar = SlotGrammar(slots=(name_slot(check=undefined), level_slot(missing=None)))
    values = grammar.parse(args)
    name: str = values["context"]

    try:
        handle = env.library.get_context(name)
    except LogLibError as exc:
        raise _library_failure(env, "Error defining context", exc) from exc

    level: Severity | None = values.get("level")
    if level is not None:
        try:
            env.library.set_context_level(handle, int(level))
        except LogLibError as exc:
            raise _library_failure(env, "Error setting context log level", exc) from exc


def cmd_set(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``set <context|pattern> <level>`` - change the level of existing contexts.

    A pattern is applied to every match in sorted order. The first failing
    context aborts the command; contexts already changed stay changed.
    """

    directory = env.directory

    def existing(name: str) -> ContextRecord | str:
        if is_wildcard(name):
            return name
        try:
            handle = directory.find_exact(name)
        except LogLibError:
            raise ParameterError(f"Context '{name}' not found.") from None
        return ContextRecord(handle=handle, name=name)

    grammar = SlotGrammar(slots=(name_slot(check=existing), level_slot()))
    values = grammar.parse(args)
    target: ContextRecord | str = values["context"]
    level: Severity = values["level"]

    if isinstance(target, ContextRecord):
        records: Sequence[ContextRecord] = [target]
    else:
        try:
            found = directory.list_contexts(target)
        except LogLibError as exc:
            raise _library_failure(env, "Error getting contexts info", exc) from exc
        if not found:
            raise CommandFailure(f"No contexts matched '{target}'.")
        records = list(found)

    for record in records:
        env.echo(f"Setting context level for '{record.name}'.")
        try:
            env.library.set_context_level(record.handle, int(level))
        except LogLibError as exc:
            raise _library_failure(env, "Error setting context log level", exc) from exc


def cmd_show(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``show [<context|pattern>]`` - list contexts with their current level."""

    grammar = SlotGrammar(slots=(name_slot(missing=None),), extra_message="Invalid parameter '{arg}'")
    pattern: str | None = grammar.parse(args).get("context")

    directory = env.directory
    try:
        found = directory.list_contexts(pattern)
        lines = [f"Context '{record.name}' = {display_level(directory.level_of(record))}" for record in found]
    except LogLibError as exc:
        raise _library_failure(env, "Error getting contexts info", exc) from exc

    for line in lines:
        env.echo(line)

    if pattern is not None and not lines:
        if is_wildcard(pattern):
            raise CommandFailure(f"No contexts matched '{pattern}'.")
        raise CommandFailure(f"Context '{pattern}' not found.")


def cmd_log(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``log [<context> <level>] <msg>`` - emit a message through the library.

    With a single argument the message goes to the global context at
    ``notice``.
    """

    directory = env.directory

    def known(text: str) -> Any:
        # find_exact resolves the alias; the error quotes the token as typed.
        try:
            return directory.find_exact(text)
        except LogLibError:
            raise ParameterError(f"Invalid context '{text}'.") from None

    prefilled: dict[str, Any] = {}
    if len(args) == 1:
        prefilled = {"context": known(GLOBAL_CONTEXT_NAME), "level": Severity.NOTICE}

    context_slot = Slot(key="context", missing=CONTEXT_MISSING, convert=known)
    grammar = SlotGrammar(slots=(context_slot, level_slot(allow_none=False), message_slot()))
    values = grammar.parse(args, prefilled=prefilled)

    try:
        env.library.emit(values["context"], int(values["level"]), values["message"])
    except LogLibError as exc:
        raise _library_failure(env, "Error logging", exc) from exc


def cmd_klog(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``klog [-p <level>] <msg>`` - write one line to the kernel log."""

    grammar = SlotGrammar(slots=(message_slot(),), flags=(Flag("-p", level_slot(missing=None)),))
    values = grammar.parse(args)

    level: Severity | None = values.get("level")
    priority = int(level) if level is not None and level >= 0 else None
    log_debug("writing kernel message", priority=priority)
    try:
        env.kmsg.write_line(values["message"], priority=priority)
    except KernelMessageError as exc:
        raise CommandFailure(str(exc)) from exc


def cmd_flush(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``flush`` - push a top-severity marker through the tool's own context."""

    SlotGrammar(slots=()).parse(args)
    try:
        handle = env.library.find_context(FLUSH_CONTEXT_NAME)
    except LogLibError as exc:
        raise _library_failure(env, f"Error getting context {FLUSH_CONTEXT_NAME}", exc) from exc

    try:
        env.library.emit(handle, int(Severity.EMERG), FLUSH_MESSAGE)
    except LogLibError as exc:
        raise _library_failure(env, "Error logging", exc) from exc


def cmd_reconf(env: CommandEnvironment, args: Sequence[str]) -> None:
    """``reconf`` - ask the library to reload its configuration."""

    SlotGrammar(slots=()).parse(args)
    try:
        handle = env.library.find_context(GLOBAL_CONTEXT_NAME)
        env.library.emit(handle, int(Severity.EMERG), RELOAD_CONFIG_COMMAND)
    except LogLibError as exc:
        raise _library_failure(env, "Error logging", exc) from exc


_USAGE_COMMANDS = (
    ("help", "show usage info"),
    ("def <context> [<level>]", "define logging context"),
    ("flush", "flush all ring buffers"),
    ("log <context> <level> <msg>", "log a message"),
    ("klog [-p <level>] <msg>", "log a kernel message"),
    ("reconf", "re-load lib options from conf"),
    ("set <context> <level>", "set logging context level"),
    ("show [<context>]", "show logging context(s)"),
)


def usage_text(prog_name: str) -> str:
    """Return the help screen listing commands, the alias and every level."""

    lines = [f"{prog_name} COMMAND [PARAM...]"]
    lines.extend(f"  {synopsis:<28} # {summary}" for synopsis, summary in _USAGE_COMMANDS)
    lines += ["", "Contexts:", "  The global context can be specified as '.'", "", "Levels:"]
    lines.extend(f"  {level.label:<10}  # {int(level)}" for level in Severity)
    return "\n".join(lines)


COMMANDS: dict[str, Callable[[CommandEnvironment, Sequence[str]], None]] = {
    "def": cmd_def,
    "log": cmd_log,
    "klog": cmd_klog,
    "reconf": cmd_reconf,
    "set": cmd_set,
    "show": cmd_show,
    "flush": cmd_flush,
}


__all__ = [
    "COMMANDS",
    "CommandEnvironment",
    "FLUSH_CONTEXT_NAME",
    "FLUSH_MESSAGE",
    "RELOAD_CONFIG_COMMAND",
    "cmd_def",
    "cmd_flush",
    "cmd_klog",
    "cmd_log",
    "cmd_reconf",
    "cmd_set",
    "cmd_show",
    "usage_text",
]
