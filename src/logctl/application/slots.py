"""Table-driven, left-to-right argument parsing for the command handlers.

Purpose
-------
Every command consumes its arguments through an ordered list of slots
(context name, level, message ...). The ordering, the "filled at most once"
rule, the extra-argument rejection and the missing-slot messages are the same
for all commands, so they live here once and each handler only declares its
table.

Contents
--------
* :class:`Slot` / :class:`Flag` - slot declarations.
* :class:`SlotGrammar` - the state machine.
* :func:`name_slot`, :func:`level_slot`, :func:`message_slot` - common slots.

Examples
--------
>>> grammar = SlotGrammar(slots=(name_slot(), level_slot()))
>>> values = grammar.parse([".", "err"])
>>> values["context"], int(values["level"])
('<global>', 3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from logctl.domain.errors import ParameterError
from logctl.domain.levels import Severity, level_from_string
from logctl.domain.patterns import resolve_alias

Converter = Callable[[str], Any]

CONTEXT_MISSING = "Context not specified."
LEVEL_MISSING = "Level not specified."
MESSAGE_MISSING = "Message not specified."
INVALID_PARAMETER = "Invalid parameter '{arg}'."


def _identity(value: str) -> str:
    return value


@dataclass(slots=True, frozen=True)
class Slot:
    """One positional argument position.

    ``missing`` is the message raised when the slot is still empty after all
    arguments were consumed; ``None`` marks the slot optional.
    """

    key: str
    missing: str | None = None
    convert: Converter = _identity

    @property
    def required(self) -> bool:
        return self.missing is not None


@dataclass(slots=True, frozen=True)
class Flag:
    """A dash option taking one value, e.g. ``-p <level>``."""

    option: str
    slot: Slot


@dataclass(slots=True, frozen=True)
class SlotGrammar:
    """Ordered slots (and optional flags) for a single command."""

    slots: tuple[Slot, ...]
    flags: tuple[Flag, ...] = ()
    extra_message: str = INVALID_PARAMETER

    def parse(self, args: Iterable[str], *, prefilled: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Consume ``args`` left to right and return the filled slot values.

        Slots listed in ``prefilled`` count as already filled. Converters run
        as soon as a slot is assigned, so their errors surface in argument
        order.
        """

        values: dict[str, Any] = dict(prefilled or {})
        flags = {flag.option: flag.slot for flag in self.flags}
        pending = iter(args)
        for arg in pending:
            if flags and arg.startswith("-"):
                slot = flags.get(arg)
                if slot is None:
                    raise ParameterError(self.extra_message.format(arg=arg))
                value = next(pending, None)
                if value is None:
                    raise ParameterError(f"Invalid parameter: {arg} requires value")
                values[slot.key] = slot.convert(value)
                continue

            slot = self._next_open_slot(values)
            if slot is None:
                raise ParameterError(self.extra_message.format(arg=arg))
            values[slot.key] = slot.convert(arg)

        for slot in self.slots:
            if slot.key not in values and slot.required:
                raise ParameterError(slot.missing)
        return values

    def _next_open_slot(self, values: Mapping[str, Any]) -> Slot | None:
        for slot in self.slots:
            if slot.key not in values:
                return slot
        return None


def parse_level(text: str, *, allow_none: bool = True) -> Severity:
    """Parse ``text`` as a severity or raise :class:`ParameterError` quoting it."""

    level = level_from_string(text)
    if level is None or (level is Severity.NONE and not allow_none):
        raise ParameterError(f"Invalid level '{text}'.")
    return level


def name_slot(*, missing: str | None = CONTEXT_MISSING, check: Converter | None = None) -> Slot:
    """Context name slot; resolves the ``"."`` alias, then runs ``check``."""

    def convert(text: str) -> Any:
        name = resolve_alias(text)
        return check(name) if check is not None else name

    return Slot(key="context", missing=missing, convert=convert)


def level_slot(*, missing: str | None = LEVEL_MISSING, allow_none: bool = True) -> Slot:
    return Slot(key="level", missing=missing, convert=lambda text: parse_level(text, allow_none=allow_none))


def message_slot() -> Slot:
    return Slot(key="message", missing=MESSAGE_MISSING)


__all__ = [
    "CONTEXT_MISSING",
    "Flag",
    "INVALID_PARAMETER",
    "LEVEL_MISSING",
    "MESSAGE_MISSING",
    "Slot",
    "SlotGrammar",
    "level_slot",
    "message_slot",
    "name_slot",
    "parse_level",
]
