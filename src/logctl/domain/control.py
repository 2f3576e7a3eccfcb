"""Control messages understood by logging libraries when sent to the global context."""

from __future__ import annotations

CONTROL_PREFIX = "!loglib "
RELOAD_CONFIG_COMMAND = CONTROL_PREFIX + "loadconf"


def is_control_message(message: str) -> bool:
    return message.startswith(CONTROL_PREFIX)


__all__ = ["CONTROL_PREFIX", "RELOAD_CONFIG_COMMAND", "is_control_message"]
