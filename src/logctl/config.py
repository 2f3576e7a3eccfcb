"""Environment-driven settings and optional ``.env`` loading.

Purpose
-------
Collect the few knobs of the default runtime (kernel message device, logging
configuration file, sink backend, context table size) from the environment,
optionally seeded from the nearest ``.env`` file via python-dotenv.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle read when no CLI flag decides.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` handling.
* :class:`Settings` / :func:`load_settings` - parsed configuration.

System Role
-----------
Consumed by :mod:`logctl.cli` and :mod:`logctl.runtime`; the command engine
itself never reads the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from logctl.adapters.kmsg import DEFAULT_KMSG_PATH
from logctl.adapters.stdlib_library import DEFAULT_MAX_CONTEXTS

DOTENV_ENV_VAR = "LOGCTL_USE_DOTENV"
KMSG_PATH_ENV_VAR = "LOGCTL_KMSG_PATH"
LOGGING_CONFIG_ENV_VAR = "LOGCTL_LOGGING_CONFIG"
BACKEND_ENV_VAR = "LOGCTL_BACKEND"
MAX_CONTEXTS_ENV_VAR = "LOGCTL_MAX_CONTEXTS"

BACKENDS = ("console", "journald")
_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag wins over the environment.

    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding variables already set.

    Returns the resolved path that was loaded, or ``None`` when no file was
    found. Subsequent calls return the first loaded path.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    if search_from is not None:
        candidate = _find_upwards(search_from.resolve())
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found).resolve() if found else None
    if candidate is None:
        return None

    load_dotenv(candidate, override=False)
    _DOTENV_LOADED = candidate
    return candidate


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


@dataclass(slots=True, frozen=True)
class Settings:
    """Configuration of the default runtime."""

    kmsg_path: Path = DEFAULT_KMSG_PATH
    logging_config: Path | None = None
    backend: str = "console"
    max_contexts: int = DEFAULT_MAX_CONTEXTS

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(f"{BACKEND_ENV_VAR} must be one of {', '.join(BACKENDS)}, got {self.backend!r}")
        if self.max_contexts <= 0:
            raise ValueError(f"{MAX_CONTEXTS_ENV_VAR} must be positive, got {self.max_contexts}")


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to :data:`os.environ`)."""

    env = os.environ if environ is None else environ
    config = env.get(LOGGING_CONFIG_ENV_VAR, "").strip()
    return Settings(
        kmsg_path=Path(env.get(KMSG_PATH_ENV_VAR, "").strip() or DEFAULT_KMSG_PATH),
        logging_config=Path(config) if config else None,
        backend=env.get(BACKEND_ENV_VAR, "console").strip().lower() or "console",
        max_contexts=_env_int(env, MAX_CONTEXTS_ENV_VAR, DEFAULT_MAX_CONTEXTS),
    )


__all__ = [
    "BACKENDS",
    "BACKEND_ENV_VAR",
    "DOTENV_ENV_VAR",
    "KMSG_PATH_ENV_VAR",
    "LOGGING_CONFIG_ENV_VAR",
    "MAX_CONTEXTS_ENV_VAR",
    "Settings",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
