"""Severity and facility enumerations with their canonical string codec.

Purpose
-------
Offer a domain-specific representation of syslog severities and facilities
together with total integer -> name conversions and partial name -> value
conversions used by every command that accepts a level.

Contents
--------
* :class:`Severity` enum (``none`` plus the eight syslog severities).
* :class:`Facility` enum (syslog facility codes).
* Codec helpers :func:`level_from_string`, :func:`string_from_level`,
  :func:`display_level`, :func:`facility_from_string`,
  :func:`string_from_facility`.

System Role
-----------
Pure and stateless; the command handlers parse user input through it and the
``show``/``help`` output renders levels through it.
"""

from __future__ import annotations

import logging
from enum import IntEnum

UNKNOWN_LEVEL_TEXT = "Unknown"


class Severity(IntEnum):
    """Ordered syslog severities; lower values are more severe."""

    NONE = -1
    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        """Return the canonical lowercase name (``"err"``, ``"notice"`` ...)."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` level number this severity maps onto."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        level = level_from_string(name)
        if level is None:
            raise ValueError(f"Unknown severity: {name!r}")
        return level

    @classmethod
    def from_python_level(cls, level: int) -> "Severity":
        """Return the least severe severity still emitted at logger level ``level``.

        >>> Severity.from_python_level(logging.WARNING)
        <Severity.WARNING: 4>
        >>> Severity.from_python_level(logging.NOTSET)
        <Severity.DEBUG: 7>
        >>> Severity.from_python_level(DISABLED_PYTHON_LEVEL)
        <Severity.NONE: -1>
        """

        for severity in sorted(cls, reverse=True):
            if severity is not cls.NONE and _PYTHON_LEVELS[severity] >= level:
                return severity
        return cls.NONE

    @classmethod
    def from_record_level(cls, levelno: int) -> "Severity":
        """Return the severity a record logged at Python level ``levelno`` carries.

        >>> Severity.from_record_level(25), Severity.from_record_level(45)
        (<Severity.NOTICE: 5>, <Severity.ERR: 3>)
        """

        reached = [severity for severity in cls if severity is not cls.NONE and _PYTHON_LEVELS[severity] <= levelno]
        if not reached:
            return cls.DEBUG
        return max(reached, key=_PYTHON_LEVELS.__getitem__)


class Facility(IntEnum):
    """Syslog facility codes, already shifted into the priority bit field."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3

    @property
    def label(self) -> str:
        """Return the canonical lowercase facility name."""

        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Facility":
        facility = facility_from_string(name)
        if facility is None:
            raise ValueError(f"Unknown facility: {name!r}")
        return facility


DISABLED_PYTHON_LEVEL = 100

_PYTHON_LEVELS = {
    Severity.NONE: DISABLED_PYTHON_LEVEL,
    Severity.EMERG: 58,
    Severity.ALERT: 55,
    Severity.CRIT: logging.CRITICAL,
    Severity.ERR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: 25,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}
# Python level numbers per severity; EMERG/ALERT/NOTICE/NONE have no stdlib constant.

_LEVELS_BY_NAME = {level.label: level for level in Severity}
_LEVELS_BY_NUMBER = {str(int(level)): level for level in Severity}
_FACILITIES_BY_NAME = {facility.label: facility for facility in Facility}


def level_from_string(text: str) -> Severity | None:
    """Return the severity named ``text`` or ``None`` when unrecognised.

    Matching is exact against the canonical lowercase names; the numeric
    value of a severity (``"-1"`` .. ``"7"``) is accepted as well, spelled
    exactly that way (no "+", padding or leading zeros).

    Examples
    --------
    >>> level_from_string("err")
    <Severity.ERR: 3>
    >>> level_from_string("3")
    <Severity.ERR: 3>
    >>> level_from_string("ERR") is None, level_from_string("03") is None
    (True, True)
    """

    level = _LEVELS_BY_NAME.get(text)
    if level is not None:
        return level
    return _LEVELS_BY_NUMBER.get(text)


def string_from_level(level: int) -> str | None:
    """Return the canonical name for ``level`` or ``None`` when out of range."""

    try:
        return Severity(level).label
    except ValueError:
        return None


def display_level(level: int) -> str:
    """Return the canonical name for ``level``, falling back to ``"Unknown"``.

    >>> display_level(5), display_level(42)
    ('notice', 'Unknown')
    """

    return string_from_level(level) or UNKNOWN_LEVEL_TEXT


def facility_from_string(text: str) -> Facility | None:
    """Return the facility named ``text`` or ``None`` when unrecognised."""

    return _FACILITIES_BY_NAME.get(text)


def string_from_facility(facility: int) -> str | None:
    """Return the canonical name for ``facility`` or ``None`` when unknown."""

    try:
        return Facility(facility).label
    except ValueError:
        return None


__all__ = [
    "DISABLED_PYTHON_LEVEL",
    "Facility",
    "Severity",
    "UNKNOWN_LEVEL_TEXT",
    "display_level",
    "facility_from_string",
    "level_from_string",
    "string_from_facility",
    "string_from_level",
]
