"""Log level abstraction shared by the facade, filters, and adapters.

Purpose
-------
Offer a totally ordered severity enumeration that also carries the ``NONE``
threshold used to switch a destination off entirely.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_ICON_TABLE`` constant mapping levels to console glyphs.

System Role
-----------
Used by the level filter to compare thresholds, by the capture sink to tag
stored messages, and by the console and stdlib bridges to pick styles and
``logging`` constants.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Enumerated logging levels ordered by ascending severity.

    ``NONE`` is never attached to a message; it only serves as a filter
    threshold meaning "disable everything".

    Examples
    --------
    >>> LogLevel.DEBUG < LogLevel.WARN < LogLevel.NONE
    True
    >>> LogLevel.from_name("warning") is LogLevel.WARN
    True
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    NONE = 100

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`.

        Numbers between the standard constants resolve to the closest level at
        or below them; anything under ``logging.DEBUG`` resolves to ``DEBUG``.
        """
        if level > logging.CRITICAL:
            return cls.NONE
        resolved = cls.DEBUG
        for member, python_level in _PYTHON_LEVELS.items():
            if member is not cls.NONE and python_level <= level:
                resolved = member
        return resolved


# Console glyphs displayed by the Rich adapter per log level.
_ICON_TABLE = {
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARN: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.NONE: "",
}

_PYTHON_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.NONE: logging.CRITICAL + 10,
}

_ALIASES = {"WARNING": "WARN", "ERR": "ERROR", "OFF": "NONE"}


__all__ = ["LogLevel"]
