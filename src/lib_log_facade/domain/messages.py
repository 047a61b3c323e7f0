"""Value object describing one message retained by the capture sink.

Purpose
-------
Provide an immutable, comparable record of a log call after its text has been
resolved, so tests and diagnostics can inspect what was emitted.

Contents
--------
* :class:`CapturedMessage` dataclass with rendering helpers.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Created by :class:`lib_log_facade.adapters.capture.LogCapture` at the moment a
log call is recorded; never mutated afterwards.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .formatting import DEFAULT_TIMESTAMP_FORMAT, format_timestamp
from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class CapturedMessage:
    """Immutable record of a single log call.

    Attributes
    ----------
    logger_name:
        Name of the channel the message was logged through.
    level:
        :class:`LogLevel` of the call; never ``LogLevel.NONE``.
    text:
        Final text after placeholder substitution.
    timestamp:
        Optional timezone-aware instant, normalised to UTC.

    Examples
    --------
    >>> message = CapturedMessage("auth", LogLevel.INFO, "user alice did login")
    >>> str(message)
    '[auth] INFO: user alice did login'
    >>> message.level_string()
    'INFO:user alice did login'
    """

    logger_name: str
    level: LogLevel
    text: str
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if self.level is LogLevel.NONE:
            raise ValueError("LogLevel.NONE cannot be attached to a message")
        if self.timestamp is not None:
            object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))

    def __str__(self) -> str:
        return f"[{self.logger_name}] {self.level.name}: {self.text}"

    def level_string(self) -> str:
        """Return the compact ``LEVEL:text`` form."""

        return f"{self.level.name}:{self.text}"

    def to_string_with_timestamp(self) -> str:
        """Prefix :meth:`__str__` with the UTC timestamp when one is present.

        >>> from datetime import datetime, timezone
        >>> ts = datetime.fromtimestamp(100000, tz=timezone.utc)
        >>> CapturedMessage("name", LogLevel.INFO, "text", ts).to_string_with_timestamp()
        '1970-01-02 03:46:40.000 UTC [name] INFO: text'
        """

        if self.timestamp is None:
            return str(self)
        return f"{format_timestamp(self.timestamp, DEFAULT_TIMESTAMP_FORMAT)} {self}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the message to a dictionary with an ISO8601 timestamp."""

        return {
            "logger_name": self.logger_name,
            "level": self.level.name,
            "text": self.text,
            "timestamp": self.timestamp.isoformat() if self.timestamp is not None else None,
        }

    def to_json(self) -> str:
        """Serialize the message to JSON with sorted keys."""

        return json.dumps(self.to_dict(), sort_keys=True)


__all__ = ["CapturedMessage"]
