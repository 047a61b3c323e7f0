"""Domain value objects and pure helpers used by the logging facade."""

from __future__ import annotations

from .formatting import DEFAULT_TIMESTAMP_FORMAT, format_timestamp, render_message, simple_format
from .levels import LogLevel
from .messages import CapturedMessage
from .values import Deferred, defer, exception_summary, exception_trace

__all__ = [
    "CapturedMessage",
    "DEFAULT_TIMESTAMP_FORMAT",
    "Deferred",
    "LogLevel",
    "defer",
    "exception_summary",
    "exception_trace",
    "format_timestamp",
    "render_message",
    "simple_format",
]
