"""Protocols describing the boundaries between the facade and its destinations."""

from __future__ import annotations

from .adapter import ChannelPort, LineWriterPort, LogAdapterPort, is_configured_externally
from .time import ClockPort, SystemClock

__all__ = [
    "ChannelPort",
    "ClockPort",
    "LineWriterPort",
    "LogAdapterPort",
    "SystemClock",
    "is_configured_externally",
]
