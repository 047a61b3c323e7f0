"""Adapter that discards everything."""

from __future__ import annotations

from typing import Any

from lib_log_facade.application.ports.adapter import ChannelPort, LogAdapterPort
from lib_log_facade.domain.levels import LogLevel


class _NullChannel(ChannelPort):
    def is_enabled(self, level: LogLevel) -> bool:
        return False

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        return None


_NULL_CHANNEL = _NullChannel()


class NullAdapter(LogAdapterPort):
    """Always-disabled adapter; every channel it hands out is the same no-op.

    Examples
    --------
    >>> channel = NULL_ADAPTER.new_channel("any")
    >>> channel.is_enabled(LogLevel.ERROR)
    False
    >>> channel is NULL_ADAPTER.new_channel("other")
    True
    """

    is_configured_externally = False

    def new_channel(self, name: str) -> ChannelPort:
        return _NULL_CHANNEL


NULL_ADAPTER = NullAdapter()


__all__ = ["NULL_ADAPTER", "NullAdapter"]
