"""Fan-out adapter broadcasting every call to several destinations."""

from __future__ import annotations

from typing import Any, Iterable

from lib_log_facade.application.ports.adapter import ChannelPort, LogAdapterPort
from lib_log_facade.domain.levels import LogLevel


class _MultiChannel(ChannelPort):
    __slots__ = ("_channels",)

    def __init__(self, channels: tuple[ChannelPort, ...]) -> None:
        self._channels = channels

    def is_enabled(self, level: LogLevel) -> bool:
        return any(channel.is_enabled(level) for channel in self._channels)

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        # Each destination applies its own level check. A raising destination
        # stops delivery to the ones after it.
        for channel in self._channels:
            channel.log(level, message, *params)


class MultiAdapter(LogAdapterPort):
    """Send output to every wrapped adapter, in order.

    A channel is enabled for a level when at least one destination is, so one
    destination may be more verbose than another. With no adapters the result
    behaves like the null adapter.

    Examples
    --------
    >>> from lib_log_facade.adapters.capture import LogCapture
    >>> from lib_log_facade.adapters.null import NULL_ADAPTER
    >>> MultiAdapter([NULL_ADAPTER, LogCapture()]).new_channel("x").is_enabled(LogLevel.DEBUG)
    True
    >>> MultiAdapter([]).new_channel("x").is_enabled(LogLevel.ERROR)
    False
    """

    is_configured_externally = False

    def __init__(self, adapters: Iterable[LogAdapterPort]) -> None:
        self._adapters = tuple(adapters)

    @property
    def adapters(self) -> tuple[LogAdapterPort, ...]:
        """Return the wrapped adapters in dispatch order."""

        return self._adapters

    def new_channel(self, name: str) -> ChannelPort:
        return _MultiChannel(tuple(adapter.new_channel(name) for adapter in self._adapters))


__all__ = ["MultiAdapter"]
