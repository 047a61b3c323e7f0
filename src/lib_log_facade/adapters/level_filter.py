"""Decorator adapter suppressing levels below a threshold.

Purpose
-------
Let any destination be limited to a minimum severity without the destination
knowing about it.

Contents
--------
* :class:`LevelFilterAdapter` - wraps one adapter and filters its channels.

System Role
-----------
Composed by :func:`lib_log_facade.logs.level` and the runtime configuration.
Adapters reporting ``is_configured_externally`` manage levels themselves, so
the filter forwards to them unchanged.
"""

from __future__ import annotations

from typing import Any

from lib_log_facade.application.ports.adapter import ChannelPort, LogAdapterPort, is_configured_externally
from lib_log_facade.domain.levels import LogLevel


class _FilteredChannel(ChannelPort):
    __slots__ = ("_wrapped", "_minimum")

    def __init__(self, wrapped: ChannelPort, minimum: LogLevel) -> None:
        self._wrapped = wrapped
        self._minimum = minimum

    def is_enabled(self, level: LogLevel) -> bool:
        return self._minimum <= level and self._wrapped.is_enabled(level)

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        # Callers may skip the facade's own check, so the threshold is applied here too.
        if self.is_enabled(level):
            self._wrapped.log(level, message, *params)


class LevelFilterAdapter(LogAdapterPort):
    """Filter the channels of ``wrapped`` to ``minimum_level`` and above.

    Parameters
    ----------
    wrapped:
        Adapter whose channels receive the surviving calls.
    minimum_level:
        Lowest enabled level; ``None`` means :attr:`LogLevel.DEBUG`.
        :attr:`LogLevel.NONE` disables everything.

    Examples
    --------
    >>> from lib_log_facade.adapters.capture import LogCapture
    >>> sink = LogCapture()
    >>> channel = LevelFilterAdapter(sink, LogLevel.WARN).new_channel("svc")
    >>> channel.is_enabled(LogLevel.INFO), channel.is_enabled(LogLevel.ERROR)
    (False, True)
    """

    def __init__(self, wrapped: LogAdapterPort, minimum_level: LogLevel | None = None) -> None:
        self._wrapped = wrapped
        self._minimum_level = LogLevel.DEBUG if minimum_level is None else minimum_level

    @property
    def wrapped(self) -> LogAdapterPort:
        """Return the decorated adapter."""

        return self._wrapped

    @property
    def minimum_level(self) -> LogLevel:
        """Return the lowest enabled level."""

        return self._minimum_level

    @property
    def is_configured_externally(self) -> bool:
        return is_configured_externally(self._wrapped)

    def new_channel(self, name: str) -> ChannelPort:
        channel = self._wrapped.new_channel(name)
        if is_configured_externally(self._wrapped):
            return channel
        return _FilteredChannel(channel, self._minimum_level)


__all__ = ["LevelFilterAdapter"]
