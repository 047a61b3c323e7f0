"""Adapter delegating to the standard library :mod:`logging` package.

Purpose
-------
Let applications that already configure :mod:`logging` (handlers, levels,
formatters) receive facade output through that configuration.

Contents
--------
* :class:`PythonLoggingAdapter` - one :class:`logging.Logger` per channel.

System Role
-----------
Levels are owned by the host's logging configuration, so the adapter reports
``is_configured_externally`` and level filters pass its channels through.
Message text is rendered only if a handler actually formats the record.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from lib_log_facade.application.ports.adapter import ChannelPort, LogAdapterPort
from lib_log_facade.domain.formatting import render_message
from lib_log_facade.domain.levels import LogLevel


class _LazyText:
    """Record ``msg`` whose text is produced when ``logging`` calls :func:`str`."""

    __slots__ = ("_message", "_params")

    def __init__(self, message: Any, params: Sequence[Any]) -> None:
        self._message = message
        self._params = params

    def __str__(self) -> str:
        return render_message(self._message, self._params)


class _PythonLoggingChannel(ChannelPort):
    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled(self, level: LogLevel) -> bool:
        if level is LogLevel.NONE:
            return False
        return self._logger.isEnabledFor(level.to_python_level())

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        if not self.is_enabled(level):
            return
        self._logger.log(level.to_python_level(), _LazyText(message, params))


class PythonLoggingAdapter(LogAdapterPort):
    """Route channels to ``logging.getLogger(name)``.

    Examples
    --------
    >>> adapter = PythonLoggingAdapter()
    >>> adapter.is_configured_externally
    True
    >>> adapter.new_channel("lib_log_facade.example").logger.name
    'lib_log_facade.example'
    """

    is_configured_externally = True

    def new_channel(self, name: str) -> ChannelPort:
        return _PythonLoggingChannel(logging.getLogger(name))


__all__ = ["PythonLoggingAdapter"]
