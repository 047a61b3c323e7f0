"""Public logging handle that library code calls directly.

Purpose
-------
Bind a logger name to one channel of an adapter and expose per-level methods,
keeping callers unaware of where output ends up.

Contents
--------
* :class:`LoggerFacade` - the facade with ``debug``/``info``/``warn``/``error``.

System Role
-----------
Outermost layer of the core. The facade never converts or formats messages;
it forwards the raw objects so the channel decides whether any text work is
needed.
"""

from __future__ import annotations

from typing import Any

from .adapters.null import NULL_ADAPTER
from .application.ports.adapter import ChannelPort, LogAdapterPort
from .domain.levels import LogLevel


class LoggerFacade:
    """Lightweight handle for leveled, parameterised logging calls.

    Create instances with :meth:`with_adapter` (or :meth:`none`), keep them for
    the lifetime of the component, and derive related loggers with
    :meth:`sub_logger`.

    Each level method accepts either a single message object, which is only
    converted to text if the channel emits it, or a ``{}`` template followed by
    parameters, whose substitution is likewise left to the channel.

    Examples
    --------
    >>> from lib_log_facade.adapters.capture import LogCapture
    >>> sink = LogCapture()
    >>> logger = LoggerFacade.with_adapter(sink, "a").sub_logger("b")
    >>> logger.warn("disk at {}%", 93)
    >>> [str(message) for message in sink.get_messages()]
    ['[a.b] WARN: disk at 93%']
    """

    __slots__ = ("_name", "_adapter", "_channel")

    def __init__(self, name: str, adapter: LogAdapterPort, channel: ChannelPort) -> None:
        """Bind ``name`` to an already created ``channel`` of ``adapter``.

        Prefer :meth:`with_adapter`; this constructor exists so callers that
        already hold a channel do not create a second one.
        """
        self._name = name
        self._adapter = adapter
        self._channel = channel

    @classmethod
    def with_adapter(cls, adapter: LogAdapterPort, name: str) -> "LoggerFacade":
        """Return a facade named ``name`` writing to a fresh channel of ``adapter``."""

        return cls(name, adapter, adapter.new_channel(name))

    @classmethod
    def none(cls) -> "LoggerFacade":
        """Return a facade that discards all output at no cost."""

        return cls.with_adapter(NULL_ADAPTER, "")

    @property
    def name(self) -> str:
        return self._name

    @property
    def adapter(self) -> LogAdapterPort:
        return self._adapter

    def sub_logger(self, suffix: str | None) -> "LoggerFacade":
        """Return a facade named ``"{name}.{suffix}"`` on the same adapter.

        An empty or ``None`` suffix returns this very instance.
        """

        if not suffix:
            return self
        sub_name = f"{self._name}.{suffix}"
        return LoggerFacade(sub_name, self._adapter, self._adapter.new_channel(sub_name))

    def is_enabled(self, level: LogLevel) -> bool:
        """Return ``True`` when the channel would emit messages at ``level``."""

        return self._channel.is_enabled(level)

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        """Forward a call at ``level`` to the channel without touching ``message``."""

        self._channel.log(level, message, *params)

    def debug(self, message: Any, *params: Any) -> None:
        """Log at ``DEBUG``; see the class docstring for argument handling."""
        self._channel.log(LogLevel.DEBUG, message, *params)

    def info(self, message: Any, *params: Any) -> None:
        """Log at ``INFO``."""
        self._channel.log(LogLevel.INFO, message, *params)

    def warn(self, message: Any, *params: Any) -> None:
        """Log at ``WARN``."""
        self._channel.log(LogLevel.WARN, message, *params)

    warning = warn

    def error(self, message: Any, *params: Any) -> None:
        """Log at ``ERROR``."""
        self._channel.log(LogLevel.ERROR, message, *params)

    def __repr__(self) -> str:
        return f"LoggerFacade(name={self._name!r}, adapter={self._adapter!r})"


__all__ = ["LoggerFacade"]
