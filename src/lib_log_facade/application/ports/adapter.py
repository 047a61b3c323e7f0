"""Channel and adapter ports every logging destination implements.

Purpose
-------
Define the narrow contracts between the :class:`LoggerFacade` and whatever
actually produces output, so destinations can be swapped or combined without
touching calling code.

Contents
--------
* :class:`ChannelPort` - named output handle accepting leveled log calls.
* :class:`LogAdapterPort` - factory of channels with the
  ``is_configured_externally`` capability flag.
* :class:`LineWriterPort` - sink for one already-formatted line.

System Role
-----------
The facade depends only on these protocols; decorators (level filter, fan-out)
implement them while wrapping other implementations. All implementations must
tolerate concurrent calls from multiple threads.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_log_facade.domain.levels import LogLevel


@runtime_checkable
class ChannelPort(Protocol):
    """Named output handle bound to one destination."""

    def is_enabled(self, level: LogLevel) -> bool:
        """Return ``True`` when messages at ``level`` would be emitted."""

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        """Emit ``message`` at ``level``.

        Without ``params`` the message may be any object; it is converted to
        text only if the channel emits it. With ``params`` the message is a
        ``{}`` template and substitution is likewise up to the channel.
        """


@runtime_checkable
class LogAdapterPort(Protocol):
    """Factory of :class:`ChannelPort` objects for one logging backend.

    ``is_configured_externally`` reports that level filtering is owned by the
    backend's own configuration; level filters wrapping such an adapter pass
    every call through untouched.
    """

    is_configured_externally: bool

    def new_channel(self, name: str) -> ChannelPort:
        """Create a channel bound to ``name``; callers retain it, adapters do not cache."""


@runtime_checkable
class LineWriterPort(Protocol):
    """Write one already-formatted log line."""

    def __call__(self, line: str) -> None: ...


def is_configured_externally(adapter: object) -> bool:
    """Return the adapter's ``is_configured_externally`` flag (``False`` when absent)."""

    return bool(getattr(adapter, "is_configured_externally", False))


__all__ = ["ChannelPort", "LineWriterPort", "LogAdapterPort", "is_configured_externally"]
