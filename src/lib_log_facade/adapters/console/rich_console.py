"""Rich-powered console adapter implementing :class:`LogAdapterPort`.

Purpose
-------
Render log lines on an interactive terminal with per-level colours while
keeping the same line layout as the plain stream adapter.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - adapter returned by
  :func:`lib_log_facade.logs.to_rich_console`.

System Role
-----------
Human-facing destination; honours ``force_color``/``no_color`` switches and
style overrides supplied by the runtime configuration.
"""

from __future__ import annotations

import threading
from typing import Any, Mapping

from rich.console import Console

from lib_log_facade.application.ports.adapter import ChannelPort, LogAdapterPort
from lib_log_facade.application.ports.time import ClockPort, SystemClock
from lib_log_facade.domain.formatting import (
    DEFAULT_TIMESTAMP_FORMAT,
    format_timestamp,
    render_message,
    validate_timestamp_format,
)
from lib_log_facade.domain.levels import LogLevel


#: Default Rich styles keyed by :class:`LogLevel` severity.
_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "red",
}


class _RichChannel(ChannelPort):
    __slots__ = ("_name", "_adapter")

    def __init__(self, name: str, adapter: "RichConsoleAdapter") -> None:
        self._name = name
        self._adapter = adapter

    def is_enabled(self, level: LogLevel) -> bool:
        return True

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        self._adapter.emit(self._name, level, render_message(message, params))


class RichConsoleAdapter(LogAdapterPort):
    """Print log lines through a :class:`rich.console.Console`.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> adapter = RichConsoleAdapter(console=console, timestamp_format=None)
    >>> adapter.new_channel("svc").log(LogLevel.INFO, "ready in {}s", 3)
    >>> "[svc] INFO: ready in 3s" in console.export_text()
    True
    """

    is_configured_externally = False

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[LogLevel | str, str] | None = None,
        show_icons: bool = False,
        timestamp_format: str | None = DEFAULT_TIMESTAMP_FORMAT,
        clock: ClockPort | None = None,
    ) -> None:
        """Configure the console adapter with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged
        self._show_icons = show_icons
        self._timestamp_format = None if timestamp_format is None else validate_timestamp_format(timestamp_format)
        self._clock: ClockPort = clock if clock is not None else SystemClock()
        self._lock = threading.Lock()

    @property
    def console(self) -> Console:
        return self._console

    @property
    def styles(self) -> dict[LogLevel, str]:
        return dict(self._style_map)

    def new_channel(self, name: str) -> ChannelPort:
        return _RichChannel(name, self)

    def emit(self, name: str, level: LogLevel, text: str) -> None:
        """Print one rendered message for channel ``name``."""

        style = "" if self._no_color else self._style_map.get(level, "")
        line = self._format_line(name, level, text)
        with self._lock:
            self._console.print(line, style=style, highlight=False, markup=False, emoji=False, soft_wrap=True)

    def _format_line(self, name: str, level: LogLevel, text: str) -> str:
        parts: list[str] = []
        if self._timestamp_format is not None:
            parts.append(format_timestamp(self._clock.now(), self._timestamp_format))
        if self._show_icons:
            parts.append(level.icon)
        parts.append(f"[{name}] {level.name}: {text}")
        return " ".join(parts)


__all__ = ["RichConsoleAdapter"]
