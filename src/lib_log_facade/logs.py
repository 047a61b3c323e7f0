"""Factory helpers for the built-in adapters.

Purpose
-------
Give host code one place to build and combine destinations without importing
adapter classes directly.

Contents
--------
* Destinations: :func:`none`, :func:`capture`, :func:`to_console`,
  :func:`to_rich_console`, :func:`to_stream`, :func:`to_method`,
  :func:`to_python_logging`.
* Decorators: :func:`level`, :func:`to_multiple`.
* Presets: :func:`basic`.

Examples
--------
>>> from lib_log_facade.logger import LoggerFacade
>>> sink = capture()
>>> logger = LoggerFacade.with_adapter(to_multiple(level(sink, LogLevel.WARN), none()), "svc")
>>> logger.info("hidden")
>>> logger.error("shown")
>>> sink.get_message_strings()
['ERROR:shown']
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .adapters.capture import LogCapture
from .adapters.console.rich_console import RichConsoleAdapter
from .adapters.level_filter import LevelFilterAdapter
from .adapters.multi import MultiAdapter
from .adapters.null import NULL_ADAPTER
from .adapters.python_logging import PythonLoggingAdapter
from .adapters.stream import StreamAdapter, StreamLineWriter
from .application.ports.adapter import LineWriterPort, LogAdapterPort
from .application.ports.time import ClockPort
from .domain.formatting import DEFAULT_TIMESTAMP_FORMAT
from .domain.levels import LogLevel


def none() -> LogAdapterPort:
    """Return the adapter that discards everything."""

    return NULL_ADAPTER


def level(adapter: LogAdapterPort, minimum_level: LogLevel | str | None) -> LogAdapterPort:
    """Wrap ``adapter`` so only ``minimum_level`` and above are emitted."""

    if isinstance(minimum_level, str):
        minimum_level = LogLevel.from_name(minimum_level)
    return LevelFilterAdapter(adapter, minimum_level)


def basic() -> LogAdapterPort:
    """Return the default setup: stderr output at ``INFO`` and above."""

    return level(to_console(), LogLevel.INFO)


def capture(*, clock: ClockPort | None = None) -> LogCapture:
    """Return a new in-memory capture sink."""

    return LogCapture(clock=clock)


def to_console() -> StreamAdapter:
    """Return a plain-text adapter writing to :data:`sys.stderr`."""

    return to_stream(sys.stderr)


def to_rich_console(**options: Any) -> RichConsoleAdapter:
    """Return a colourised console adapter; ``options`` go to :class:`RichConsoleAdapter`."""

    return RichConsoleAdapter(**options)


def to_stream(stream: TextIO) -> StreamAdapter:
    """Return a plain-text adapter writing one line per message to ``stream``."""

    return to_method(StreamLineWriter(stream))


def to_method(line_writer: LineWriterPort) -> StreamAdapter:
    """Return a plain-text adapter handing each line to ``line_writer``."""

    return StreamAdapter(line_writer, timestamp_format=DEFAULT_TIMESTAMP_FORMAT)


def to_python_logging() -> LogAdapterPort:
    """Return an adapter delegating to the standard :mod:`logging` package."""

    return PythonLoggingAdapter()


def to_multiple(*adapters: LogAdapterPort) -> LogAdapterPort:
    """Return an adapter broadcasting to all ``adapters`` (the null adapter when empty)."""

    if not adapters:
        return NULL_ADAPTER
    return MultiAdapter(adapters)


__all__ = [
    "basic",
    "capture",
    "level",
    "none",
    "to_console",
    "to_method",
    "to_multiple",
    "to_python_logging",
    "to_rich_console",
    "to_stream",
]
