"""Line-oriented adapter writing plain text through a callback or stream.

Purpose
-------
Provide the simplest real destination: one formatted line per enabled call,
written either to a text stream or to any callable accepting a line.

Contents
--------
* :class:`StreamLineWriter` - thread-safe ``print``-style writer over a stream.
* :class:`StreamAdapter` - adapter rendering ``[name] LEVEL: text`` lines with an
  optional timestamp and tag.

System Role
-----------
Backs :func:`lib_log_facade.logs.to_console`, ``to_stream``, and ``to_method``.
The adapter itself holds no mutable state; thread-safety of the output is the
line writer's job.
"""

from __future__ import annotations

import threading
from typing import Any, TextIO

from lib_log_facade.application.ports.adapter import ChannelPort, LineWriterPort, LogAdapterPort
from lib_log_facade.application.ports.time import ClockPort, SystemClock
from lib_log_facade.domain.formatting import (
    DEFAULT_TIMESTAMP_FORMAT,
    format_timestamp,
    render_message,
    validate_timestamp_format,
)
from lib_log_facade.domain.levels import LogLevel


class StreamLineWriter(LineWriterPort):
    """Write each line plus a newline to ``stream``, serialising writers.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> StreamLineWriter(buffer)("hello")
    >>> buffer.getvalue()
    'hello\\n'
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream

    def __call__(self, line: str) -> None:
        with self._lock:
            self._stream.write(line + "\n")
            self._stream.flush()


class _StreamChannel(ChannelPort):
    __slots__ = ("_name", "_adapter")

    def __init__(self, name: str, adapter: "StreamAdapter") -> None:
        self._name = name
        self._adapter = adapter

    def is_enabled(self, level: LogLevel) -> bool:
        return True

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        self._adapter.line_writer(self._adapter.format_line(self._name, level, render_message(message, params)))


class StreamAdapter(LogAdapterPort):
    """Render every call as one text line and hand it to ``line_writer``.

    Lines look like ``{timestamp} {{tag}} [{name}] {LEVEL}: {text}`` where the
    timestamp and tag parts are omitted when not configured. Every level is
    enabled; wrap the adapter in a level filter to restrict it.

    Parameters
    ----------
    line_writer:
        Callable receiving each finished line.
    tag:
        Optional label rendered in braces before the logger name.
    timestamp_format:
        strftime pattern (``%3f`` = milliseconds) or ``None`` to omit
        timestamps. Malformed patterns raise :class:`ValueError`.
    clock:
        Time source; defaults to UTC wall-clock time.

    Examples
    --------
    >>> lines = []
    >>> adapter = StreamAdapter(lines.append, timestamp_format=None).with_tag("app")
    >>> adapter.new_channel("db").log(LogLevel.WARN, "slow query: {}ms", 250)
    >>> lines
    ['{app} [db] WARN: slow query: 250ms']
    """

    is_configured_externally = False

    def __init__(
        self,
        line_writer: LineWriterPort,
        *,
        tag: str | None = None,
        timestamp_format: str | None = DEFAULT_TIMESTAMP_FORMAT,
        clock: ClockPort | None = None,
    ) -> None:
        self._line_writer = line_writer
        self._tag = tag
        self._timestamp_format = None if timestamp_format is None else validate_timestamp_format(timestamp_format)
        self._clock: ClockPort = clock if clock is not None else SystemClock()

    @property
    def line_writer(self) -> LineWriterPort:
        return self._line_writer

    @property
    def tag(self) -> str | None:
        return self._tag

    @property
    def timestamp_format(self) -> str | None:
        return self._timestamp_format

    def with_tag(self, tag: str | None) -> "StreamAdapter":
        """Return a copy of this adapter using ``tag``."""

        return StreamAdapter(self._line_writer, tag=tag, timestamp_format=self._timestamp_format, clock=self._clock)

    def with_timestamp_format(self, timestamp_format: str | None) -> "StreamAdapter":
        """Return a copy of this adapter using ``timestamp_format`` (``None`` disables timestamps)."""

        return StreamAdapter(self._line_writer, tag=self._tag, timestamp_format=timestamp_format, clock=self._clock)

    def new_channel(self, name: str) -> ChannelPort:
        return _StreamChannel(name, self)

    def format_line(self, name: str, level: LogLevel, text: str) -> str:
        """Build the output line for one message."""

        parts: list[str] = []
        if self._timestamp_format is not None:
            parts.append(format_timestamp(self._clock.now(), self._timestamp_format))
        if self._tag:
            parts.append(f"{{{self._tag}}}")
        parts.append(f"[{name}] {level.name}: {text}")
        return " ".join(parts)


__all__ = ["StreamAdapter", "StreamLineWriter"]
