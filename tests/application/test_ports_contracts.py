from __future__ import annotations

from datetime import datetime
from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from lib_log_facade.adapters.capture import LogCapture
from lib_log_facade.adapters.console.rich_console import RichConsoleAdapter
from lib_log_facade.adapters.level_filter import LevelFilterAdapter
from lib_log_facade.adapters.multi import MultiAdapter
from lib_log_facade.adapters.null import NULL_ADAPTER
from lib_log_facade.adapters.python_logging import PythonLoggingAdapter
from lib_log_facade.adapters.stream import StreamAdapter, StreamLineWriter
from lib_log_facade.application.ports.adapter import (
    ChannelPort,
    LineWriterPort,
    LogAdapterPort,
    is_configured_externally,
)
from lib_log_facade.application.ports.time import ClockPort, SystemClock
from lib_log_facade.domain.levels import LogLevel


def _adapters() -> list[LogAdapterPort]:
    sink = LogCapture()
    return [
        NULL_ADAPTER,
        sink,
        LevelFilterAdapter(sink, LogLevel.INFO),
        MultiAdapter([sink, NULL_ADAPTER]),
        StreamAdapter(StreamLineWriter(StringIO())),
        RichConsoleAdapter(console=Console(file=StringIO())),
        PythonLoggingAdapter(),
    ]


@pytest.mark.parametrize("adapter", _adapters(), ids=lambda adapter: type(adapter).__name__)
def test_adapters_and_their_channels_satisfy_ports(adapter: LogAdapterPort) -> None:
    assert isinstance(adapter, LogAdapterPort)
    channel = adapter.new_channel("contract")
    assert isinstance(channel, ChannelPort)
    assert isinstance(channel.is_enabled(LogLevel.INFO), bool)
    channel.log(LogLevel.INFO, "hello {}", "contract")


def test_new_channel_returns_fresh_channels_for_stateful_adapters() -> None:
    sink = LogCapture()
    assert sink.new_channel("a") is not sink.new_channel("a")


def test_line_writer_port_accepts_plain_callables() -> None:
    lines: list[str] = []
    assert isinstance(lines.append, LineWriterPort)
    assert isinstance(StreamLineWriter(StringIO()), LineWriterPort)


def test_is_configured_externally_defaults_to_false() -> None:
    class _Bare:
        def new_channel(self, name: str) -> Any:
            return NULL_ADAPTER.new_channel(name)

    assert is_configured_externally(_Bare()) is False
    assert is_configured_externally(PythonLoggingAdapter()) is True


def test_system_clock_returns_aware_utc_timestamps() -> None:
    clock = SystemClock()
    assert isinstance(clock, ClockPort)
    now = clock.now()
    assert isinstance(now, datetime)
    assert now.utcoffset() is not None
    assert now.utcoffset().total_seconds() == 0  # type: ignore[union-attr]
