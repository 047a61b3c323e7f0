from __future__ import annotations

import threading
from io import StringIO

import pytest

from lib_log_facade.adapters.stream import StreamAdapter, StreamLineWriter
from lib_log_facade.domain.levels import LogLevel


@pytest.mark.parametrize("level", [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR])
def test_lines_use_name_level_and_text(level: LogLevel) -> None:
    lines: list[str] = []
    StreamAdapter(lines.append, timestamp_format=None).new_channel("svc").log(level, "hello {}", "world")
    assert lines == [f"[svc] {level.name}: hello world"]


def test_all_levels_are_enabled() -> None:
    channel = StreamAdapter(lambda line: None).new_channel("x")
    assert channel.is_enabled(LogLevel.DEBUG)


def test_default_timestamp_prefix_uses_clock(fixed_clock) -> None:  # noqa: ANN001
    lines: list[str] = []
    StreamAdapter(lines.append, clock=fixed_clock).new_channel("svc").log(LogLevel.INFO, "ready")
    assert lines == ["1970-01-02 03:46:40.000 UTC [svc] INFO: ready"]


def test_custom_timestamp_format(fixed_clock) -> None:  # noqa: ANN001
    lines: list[str] = []
    adapter = StreamAdapter(lines.append, clock=fixed_clock).with_timestamp_format("%H:%M:%S")
    adapter.new_channel("svc").log(LogLevel.WARN, "careful")
    assert lines == ["03:46:40 [svc] WARN: careful"]


def test_tag_is_rendered_in_braces(fixed_clock) -> None:  # noqa: ANN001
    lines: list[str] = []
    adapter = StreamAdapter(lines.append, clock=fixed_clock).with_tag("worker")
    adapter.new_channel("svc").log(LogLevel.ERROR, "boom")
    assert lines == ["1970-01-02 03:46:40.000 UTC {worker} [svc] ERROR: boom"]


def test_empty_tag_is_omitted() -> None:
    lines: list[str] = []
    StreamAdapter(lines.append, timestamp_format=None, tag="").new_channel("svc").log(LogLevel.INFO, "x")
    assert lines == ["[svc] INFO: x"]


def test_with_methods_return_new_adapters() -> None:
    original = StreamAdapter(lambda line: None)
    tagged = original.with_tag("t")

    assert tagged is not original
    assert original.tag is None
    assert tagged.tag == "t"
    assert tagged.timestamp_format == original.timestamp_format
    assert original.with_timestamp_format(None).timestamp_format is None


def test_invalid_timestamp_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid timestamp format"):
        StreamAdapter(lambda line: None, timestamp_format="")


def test_none_message_renders_empty_text() -> None:
    lines: list[str] = []
    StreamAdapter(lines.append, timestamp_format=None).new_channel("svc").log(LogLevel.INFO, None)
    assert lines == ["[svc] INFO: "]


def test_stream_line_writer_appends_newlines() -> None:
    buffer = StringIO()
    writer = StreamLineWriter(buffer)
    writer("a")
    writer("b")
    assert buffer.getvalue() == "a\nb\n"
    assert writer.stream is buffer


def test_stream_line_writer_keeps_lines_intact_across_threads() -> None:
    buffer = StringIO()
    channel = StreamAdapter(StreamLineWriter(buffer), timestamp_format=None).new_channel("t")

    def produce(worker: int) -> None:
        for index in range(100):
            channel.log(LogLevel.INFO, "{}-{}", worker, index)

    threads = [threading.Thread(target=produce, args=(worker,)) for worker in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 400
    assert all(line.startswith("[t] INFO: ") for line in lines)
