from __future__ import annotations

import pytest

from lib_log_facade.adapters.capture import LogCapture
from lib_log_facade.adapters.level_filter import LevelFilterAdapter
from lib_log_facade.adapters.null import NULL_ADAPTER
from lib_log_facade.domain.levels import LogLevel
from lib_log_facade.domain.values import defer
from lib_log_facade.logger import LoggerFacade


class _CountingStr:
    def __init__(self, text: str) -> None:
        self.text = text
        self.calls = 0

    def __str__(self) -> str:
        self.calls += 1
        return self.text


def test_level_methods_emit_at_matching_levels(capture_sink: LogCapture) -> None:
    logger = LoggerFacade.with_adapter(capture_sink, "svc")

    logger.debug("d")
    logger.info("i {}", 1)
    logger.warn("w {} {}", 1, 2)
    logger.warning("alias")
    logger.error("e {} {} {}", 1, 2, 3)
    logger.log(LogLevel.INFO, "direct")

    assert capture_sink.get_message_strings() == [
        "DEBUG:d",
        "INFO:i 1",
        "WARN:w 1 2",
        "WARN:alias",
        "ERROR:e 1 2 3",
        "INFO:direct",
    ]


def test_sub_logger_appends_suffix_with_a_dot(capture_sink: LogCapture) -> None:
    child = LoggerFacade.with_adapter(capture_sink, "a").sub_logger("b")
    grandchild = child.sub_logger("c")
    grandchild.info("x")

    assert child.name == "a.b"
    assert grandchild.name == "a.b.c"
    assert child.adapter is capture_sink
    assert capture_sink.get_messages()[0].logger_name == "a.b.c"


def test_sub_logger_of_unnamed_logger_starts_with_a_dot(capture_sink: LogCapture) -> None:
    assert LoggerFacade.with_adapter(capture_sink, "").sub_logger("x").name == ".x"


@pytest.mark.parametrize("suffix", [None, ""])
def test_sub_logger_without_suffix_is_identity(capture_sink: LogCapture, suffix: str | None) -> None:
    logger = LoggerFacade.with_adapter(capture_sink, "a")
    assert logger.sub_logger(suffix) is logger


def test_none_logger_discards_everything() -> None:
    logger = LoggerFacade.none()

    assert logger.adapter is NULL_ADAPTER
    assert logger.name == ""
    assert not any(logger.is_enabled(level) for level in LogLevel)
    logger.error("ignored {}", 1)


def test_is_enabled_delegates_to_channel(capture_sink: LogCapture) -> None:
    logger = LoggerFacade.with_adapter(LevelFilterAdapter(capture_sink, LogLevel.WARN), "svc")

    assert logger.is_enabled(LogLevel.INFO) is False
    assert logger.is_enabled(LogLevel.WARN) is True


def test_disabled_messages_are_never_stringified(capture_sink: LogCapture) -> None:
    logger = LoggerFacade.with_adapter(LevelFilterAdapter(capture_sink, LogLevel.ERROR), "svc")
    message = _CountingStr("costly")
    param = _CountingStr("param")

    logger.debug(message)
    logger.info("value: {}", param)
    logger.warn("value: {} {}", param, defer(lambda: "never"))

    assert message.calls == 0
    assert param.calls == 0
    assert capture_sink.get_messages() == []


def test_enabled_message_objects_are_rendered_once(capture_sink: LogCapture) -> None:
    logger = LoggerFacade.with_adapter(capture_sink, "svc")
    message = _CountingStr("rendered")

    logger.info(message)

    assert message.calls == 1
    assert capture_sink.get_message_strings() == ["INFO:rendered"]


def test_deferred_parameters_are_computed_per_emission(capture_sink: LogCapture) -> None:
    calls: list[int] = []
    value = defer(lambda: calls.append(1) or "lazy")
    logger = LoggerFacade.with_adapter(capture_sink, "svc")

    logger.info("a {}", value)
    logger.info("b {}", value)

    assert len(calls) == 2
    assert capture_sink.get_message_strings() == ["INFO:a lazy", "INFO:b lazy"]


def test_template_braces_beyond_params_stay_literal(capture_sink: LogCapture) -> None:
    LoggerFacade.with_adapter(capture_sink, "svc").info("{} and {}", "one")
    assert capture_sink.get_message_strings() == ["INFO:one and {}"]


def test_repr_names_logger_and_adapter(capture_sink: LogCapture) -> None:
    assert repr(LoggerFacade.with_adapter(capture_sink, "svc")).startswith("LoggerFacade(name='svc'")
