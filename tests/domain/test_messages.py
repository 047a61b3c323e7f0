from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from lib_log_facade.domain.levels import LogLevel
from lib_log_facade.domain.messages import CapturedMessage

TS = datetime.fromtimestamp(100000, tz=timezone.utc)


def test_basic_properties() -> None:
    message = CapturedMessage("name", LogLevel.INFO, "text", TS)

    assert message.logger_name == "name"
    assert message.level is LogLevel.INFO
    assert message.text == "text"
    assert message.timestamp == TS


def test_timestamp_is_optional() -> None:
    assert CapturedMessage("name", LogLevel.INFO, "text").timestamp is None


def test_equality_and_hash_are_structural() -> None:
    first = CapturedMessage("name", LogLevel.WARN, "text", TS)
    second = CapturedMessage("name", LogLevel.WARN, "text", TS)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


@pytest.mark.parametrize(
    "other",
    [
        CapturedMessage("other", LogLevel.WARN, "text", TS),
        CapturedMessage("name", LogLevel.ERROR, "text", TS),
        CapturedMessage("name", LogLevel.WARN, "different", TS),
        CapturedMessage("name", LogLevel.WARN, "text", TS + timedelta(seconds=1)),
        CapturedMessage("name", LogLevel.WARN, "text"),
    ],
)
def test_any_field_difference_breaks_equality(other: CapturedMessage) -> None:
    assert CapturedMessage("name", LogLevel.WARN, "text", TS) != other


def test_messages_are_immutable() -> None:
    message = CapturedMessage("name", LogLevel.INFO, "text")
    with pytest.raises(AttributeError):
        message.text = "changed"  # type: ignore[misc]


def test_none_level_is_rejected() -> None:
    with pytest.raises(ValueError, match="NONE"):
        CapturedMessage("name", LogLevel.NONE, "text")


def test_naive_timestamp_is_rejected() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        CapturedMessage("name", LogLevel.INFO, "text", datetime(2025, 1, 1, 12, 0))


def test_timestamp_is_normalised_to_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    message = CapturedMessage("name", LogLevel.INFO, "text", datetime(2025, 1, 1, 14, 0, tzinfo=plus_two))

    assert message.timestamp == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert message.timestamp.tzinfo is timezone.utc


def test_simple_string_representation() -> None:
    assert str(CapturedMessage("name", LogLevel.INFO, "text", TS)) == "[name] INFO: text"


def test_string_representation_with_timestamp() -> None:
    message = CapturedMessage("name", LogLevel.INFO, "text", TS)
    assert message.to_string_with_timestamp() == "1970-01-02 03:46:40.000 UTC [name] INFO: text"


def test_string_representation_with_timestamp_falls_back_without_timestamp() -> None:
    message = CapturedMessage("name", LogLevel.ERROR, "text")
    assert message.to_string_with_timestamp() == "[name] ERROR: text"


def test_level_string() -> None:
    assert CapturedMessage("name", LogLevel.WARN, "careful").level_string() == "WARN:careful"


def test_to_json_round_trips_through_dict() -> None:
    message = CapturedMessage("name", LogLevel.DEBUG, "text", TS)

    decoded = json.loads(message.to_json())

    assert decoded == message.to_dict()
    assert decoded["level"] == "DEBUG"
    assert decoded["timestamp"] == TS.isoformat()
