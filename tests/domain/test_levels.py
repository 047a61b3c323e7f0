from __future__ import annotations

import itertools
import logging

import pytest

from lib_log_facade.domain.levels import LogLevel

ORDERED = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.NONE]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warn", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("error", LogLevel.ERROR),
        (" none ", LogLevel.NONE),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        LogLevel.from_name("verbose")


@pytest.mark.parametrize("lower, higher", list(itertools.combinations(ORDERED, 2)))
def test_levels_are_ordered_by_severity(lower: LogLevel, higher: LogLevel) -> None:
    assert lower < higher
    assert lower <= higher
    assert higher > lower
    assert higher >= lower
    assert not higher < lower


def test_sorting_follows_severity() -> None:
    assert sorted(reversed(ORDERED)) == ORDERED


def test_comparison_with_foreign_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        LogLevel.INFO < 3  # noqa: B015


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
    ],
)
def test_to_python_level_returns_logging_constant(level: LogLevel, expected: int) -> None:
    assert level.to_python_level() == expected


def test_none_maps_above_every_python_level() -> None:
    assert LogLevel.NONE.to_python_level() > logging.CRITICAL


@pytest.mark.parametrize(
    "number, expected",
    [
        (logging.NOTSET, LogLevel.DEBUG),
        (logging.DEBUG, LogLevel.DEBUG),
        (15, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARN),
        (logging.ERROR, LogLevel.ERROR),
        (logging.CRITICAL, LogLevel.ERROR),
        (logging.CRITICAL + 1, LogLevel.NONE),
    ],
)
def test_from_python_level_picks_closest_lower_level(number: int, expected: LogLevel) -> None:
    assert LogLevel.from_python_level(number) is expected


@pytest.mark.parametrize(
    "level, severity",
    [
        (LogLevel.DEBUG, "debug"),
        (LogLevel.INFO, "info"),
        (LogLevel.WARN, "warn"),
        (LogLevel.ERROR, "error"),
    ],
)
def test_severity_matches_lowercase_name(level: LogLevel, severity: str) -> None:
    assert level.severity == severity


@pytest.mark.parametrize("level", [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR])
def test_message_levels_have_icons(level: LogLevel) -> None:
    assert level.icon
