from __future__ import annotations

from datetime import datetime, timedelta, timezone
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_facade import runtime
from lib_log_facade.adapters.capture import LogCapture


class FixedClock:
    """Clock returning a settable instant; advances by ``step`` per call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(0)) -> None:
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime.fromtimestamp(100000, tz=timezone.utc))


@pytest.fixture
def capture_sink() -> LogCapture:
    return LogCapture()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture(autouse=True)
def reset_runtime() -> Iterator[None]:
    try:
        yield
    finally:
        if runtime.is_initialised():
            runtime.shutdown()


@pytest.fixture(autouse=True)
def clear_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_DESTINATION",
        "LOG_LEVEL",
        "LOG_TAG",
        "LOG_TIMESTAMP_FORMAT",
        "LOG_FORCE_COLOR",
        "LOG_NO_COLOR",
        "LOG_USE_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)
