"""In-memory adapter retaining every message for inspection.

Purpose
-------
Record log output so tests (and diagnostics buffers) can assert on it, either by
taking snapshots or by blocking until a specific message arrives.

Contents
--------
* :class:`LogCapture` - adapter plus query API.
* :class:`MessageNotReceivedError` - raised by :meth:`LogCapture.require_message`.

System Role
-----------
The only component holding shared mutable state. All access to the buffer goes
through one lock; waiters sleep on a condition bound to that lock and are woken
whenever a message is appended.

Alignment Notes
---------------
:meth:`LogCapture.await_message` removes what it returns, so a message is handed
to at most one waiter. Ordering is append order, which is the order in which
producers acquired the lock.
"""

from __future__ import annotations

import re
import threading
import time
from datetime import timedelta
from typing import Any, Pattern

from lib_log_facade.application.ports.adapter import ChannelPort, LogAdapterPort
from lib_log_facade.application.ports.time import ClockPort, SystemClock
from lib_log_facade.domain.formatting import render_message
from lib_log_facade.domain.levels import LogLevel
from lib_log_facade.domain.messages import CapturedMessage

DEFAULT_TIMEOUT = 1.0
"""Seconds :meth:`LogCapture.await_message` waits when no timeout is given."""


class MessageNotReceivedError(AssertionError):
    """Raised when :meth:`LogCapture.require_message` times out."""


def _coerce_timeout(timeout: float | timedelta) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class _CaptureChannel(ChannelPort):
    __slots__ = ("_name", "_sink")

    def __init__(self, name: str, sink: "LogCapture") -> None:
        self._name = name
        self._sink = sink

    def is_enabled(self, level: LogLevel) -> bool:
        return True

    def log(self, level: LogLevel, message: Any, *params: Any) -> None:
        self._sink._append(self._name, level, render_message(message, params))


class LogCapture(LogAdapterPort):
    """Adapter accumulating every message it receives, regardless of level.

    Parameters
    ----------
    clock:
        Source of message timestamps; defaults to :class:`SystemClock`.

    Examples
    --------
    >>> from lib_log_facade.logger import LoggerFacade
    >>> sink = LogCapture()
    >>> logger = LoggerFacade.with_adapter(sink, "auth")
    >>> logger.info("user {} did {}", "alice", "login")
    >>> sink.get_message_strings()
    ['INFO:user alice did login']
    >>> sink.await_message(LogLevel.INFO, 0.1).text
    'user alice did login'
    >>> sink.await_message(timeout=0.01) is None
    True
    """

    is_configured_externally = False

    def __init__(self, *, clock: ClockPort | None = None) -> None:
        self._clock: ClockPort = clock if clock is not None else SystemClock()
        self._messages: list[CapturedMessage] = []
        self._condition = threading.Condition(threading.Lock())
        self._interrupts = 0

    def new_channel(self, name: str) -> ChannelPort:
        return _CaptureChannel(name, self)

    def _append(self, name: str, level: LogLevel, text: str) -> None:
        with self._condition:
            self._messages.append(CapturedMessage(name, level, text, self._clock.now()))
            self._condition.notify_all()

    def get_messages(self) -> list[CapturedMessage]:
        """Return a copy of all buffered messages in append order."""

        with self._condition:
            return list(self._messages)

    def get_message_strings(self) -> list[str]:
        """Return ``LEVEL:text`` for every buffered message in append order."""

        with self._condition:
            return [message.level_string() for message in self._messages]

    def has_message_matching(self, level: LogLevel | None, pattern: str | Pattern[str]) -> bool:
        """Return ``True`` when a buffered message at ``level`` matches ``pattern``.

        ``pattern`` is searched (not fully matched) in the message text;
        ``level=None`` accepts any level. Nothing is removed.
        """

        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        with self._condition:
            return any(
                (level is None or message.level is level) and regex.search(message.text) is not None
                for message in self._messages
            )

    def clear(self) -> None:
        """Discard all buffered messages."""

        with self._condition:
            self._messages.clear()

    def await_message(
        self,
        level: LogLevel | float | timedelta | None = None,
        timeout: float | timedelta = DEFAULT_TIMEOUT,
    ) -> CapturedMessage | None:
        """Remove and return the first message matching ``level``.

        Blocks until such a message arrives, ``timeout`` elapses, or
        :meth:`interrupt_waiters` is called; the latter two return ``None``.
        ``level=None`` matches every level. A timeout may also be passed as the
        only positional argument.

        Each wake re-scans the buffer from the front, so messages of one level
        come out in their append order even when other levels are interleaved.
        """

        if level is not None and not isinstance(level, LogLevel):
            level, timeout = None, level
        deadline = time.monotonic() + _coerce_timeout(timeout)
        with self._condition:
            interrupts = self._interrupts
            while True:
                for index, message in enumerate(self._messages):
                    if level is None or message.level is level:
                        del self._messages[index]
                        return message
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None
                self._condition.wait(remaining)
                if self._interrupts != interrupts:
                    return None

    def require_message(
        self,
        level: LogLevel | float | timedelta | None = None,
        timeout: float | timedelta = DEFAULT_TIMEOUT,
    ) -> CapturedMessage:
        """Like :meth:`await_message` but raise :class:`MessageNotReceivedError` instead of returning ``None``."""

        message = self.await_message(level, timeout)
        if message is None:
            raise MessageNotReceivedError("expected a log message but did not get one")
        return message

    def interrupt_waiters(self) -> None:
        """Wake every thread blocked in :meth:`await_message` and make it return ``None``."""

        with self._condition:
            self._interrupts += 1
            self._condition.notify_all()

    def __repr__(self) -> str:
        with self._condition:
            return f"LogCapture(messages={len(self._messages)})"


__all__ = ["DEFAULT_TIMEOUT", "LogCapture", "MessageNotReceivedError"]
