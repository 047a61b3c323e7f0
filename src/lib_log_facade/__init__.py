"""Public package surface of the logging facade.

Library code receives a :class:`LoggerFacade` and calls ``debug``/``info``/
``warn``/``error`` on it; applications decide where output goes by choosing an
adapter from :mod:`lib_log_facade.logs`.

Examples
--------
>>> from lib_log_facade import LoggerFacade, LogLevel, logs
>>> sink = logs.capture()
>>> LoggerFacade.with_adapter(sink, "auth").info("user {} did {}", "alice", "login")
>>> message = sink.require_message(LogLevel.INFO, 0.1)
>>> (message.logger_name, message.level, message.text)
('auth', <LogLevel.INFO: 20>, 'user alice did login')
"""

from __future__ import annotations

from . import logs
from .adapters import (
    LevelFilterAdapter,
    LogCapture,
    MessageNotReceivedError,
    MultiAdapter,
    NullAdapter,
    PythonLoggingAdapter,
    RichConsoleAdapter,
    StreamAdapter,
    StreamLineWriter,
)
from .application.ports import ChannelPort, ClockPort, LineWriterPort, LogAdapterPort
from .domain import (
    CapturedMessage,
    Deferred,
    LogLevel,
    defer,
    exception_summary,
    exception_trace,
    simple_format,
)
from .logger import LoggerFacade

__all__ = [
    "CapturedMessage",
    "ChannelPort",
    "ClockPort",
    "Deferred",
    "LevelFilterAdapter",
    "LineWriterPort",
    "LogAdapterPort",
    "LogCapture",
    "LogLevel",
    "LoggerFacade",
    "MessageNotReceivedError",
    "MultiAdapter",
    "NullAdapter",
    "PythonLoggingAdapter",
    "RichConsoleAdapter",
    "StreamAdapter",
    "StreamLineWriter",
    "defer",
    "exception_summary",
    "exception_trace",
    "logs",
    "simple_format",
]
