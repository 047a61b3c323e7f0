"""Concrete adapters implementing :class:`LogAdapterPort`."""

from __future__ import annotations

from .capture import LogCapture, MessageNotReceivedError
from .console.rich_console import RichConsoleAdapter
from .level_filter import LevelFilterAdapter
from .multi import MultiAdapter
from .null import NULL_ADAPTER, NullAdapter
from .python_logging import PythonLoggingAdapter
from .stream import StreamAdapter, StreamLineWriter

__all__ = [
    "LevelFilterAdapter",
    "LogCapture",
    "MessageNotReceivedError",
    "MultiAdapter",
    "NULL_ADAPTER",
    "NullAdapter",
    "PythonLoggingAdapter",
    "RichConsoleAdapter",
    "StreamAdapter",
    "StreamLineWriter",
]
