"""Runtime composition helpers turning settings into a live adapter.

Purpose
-------
Translate :class:`RuntimeSettings` into the :class:`LoggingRuntime` singleton:
pick the destination adapter and wrap it in a level filter.

System Role
-----------
Outer shell only. The core adapters and :class:`LoggerFacade` never consult
the runtime; it exists for applications that want one process-wide default.
"""

from __future__ import annotations

from lib_log_facade import logs
from lib_log_facade.adapters.capture import LogCapture
from lib_log_facade.adapters.console.rich_console import RichConsoleAdapter
from lib_log_facade.adapters.stream import StreamAdapter
from lib_log_facade.application.ports.adapter import LogAdapterPort
from lib_log_facade.logger import LoggerFacade

from ._settings import Destination, RuntimeConfig, RuntimeSettings, build_runtime_settings
from ._state import LoggingRuntime


def build_runtime(settings: RuntimeSettings, adapter: LogAdapterPort | None = None) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings.

    When ``adapter`` is given it replaces the configured destination but is
    still wrapped in the configured level filter.
    """

    capture: LogCapture | None = None
    if adapter is None:
        adapter = _select_destination(settings)
        if isinstance(adapter, LogCapture):
            capture = adapter
    filtered = logs.level(adapter, settings.level)
    return LoggingRuntime(
        adapter=filtered,
        root=LoggerFacade.with_adapter(filtered, settings.name),
        settings=settings,
        capture=capture,
    )


def build_adapter(config: RuntimeConfig | None = None) -> LogAdapterPort:
    """Return the level-filtered destination described by ``config``.

    Applies the same ``LOG_*`` environment overrides as
    :func:`lib_log_facade.runtime.init` but leaves the runtime state untouched.
    """

    settings = build_runtime_settings(config or RuntimeConfig())
    return logs.level(_select_destination(settings), settings.level)


def _select_destination(settings: RuntimeSettings) -> LogAdapterPort:
    destination = settings.destination
    if destination is Destination.CONSOLE:
        base: StreamAdapter = logs.to_console().with_timestamp_format(settings.timestamp_format)
        return base.with_tag(settings.tag)
    if destination is Destination.RICH:
        return RichConsoleAdapter(
            force_color=settings.force_color,
            no_color=settings.no_color,
            timestamp_format=settings.timestamp_format,
        )
    if destination is Destination.PYTHON:
        return logs.to_python_logging()
    if destination is Destination.CAPTURE:
        return logs.capture()
    return logs.none()


__all__ = ["build_adapter", "build_runtime"]
