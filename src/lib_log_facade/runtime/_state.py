"""Process-wide holder for the active :class:`LoggingRuntime`."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from lib_log_facade.adapters.capture import LogCapture
from lib_log_facade.application.ports.adapter import LogAdapterPort
from lib_log_facade.logger import LoggerFacade

from ._settings import RuntimeSettings


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    adapter: LogAdapterPort
    root: LoggerFacade
    settings: RuntimeSettings
    capture: LogCapture | None


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


_ALREADY_ACTIVE = "lib_log_facade.runtime.init() cannot be called twice without shutdown(); call shutdown() first"


def install_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton; refuse to replace an active one."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is not None:
            raise RuntimeError(_ALREADY_ACTIVE)
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_facade.runtime.init() must be called before using the runtime logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_facade.runtime.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "install_runtime",
    "is_initialised",
]
