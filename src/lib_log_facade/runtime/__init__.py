"""Process-wide default logging setup for applications.

Purpose
-------
Expose a small entry point (``init``, ``get``, ``shutdown``) for applications
that want one configured destination shared by all their components. Library
code should keep receiving a :class:`LoggerFacade` from its caller instead.

Contents
--------
* ``build_adapter`` - compose a configured destination without global state.
* ``init`` - composition root; resolves :class:`RuntimeConfig` plus ``LOG_*``
  environment overrides into the active runtime.
* ``get`` - facade for a name on the active runtime's adapter.
* ``shutdown`` / ``is_initialised`` / ``inspect_runtime`` - lifecycle helpers.

System Role
-----------
The only global state in the package. It is initialised once by the host and
never consulted by the core adapters or the facade.
"""

from __future__ import annotations

from dataclasses import dataclass

from lib_log_facade.adapters.capture import LogCapture
from lib_log_facade.application.ports.adapter import LogAdapterPort
from lib_log_facade.domain.levels import LogLevel
from lib_log_facade.logger import LoggerFacade

from ._composition import build_adapter, build_runtime
from ._settings import Destination, RuntimeConfig, build_runtime_settings, coerce_level
from ._state import _ALREADY_ACTIVE, LoggingRuntime, clear_runtime, current_runtime, install_runtime, is_initialised


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    name: str
    destination: Destination
    level: LogLevel
    tag: str | None
    timestamp_format: str | None
    capture_present: bool


def init(config: RuntimeConfig | None = None, *, adapter: LogAdapterPort | None = None) -> None:
    """Compose the default logging runtime.

    Parameters
    ----------
    config:
        Declarative settings; ``None`` uses :class:`RuntimeConfig` defaults.
        ``LOG_DESTINATION``, ``LOG_LEVEL``, ``LOG_TAG``,
        ``LOG_TIMESTAMP_FORMAT``, ``LOG_FORCE_COLOR``, and ``LOG_NO_COLOR``
        override the matching fields.
    adapter:
        Explicit destination replacing ``config.destination``; still wrapped in
        the configured level filter.

    Raises
    ------
    RuntimeError
        If a runtime is already active.
    ValueError
        If a configuration value or environment override is invalid.
    """

    if is_initialised():
        raise RuntimeError(_ALREADY_ACTIVE)
    settings = build_runtime_settings(config or RuntimeConfig())
    install_runtime(build_runtime(settings, adapter))


def get(name: str | None = None) -> LoggerFacade:
    """Return a facade for ``name`` on the active runtime.

    ``None`` or an empty name returns the root facade; other names are created
    as sub-loggers of the configured root name (or used verbatim when the root
    name is empty).

    Raises
    ------
    RuntimeError
        When :func:`init` has not been called.
    """

    runtime = current_runtime()
    if not name:
        return runtime.root
    if not runtime.root.name:
        return LoggerFacade.with_adapter(runtime.adapter, name)
    return runtime.root.sub_logger(name)


def shutdown() -> None:
    """Clear the active runtime.

    Raises
    ------
    RuntimeError
        If :func:`init` has not been called yet.
    """

    current_runtime()
    clear_runtime()


def captured() -> LogCapture:
    """Return the capture sink of a runtime configured with ``destination="capture"``."""

    runtime = current_runtime()
    if runtime.capture is None:
        raise RuntimeError("the active runtime does not use the capture destination")
    return runtime.capture


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    settings = runtime.settings
    return RuntimeSnapshot(
        name=settings.name,
        destination=settings.destination,
        level=settings.level,
        tag=settings.tag,
        timestamp_format=settings.timestamp_format,
        capture_present=runtime.capture is not None,
    )


__all__ = [
    "Destination",
    "LoggingRuntime",
    "RuntimeConfig",
    "RuntimeSnapshot",
    "build_adapter",
    "captured",
    "coerce_level",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
]
