"""Runtime configuration model and environment override resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum

from lib_log_facade.domain.formatting import DEFAULT_TIMESTAMP_FORMAT, validate_timestamp_format
from lib_log_facade.domain.levels import LogLevel


class Destination(Enum):
    """Output destinations selectable through configuration."""

    CONSOLE = "console"
    RICH = "rich"
    PYTHON = "python"
    CAPTURE = "capture"
    NONE = "none"

    @classmethod
    def from_name(cls, name: str) -> "Destination":
        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported destination: {name!r}")


@dataclass(frozen=True)
class RuntimeConfig:
    """Declarative description of the process-wide default logging setup.

    Attributes
    ----------
    name:
        Root logger name handed out by :func:`lib_log_facade.runtime.get`
        when called without a name.
    destination:
        Where output goes; strings are parsed with :meth:`Destination.from_name`.
    level:
        Minimum enabled level (name or :class:`LogLevel`).
    tag:
        Optional tag rendered by the plain console destination.
    timestamp_format:
        strftime pattern for line destinations; ``None`` disables timestamps.
    force_color / no_color:
        Colour switches for the Rich destination.
    """

    name: str = ""
    destination: Destination | str = Destination.CONSOLE
    level: LogLevel | str = LogLevel.INFO
    tag: str | None = None
    timestamp_format: str | None = DEFAULT_TIMESTAMP_FORMAT
    force_color: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class RuntimeSettings:
    """Fully resolved configuration after environment overrides."""

    name: str
    destination: Destination
    level: LogLevel
    tag: str | None
    timestamp_format: str | None
    force_color: bool
    no_color: bool


def coerce_level(level: str | LogLevel, *, source: str = "level") -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    >>> coerce_level("warning") is LogLevel.WARN
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    try:
        return LogLevel.from_name(level)
    except ValueError as exc:
        raise ValueError(f"{source}: {exc}") from exc


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_str(name: str, default: str | None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip() or None


def build_runtime_settings(config: RuntimeConfig) -> RuntimeSettings:
    """Merge ``config`` with ``LOG_*`` environment overrides and validate it.

    Environment variables win over the supplied configuration so operators can
    adjust verbosity without code changes.
    """

    env_destination = os.getenv("LOG_DESTINATION")
    destination_raw = env_destination if env_destination else config.destination
    try:
        destination = (
            destination_raw if isinstance(destination_raw, Destination) else Destination.from_name(destination_raw)
        )
    except ValueError as exc:
        source = "LOG_DESTINATION" if env_destination else "destination"
        raise ValueError(f"{source}: {exc}") from exc

    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        level = coerce_level(env_level, source="LOG_LEVEL")
    else:
        level = coerce_level(config.level)

    timestamp_format = config.timestamp_format
    if "LOG_TIMESTAMP_FORMAT" in os.environ:
        timestamp_format = _env_str("LOG_TIMESTAMP_FORMAT", None)
        source = "LOG_TIMESTAMP_FORMAT"
    else:
        source = "timestamp_format"
    if timestamp_format is not None:
        try:
            validate_timestamp_format(timestamp_format)
        except ValueError as exc:
            raise ValueError(f"{source}: {exc}") from exc

    return RuntimeSettings(
        name=config.name,
        destination=destination,
        level=level,
        tag=_env_str("LOG_TAG", config.tag),
        timestamp_format=timestamp_format,
        force_color=_env_bool("LOG_FORCE_COLOR", config.force_color),
        no_color=_env_bool("LOG_NO_COLOR", config.no_color),
    )


def with_overrides(config: RuntimeConfig, **changes: object) -> RuntimeConfig:
    """Return ``config`` with the non-``None`` ``changes`` applied."""

    return replace(config, **{key: value for key, value in changes.items() if value is not None})


__all__ = [
    "Destination",
    "RuntimeConfig",
    "RuntimeSettings",
    "build_runtime_settings",
    "coerce_level",
    "with_overrides",
]
