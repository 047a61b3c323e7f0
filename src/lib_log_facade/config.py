"""Optional ``.env`` loading for environment-driven configuration.

Purpose
-------
Allow ``LOG_*`` settings to live in a project-local ``.env`` file. Loading is
opt-in (CLI flag or ``LOG_USE_DOTENV``) and never overrides variables already
present in the process environment.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle variable consulted by the CLI.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.
* :func:`dotenv_requested` - interpret the toggle variable.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

LOGGER = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_lock = threading.Lock()
_dotenv_loaded = False
_dotenv_path: Path | None = None


def dotenv_requested(default: bool = False) -> bool:
    """Return whether :data:`DOTENV_ENV_VAR` asks for ``.env`` loading."""

    value = os.getenv(DOTENV_ENV_VAR)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file walking up from ``search_from`` (or the cwd).

    Existing environment variables keep precedence. Subsequent calls return
    the path recorded by the first successful call without reloading.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _dotenv_loaded, _dotenv_path
    with _dotenv_lock:
        if _dotenv_loaded:
            return _dotenv_path
        if search_from is not None:
            candidate = _search_upwards(search_from)
        else:
            found = find_dotenv(usecwd=True)
            candidate = Path(found).resolve() if found else None
        if candidate is None:
            LOGGER.debug("no .env file found")
            return None
        load_dotenv(candidate, override=False)
        LOGGER.debug("loaded environment from %s", candidate)
        _dotenv_loaded = True
        _dotenv_path = candidate
        return candidate


def _search_upwards(start: Path) -> Path | None:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded, _dotenv_path
    with _dotenv_lock:
        _dotenv_loaded = False
        _dotenv_path = None


__all__ = ["DOTENV_ENV_VAR", "dotenv_requested", "enable_dotenv"]
