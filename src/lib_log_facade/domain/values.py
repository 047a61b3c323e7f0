"""Helpers for log parameters whose text is expensive to compute."""

from __future__ import annotations

import traceback
from typing import Callable


class Deferred:
    """Value whose string form is computed by ``provider`` on demand.

    Each :func:`str` call invokes ``provider`` again; nothing is cached. Pass
    instances as log parameters so the work only happens when a channel
    actually renders the message.

    Examples
    --------
    >>> calls = []
    >>> value = Deferred(lambda: calls.append(1) or "computed")
    >>> calls
    []
    >>> str(value), str(value), len(calls)
    ('computed', 'computed', 2)
    """

    __slots__ = ("_provider",)

    def __init__(self, provider: Callable[[], str]) -> None:
        self._provider = provider

    def __str__(self) -> str:
        return self._provider()

    def __repr__(self) -> str:
        return f"Deferred({self._provider!r})"


def defer(provider: Callable[[], str]) -> Deferred:
    """Wrap ``provider`` so it runs only when the value is stringified."""

    return Deferred(provider)


def exception_summary(exc: BaseException | None) -> Deferred | None:
    """Return a deferred ``"TypeName: message"`` for ``exc`` (just the type name if empty).

    The text is built only when a channel renders the value.

    >>> str(exception_summary(ValueError("bad input")))
    'ValueError: bad input'
    >>> str(exception_summary(KeyError()))
    'KeyError'
    """

    if exc is None:
        return None
    return Deferred(lambda: _summarise(exc))


def _summarise(exc: BaseException) -> str:
    text = str(exc)
    name = type(exc).__name__
    return f"{name}: {text}" if text else name


def exception_trace(exc: BaseException | None) -> Deferred | None:
    """Return a deferred value rendering the full traceback of ``exc``."""

    if exc is None:
        return None
    return Deferred(lambda: "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))


__all__ = ["Deferred", "defer", "exception_summary", "exception_trace"]
