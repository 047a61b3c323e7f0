"""Placeholder substitution and timestamp rendering helpers.

Purpose
-------
Turn ``{}`` templates plus positional parameters into final message text and
render timestamps for line-oriented destinations.

Contents
--------
* :func:`simple_format` - positional ``{}`` substitution with ``\\{}`` escapes.
* :func:`render_message` - the channel-side entry point used by every adapter
  that materialises text.
* :func:`format_timestamp` / :func:`validate_timestamp_format` - strftime
  rendering with a ``%3f`` millisecond extension.

System Role
-----------
Pure functions with no shared state; adapters call them only after deciding a
message is going to be emitted, which keeps formatting lazy for disabled
levels.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Sequence

PLACEHOLDER = "{}"
ESCAPE = "\\"

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%3f %Z"
"""Default layout: ``yyyy-MM-dd HH:mm:ss.SSS zzz``."""

_MILLIS_TOKEN = "%3f"

# Directives documented for datetime.strftime on every platform.
_STRFTIME_DIRECTIVES = frozenset("aAwdbBmyYHIpMSfzZjUWcxXGuV")


def _stringify(value: Any) -> str:
    return "" if value is None else str(value)


def simple_format(template: str, *params: Any) -> str:
    """Substitute ``params`` into the ``{}`` placeholders of ``template``.

    Placeholders beyond the supplied parameters stay in the output verbatim;
    parameters beyond the placeholders are ignored. A placeholder preceded by a
    backslash is emitted as a literal ``{}`` and does not consume a parameter.

    Examples
    --------
    >>> simple_format("a={},b={}", "x", "y")
    'a=x,b=y'
    >>> simple_format("{} and {}", "A")
    'A and {}'
    >>> simple_format("{} only", "A", "B")
    'A only'
    >>> simple_format("\\\\{} is literal, {} is not", "Z")
    '{} is literal, Z is not'
    >>> simple_format("x={}y", None)
    'x=y'
    """

    template = _stringify(template)
    out: list[str] = []
    pos = 0
    remaining = iter(params)
    pending = len(params)
    while pending:
        next_pos = template.find(PLACEHOLDER, pos)
        if next_pos < 0:
            break
        if next_pos > 0 and template[next_pos - 1] == ESCAPE:
            out.append(template[pos : next_pos - 1])
            out.append(PLACEHOLDER)
            pos = next_pos + len(PLACEHOLDER)
            continue
        out.append(template[pos:next_pos])
        out.append(_stringify(next(remaining)))
        pending -= 1
        pos = next_pos + len(PLACEHOLDER)
    out.append(template[pos:])
    return "".join(out)


def render_message(message: Any, params: Sequence[Any] = ()) -> str:
    """Resolve the final text for a channel ``log`` call.

    Without parameters ``message`` is converted with :func:`str` (``None``
    becomes an empty string); with parameters it is treated as a template.
    """

    if not params:
        return _stringify(message)
    return simple_format(message, *params)


def format_timestamp(ts: datetime, pattern: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """Render ``ts`` with :meth:`datetime.strftime` plus ``%3f`` milliseconds.

    The pattern is walked directive by directive, so ``%%3f`` stays a literal
    ``%3f``. A trailing ``%`` or an unknown directive raises :class:`ValueError`.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> format_timestamp(datetime(1970, 1, 2, 3, 46, 40, tzinfo=timezone.utc))
    '1970-01-02 03:46:40.000 UTC'
    """

    out: list[str] = []
    index = 0
    end = len(pattern)
    while index < end:
        char = pattern[index]
        if char != "%":
            out.append(char)
            index += 1
            continue
        if pattern.startswith(_MILLIS_TOKEN, index):
            out.append(f"{ts.microsecond // 1000:03d}")
            index += len(_MILLIS_TOKEN)
            continue
        if index + 1 >= end:
            raise ValueError(f"dangling '%' at end of {pattern!r}")
        directive = pattern[index + 1]
        if directive == "%":
            out.append("%")
        elif directive in _STRFTIME_DIRECTIVES:
            out.append(ts.strftime("%" + directive))
        else:
            raise ValueError(f"unknown directive '%{directive}' in {pattern!r}")
        index += 2
    return "".join(out)


def validate_timestamp_format(pattern: str) -> str:
    """Return ``pattern`` unchanged or raise :class:`ValueError` if unusable.

    Blank patterns, a trailing ``%`` and directives outside the portable
    strftime set (plus ``%3f``) are rejected.

    >>> validate_timestamp_format("%H:%M:%S.%3f")
    '%H:%M:%S.%3f'
    >>> validate_timestamp_format("%Y-%")
    Traceback (most recent call last):
    ...
    ValueError: Invalid timestamp format: '%Y-%'
    """

    if not isinstance(pattern, str) or not pattern.strip():
        raise ValueError(f"Invalid timestamp format: {pattern!r}")
    try:
        format_timestamp(datetime(2000, 1, 1, tzinfo=timezone.utc), pattern)
    except ValueError as exc:
        raise ValueError(f"Invalid timestamp format: {pattern!r}") from exc
    return pattern


__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "format_timestamp",
    "render_message",
    "simple_format",
    "validate_timestamp_format",
]
