"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_facade"
title = "Dependency-light logging facade with pluggable destinations"
version = "1.0.0"
shell_command = "lib_log_facade"


def info_lines() -> list[str]:
    """Return the metadata banner as a list of lines without newlines."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    return lines


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (stdout by default)."""

    text = summary_info()
    if writer is None:
        sys.stdout.write(text)
    else:
        writer(text)


def summary_info() -> str:
    """Return the metadata banner as one string ending with a newline."""

    return "\n".join(info_lines()) + "\n"
