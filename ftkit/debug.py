"""Debug dumps of string lists and lists of string lists."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence


def _row(items: Iterable[object]) -> str:
    return "[ " + ", ".join(f'"{item}"' for item in items) + " ]\n"


def format_str_1d(items: Optional[Sequence[object]]) -> str:
    """Render a list as ``[ "a", "b" ]`` followed by a newline."""
    if items is None:
        return "(arr) is NULL"
    return _row(items)


def format_str_2d(rows: Sequence[Sequence[object]]) -> str:
    """Render a list of lists, one tab-indented row per line, inside brackets."""
    if rows is None:
        raise TypeError("rows must not be None")
    return "[\n" + "".join("\t" + _row(row) for row in rows) + "]\n"


def _write(text: str) -> int:
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def debug_str_1d(items: Optional[Sequence[object]]) -> int:
    """Write the rendering of ``items`` to standard output; return its length."""
    return _write(format_str_1d(items))


def debug_str_2d(rows: Sequence[Sequence[object]]) -> int:
    """Write the rendering of ``rows`` to standard output; return its length."""
    return _write(format_str_2d(rows))