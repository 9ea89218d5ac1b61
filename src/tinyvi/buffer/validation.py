"""Bounds checks shared by buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tinyvi.errors import OutOfRange

if TYPE_CHECKING:
    from .document import TextBuffer
    from .state import Cursor


def ensure_line(buffer: "TextBuffer", index: int) -> int:
    if index < 0 or index >= buffer.line_count:
        raise OutOfRange(f"Line {index} out of range", index=index)
    return index


def ensure_column(buffer: "TextBuffer", index: int, col: int) -> int:
    line = buffer.get_line(index)
    if col < 0 or col > len(line):
        raise OutOfRange(
            f"Column {col} out of range for line {index}", cursor=(index, col)
        )
    return col


def clamp_cursor(buffer: "TextBuffer", line: int, col: int) -> "Cursor":
    max_line = max(0, buffer.line_count - 1)
    line = max(0, min(line, max_line))
    text = buffer.get_line(line)
    col = max(0, min(col, len(text)))
    return (line, col)
