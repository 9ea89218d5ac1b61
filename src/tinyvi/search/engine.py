"""Literal substring search and global substitution over a TextBuffer."""

from __future__ import annotations

from typing import List, Optional, Tuple

from tinyvi.buffer import Cursor, TextBuffer
from tinyvi.errors import InvalidArgument
from tinyvi.runtime import telemetry


class SearchEngine:
    """Searches never wrap around; a miss is reported as ``None``."""

    def __init__(self, buffer: TextBuffer) -> None:
        self.buffer = buffer
        self.last_pattern: Optional[str] = None

    def search(self, query: str, from_line: int, from_column: int) -> Optional[Cursor]:
        """First match at or after ``(from_line, from_column)``."""

        _require_pattern(query, "search")
        self.last_pattern = query
        with telemetry.span(
            "search::forward", metadata={"from": (from_line, from_column)}
        ) as handle:
            lines = self.buffer.snapshot()
            for index in range(max(from_line, 0), len(lines)):
                start = from_column if index == from_line else 0
                column = lines[index].find(query, max(start, 0))
                if column != -1:
                    handle.add_metadata("hit", (index, column))
                    return (index, column)
            handle.add_metadata("hit", None)
        return None

    def search_backward(
        self, query: str, from_line: int, from_column: int
    ) -> Optional[Cursor]:
        """Highest match strictly before ``(from_line, from_column)``."""

        _require_pattern(query, "search")
        self.last_pattern = query
        with telemetry.span(
            "search::backward", metadata={"from": (from_line, from_column)}
        ) as handle:
            lines = self.buffer.snapshot()
            for index in range(min(from_line, len(lines) - 1), -1, -1):
                line = lines[index]
                if index == from_line:
                    if from_column <= 0:
                        continue
                    # match must start before from_column
                    column = line.rfind(query, 0, from_column - 1 + len(query))
                else:
                    column = line.rfind(query)
                if column != -1:
                    handle.add_metadata("hit", (index, column))
                    return (index, column)
            handle.add_metadata("hit", None)
        return None

    def repeat(self, cursor: Cursor, *, reverse: bool = False) -> Optional[Cursor]:
        """Repeat the last pattern from ``cursor``: ``n`` forward, ``N`` back.

        Raises ``InvalidArgument`` when nothing has been searched yet.
        """

        if self.last_pattern is None:
            raise InvalidArgument("No previous search pattern")
        line, column = cursor
        if reverse:
            return self.search_backward(self.last_pattern, line, column)
        return self.search(self.last_pattern, line, column + 1)

    def substituted_lines(self, find: str, replace: str) -> Tuple[List[str], int]:
        """Return the buffer with every ``find`` replaced, and the hit count.

        The buffer itself is left untouched so callers can snapshot first.
        """

        _require_pattern(find, "substitute")
        result: List[str] = []
        total = 0
        for line in self.buffer.snapshot():
            updated, count = replace_all(line, find, replace)
            result.append(updated)
            total += count
        return result, total

    def substitute_all(self, find: str, replace: str) -> int:
        lines, count = self.substituted_lines(find, replace)
        if count:
            self.buffer.replace_lines(0, self.buffer.line_count, lines)
        return count


def replace_all(line: str, find: str, replace: str) -> Tuple[str, int]:
    """Left-to-right, non-overlapping replacement that never rescans output."""

    _require_pattern(find, "substitute")
    pieces: List[str] = []
    count = 0
    position = 0
    while True:
        hit = line.find(find, position)
        if hit == -1:
            break
        pieces.append(line[position:hit])
        pieces.append(replace)
        position = hit + len(find)
        count += 1
    pieces.append(line[position:])
    return "".join(pieces), count


def _require_pattern(pattern: str, operation: str) -> None:
    if not pattern:
        raise InvalidArgument(f"Empty {operation} pattern")


__all__ = ["SearchEngine", "replace_all"]
