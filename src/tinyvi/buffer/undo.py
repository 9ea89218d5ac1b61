"""Line-snapshot undo/redo history."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Tuple

from tinyvi.runtime import telemetry

from .document import TextBuffer


@dataclass(frozen=True, slots=True)
class UndoEntry:
    """Prior content of a line span, taken before an edit.

    Restoring means replacing ``buffer[line_index:line_index + span]`` with
    ``lines``. A plain line edit is ``(i, (text,), 1)``; a removed line is
    ``(i, (text,), 0)``; ``k`` inserted lines are ``(i, (), k)``.
    """

    line_index: int
    lines: Tuple[str, ...]
    span: int = 1

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class UndoRedoManager:
    """Two stacks of ``UndoEntry`` over one ``TextBuffer``.

    New edits clear the redo stack unless ``clear_redo_on_edit`` is off.
    With ``limit`` set, each stack keeps at most that many entries and
    drops the oldest first.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        *,
        limit: Optional[int] = None,
        clear_redo_on_edit: bool = True,
    ) -> None:
        self.buffer = buffer
        self.limit = limit
        self.clear_redo_on_edit = clear_redo_on_edit
        self._undo: Deque[UndoEntry] = deque(maxlen=limit)
        self._redo: Deque[UndoEntry] = deque(maxlen=limit)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def record_before_edit(self, line_index: int) -> UndoEntry:
        """Snapshot one line that is about to change in place."""

        text = self.buffer.get_line(line_index)
        return self._record(UndoEntry(line_index, (text,), 1))

    def record_before_delete(self, line_index: int) -> UndoEntry:
        """Snapshot a line that is about to be removed."""

        if self.buffer.line_count == 1:
            # the sole line is blanked, not removed
            return self.record_before_edit(line_index)
        text = self.buffer.get_line(line_index)
        return self._record(UndoEntry(line_index, (text,), 0))

    def record_before_insert(self, line_index: int, count: int) -> UndoEntry:
        """Note that ``count`` lines are about to appear at ``line_index``."""

        return self._record(UndoEntry(line_index, (), count))

    def record_before_range(self, start: int, end: int) -> UndoEntry:
        """Snapshot ``[start:end]`` ahead of an edit that keeps its length."""

        lines = tuple(self.buffer.snapshot()[start:end])
        return self._record(UndoEntry(start, lines, end - start))

    def undo(self) -> Optional[UndoEntry]:
        """Restore the most recent snapshot; ``None`` when there is nothing."""

        if not self._undo:
            return None
        entry = self._undo.pop()
        self._redo.append(self._restore(entry))
        telemetry.record_event(
            "undo.apply", level="debug", data={"line": entry.line_index}
        )
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self._redo:
            return None
        entry = self._redo.pop()
        self._undo.append(self._restore(entry))
        telemetry.record_event(
            "redo.apply", level="debug", data={"line": entry.line_index}
        )
        return entry

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def _record(self, entry: UndoEntry) -> UndoEntry:
        self._undo.append(entry)
        if self.clear_redo_on_edit:
            self._redo.clear()
        return entry

    def _restore(self, entry: UndoEntry) -> UndoEntry:
        start = entry.line_index
        end = start + entry.span
        current = tuple(self.buffer.snapshot()[start:end])
        self.buffer.replace_lines(start, end, entry.lines)
        return UndoEntry(start, current, len(entry.lines))


__all__ = ["UndoEntry", "UndoRedoManager"]
