"""Editing session aggregate: buffer, cursor, clipboard, history and search."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from tinyvi.buffer import (
    BufferMirror,
    ClipboardRegister,
    Cursor,
    CursorState,
    TextBuffer,
    UndoEntry,
    UndoRedoManager,
)
from tinyvi.config import EditorConfig, EditorMode
from tinyvi.errors import FileUnavailable
from tinyvi.runtime import telemetry
from tinyvi.runtime.files import FileStore
from tinyvi.search import SearchEngine

PROMPT_COMMAND = "command"
PROMPT_SEARCH = "search"
PROMPT_SUBSTITUTE_FIND = "substitute_find"
PROMPT_SUBSTITUTE_REPLACE = "substitute_replace"


@dataclass(slots=True)
class CommandLine:
    """Text typed in Command mode and what the finished line is for."""

    text: str = ""
    purpose: str = PROMPT_COMMAND
    prompt: str = ":"
    find: Optional[str] = None

    def begin(
        self, purpose: str = PROMPT_COMMAND, prompt: str = ":", *, find: str | None = None
    ) -> None:
        self.text = ""
        self.purpose = purpose
        self.prompt = prompt
        self.find = find

    def reset(self) -> None:
        self.begin()

    def append(self, text: str) -> None:
        self.text += text

    def backspace(self) -> bool:
        if not self.text:
            return False
        self.text = self.text[:-1]
        return True

    @property
    def display(self) -> str:
        return f"{self.prompt}{self.text}"


class EditorSession:
    """All mutable state of one editing session.

    Every mutation goes through ``edit()`` so that the affected lines are
    snapshotted into the undo history before the buffer changes. Cursor
    updates are always clamped to the buffer.
    """

    def __init__(
        self,
        *,
        document: Optional[TextBuffer] = None,
        config: Optional[EditorConfig] = None,
        files: Optional[FileStore] = None,
        filename: Optional[str] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.document = document or TextBuffer()
        self.cursor = CursorState()
        self.clipboard = ClipboardRegister()
        self.history = UndoRedoManager(
            self.document,
            limit=self.config.undo_limit,
            clear_redo_on_edit=self.config.clear_redo_on_edit,
        )
        self.search_engine = SearchEngine(self.document)
        self.files = files or FileStore(encoding=self.config.encoding)
        self.command_line = CommandLine()
        self.mode = EditorMode.NORMAL
        self.filename = filename
        self.status: Optional[str] = None
        self.modified = False
        self.running = True

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "EditorSession":
        return cls(document=TextBuffer.from_text(text), **kwargs)

    @classmethod
    def open(
        cls,
        path: Optional[str],
        *,
        config: Optional[EditorConfig] = None,
        files: Optional[FileStore] = None,
    ) -> "EditorSession":
        """Start a session on ``path``; a missing file gives an empty buffer."""

        session = cls(config=config, files=files, filename=path)
        if path:
            try:
                session.open_file(path)
            except FileUnavailable as exc:
                session.status = exc.message
        return session

    @property
    def position(self) -> Cursor:
        return self.cursor.position

    def current_line(self) -> str:
        return self.document.get_line(self.cursor.line)

    def edit(self, label: str) -> ContextManager["Transaction"]:
        return Transaction(self, label)

    # motion -----------------------------------------------------------

    def move_cursor(self, d_line: int, d_column: int) -> Cursor:
        return self.cursor.move(self.document, d_line, d_column)

    def set_cursor(self, line: int, column: int) -> Cursor:
        return self.cursor.set(self.document, line, column)

    # editing ----------------------------------------------------------

    def insert_char(self, ch: str) -> Cursor:
        line, column = self.position
        with self.edit("insert_char") as tx:
            tx.record_edit(line)
            self.document.insert_char(line, column, ch)
        return self.set_cursor(line, column + len(ch))

    def backspace(self) -> bool:
        line, column = self.position
        if column == 0:
            return False
        with self.edit("delete_char") as tx:
            tx.record_edit(line)
            self.document.delete_char(line, column)
        self.set_cursor(line, column - 1)
        return True

    def cut_line(self) -> str:
        line = self.cursor.line
        with self.edit("cut_line") as tx:
            tx.record_delete(line)
            removed = self.document.delete_line(line)
        self.clipboard.set([removed])
        self.cursor.clamp(self.document)
        return removed

    def copy_line(self) -> str:
        text = self.current_line()
        self.clipboard.set([text])
        return text

    def paste(self) -> int:
        """Insert the clipboard above the cursor line; returns lines pasted."""

        if self.clipboard.is_empty():
            return 0
        lines = self.clipboard.lines
        line = self.cursor.line
        with self.edit("paste") as tx:
            tx.record_insert(line, len(lines))
            self.document.insert_lines(line, lines)
        self.cursor.clamp(self.document)
        return len(lines)

    def undo(self) -> Optional[UndoEntry]:
        entry = self.history.undo()
        self._after_history(entry)
        return entry

    def redo(self) -> Optional[UndoEntry]:
        entry = self.history.redo()
        self._after_history(entry)
        return entry

    def _after_history(self, entry: Optional[UndoEntry]) -> None:
        if entry is None:
            return
        self.modified = True
        self.set_cursor(entry.line_index, self.cursor.column)

    # search -----------------------------------------------------------

    def search_forward(self, query: str) -> Optional[Cursor]:
        """Search from the cursor (inclusive) and jump to the first hit."""

        line, column = self.position
        hit = self.search_engine.search(query, line, column)
        return self._jump(hit)

    def repeat_search(self, *, reverse: bool = False) -> Optional[Cursor]:
        hit = self.search_engine.repeat(self.position, reverse=reverse)
        return self._jump(hit)

    def _jump(self, hit: Optional[Cursor]) -> Optional[Cursor]:
        if hit is None:
            pattern = self.search_engine.last_pattern or ""
            self.status = f"Pattern not found: {pattern}"
            telemetry.record_event("search.miss", data={"pattern": pattern})
            return None
        self.status = None
        return self.set_cursor(*hit)

    def substitute_all(self, find: str, replace: str) -> int:
        """Replace every occurrence of ``find``; one undo entry per pass."""

        lines, count = self.search_engine.substituted_lines(find, replace)
        if count:
            with self.edit("substitute") as tx:
                tx.record_range(0, self.document.line_count)
                self.document.replace_lines(0, self.document.line_count, lines)
            self.cursor.clamp(self.document)
        self.status = f"{count} substitution{'s' if count != 1 else ''}"
        return count

    # files ------------------------------------------------------------

    def open_file(self, path: str) -> int:
        """Replace the buffer with ``path``; on failure nothing changes."""

        lines = self.files.load(path)
        self.document.load(lines)
        self.cursor.reset()
        self.history.clear()
        self.filename = path
        self.modified = False
        self.status = f'"{path}" {len(lines)}L'
        return len(lines)

    def save_file(self, path: Optional[str] = None) -> int:
        target = path or self.filename
        if not target:
            raise FileUnavailable("No file name")
        written = self.files.save(target, self.document.snapshot())
        self.filename = target
        self.modified = False
        self.status = "File saved"
        return written

    # lifecycle --------------------------------------------------------

    def quit(self) -> None:
        self.running = False

    def suspend(self) -> None:
        self.running = False
        self.status = "Suspended"

    def status_line(self) -> str:
        return self.mirror().status_line

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        command = self.command_line.display if self.mode is EditorMode.COMMAND else ""
        return BufferMirror(
            lines=tuple(self.document.snapshot()),
            cursor=self.position,
            mode=self.mode.label,
            filename=self.filename,
            status=self.status,
            command_line=command,
            attributes=dict(attributes or {}),
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one discrete edit: undo snapshot plus a telemetry span."""

    def __init__(self, session: EditorSession, label: str) -> None:
        self.session = session
        self.label = label
        self.entries: list[UndoEntry] = []
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={
                "file": self.session.filename or "",
                "cursor": self.session.position,
            },
        )
        self._span_cm.__enter__()
        return self

    def record_edit(self, line: int) -> UndoEntry:
        return self._keep(self.session.history.record_before_edit(line))

    def record_delete(self, line: int) -> UndoEntry:
        return self._keep(self.session.history.record_before_delete(line))

    def record_insert(self, line: int, count: int) -> UndoEntry:
        return self._keep(self.session.history.record_before_insert(line, count))

    def record_range(self, start: int, end: int) -> UndoEntry:
        return self._keep(self.session.history.record_before_range(start, end))

    def _keep(self, entry: UndoEntry) -> UndoEntry:
        self.entries.append(entry)
        return entry

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None and self.entries:
            self.session.modified = True
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = [
    "CommandLine",
    "EditorSession",
    "Transaction",
    "PROMPT_COMMAND",
    "PROMPT_SEARCH",
    "PROMPT_SUBSTITUTE_FIND",
    "PROMPT_SUBSTITUTE_REPLACE",
]
