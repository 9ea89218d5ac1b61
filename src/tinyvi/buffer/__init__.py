"""Line buffer, cursor, clipboard and undo/redo data structures."""

from .document import TextBuffer
from .registers import ClipboardRegister
from .state import Cursor, CursorState
from .sync import BufferMirror
from .undo import UndoEntry, UndoRedoManager
from .validation import clamp_cursor, ensure_column, ensure_line

__all__ = [
    "TextBuffer",
    "ClipboardRegister",
    "Cursor",
    "CursorState",
    "BufferMirror",
    "UndoEntry",
    "UndoRedoManager",
    "clamp_cursor",
    "ensure_column",
    "ensure_line",
]
