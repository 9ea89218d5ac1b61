"""Line edits, clipboard and history actions."""

from __future__ import annotations

from tinyvi.modes.base_mode import ModeContext, ModeResult


def cut_line(context: ModeContext, match) -> ModeResult:
    del match
    text = context.session.cut_line()
    context.bus.emit("edit.cut", text)
    return ModeResult(consumed=True, status="cut_line")


def copy_line(context: ModeContext, match) -> ModeResult:
    del match
    text = context.session.copy_line()
    context.bus.emit("edit.copy", text)
    return ModeResult(consumed=True, status="copy_line")


def paste(context: ModeContext, match) -> ModeResult:
    del match
    count = context.session.paste()
    if not count:
        return ModeResult(consumed=True, status="noop", message="clipboard_empty")
    context.bus.emit("edit.paste", count)
    return ModeResult(consumed=True, status="paste")


def undo(context: ModeContext, match) -> ModeResult:
    del match
    if context.session.undo() is None:
        return ModeResult(consumed=True, status="noop", message="undo_empty")
    return ModeResult(consumed=True, status="undo")


def redo(context: ModeContext, match) -> ModeResult:
    del match
    if context.session.redo() is None:
        return ModeResult(consumed=True, status="noop", message="redo_empty")
    return ModeResult(consumed=True, status="redo")


def delete_backward(context: ModeContext, match) -> ModeResult:
    del match
    if not context.session.backspace():
        return ModeResult(consumed=True, status="noop")
    return ModeResult(consumed=True, status="delete_char")


__all__ = ["cut_line", "copy_line", "paste", "undo", "redo", "delete_backward"]
