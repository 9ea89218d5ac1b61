from __future__ import annotations

from tinyvi.buffer import TextBuffer, UndoEntry, UndoRedoManager


def make_history(*lines: str, **kwargs) -> tuple[TextBuffer, UndoRedoManager]:
    buffer = TextBuffer.from_lines(lines)
    return buffer, UndoRedoManager(buffer, **kwargs)


def test_undo_on_empty_history_is_noop() -> None:
    buffer, history = make_history("abc")

    assert history.undo() is None
    assert history.redo() is None
    assert buffer.snapshot() == ("abc",)


def test_line_edit_round_trip() -> None:
    buffer, history = make_history("abc")

    history.record_before_edit(0)
    buffer.insert_char(0, 3, "d")

    assert history.undo() == UndoEntry(0, ("abc",), 1)
    assert buffer.snapshot() == ("abc",)
    history.redo()
    assert buffer.snapshot() == ("abcd",)


def test_deleted_line_is_reinserted() -> None:
    buffer, history = make_history("a", "b", "c")

    history.record_before_delete(1)
    buffer.delete_line(1)
    history.undo()

    assert buffer.snapshot() == ("a", "b", "c")
    history.redo()
    assert buffer.snapshot() == ("a", "c")


def test_sole_line_delete_restores_text() -> None:
    buffer, history = make_history("only")

    entry = history.record_before_delete(0)
    buffer.delete_line(0)
    history.undo()

    assert entry.span == 1
    assert buffer.snapshot() == ("only",)


def test_inserted_lines_are_removed_by_undo() -> None:
    buffer, history = make_history("a", "c")

    history.record_before_insert(1, 2)
    buffer.insert_lines(1, ["b1", "b2"])
    history.undo()

    assert buffer.snapshot() == ("a", "c")
    history.redo()
    assert buffer.snapshot() == ("a", "b1", "b2", "c")


def test_range_snapshot_restores_every_line() -> None:
    buffer, history = make_history("x1", "x2")

    history.record_before_range(0, 2)
    buffer.replace_lines(0, 2, ["y1", "y2"])
    history.undo()

    assert buffer.snapshot() == ("x1", "x2")


def test_new_edit_clears_redo_by_default() -> None:
    buffer, history = make_history("a")
    history.record_before_edit(0)
    buffer.set_line(0, "b")
    history.undo()
    assert history.can_redo()

    history.record_before_edit(0)
    buffer.set_line(0, "c")

    assert not history.can_redo()


def test_redo_can_be_kept_across_edits() -> None:
    buffer, history = make_history("a", clear_redo_on_edit=False)
    history.record_before_edit(0)
    buffer.set_line(0, "b")
    history.undo()

    history.record_before_edit(0)

    assert history.redo_depth == 1


def test_limit_drops_oldest_entries() -> None:
    buffer, history = make_history("", limit=2)

    for ch in "abc":
        history.record_before_edit(0)
        buffer.insert_char(0, len(buffer.get_line(0)), ch)

    assert history.undo_depth == 2
    history.undo()
    history.undo()
    assert history.undo() is None
    assert buffer.snapshot() == ("a",)


def test_clear_empties_both_stacks() -> None:
    buffer, history = make_history("a")
    history.record_before_edit(0)
    buffer.set_line(0, "b")
    history.undo()

    history.clear()

    assert history.undo_depth == 0
    assert history.redo_depth == 0
