from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from tinyvi.commands import CommandDispatcher
from tinyvi.commands.parser import Edit, Search, SearchNext, Substitute, Unknown, Write
from tinyvi.config import EditorConfig
from tinyvi.session import PROMPT_SEARCH, PROMPT_SUBSTITUTE_FIND, EditorSession


def make_dispatcher(
    text: str = "", **kwargs
) -> Tuple[CommandDispatcher, EditorSession, List[Tuple[str, object]]]:
    session = EditorSession.from_text(text, **kwargs)
    events: List[Tuple[str, object]] = []
    dispatcher = CommandDispatcher(
        session, emit=lambda name, payload: events.append((name, payload))
    )
    return dispatcher, session, events


def test_write_saves_buffer(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    dispatcher, session, events = make_dispatcher("one\ntwo", filename=str(path))
    session.modified = True

    result = dispatcher.run("w")

    assert result.status == "write"
    assert path.read_text(encoding="utf-8") == "one\ntwo\n"
    assert session.modified is False
    assert ("command.write", {"path": str(path), "lines": 2}) in events


def test_write_to_new_path_binds_filename(tmp_path: Path) -> None:
    path = tmp_path / "renamed.txt"
    dispatcher, session, _ = make_dispatcher("x")

    dispatcher.run(f"w {path}")

    assert session.filename == str(path)
    assert path.exists()


def test_write_without_filename_is_reported() -> None:
    dispatcher, session, _ = make_dispatcher("x")

    result = dispatcher.run("w")

    assert result.status == "error"
    assert session.status == "No file name"
    assert session.running is True


def test_quit_stops_session() -> None:
    dispatcher, session, events = make_dispatcher()

    result = dispatcher.run("q")

    assert result.status == "quit"
    assert session.running is False
    assert ("session.quit", None) in events


def test_write_quit(tmp_path: Path) -> None:
    path = tmp_path / "wq.txt"
    dispatcher, session, _ = make_dispatcher("data", filename=str(path))

    result = dispatcher.run("wq")

    assert result.status == "write_quit"
    assert path.read_text(encoding="utf-8") == "data\n"
    assert session.running is False


def test_edit_loads_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("loaded\n", encoding="utf-8")
    dispatcher, session, events = make_dispatcher("old")

    result = dispatcher.run(f"e {path}")

    assert result.status == "edit"
    assert session.document.snapshot() == ("loaded",)
    assert session.filename == str(path)
    assert ("command.edit", {"path": str(path)}) in events


def test_edit_missing_file_leaves_buffer(tmp_path: Path) -> None:
    dispatcher, session, _ = make_dispatcher("keep", filename="orig.txt")
    missing = tmp_path / "missing.txt"

    result = dispatcher.run(f"e {missing}")

    assert result.status == "error"
    assert session.document.snapshot() == ("keep",)
    assert session.filename == "orig.txt"
    assert session.status == f"Cannot open file: {missing}"


def test_undo_and_redo_commands() -> None:
    dispatcher, session, _ = make_dispatcher()
    session.insert_char("a")

    assert dispatcher.run("u").status == "undo"
    assert session.document.snapshot() == ("",)
    assert dispatcher.run("u").status == "noop"
    assert dispatcher.run("r").status == "redo"
    assert session.document.snapshot() == ("a",)


def test_prompts_prepare_command_line() -> None:
    dispatcher, session, _ = make_dispatcher()

    assert dispatcher.run("/").prompt is True
    assert session.command_line.purpose == PROMPT_SEARCH

    assert dispatcher.run(":s").prompt is True
    assert session.command_line.purpose == PROMPT_SUBSTITUTE_FIND
    assert session.command_line.display == ":s/"


def test_inline_search_and_repeat() -> None:
    dispatcher, session, events = make_dispatcher("the cat sat\ncat")

    assert dispatcher.run("/cat").status == "search"
    assert session.position == (0, 4)
    assert dispatcher.run("n").status == "search"
    assert session.position == (1, 0)
    assert dispatcher.run("n").status == "not_found"
    assert ("search.miss", "cat") in events


def test_repeat_search_without_pattern_is_error() -> None:
    dispatcher, session, _ = make_dispatcher("abc")

    result = dispatcher.run("n")

    assert result.status == "error"
    assert session.status == "No previous search pattern"


def test_inline_substitute() -> None:
    dispatcher, session, _ = make_dispatcher("aaa")

    result = dispatcher.run("s/a/aa")

    assert result.status == "substitute"
    assert session.document.snapshot() == ("aaaaaa",)


def test_empty_substitute_pattern_is_rejected() -> None:
    dispatcher, session, _ = make_dispatcher("abc")

    result = dispatcher.run("s//x")

    assert result.status == "error"
    assert session.document.snapshot() == ("abc",)
    assert session.history.undo_depth == 0


def test_unknown_command_is_silent_by_default() -> None:
    dispatcher, session, _ = make_dispatcher("abc")

    result = dispatcher.run("frobnicate")

    assert result.status == "ignored"
    assert session.status is None
    assert session.document.snapshot() == ("abc",)


def test_unknown_command_can_be_reported() -> None:
    dispatcher, session, _ = make_dispatcher(
        "abc", config=EditorConfig(report_unknown_commands=True)
    )

    result = dispatcher.run("frobnicate")

    assert result.status == "unknown"
    assert session.status == "Not an editor command: frobnicate"


def test_dispatch_takes_parsed_variants(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("cat\n", encoding="utf-8")
    dispatcher, _, events = make_dispatcher("x")

    assert dispatcher.dispatch(Edit(str(path))).status == "edit"
    assert dispatcher.dispatch(Search("cat")).status == "search"
    assert dispatcher.dispatch(SearchNext(reverse=True)).status == "not_found"
    assert dispatcher.dispatch(Substitute("cat", "dog")).status == "substitute"
    assert dispatcher.dispatch(Write()).status == "write"
    assert dispatcher.dispatch(Unknown("zz")).status == "ignored"
    assert path.read_text(encoding="utf-8") == "dog\n"
    assert ("search.miss", "cat") in events
