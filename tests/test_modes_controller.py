from __future__ import annotations

from typing import List, Tuple

from tinyvi.config import EditorConfig, EditorMode
from tinyvi.modes import KeyInput, ModalController, ModeBus, NormalState
from tinyvi.session import PROMPT_SUBSTITUTE_FIND, PROMPT_SUBSTITUTE_REPLACE, EditorSession

ESC = KeyInput(key="ESC")
ENTER = KeyInput(key="ENTER")
BACKSPACE = KeyInput(key="BACKSPACE")


def make_controller(text: str = "", **kwargs) -> ModalController:
    return ModalController.create(EditorSession.from_text(text), **kwargs)


def lines(controller: ModalController) -> Tuple[str, ...]:
    return tuple(controller.session.document.snapshot())


def test_starts_in_normal_mode() -> None:
    controller = make_controller()

    assert controller.mode is EditorMode.NORMAL
    assert controller.normal_state is NormalState.READY


def test_insert_text_and_escape() -> None:
    controller = make_controller()

    controller.type_keys("iabc")
    assert controller.mode is EditorMode.INSERT
    controller.handle_key(ESC)

    assert controller.mode is EditorMode.NORMAL
    assert lines(controller) == ("abc",)
    assert controller.session.position == (0, 3)
    assert controller.session.status_line() == "-- NORMAL -- [No Name] 1,4"


def test_escape_keeps_edits_undoable_one_by_one() -> None:
    controller = make_controller()
    controller.type_keys("iabc")
    controller.handle_key(ESC)

    controller.type_keys("u")
    assert lines(controller) == ("ab",)
    controller.type_keys("uu")
    assert lines(controller) == ("",)

    controller.handle_key(KeyInput.ctrl("r"))
    assert lines(controller) == ("a",)


def test_insert_mode_backspace() -> None:
    controller = make_controller("ab")
    controller.type_keys("lli")

    controller.handle_key(BACKSPACE)
    assert lines(controller) == ("a",)
    controller.handle_key(BACKSPACE)
    result = controller.handle_key(BACKSPACE)

    assert lines(controller) == ("",)
    assert result.status == "noop"


def test_motions_are_clamped() -> None:
    controller = make_controller("ab\nabcdef")

    controller.type_keys("jllll")
    assert controller.session.position == (1, 4)
    controller.type_keys("k")
    assert controller.session.position == (0, 2)
    controller.type_keys("hhhhk")
    assert controller.session.position == (0, 0)


def test_dd_cuts_and_p_pastes_above() -> None:
    controller = make_controller("a\nb\nc")

    controller.type_keys("jdd")
    assert lines(controller) == ("a", "c")
    assert controller.session.clipboard.lines == ("b",)

    controller.type_keys("p")
    assert lines(controller) == ("a", "b", "c")


def test_delete_sole_line() -> None:
    controller = make_controller("hello")

    controller.type_keys("llldd")

    assert lines(controller) == ("",)
    assert controller.session.position == (0, 0)


def test_yy_copies_without_change() -> None:
    controller = make_controller("one\ntwo")

    controller.type_keys("yyjp")

    assert lines(controller) == ("one", "one", "two")


def test_composite_waits_for_second_key() -> None:
    controller = make_controller("a")

    result = controller.type_keys("d")[0]

    assert result.status == "pending"
    assert controller.normal_state is NormalState.PENDING_D
    assert lines(controller) == ("a",)


def test_other_second_key_cancels_composite() -> None:
    controller = make_controller("a\nb")

    results = controller.type_keys("di")

    assert results[-1].status == "cancelled"
    assert controller.mode is EditorMode.NORMAL
    assert controller.normal_state is NormalState.READY
    assert lines(controller) == ("a", "b")

    controller.type_keys("yd")
    assert controller.session.clipboard.is_empty()
    assert controller.normal_state is NormalState.READY


def test_unbound_normal_key_is_not_consumed() -> None:
    controller = make_controller("a")

    result = controller.handle_key(KeyInput.char("x"))

    assert result.consumed is False
    assert lines(controller) == ("a",)


def test_search_through_prompt() -> None:
    controller = make_controller("the cat sat\ncat")

    controller.type_keys("/cat")
    assert controller.mode is EditorMode.COMMAND
    assert controller.session.command_line.display == "/cat"
    controller.handle_key(ENTER)

    assert controller.mode is EditorMode.NORMAL
    assert controller.session.position == (0, 4)
    controller.type_keys("n")
    assert controller.session.position == (1, 0)
    controller.type_keys("N")
    assert controller.session.position == (0, 4)


def test_search_miss_reports_status() -> None:
    events: List[object] = []
    bus = ModeBus()
    bus.subscribe("search.miss", events.append)
    controller = make_controller("abc", bus=bus)

    controller.type_keys("/dog")
    controller.handle_key(ENTER)

    assert controller.session.position == (0, 0)
    assert controller.session.status == "Pattern not found: dog"
    assert events == ["dog"]


def test_repeat_without_search_reports_error() -> None:
    controller = make_controller("abc")

    result = controller.handle_key(KeyInput.char("n"))

    assert result.status == "error"
    assert controller.session.status == "No previous search pattern"


def test_substitute_through_prompts() -> None:
    controller = make_controller("aaa")

    controller.type_keys(":s")
    controller.handle_key(ENTER)
    assert controller.mode is EditorMode.COMMAND
    assert controller.session.command_line.purpose == PROMPT_SUBSTITUTE_FIND

    controller.type_keys("a")
    controller.handle_key(ENTER)
    assert controller.session.command_line.purpose == PROMPT_SUBSTITUTE_REPLACE
    assert controller.session.command_line.display == ":s/a/"

    controller.type_keys("aa")
    controller.handle_key(ENTER)

    assert controller.mode is EditorMode.NORMAL
    assert lines(controller) == ("aaaaaa",)
    assert controller.session.status == "3 substitutions"

    controller.type_keys("u")
    assert lines(controller) == ("aaa",)


def test_empty_substitute_find_is_rejected() -> None:
    controller = make_controller("abc")

    controller.type_keys(":s")
    controller.handle_key(ENTER)
    result = controller.handle_key(ENTER)

    assert result.status == "command_error"
    assert controller.mode is EditorMode.NORMAL
    assert lines(controller) == ("abc",)
    assert controller.session.status == "Empty substitute pattern"


def test_escape_cancels_command_line() -> None:
    controller = make_controller("abc")

    controller.type_keys(":q")
    controller.handle_key(ESC)

    assert controller.mode is EditorMode.NORMAL
    assert controller.session.running is True
    assert controller.session.command_line.text == ""


def test_command_line_backspace() -> None:
    controller = make_controller()

    controller.type_keys(":qx")
    controller.handle_key(BACKSPACE)
    controller.handle_key(ENTER)

    assert controller.session.running is False


def test_command_events_are_emitted() -> None:
    seen: List[Tuple[str, object]] = []
    bus = ModeBus()
    for name in ("command.start", "command.submit", "command.end", "mode.switch"):
        bus.subscribe(name, lambda payload, name=name: seen.append((name, payload)))
    controller = make_controller(bus=bus)

    controller.type_keys(":u")
    controller.handle_key(ENTER)

    assert seen == [
        ("command.start", "command"),
        ("mode.switch", "command"),
        ("command.submit", "u"),
        ("command.end", "u"),
        ("mode.switch", "normal"),
    ]


def test_ctrl_z_ends_session() -> None:
    suspended: List[object] = []
    bus = ModeBus()
    bus.subscribe("session.suspend", suspended.append)
    controller = make_controller(bus=bus)

    result = controller.handle_key(KeyInput.ctrl("z"))

    assert result.status == "suspend"
    assert controller.session.running is False
    assert suspended == [None]


def test_failed_write_is_reported_and_keeps_file(tmp_path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("keep me\n", encoding="utf-8")
    session = EditorSession.open(str(path), config=EditorConfig(encoding="ascii"))
    controller = ModalController.create(session)

    controller.type_keys("ié")
    controller.handle_key(ESC)
    controller.type_keys(":w")
    result = controller.handle_key(ENTER)

    assert result.status == "command_error"
    assert controller.mode is EditorMode.NORMAL
    assert controller.session.running is True
    assert controller.session.status == f"Cannot write file: {path}"
    assert path.read_text(encoding="utf-8") == "keep me\n"


def test_status_message_lasts_one_key() -> None:
    controller = make_controller("abc")

    controller.type_keys("/zzz")
    controller.handle_key(ENTER)
    assert controller.session.status == "Pattern not found: zzz"

    controller.type_keys("l")

    assert controller.session.status is None
    assert controller.session.position == (0, 1)
