from __future__ import annotations

import pytest

from tinyvi.commands.parser import (
    Edit,
    Quit,
    Redo,
    Search,
    SearchNext,
    SearchPrompt,
    Substitute,
    SubstitutePrompt,
    Undo,
    Unknown,
    Write,
    WriteQuit,
    parse_command,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("w", Write()),
        ("q", Quit()),
        ("wq", WriteQuit()),
        ("u", Undo()),
        ("r", Redo()),
        ("/", SearchPrompt()),
        ("n", SearchNext()),
        ("N", SearchNext(reverse=True)),
        (":s", SubstitutePrompt()),
        ("s", SubstitutePrompt()),
        (" q ", Quit()),
    ],
)
def test_exact_tokens(raw: str, expected: object) -> None:
    assert parse_command(raw) == expected


def test_commands_with_paths() -> None:
    assert parse_command("e notes.txt") == Edit("notes.txt")
    assert parse_command("w out.txt") == Write("out.txt")
    assert parse_command("wq out.txt") == WriteQuit("out.txt")


def test_inline_search() -> None:
    assert parse_command("/cat") == Search("cat")
    assert parse_command("/two words") == Search("two words")


def test_inline_substitute() -> None:
    assert parse_command("s/cat/dog") == Substitute("cat", "dog")
    assert parse_command(":s/cat/dog/") == Substitute("cat", "dog")
    assert parse_command("s/cat/") == Substitute("cat", "")
    assert parse_command("s//x") == Substitute("", "x")


@pytest.mark.parametrize("raw", ["", "e", "xyz", "s/a/b/c", "s/only", "ww"])
def test_unknown_commands(raw: str) -> None:
    assert isinstance(parse_command(raw), Unknown)
