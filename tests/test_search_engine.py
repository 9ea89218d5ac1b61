from __future__ import annotations

import pytest

from tinyvi.buffer import TextBuffer
from tinyvi.errors import InvalidArgument
from tinyvi.search import SearchEngine, replace_all


def make_engine(*lines: str) -> SearchEngine:
    return SearchEngine(TextBuffer.from_lines(lines))


def test_search_finds_first_match_from_position() -> None:
    engine = make_engine("the cat sat", "cat")

    assert engine.search("cat", 0, 0) == (0, 4)
    assert engine.search("cat", 0, 5) == (1, 0)


def test_search_start_column_is_inclusive() -> None:
    engine = make_engine("cat")

    assert engine.search("cat", 0, 0) == (0, 0)


def test_search_does_not_wrap() -> None:
    engine = make_engine("cat", "dog")

    assert engine.search("cat", 1, 0) is None


def test_search_is_literal() -> None:
    engine = make_engine("a.c abc", "x*")

    assert engine.search(".", 0, 0) == (0, 1)
    assert engine.search("x*", 0, 0) == (1, 0)


def test_empty_pattern_is_rejected() -> None:
    engine = make_engine("abc")

    with pytest.raises(InvalidArgument):
        engine.search("", 0, 0)


def test_search_backward_finds_highest_before_position() -> None:
    engine = make_engine("cat cat", "cat")

    assert engine.search_backward("cat", 1, 0) == (0, 4)
    assert engine.search_backward("cat", 0, 4) == (0, 0)
    assert engine.search_backward("cat", 0, 0) is None


def test_repeat_uses_last_pattern() -> None:
    engine = make_engine("the cat sat", "cat")
    engine.search("cat", 0, 0)

    assert engine.repeat((0, 4)) == (1, 0)
    assert engine.repeat((1, 0), reverse=True) == (0, 4)


def test_repeat_without_pattern_fails() -> None:
    engine = make_engine("abc")

    with pytest.raises(InvalidArgument):
        engine.repeat((0, 0))


def test_replace_all_does_not_rescan_output() -> None:
    assert replace_all("aaa", "a", "aa") == ("aaaaaa", 3)
    assert replace_all("abab", "ab", "b") == ("bb", 2)
    assert replace_all("xyz", "q", "r") == ("xyz", 0)


def test_substitute_all_counts_every_line() -> None:
    engine = make_engine("cat cat", "dog", "cat")

    assert engine.substitute_all("cat", "dog") == 3
    assert engine.buffer.snapshot() == ("dog dog", "dog", "dog")


def test_substitute_with_empty_find_leaves_buffer() -> None:
    engine = make_engine("abc")

    with pytest.raises(InvalidArgument):
        engine.substitute_all("", "x")

    assert engine.buffer.snapshot() == ("abc",)
