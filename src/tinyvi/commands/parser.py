"""Parse a committed command line into a closed set of command types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class Write:
    path: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class WriteQuit:
    path: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class SearchPrompt:
    pass


@dataclass(frozen=True, slots=True)
class Search:
    query: str


@dataclass(frozen=True, slots=True)
class SearchNext:
    reverse: bool = False


@dataclass(frozen=True, slots=True)
class SubstitutePrompt:
    pass


@dataclass(frozen=True, slots=True)
class Substitute:
    find: str
    replace: str


@dataclass(frozen=True, slots=True)
class Edit:
    path: str


@dataclass(frozen=True, slots=True)
class Unknown:
    text: str


Command = Union[
    Write,
    Quit,
    WriteQuit,
    Undo,
    Redo,
    SearchPrompt,
    Search,
    SearchNext,
    SubstitutePrompt,
    Substitute,
    Edit,
    Unknown,
]

_SIMPLE: dict[str, Command] = {
    "w": Write(),
    "q": Quit(),
    "wq": WriteQuit(),
    "u": Undo(),
    "r": Redo(),
    "/": SearchPrompt(),
    "n": SearchNext(),
    "N": SearchNext(reverse=True),
    "s": SubstitutePrompt(),
    ":s": SubstitutePrompt(),
}


def parse_command(raw: str) -> Command:
    """Map the text typed after ``:`` to a command.

    Exact tokens: ``w q u r / n N :s`` and ``e <path>``. Also accepted:
    ``w <path>``, ``wq``, ``/<query>`` and ``s/<find>/<replace>``.
    Anything else parses to ``Unknown``.
    """

    text = raw.strip()
    simple = _SIMPLE.get(text)
    if simple is not None:
        return simple

    head, _, rest = text.partition(" ")
    rest = rest.strip()
    if head == "e" and rest:
        return Edit(rest)
    if head == "w" and rest:
        return Write(rest)
    if head == "wq" and rest:
        return WriteQuit(rest)

    query = raw.lstrip()
    if query.startswith("/") and len(text) > 1:
        return Search(query[1:])

    substitute = _parse_substitute(text)
    if substitute is not None:
        return substitute

    return Unknown(text)


def _parse_substitute(text: str) -> Optional[Substitute]:
    body = text[1:] if text.startswith(":") else text
    if not body.startswith("s/"):
        return None
    parts = body[2:].split("/")
    if len(parts) < 2:
        return None
    # a trailing slash is allowed, further fields are not
    if len(parts) > 3 or (len(parts) == 3 and parts[2]):
        return None
    return Substitute(find=parts[0], replace=parts[1])


__all__ = [
    "Command",
    "Edit",
    "Quit",
    "Redo",
    "Search",
    "SearchNext",
    "SearchPrompt",
    "Substitute",
    "SubstitutePrompt",
    "Undo",
    "Unknown",
    "Write",
    "WriteQuit",
    "parse_command",
]
