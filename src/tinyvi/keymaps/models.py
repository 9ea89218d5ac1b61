"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def make_token(key: str, modifiers: Iterable[str] = ()) -> str:
    normalized = normalize_modifiers(modifiers)
    if normalized:
        return f"{'+'.join(normalized)}+{key}"
    return key


@dataclass(frozen=True, slots=True)
class KeySequence:
    """Immutable run of key tokens such as ``("d", "d")`` or ``("ctrl+r",)``."""

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tokens or not all(self.tokens):
            raise ValueError("KeySequence requires at least one non-empty token")

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(tuple(key for key in keys if key))

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named callable invoked as ``handler(context, match)``."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence in one mode with an action id."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


__all__ = ["ActionRef", "Binding", "KeySequence", "make_token", "normalize_modifiers"]
