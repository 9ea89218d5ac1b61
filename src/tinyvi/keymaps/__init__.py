"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, KeySequence, make_token
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import default_actions, default_bindings, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeySequence",
    "make_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "default_actions",
    "default_bindings",
    "load_default_keymaps",
]
