"""Helpers for keymap-driven modes."""

from __future__ import annotations

from tinyvi.keymaps import KeymapResolver, make_token

from .base_mode import KeyInput, ModeContext


def key_to_token(key: KeyInput) -> str:
    return make_token(key.key, key.modifiers)


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


__all__ = ["key_to_token", "require_keymap_resolver"]
