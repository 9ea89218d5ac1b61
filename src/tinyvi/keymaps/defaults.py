"""Built-in bindings for Normal, Insert and Command modes."""

from __future__ import annotations

from typing import Iterable

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

# (binding id, mode, keys, action id, description)
_BINDING_TABLE: tuple[tuple[str, str, tuple[str, ...], str, str], ...] = (
    ("normal.enter_insert", "normal", ("i",), "core.enter_insert", "Enter insert mode"),
    ("normal.enter_command", "normal", (":",), "core.enter_command", "Enter command-line mode"),
    ("normal.left", "normal", ("h",), "motion.left", "Cursor left"),
    ("normal.down", "normal", ("j",), "motion.down", "Cursor down"),
    ("normal.up", "normal", ("k",), "motion.up", "Cursor up"),
    ("normal.right", "normal", ("l",), "motion.right", "Cursor right"),
    ("normal.cut_line", "normal", ("d", "d"), "edit.cut_line", "Cut current line"),
    ("normal.copy_line", "normal", ("y", "y"), "edit.copy_line", "Copy current line"),
    ("normal.paste", "normal", ("p",), "edit.paste", "Paste above current line"),
    ("normal.undo", "normal", ("u",), "edit.undo", "Undo"),
    ("normal.redo", "normal", ("ctrl+r",), "edit.redo", "Redo"),
    ("normal.search", "normal", ("/",), "search.prompt", "Search forward"),
    ("normal.search_next", "normal", ("n",), "search.next", "Repeat search forward"),
    ("normal.search_previous", "normal", ("N",), "search.previous", "Repeat search backward"),
    ("normal.suspend", "normal", ("ctrl+z",), "core.suspend", "End the session"),
    ("insert.exit_escape", "insert", ("ESC",), "core.exit_to_normal", "Leave insert mode"),
    ("insert.exit_escape_alt", "insert", ("<Esc>",), "core.exit_to_normal", "Leave insert mode"),
    ("insert.backspace", "insert", ("BACKSPACE",), "edit.delete_backward", "Delete before cursor"),
    ("command.exit_escape", "command", ("ESC",), "command.cancel", "Cancel command line"),
    ("command.exit_escape_alt", "command", ("<Esc>",), "command.cancel", "Cancel command line"),
    ("command.submit_enter", "command", ("ENTER",), "command.submit_line", "Submit the command line"),
    ("command.submit_return", "command", ("RETURN",), "command.submit_line", "Submit the command line"),
)


def default_actions() -> tuple[ActionRef, ...]:
    """Action references for every built-in binding."""

    # imported lazily: actions depend on modes, which depend on keymaps
    from tinyvi.actions import command as command_actions
    from tinyvi.actions import core as core_actions
    from tinyvi.actions import editing as editing_actions
    from tinyvi.actions import motion as motion_actions
    from tinyvi.actions import search as search_actions

    return (
        ActionRef("core.enter_insert", core_actions.enter_insert_mode, "Enter insert mode"),
        ActionRef("core.enter_command", core_actions.enter_command_mode, "Enter command-line mode"),
        ActionRef("core.exit_to_normal", core_actions.exit_to_normal_mode, "Return to normal mode"),
        ActionRef("core.suspend", core_actions.suspend_session, "End the session"),
        ActionRef("motion.left", motion_actions.move_left, "Cursor left"),
        ActionRef("motion.down", motion_actions.move_down, "Cursor down"),
        ActionRef("motion.up", motion_actions.move_up, "Cursor up"),
        ActionRef("motion.right", motion_actions.move_right, "Cursor right"),
        ActionRef("edit.cut_line", editing_actions.cut_line, "Cut current line"),
        ActionRef("edit.copy_line", editing_actions.copy_line, "Copy current line"),
        ActionRef("edit.paste", editing_actions.paste, "Paste clipboard"),
        ActionRef("edit.undo", editing_actions.undo, "Undo last edit"),
        ActionRef("edit.redo", editing_actions.redo, "Redo last undone edit"),
        ActionRef("edit.delete_backward", editing_actions.delete_backward, "Backspace"),
        ActionRef("search.prompt", search_actions.open_search_prompt, "Search forward"),
        ActionRef("search.next", search_actions.search_next, "Repeat search forward"),
        ActionRef("search.previous", search_actions.search_previous, "Repeat search backward"),
        ActionRef("command.submit_line", command_actions.submit_command_line, "Evaluate the command line"),
        ActionRef("command.cancel", command_actions.cancel_command_line, "Cancel the command line"),
    )


def default_bindings() -> tuple[Binding, ...]:
    return tuple(
        Binding(
            id=binding_id,
            mode=mode,
            sequence=KeySequence.from_strings(*keys),
            action_id=action_id,
            description=description,
        )
        for binding_id, mode, keys, action_id, description in _BINDING_TABLE
    )


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register built-in actions and bindings, then any ``extra_bindings``."""

    for action in default_actions():
        registry.register_action(action, replace=replace)

    for binding in default_bindings():
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = ["default_actions", "default_bindings", "load_default_keymaps"]
