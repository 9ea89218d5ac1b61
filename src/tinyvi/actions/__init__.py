"""Editing verbs bound to keys."""

from .core import enter_command_mode, enter_insert_mode, exit_to_normal_mode, suspend_session
from .editing import copy_line, cut_line, delete_backward, paste, redo, undo
from .motion import move_down, move_left, move_right, move_up
from .search import open_search_prompt, search_next, search_previous
from .command import cancel_command_line, submit_command_line

__all__ = [
    "enter_insert_mode",
    "enter_command_mode",
    "exit_to_normal_mode",
    "suspend_session",
    "cut_line",
    "copy_line",
    "paste",
    "undo",
    "redo",
    "delete_backward",
    "move_left",
    "move_down",
    "move_up",
    "move_right",
    "open_search_prompt",
    "search_next",
    "search_previous",
    "submit_command_line",
    "cancel_command_line",
]
