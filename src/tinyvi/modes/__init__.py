"""Modes and the modal controller that dispatches key events."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode, NormalState
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .controller import ModalController

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "NormalState",
    "InsertMode",
    "CommandMode",
    "ModalController",
]
