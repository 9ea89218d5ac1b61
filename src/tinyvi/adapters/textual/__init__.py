"""Textual host for tinyvi; the app module needs the ``textual`` package."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
