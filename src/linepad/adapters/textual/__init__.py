"""Textual host adapter."""

from .controller import TextualEditorAdapter, TextualUIHooks, dirty_screen_rows

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "dirty_screen_rows"]
