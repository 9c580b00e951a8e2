"""Text buffer model, cursor value, and change notifications."""

from .changes import ChangeKind, ChangeSet
from .cursor import Cursor
from .text_buffer import LINE_TERMINATORS, TextBuffer

__all__ = [
    "ChangeKind",
    "ChangeSet",
    "Cursor",
    "LINE_TERMINATORS",
    "TextBuffer",
]
