"""Editing verbs: map one key to a buffer mutation and the cursor after it."""

from __future__ import annotations

from typing import Tuple

from linepad.buffer import ChangeSet, Cursor, TextBuffer
from linepad.keymaps import KeyInput

ENTER_KEYS = frozenset({"enter", "return"})
BACKSPACE_KEYS = frozenset({"backspace"})


def insert_character(
    buffer: TextBuffer, cursor: Cursor, character: str
) -> Tuple[ChangeSet, Cursor]:
    changes = buffer.insert_char(cursor, character)
    return changes, Cursor(cursor.x + 1, cursor.y)


def commit_line(buffer: TextBuffer, cursor: Cursor) -> Tuple[ChangeSet, Cursor]:
    changes = buffer.split_line(cursor)
    return changes, Cursor(0, cursor.y + 1)


def delete_backward(buffer: TextBuffer, cursor: Cursor) -> Tuple[ChangeSet, Cursor]:
    # read before mutating: a merge replaces the previous row's content
    previous_line_length = buffer.line_length(cursor.y - 1) if cursor.y > 0 else 0

    changes = buffer.backspace(cursor)

    if cursor.x > 0:
        return changes, Cursor(cursor.x - 1, cursor.y)
    if cursor.y > 0:
        return changes, Cursor(previous_line_length, cursor.y - 1)
    return changes, cursor


def apply_command(
    key: KeyInput, buffer: TextBuffer, cursor: Cursor
) -> Tuple[ChangeSet, Cursor]:
    """Apply an edit key and return ``(changes, new_cursor)``.

    Keys that are not edits pass through as ``(ChangeSet.none(), cursor)``.
    """

    name = key.key.lower()
    if not key.modifiers and name in ENTER_KEYS:
        return commit_line(buffer, cursor)
    if not key.modifiers and name in BACKSPACE_KEYS:
        return delete_backward(buffer, cursor)

    character = key.character
    if character is not None:
        return insert_character(buffer, cursor, character)

    return ChangeSet.none(), cursor


__all__ = [
    "apply_command",
    "commit_line",
    "delete_backward",
    "insert_character",
]
