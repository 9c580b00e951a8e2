"""Editing verbs dispatched from key input."""

from .edit import apply_command, commit_line, delete_backward, insert_character

__all__ = [
    "apply_command",
    "commit_line",
    "delete_backward",
    "insert_character",
]
