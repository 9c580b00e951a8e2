"""Cursor movement over a text buffer."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from linepad.buffer import Cursor


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class LineSource(Protocol):
    """Read-only view of a buffer, all the navigator needs."""

    def line_count(self) -> int: ...

    def line_length(self, row: int) -> int: ...


def can_move(current: Cursor, buffer: LineSource, direction: Direction) -> bool:
    x, y = current
    if direction is Direction.UP:
        return y > 0
    if direction is Direction.DOWN:
        return y + 1 < buffer.line_count()
    if direction is Direction.LEFT:
        return x > 0 or y > 0
    if direction is Direction.RIGHT:
        # The second clause lets the cursor walk past the end of the last row
        # into virtual columns; typing there pads the gap with spaces.
        return x < buffer.line_length(y) or y < buffer.line_count()
    raise ValueError(f"Unknown direction '{direction}'")


def next_cursor(current: Cursor, buffer: LineSource, direction: Direction) -> Cursor:
    """Return the cursor one step in ``direction``.

    Illegal moves return ``current`` unchanged. Horizontal moves wrap across
    line boundaries; vertical moves keep the column when the target row is long
    enough and clamp to its end otherwise. The buffer is never mutated.
    """

    if not can_move(current, buffer, direction):
        return current

    x, y = current
    if direction is Direction.LEFT:
        if y > 0 and x == 0:
            return Cursor(buffer.line_length(y - 1), y - 1)
        return Cursor(x - 1, y)

    if direction is Direction.RIGHT:
        if y + 1 < buffer.line_count() and x == buffer.line_length(y):
            return Cursor(0, y + 1)
        return Cursor(x + 1, y)

    target = y - 1 if direction is Direction.UP else y + 1
    return Cursor(min(x, buffer.line_length(target)), target)


__all__ = ["Direction", "LineSource", "can_move", "next_cursor"]
