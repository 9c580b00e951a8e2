"""Vertical scroll window over the buffer."""

from __future__ import annotations

from dataclasses import dataclass

from linepad.buffer import ChangeSet, Cursor


@dataclass(slots=True)
class Viewport:
    """Rows ``[offset, offset + height)`` are on screen."""

    height: int
    offset: int = 0

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ValueError("viewport height must be >= 1")

    def contains(self, row: int) -> bool:
        return self.offset <= row < self.offset + self.height

    def to_screen(self, row: int) -> int:
        return row - self.offset

    def follow(self, cursor: Cursor) -> ChangeSet:
        """Scroll so the cursor row is visible; a scroll repaints everything."""

        if cursor.y >= self.offset + self.height:
            self.offset = cursor.y - self.height + 1
        elif cursor.y < self.offset:
            self.offset = cursor.y
        else:
            return ChangeSet.none()
        return ChangeSet.whole()

    def resize(self, height: int, cursor: Cursor) -> ChangeSet:
        if height < 1:
            raise ValueError("viewport height must be >= 1")
        self.height = height
        self.follow(cursor)
        return ChangeSet.whole()


__all__ = ["Viewport"]
