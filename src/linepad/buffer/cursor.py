"""Cursor value shared by the buffer, navigation, and dispatch layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Cursor:
    """Logical ``(column, row)`` position into a buffer.

    The cursor is a request/result value and is not validated against any
    buffer: it may sit past the end of its row until the next read clamps it.
    """

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"cursor coordinates must be >= 0, got ({self.x}, {self.y})"
            )

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


__all__ = ["Cursor"]
