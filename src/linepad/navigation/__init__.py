"""Pure cursor navigation."""

from .navigator import Direction, LineSource, can_move, next_cursor

__all__ = ["Direction", "LineSource", "can_move", "next_cursor"]
