from __future__ import annotations

import pytest

from linepad.buffer import Cursor, TextBuffer
from linepad.navigation import Direction, can_move, next_cursor

LINE_0 = "I'm Line 0"
LINE_1 = "And here's Line 1."
LINE_2 = "Line 1 here"


def make_buffer() -> TextBuffer:
    return TextBuffer.load("\n".join([LINE_0, LINE_1, LINE_2]))


@pytest.mark.parametrize("direction", list(Direction))
def test_every_move_on_empty_buffer_is_noop(direction: Direction) -> None:
    origin = Cursor(0, 0)

    assert next_cursor(origin, TextBuffer(), direction) == origin


def test_happy_path_moves() -> None:
    buffer = TextBuffer.load("I'm Line 0\nLine 1 here\nAnd here's Line 2.")

    assert next_cursor(Cursor(3, 0), buffer, Direction.LEFT) == Cursor(2, 0)
    assert next_cursor(Cursor(3, 0), buffer, Direction.RIGHT) == Cursor(4, 0)
    assert next_cursor(Cursor(3, 1), buffer, Direction.UP) == Cursor(3, 0)
    assert next_cursor(Cursor(3, 1), buffer, Direction.DOWN) == Cursor(3, 2)


def test_left_at_line_start_wraps_to_previous_eol() -> None:
    result = next_cursor(Cursor(0, 1), make_buffer(), Direction.LEFT)

    assert result == Cursor(len(LINE_0), 0)


def test_right_at_eol_wraps_to_next_line_start() -> None:
    result = next_cursor(Cursor(len(LINE_1), 1), make_buffer(), Direction.RIGHT)

    assert result == Cursor(0, 2)


def test_vertical_moves_clamp_to_shorter_rows() -> None:
    buffer = make_buffer()
    start = Cursor(len(LINE_1), 1)

    assert next_cursor(start, buffer, Direction.DOWN) == Cursor(len(LINE_2), 2)
    assert next_cursor(start, buffer, Direction.UP) == Cursor(len(LINE_0), 0)


def test_vertical_moves_keep_column_on_longer_rows() -> None:
    result = next_cursor(Cursor(5, 0), make_buffer(), Direction.DOWN)

    assert result == Cursor(5, 1)


def test_boundaries_are_noops() -> None:
    buffer = make_buffer()

    assert next_cursor(Cursor(4, 0), buffer, Direction.UP) == Cursor(4, 0)
    assert next_cursor(Cursor(4, 2), buffer, Direction.DOWN) == Cursor(4, 2)
    assert next_cursor(Cursor(0, 0), buffer, Direction.LEFT) == Cursor(0, 0)


def test_right_walks_into_virtual_columns_on_last_row() -> None:
    buffer = make_buffer()
    cursor = Cursor(len(LINE_2), 2)

    cursor = next_cursor(cursor, buffer, Direction.RIGHT)
    cursor = next_cursor(cursor, buffer, Direction.RIGHT)

    assert cursor == Cursor(len(LINE_2) + 2, 2)
    assert next_cursor(cursor, buffer, Direction.LEFT) == Cursor(len(LINE_2) + 1, 2)


def test_right_below_last_row_is_noop() -> None:
    buffer = TextBuffer.load("ab")

    assert can_move(Cursor(0, 1), buffer, Direction.RIGHT) is False
    assert next_cursor(Cursor(0, 1), buffer, Direction.RIGHT) == Cursor(0, 1)


def test_navigation_never_mutates_buffer() -> None:
    buffer = make_buffer()
    before = buffer.lines()

    for direction in Direction:
        next_cursor(Cursor(30, 1), buffer, direction)

    assert buffer.lines() == before
    assert buffer.version == 0
