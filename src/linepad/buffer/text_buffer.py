"""Line-oriented text storage whose mutations report their redraw surface."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .changes import ChangeSet
from .cursor import Cursor

LINE_TERMINATORS = frozenset({"\n", "\r"})


class TextBuffer:
    """Ordered list of lines, each a mutable list of single characters.

    Reads at rows past the end degrade to the empty line. Mutations at rows
    past the end first *fill-to* the row by appending empty lines. Every
    mutation returns a :class:`ChangeSet` describing what must be repainted.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        self._lines: List[List[str]] = [list(line) for line in lines or ()]
        for line in self._lines:
            if LINE_TERMINATORS.intersection(line):
                raise ValueError("lines cannot contain line terminators")
        self.version = 0
        self.modified = False

    @classmethod
    def load(cls, text: str) -> "TextBuffer":
        """Build a buffer from raw file contents.

        One trailing terminator is not a line of its own, so loading and
        serializing is stable. Besides LF and CRLF, a lone CR also breaks
        the line, since lines can never hold a terminator. Text without
        terminators (including the empty string) yields exactly one line.
        """

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if text.endswith("\n"):
            text = text[:-1]
        return cls(text.split("\n"))

    from_text = load

    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, row: int) -> str:
        if 0 <= row < len(self._lines):
            return "".join(self._lines[row])
        return ""

    def line_length(self, row: int) -> int:
        if 0 <= row < len(self._lines):
            return len(self._lines[row])
        return 0

    def lines(self) -> Sequence[str]:
        """Return every line as a string without exposing internal lists."""

        return tuple("".join(line) for line in self._lines)

    def insert_char(self, cursor: Cursor, character: str) -> ChangeSet:
        """Insert ``character`` at the cursor, padding virtual space with blanks."""

        if len(character) != 1 or character in LINE_TERMINATORS:
            raise ValueError(
                f"expected a single non-terminator character, got {character!r}"
            )
        x, y = cursor
        self._fill_to(y)
        line = self._lines[y]
        if x > len(line):
            line.extend(" " * (x - len(line)))
        line.insert(x, character)
        self._touch()
        return ChangeSet.lines([y])

    def split_line(self, cursor: Cursor) -> ChangeSet:
        """Move everything from the cursor onward into a new line below it."""

        x, y = cursor
        # an absent row counts as empty, so the check holds before fill-to
        if x > self.line_length(y):
            return ChangeSet.none()
        self._fill_to(y)
        rest = self._lines[y][x:]
        del self._lines[y][x:]
        self._lines.insert(y + 1, rest)
        self._touch()
        return ChangeSet.whole()

    def backspace(self, cursor: Cursor) -> ChangeSet:
        """Delete the character before the cursor, or join the row to the one above.

        The two branches are independent ``if`` statements on purpose: their
        guards are disjoint on ``x`` (``x > 0`` versus ``x == 0``) so at most one
        fires, and ``(0, 0)`` fires neither.
        """

        x, y = cursor
        result = ChangeSet.none()
        changed = False

        if 0 < x <= self.line_length(y) and y < len(self._lines):
            del self._lines[y][x - 1]
            result = ChangeSet.whole()
            changed = True

        if x == 0 and y > 0 and y - 1 < len(self._lines):
            # joining the row below the last one moves the cursor but edits nothing
            changed = y < len(self._lines)
            self._slurp_next_line(y - 1)
            self._remove_line(y)
            result = ChangeSet.whole()

        if changed:
            self._touch()
        return result

    def serialize(self) -> str:
        """Join lines with a terminator after every line, the last included."""

        return "".join("".join(line) + "\n" for line in self._lines)

    def mark_saved(self) -> None:
        self.modified = False

    def _fill_to(self, row: int) -> None:
        while row + 1 > len(self._lines) or not self._lines:
            self._lines.append([])

    def _slurp_next_line(self, row: int) -> None:
        self._lines[row].extend(self.line_text(row + 1))

    def _remove_line(self, row: int) -> None:
        if row < len(self._lines):
            del self._lines[row]

    def _touch(self) -> None:
        self.version += 1
        self.modified = True

    def __repr__(self) -> str:
        return f"TextBuffer(lines={self.line_count()}, version={self.version})"


__all__ = ["TextBuffer", "LINE_TERMINATORS"]
