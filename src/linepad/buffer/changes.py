"""Change notifications produced by buffer mutations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ChangeKind(str, Enum):
    NONE = "none"
    LINES = "lines"
    WHOLE = "whole"


@dataclass(frozen=True, slots=True)
class ChangeSet:
    """Minimal redraw surface reported after an operation.

    ``LINES`` carries the deduplicated set of dirty rows; the other kinds
    carry no rows.
    """

    kind: ChangeKind = ChangeKind.NONE
    rows: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        if self.kind is ChangeKind.LINES:
            if not self.rows:
                raise ValueError("LINES change requires at least one row")
        elif self.rows:
            raise ValueError(f"{self.kind.value} change cannot carry rows")

    @classmethod
    def none(cls) -> "ChangeSet":
        return _NONE

    @classmethod
    def lines(cls, rows: Iterable[int]) -> "ChangeSet":
        return cls(ChangeKind.LINES, frozenset(rows))

    @classmethod
    def whole(cls) -> "ChangeSet":
        return _WHOLE

    @property
    def is_noop(self) -> bool:
        return self.kind is ChangeKind.NONE

    @property
    def is_whole(self) -> bool:
        return self.kind is ChangeKind.WHOLE

    def merge(self, other: "ChangeSet") -> "ChangeSet":
        """Combine two outcomes from the same event step."""

        if self.is_whole or other.is_whole:
            return _WHOLE
        if self.is_noop:
            return other
        if other.is_noop:
            return self
        return ChangeSet.lines(self.rows | other.rows)


_NONE = ChangeSet(ChangeKind.NONE)
_WHOLE = ChangeSet(ChangeKind.WHOLE)

__all__ = ["ChangeKind", "ChangeSet"]
