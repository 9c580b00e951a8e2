"""One editing session: a buffer, its file, the cursor, and the viewport."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from linepad.actions import apply_command
from linepad.buffer import ChangeSet, Cursor, TextBuffer
from linepad.keymaps import (
    DEFAULT_BINDINGS,
    MOVE_DIRECTIONS,
    Action,
    KeyInput,
    resolve_action,
)
from linepad.navigation import next_cursor
from linepad.runtime import telemetry
from linepad.storage import PathLike, load_buffer, save_to_file

from .viewport import Viewport


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Outcome of one key: what to repaint and where the cursor went."""

    changes: ChangeSet
    cursor: Cursor
    previous_cursor: Cursor
    quit: bool = False
    saved: bool = False
    message: Optional[str] = None


class EditorSession:
    """Applies keys to the buffer one at a time, in strict turns."""

    def __init__(
        self,
        buffer: TextBuffer,
        *,
        filename: PathLike,
        height: int = 24,
        bindings: Mapping[str, Action] = DEFAULT_BINDINGS,
    ) -> None:
        self.buffer = buffer
        self.filename = os.fspath(filename)
        self.cursor = Cursor(0, 0)
        self.viewport = Viewport(height=height)
        self.bindings = bindings

    @classmethod
    def open(cls, filename: PathLike, *, height: int = 24) -> "EditorSession":
        """Start a session from ``filename``; a missing file starts empty."""

        with telemetry.span(
            "session::open",
            component="session",
            metadata={"filename": os.fspath(filename)},
        ):
            buffer = load_buffer(filename)
        telemetry.record_event(
            "session.opened",
            data={"filename": os.fspath(filename), "lines": buffer.line_count()},
        )
        return cls(buffer, filename=filename, height=height)

    def handle_key(self, key: KeyInput) -> SessionResult:
        previous = self.cursor
        with telemetry.span(
            "session::handle_key",
            component="session",
            metadata={"key": key.token},
        ) as handle:
            action = resolve_action(key, self.bindings)
            handle.add_metadata("action", action.value if action else "edit")

            if action is Action.QUIT:
                telemetry.record_event(
                    "session.quit", data={"modified": self.buffer.modified}
                )
                return SessionResult(
                    ChangeSet.none(), self.cursor, previous, quit=True
                )

            if action is Action.SAVE:
                written = save_to_file(self.filename, self.buffer)
                return SessionResult(
                    ChangeSet.none(),
                    self.cursor,
                    previous,
                    saved=True,
                    message=f"wrote {written} chars to {self.filename}",
                )

            if action is not None:
                changes = ChangeSet.none()
                self.cursor = next_cursor(
                    self.cursor, self.buffer, MOVE_DIRECTIONS[action]
                )
            else:
                changes, self.cursor = apply_command(key, self.buffer, self.cursor)

            changes = changes.merge(self.viewport.follow(self.cursor))
            return SessionResult(changes, self.cursor, previous)

    def resize(self, height: int) -> ChangeSet:
        return self.viewport.resize(height, self.cursor)

    @property
    def status(self) -> str:
        marker = " [+]" if self.buffer.modified else ""
        return (
            f"{self.filename}{marker}  "
            f"{self.cursor.y + 1}:{self.cursor.x + 1}  "
            f"{self.buffer.line_count()} lines"
        )


__all__ = ["EditorSession", "SessionResult"]
