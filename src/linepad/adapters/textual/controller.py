"""Adapter that turns session results into row refreshes for a Textual host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from linepad.buffer import ChangeSet
from linepad.keymaps import KeyInput
from linepad.session import EditorSession, SessionResult, Viewport


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets.

    ``refresh_rows`` and ``move_cursor`` receive screen rows, already shifted
    by the viewport offset.
    """

    refresh_rows: Callable[[Sequence[int]], None]
    refresh_all: Callable[[], None] = _noop
    move_cursor: Callable[[int, int], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def dirty_screen_rows(
    changes: ChangeSet, viewport: Viewport, extra_rows: Iterable[int] = ()
) -> Optional[List[int]]:
    """Screen rows to repaint, or ``None`` for a full repaint.

    Rows outside the viewport are dropped: they are painted when they scroll in.
    """

    if changes.is_whole:
        return None
    rows = set(changes.rows)
    rows.update(extra_rows)
    return [viewport.to_screen(row) for row in sorted(rows) if viewport.contains(row)]


class TextualEditorAdapter:
    """Bridges an EditorSession to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.hooks.refresh_all()
        self._place_cursor()
        self.hooks.update_status(self.session.status)

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> SessionResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        key_input = KeyInput(key=key, text=text, modifiers=tuple(modifiers))
        self._log_state("key ->", key=key_input.token, text=text)
        result = self.session.handle_key(key_input)
        if not result.quit:
            self.render(result)
        self._log_state(
            "result <-",
            changes=result.changes.kind.value,
            quit=result.quit,
            saved=result.saved,
        )
        return result

    def render(self, result: SessionResult) -> None:
        """Repaint what the result marks dirty, then reposition the cursor."""

        # the cursor cell is painted, so its old and new rows need a repaint
        rows = dirty_screen_rows(
            result.changes,
            self.session.viewport,
            extra_rows=(result.previous_cursor.y, result.cursor.y),
        )
        if rows is None:
            self.hooks.refresh_all()
        elif rows:
            self.hooks.refresh_rows(rows)
        self._place_cursor()
        self.hooks.update_status(result.message or self.session.status)

    def resize(self, height: int) -> None:
        self.session.resize(height)
        self.hooks.refresh_all()
        self._place_cursor()
        self._log_state("resize ->", height=height)

    def _place_cursor(self) -> None:
        cursor = self.session.cursor
        self.hooks.move_cursor(cursor.x, self.session.viewport.to_screen(cursor.y))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> dict[str, object]:
        session = self.session
        return {
            "cursor": tuple(session.cursor),
            "offset": session.viewport.offset,
            "lines": session.buffer.line_count(),
            "buffer_version": session.buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "dirty_screen_rows"]
