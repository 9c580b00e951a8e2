"""Executable Textual app that hosts an editing session."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the editor is run
    from rich.segment import Segment
    from rich.style import Style
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.geometry import Region
    from textual.message import Message
    from textual.strip import Strip
    from textual.widget import Widget
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use linepad.adapters.textual.app"
    ) from exc

from linepad.runtime import telemetry
from linepad.session import EditorSession
from linepad.storage import SaveError
from linepad.syntax import Span, SyntaxTable, TokenKind, highlight_line, table_for

from .controller import TextualEditorAdapter, TextualUIHooks

TOKEN_STYLES = {
    TokenKind.PLAIN: Style(),
    TokenKind.KEYWORD: Style(color="green"),
    TokenKind.COMMENT: Style(color="blue"),
    TokenKind.STRING: Style(color="yellow"),
    TokenKind.SYMBOL: Style(color="red"),
}
CURSOR_STYLE = Style(reverse=True)


def _segments_with_cursor(spans: List[Span], column: Optional[int]) -> List[Segment]:
    if column is None:
        return [Segment(text, TOKEN_STYLES[kind]) for text, kind in spans]

    segments: List[Segment] = []
    start = 0
    for text, kind in spans:
        style = TOKEN_STYLES[kind]
        end = start + len(text)
        if start <= column < end:
            offset = column - start
            if offset:
                segments.append(Segment(text[:offset], style))
            segments.append(Segment(text[offset], style + CURSOR_STYLE))
            if offset + 1 < len(text):
                segments.append(Segment(text[offset + 1 :], style))
        else:
            segments.append(Segment(text, style))
        start = end
    if column >= start:
        # cursor in virtual space past end-of-line
        segments.append(Segment(" " * (column - start)))
        segments.append(Segment(" ", CURSOR_STYLE))
    return segments


class BufferView(Widget, can_focus=True):
    """Line-API widget painting visible rows of the session's buffer."""

    DEFAULT_CSS = """
	BufferView {
		height: 1fr;
	}
	"""

    class HeightChanged(Message):
        def __init__(self, height: int) -> None:
            super().__init__()
            self.height = height

    def __init__(
        self, session: EditorSession, table: SyntaxTable, *, id: str | None = None
    ) -> None:
        super().__init__(id=id)
        self.session = session
        self.table = table
        self.cursor_cell: Tuple[int, int] = (0, 0)

    def render_line(self, y: int) -> Strip:
        row = self.session.viewport.offset + y
        # tabs paint as one cell so screen columns match buffer columns
        text = self.session.buffer.line_text(row).replace("\t", " ")
        column = self.cursor_cell[0] if self.cursor_cell[1] == y else None
        segments = _segments_with_cursor(highlight_line(text, self.table), column)
        width = self.size.width
        return Strip(segments).crop(0, width).extend_cell_length(width)

    def refresh_rows(self, rows: Sequence[int]) -> None:
        width = self.size.width
        self.refresh(*(Region(0, row, width, 1) for row in rows))

    def move_cursor(self, x: int, y: int) -> None:
        self.cursor_cell = (x, y)

    def on_resize(self, event: events.Resize) -> None:
        self.post_message(self.HeightChanged(event.size.height))


class LinepadApp(App[None]):
    """Single-file editor UI around an EditorSession."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+q", "quit_editor", "Quit", priority=True),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self.logger = telemetry.get_logger("linepad.adapters.textual")
        self._view = BufferView(
            session, table_for(session.filename), id="buffer-view"
        )
        self._status_widget = Static("", id="status-line")

    def compose(self) -> ComposeResult:
        yield self._view
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            refresh_rows=self._view.refresh_rows,
            refresh_all=self._view.refresh,
            move_cursor=self._view.move_cursor,
            update_status=lambda status: self._status_widget.update(Text(status)),
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self._view.focus()

    def on_buffer_view_height_changed(
        self, message: BufferView.HeightChanged
    ) -> None:
        if self.adapter and message.height > 0:
            self.adapter.resize(message.height)

    async def on_key(self, event: events.Key) -> None:
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self._dispatch(key, text=text, modifiers=modifiers)
        event.stop()

    def action_save(self) -> None:
        self._dispatch("s", modifiers=("ctrl",))

    def action_quit_editor(self) -> None:
        self._dispatch("q", modifiers=("ctrl",))

    def _dispatch(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Tuple[str, ...] = (),
    ) -> None:
        if not self.adapter:
            return
        try:
            result = self.adapter.handle_textual_key(
                key, text=text, modifiers=modifiers
            )
        except SaveError as exc:
            # an unwritable save target has no degraded mode
            telemetry.record_event(
                "session.save_failed",
                level="error",
                data={"path": exc.path, "reason": str(exc)},
            )
            self.exit(return_code=1, message=str(exc))
            return
        if result.quit:
            self.exit()

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        parts = event.key.split("+")
        key = parts[-1]
        modifiers = tuple(parts[:-1])
        if not key:
            return None
        character = event.character
        if character and len(character) == 1 and set(modifiers) <= {"shift"}:
            return (key, character, modifiers)
        return (key, None, modifiers)


__all__ = ["BufferView", "LinepadApp"]
