from __future__ import annotations

from pathlib import Path

import pytest

from linepad.buffer import ChangeSet, Cursor, TextBuffer
from linepad.keymaps import Action, KeyInput, resolve_action
from linepad.session import EditorSession, Viewport
from linepad.storage import SaveError


def type_text(session: EditorSession, text: str) -> None:
    for character in text:
        session.handle_key(KeyInput(character, text=character))


def test_resolve_action_uses_default_bindings() -> None:
    assert resolve_action(KeyInput("up")) is Action.MOVE_UP
    assert resolve_action(KeyInput("s", modifiers=("CTRL",))) is Action.SAVE
    assert resolve_action(KeyInput("q", modifiers=("ctrl",))) is Action.QUIT
    assert resolve_action(KeyInput("a", text="a")) is None


def test_open_missing_file_starts_empty(tmp_path: Path) -> None:
    session = EditorSession.open(tmp_path / "new.txt")

    assert session.buffer.line_count() == 0
    assert session.cursor == Cursor(0, 0)


def test_open_existing_file_loads_contents(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    target.write_text("one\ntwo\n", encoding="utf-8")

    session = EditorSession.open(target)

    assert session.buffer.lines() == ("one", "two")


def test_typing_and_moving(tmp_path: Path) -> None:
    session = EditorSession(TextBuffer(), filename=tmp_path / "f.txt")

    type_text(session, "hi")
    session.handle_key(KeyInput("enter"))
    type_text(session, "there")
    result = session.handle_key(KeyInput("up"))

    assert session.buffer.lines() == ("hi", "there")
    assert result.cursor == Cursor(2, 0)
    assert result.previous_cursor == Cursor(5, 1)
    assert result.changes.is_noop


def test_save_writes_file_and_clears_modified(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    session = EditorSession(TextBuffer(), filename=target)
    type_text(session, "abc")

    result = session.handle_key(KeyInput("s", modifiers=("ctrl",)))

    assert result.saved is True
    assert result.changes.is_noop
    assert target.read_text(encoding="utf-8") == "abc\n"
    assert session.buffer.modified is False


def test_quit_never_saves(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    session = EditorSession(TextBuffer(), filename=target)
    type_text(session, "unsaved")

    result = session.handle_key(KeyInput("q", modifiers=("ctrl",)))

    assert result.quit is True
    assert not target.exists()


def test_save_failure_propagates(tmp_path: Path) -> None:
    session = EditorSession(TextBuffer.load("x"), filename=tmp_path)

    with pytest.raises(SaveError):
        session.handle_key(KeyInput("s", modifiers=("ctrl",)))


def test_scrolling_forces_whole_repaint(tmp_path: Path) -> None:
    buffer = TextBuffer.load("\n".join(f"row {i}" for i in range(10)))
    session = EditorSession(buffer, filename=tmp_path / "f.txt", height=3)

    session.handle_key(KeyInput("down"))
    result = session.handle_key(KeyInput("down"))
    assert result.changes.is_noop
    assert session.viewport.offset == 0

    result = session.handle_key(KeyInput("down"))
    assert result.changes.is_whole
    assert session.viewport.offset == 1

    session.handle_key(KeyInput("up"))
    session.handle_key(KeyInput("up"))
    result = session.handle_key(KeyInput("up"))
    assert result.changes.is_whole
    assert session.viewport.offset == 0


def test_edit_changes_survive_when_no_scroll(tmp_path: Path) -> None:
    session = EditorSession(TextBuffer.load("abc"), filename=tmp_path / "f.txt")

    result = session.handle_key(KeyInput("x", text="x"))

    assert result.changes == ChangeSet.lines([0])


def test_resize_scrolls_cursor_into_view(tmp_path: Path) -> None:
    buffer = TextBuffer.load("\n".join("x" for _ in range(10)))
    session = EditorSession(buffer, filename=tmp_path / "f.txt", height=10)
    for _ in range(9):
        session.handle_key(KeyInput("down"))

    changes = session.resize(4)

    assert changes.is_whole
    assert session.viewport.offset == 6
    assert session.viewport.contains(9)


def test_viewport_rejects_zero_height() -> None:
    with pytest.raises(ValueError):
        Viewport(height=0)


def test_status_reports_position_and_modified() -> None:
    session = EditorSession(TextBuffer.load("abc"), filename="doc.txt")
    assert session.status == "doc.txt  1:1  1 lines"

    session.handle_key(KeyInput("x", text="x"))

    assert session.status == "doc.txt [+]  1:2  1 lines"
