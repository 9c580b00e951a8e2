from __future__ import annotations

from pathlib import Path

import pytest

from linepad.buffer import Cursor, TextBuffer
from linepad.storage import SaveError, load_buffer, read_file_as_string, save_to_file


def test_read_missing_file_returns_none(tmp_path: Path) -> None:
    assert read_file_as_string(tmp_path / "missing.txt") is None


def test_read_undecodable_file_returns_none(tmp_path: Path) -> None:
    target = tmp_path / "binary.bin"
    target.write_bytes(b"\xff\xfe\xfa")

    assert read_file_as_string(target) is None


def test_load_buffer_from_file(tmp_path: Path) -> None:
    target = tmp_path / "in.txt"
    target.write_text("alpha\nbeta", encoding="utf-8")

    buffer = load_buffer(target)

    assert buffer.lines() == ("alpha", "beta")


def test_save_adds_trailing_newline(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    written = save_to_file(target, TextBuffer.load("a\nb"))

    assert target.read_bytes() == b"a\nb\n"
    assert written == 4


def test_save_truncates_previous_contents(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("a much longer previous body\n" * 5, encoding="utf-8")

    save_to_file(target, TextBuffer.load("short"))

    assert target.read_text(encoding="utf-8") == "short\n"


def test_save_then_reload_is_stable(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"
    buffer = TextBuffer.load("x")
    buffer.split_line(Cursor(1, 0))
    buffer.insert_char(Cursor(0, 1), "y")

    save_to_file(target, buffer)
    reloaded = load_buffer(target)

    assert reloaded.lines() == buffer.lines()
    assert buffer.modified is False


def test_save_to_unwritable_target_raises(tmp_path: Path) -> None:
    target = tmp_path / "missing-dir" / "out.txt"

    with pytest.raises(SaveError) as excinfo:
        save_to_file(target, TextBuffer.load("x"))

    assert excinfo.value.path == str(target)
