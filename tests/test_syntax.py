from __future__ import annotations

import pytest

from linepad.syntax import PLAIN, PYTHON, RUST, TokenKind, highlight_line, table_for


@pytest.mark.parametrize(
    "line",
    [
        "",
        "fn main() {",
        "    let s = \"hello world\"; // greet",
        "a  b   c",
        "let c = 'x';",
        "   ",
    ],
)
def test_spans_concatenate_back_to_line(line: str) -> None:
    spans = highlight_line(line, RUST)

    assert "".join(text for text, _ in spans) == line


def test_keywords_and_symbols() -> None:
    spans = highlight_line("fn main() {", RUST)

    assert spans[0] == ("fn", TokenKind.KEYWORD)
    assert ("()", TokenKind.SYMBOL) in spans
    assert ("{", TokenKind.SYMBOL) in spans


def test_comment_runs_to_end_of_line() -> None:
    spans = highlight_line("x = 1; // let fn", RUST)

    assert spans[-1] == ("// let fn", TokenKind.COMMENT)


def test_strings_cover_spaces_and_keywords() -> None:
    spans = highlight_line('print("if x")', PYTHON)

    assert ('"if x"', TokenKind.STRING) in spans


def test_plain_table_does_not_highlight() -> None:
    assert highlight_line("fn main() {}", PLAIN) == [("fn main() {}", TokenKind.PLAIN)]


def test_table_for_picks_by_suffix() -> None:
    assert table_for("src/main.rs") is RUST
    assert table_for("tool.PY") is PYTHON
    assert table_for("notes.txt") is PLAIN
    assert table_for(None) is PLAIN


def test_tables_are_read_only() -> None:
    with pytest.raises(AttributeError):
        RUST.keywords.add("foo")  # type: ignore[attr-defined]
