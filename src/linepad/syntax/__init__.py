"""Presentation-only syntax highlighting."""

from .highlighter import Span, TokenKind, highlight_line
from .tables import PLAIN, PYTHON, RUST, TABLES, SyntaxTable, table_for

__all__ = [
    "Span",
    "TokenKind",
    "highlight_line",
    "SyntaxTable",
    "PLAIN",
    "PYTHON",
    "RUST",
    "TABLES",
    "table_for",
]
