"""Read-only keyword and symbol tables, built once at import time."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class SyntaxTable:
    name: str
    keywords: frozenset[str] = frozenset()
    symbols: frozenset[str] = frozenset()
    comment_prefix: Optional[str] = None
    suffixes: tuple[str, ...] = ()

    @property
    def highlights(self) -> bool:
        return bool(self.keywords or self.symbols or self.comment_prefix)


RUST = SyntaxTable(
    name="rust",
    keywords=frozenset(
        {
            "abstract", "alignof", "as", "become", "box",
            "break", "const", "continue", "crate", "do",
            "else", "enum", "extern", "false", "final",
            "fn", "for", "if", "impl", "in", "let", "loop",
            "macro", "match", "mod", "move", "mut", "offsetof",
            "override", "priv", "proc", "pub", "pure", "ref",
            "return", "Self", "self", "sizeof", "static",
            "struct", "super", "trait", "true", "type",
            "typeof", "unsafe", "unsized", "use", "virtual",
            "where", "while", "yield",
        }
    ),  # fmt: skip
    symbols=frozenset(":;()[]{}=<>"),
    comment_prefix="//",
    suffixes=(".rs",),
)

PYTHON = SyntaxTable(
    name="python",
    keywords=frozenset(
        {
            "False", "None", "True", "and", "as", "assert", "async",
            "await", "break", "class", "continue", "def", "del", "elif",
            "else", "except", "finally", "for", "from", "global", "if",
            "import", "in", "is", "lambda", "nonlocal", "not", "or",
            "pass", "raise", "return", "try", "while", "with", "yield",
        }
    ),  # fmt: skip
    symbols=frozenset(":;()[]{}=<>,"),
    comment_prefix="#",
    suffixes=(".py", ".pyi"),
)

PLAIN = SyntaxTable(name="plain")

TABLES: tuple[SyntaxTable, ...] = (RUST, PYTHON)


def table_for(path: Union[str, "os.PathLike[str]", None]) -> SyntaxTable:
    """Pick a table from the file suffix; unknown suffixes get no highlighting."""

    if path is None:
        return PLAIN
    suffix = os.path.splitext(os.fspath(path))[1].lower()
    for table in TABLES:
        if suffix in table.suffixes:
            return table
    return PLAIN


__all__ = ["SyntaxTable", "RUST", "PYTHON", "PLAIN", "TABLES", "table_for"]
