"""Word/character tokenizer used only for painting."""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .tables import RUST, SyntaxTable


class TokenKind(str, Enum):
    PLAIN = "plain"
    KEYWORD = "keyword"
    COMMENT = "comment"
    STRING = "string"
    SYMBOL = "symbol"


Span = Tuple[str, TokenKind]


def highlight_line(line: str, table: SyntaxTable = RUST) -> List[Span]:
    """Split ``line`` into styled spans whose texts concatenate back to ``line``.

    Words are separated by single spaces. A word starting with the comment
    prefix turns the rest of the line into a comment. Whole words found in the
    keyword table are keywords. Other words are scanned character by character:
    double and single quotes open and close string runs, and single characters
    in the symbol table are symbols.
    """

    if not line:
        return []
    if not table.highlights:
        return [(line, TokenKind.PLAIN)]

    spans: List[Span] = []
    in_comment = False
    quote: str | None = None

    def emit(text: str, kind: TokenKind) -> None:
        if spans and spans[-1][1] is kind:
            spans[-1] = (spans[-1][0] + text, kind)
        else:
            spans.append((text, kind))

    for index, word in enumerate(line.split(" ")):
        if index:
            if in_comment:
                emit(" ", TokenKind.COMMENT)
            elif quote is not None:
                emit(" ", TokenKind.STRING)
            else:
                emit(" ", TokenKind.PLAIN)
        if not word:
            continue

        prefix = table.comment_prefix
        if in_comment or (quote is None and prefix and word.startswith(prefix)):
            in_comment = True
            emit(word, TokenKind.COMMENT)
            continue
        if quote is None and word in table.keywords:
            emit(word, TokenKind.KEYWORD)
            continue

        for character in word:
            if quote is not None:
                emit(character, TokenKind.STRING)
                if character == quote:
                    quote = None
            elif character in {'"', "'"}:
                quote = character
                emit(character, TokenKind.STRING)
            elif character in table.symbols:
                emit(character, TokenKind.SYMBOL)
            else:
                emit(character, TokenKind.PLAIN)

    return spans


__all__ = ["Span", "TokenKind", "highlight_line"]
