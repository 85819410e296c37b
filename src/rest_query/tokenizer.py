"""Filter string -> flat token sequence."""

from __future__ import annotations

import logging
from enum import Enum
from typing import NamedTuple

from .exceptions import MissingGroupDelimiterError

logger = logging.getLogger("rest_query.tokenizer")


class TokenKind(str, Enum):
    CONDITION = "condition"
    OPEN = "("
    CLOSE = ")"
    AND = "and"
    OR = "or"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    position: int


_DELIMITERS: dict[str, TokenKind] = {
    ";": TokenKind.AND,
    "|": TokenKind.OR,
}


def tokenize(source: str) -> tuple[Token, ...]:
    """
    Split a decoded filter string into condition and structural tokens.

    Conditions are trimmed and blank ones dropped. A ``(`` must follow a
    delimiter, another ``(``, a ``)``, or the start of input, so
    ``(a[eq]1)(b[eq]2)`` is accepted while ``a[eq]1(b[eq]2)``
    raises :class:`MissingGroupDelimiterError`.
    """
    tokens: list[Token] = []
    buffer: list[str] = []
    start = 0

    def flush() -> None:
        text = "".join(buffer).strip()
        if text:
            tokens.append(Token(TokenKind.CONDITION, text, start))
        buffer.clear()

    for position, char in enumerate(source):
        if char == "(":
            pending = "".join(buffer).strip()
            if pending and not pending.endswith(";"):
                raise MissingGroupDelimiterError(position)
            buffer.clear()
            tokens.append(Token(TokenKind.OPEN, char, position))
        elif char == ")":
            flush()
            tokens.append(Token(TokenKind.CLOSE, char, position))
        elif char in _DELIMITERS:
            flush()
            tokens.append(Token(_DELIMITERS[char], char, position))
        else:
            if not buffer:
                start = position
            buffer.append(char)

    flush()
    logger.debug("Tokenized filter into %d tokens", len(tokens))
    return tuple(tokens)
