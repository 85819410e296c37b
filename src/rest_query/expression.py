"""
Recursive-descent parser for the filter grammar.

::

    expr       := term (delimiter term)*
    term       := condition | '(' expr ')'
    delimiter  := ';' (and) | '|' (or)

Every parse returns a :class:`~rest_query.models.Group` at the root, even
for a single condition.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .condition import parse_condition
from .exceptions import FilterTooDeepError, UnbalancedGroupError
from .models import Group
from .operators import LogicalOperator
from .tokenizer import TokenKind, tokenize

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import FilterNode
    from .tokenizer import Token

logger = logging.getLogger("rest_query.expression")

DEFAULT_MAX_DEPTH = 100

_LOGICAL: dict[TokenKind, LogicalOperator] = {
    TokenKind.AND: LogicalOperator.AND,
    TokenKind.OR: LogicalOperator.OR,
}


class TokenCursor:
    """Read position over an immutable token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self.index = 0

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self.index

    def __bool__(self) -> bool:
        return self.remaining > 0

    def next(self) -> Token:
        token = self._tokens[self.index]
        self.index += 1
        return token


def parse_expression(
    cursor: TokenCursor,
    *,
    depth: int = 0,
    strict: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Group:
    """
    Build one group from *cursor*, consuming up to its closing ``)``.

    ``;`` and ``|`` overwrite the group's logical operator; they never
    add a child. With ``strict`` an unclosed nested group or a stray
    ``)`` at the root raises :class:`UnbalancedGroupError`; otherwise end
    of input closes every open group and a stray ``)`` ends the root.
    Opening a group below *max_depth* levels raises
    :class:`FilterTooDeepError`.
    """
    logical = LogicalOperator.AND
    children: list[FilterNode] = []

    while cursor:
        token = cursor.next()
        if token.kind is TokenKind.OPEN:
            if depth >= max_depth:
                raise FilterTooDeepError(max_depth)
            children.append(
                parse_expression(
                    cursor, depth=depth + 1, strict=strict, max_depth=max_depth
                )
            )
        elif token.kind is TokenKind.CLOSE:
            if depth == 0 and strict:
                raise UnbalancedGroupError(
                    f'Invalid syntax: unexpected ")" at position {token.position}'
                )
            return Group(logical=logical, conditions=tuple(children))
        elif token.kind in _LOGICAL:
            logical = _LOGICAL[token.kind]
        else:
            children.append(parse_condition(token.text))

    if depth > 0 and strict:
        raise UnbalancedGroupError('Invalid syntax: missing closing ")"')
    return Group(logical=logical, conditions=tuple(children))


def parse_filter(
    source: str, *, strict: bool = False, max_depth: int = DEFAULT_MAX_DEPTH
) -> Group:
    """Parse a decoded ``filter`` parameter into its root group."""
    cursor = TokenCursor(tokenize(source))
    root = parse_expression(cursor, strict=strict, max_depth=max_depth)
    if cursor:
        logger.debug("Ignoring %d tokens after unmatched ')'", cursor.remaining)
    return root
