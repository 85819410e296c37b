"""ParseResult — explicit success/failure outcome of a parse."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import QueryParseError
from .parser import QueryParser

if TYPE_CHECKING:
    from .models import Query


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed ``query`` or the ``error`` that stopped the parse.

    Usage::

        result = try_parse_url("users?limit=abc")
        if not result:
            return JSONResponse(result.error.to_dict(), status_code=400)
    """

    query: Query | None = None
    error: QueryParseError | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls, query: Query) -> ParseResult:
        return cls(query=query)

    @classmethod
    def failure(cls, error: QueryParseError) -> ParseResult:
        return cls(error=error)

    def unwrap(self) -> Query:
        """Return the query, or raise the stored error."""
        if self.error is not None:
            raise self.error
        assert self.query is not None
        return self.query

    def __bool__(self) -> bool:
        return self.is_ok


def try_parse_url(url: str, **options: Any) -> ParseResult:
    """Like :func:`~rest_query.parser.parse_url` but never raises parse errors."""
    try:
        return ParseResult.success(QueryParser(**options).parse(url))
    except QueryParseError as exc:
        return ParseResult.failure(exc)
