"""
Query parsing exception hierarchy.

All exceptions inherit from ``QueryParseError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class QueryParseError(Exception):
    """Base exception for all query parsing errors."""

    code = "QUERY_PARSE_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
        }


class QuerySyntaxError(QueryParseError, ValueError):
    """A query parameter does not follow its grammar."""

    code = "SYNTAX_ERROR"


class MissingGroupDelimiterError(QuerySyntaxError):
    """An opening ``(`` directly follows a condition without ``;``/``|``."""

    code = "MISSING_GROUP_DELIMITER"

    def __init__(self, position: int | None = None) -> None:
        self.position = position
        super().__init__('Invalid syntax: missing delimiter before "("')

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "position": self.position,
        }


class InvalidConditionError(QuerySyntaxError):
    """A leaf token does not match ``field[operator]value``."""

    code = "INVALID_FILTER_CONDITION"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'Invalid filter condition: "{token}"')

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "token": self.token,
        }


class UnbalancedGroupError(QuerySyntaxError):
    """Parentheses do not pair up (only raised by strict parsing)."""

    code = "UNBALANCED_GROUP"


class FilterTooDeepError(QuerySyntaxError):
    """Groups are nested deeper than the configured limit."""

    code = "FILTER_TOO_DEEP"

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Invalid syntax: groups nested deeper than {max_depth} levels"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "max_depth": self.max_depth,
        }


class MissingSortFieldError(QuerySyntaxError):
    code = "MISSING_ORDER_FIELD"

    def __init__(self) -> None:
        super().__init__("Missing order field")


class InvalidSortDirectionError(QuerySyntaxError):
    code = "INVALID_SORT_DIRECTION"

    def __init__(self, direction: str) -> None:
        self.direction = direction
        super().__init__(
            f"Invalid sorting direction: '{direction}'. Expected 'asc' or 'desc'."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "direction": self.direction,
        }


class InvalidFieldsSelectionError(QuerySyntaxError):
    """A ``fields`` value lacks the ``resource:field1,field2`` shape."""

    code = "INVALID_FIELDS_SELECTION"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            "Invalid fields selection. Try 'resource:field1,field2[,fieldN]'"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "value": self.value,
        }


class InvalidPaginationError(QueryParseError, TypeError):
    """``limit`` or ``offset`` is not a non-negative number."""

    code = "INVALID_PAGINATION_VALUE"

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid pagination field '{field}'. The value must be an integer."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "field": self.field,
            "value": self.value,
        }
