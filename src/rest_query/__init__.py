"""REST resource URL parsing — filter expressions, sort, fields, pagination."""

from __future__ import annotations

from .condition import parse_condition
from .exceptions import (
    FilterTooDeepError,
    InvalidConditionError,
    InvalidFieldsSelectionError,
    InvalidPaginationError,
    InvalidSortDirectionError,
    MissingGroupDelimiterError,
    MissingSortFieldError,
    QueryParseError,
    QuerySyntaxError,
    UnbalancedGroupError,
)
from .expression import parse_filter
from .fields import parse_fields
from .models import Condition, FilterNode, Group, Pagination, Query, SortSpec
from .operators import FilterOperator, LogicalOperator, SortDirection
from .pagination import parse_pagination
from .parser import QueryParser, parse_url
from .query_string import QueryStringBuilder
from .result import ParseResult, try_parse_url
from .sort import parse_sort
from .tokenizer import Token, TokenKind, tokenize
from .values import coerce_value, is_numeric

__all__ = [
    # Entry points
    "QueryParser",
    "parse_url",
    "try_parse_url",
    "ParseResult",
    "QueryStringBuilder",
    # Models
    "Query",
    "Group",
    "Condition",
    "FilterNode",
    "SortSpec",
    "Pagination",
    "FilterOperator",
    "LogicalOperator",
    "SortDirection",
    # Component parsers
    "tokenize",
    "Token",
    "TokenKind",
    "parse_filter",
    "parse_condition",
    "coerce_value",
    "is_numeric",
    "parse_sort",
    "parse_fields",
    "parse_pagination",
    # Exceptions
    "QueryParseError",
    "QuerySyntaxError",
    "MissingGroupDelimiterError",
    "InvalidConditionError",
    "UnbalancedGroupError",
    "FilterTooDeepError",
    "MissingSortFieldError",
    "InvalidSortDirectionError",
    "InvalidFieldsSelectionError",
    "InvalidPaginationError",
]
