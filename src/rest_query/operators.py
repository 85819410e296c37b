"""Operator vocabularies used by the filter grammar and the sort parser."""

from __future__ import annotations

from enum import Enum


class FilterOperator(str, Enum):
    """Comparison operators with a defined meaning downstream.

    The condition parser accepts any ``[word]`` operator; this set only
    documents the ones translators are expected to understand.
    """

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"
    LIKE = "like"


class LogicalOperator(str, Enum):
    """How a group combines its children."""

    AND = "and"
    OR = "or"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


RECOGNIZED_OPERATORS: frozenset[str] = frozenset(m.value for m in FilterOperator)
