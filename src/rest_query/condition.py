"""Leaf token ``field[operator]value`` -> Condition."""

from __future__ import annotations

import re

from .exceptions import InvalidConditionError
from .models import Condition
from .values import coerce_value

CONDITION_RE = re.compile(r"([\w\\.?]+)\[(\w+)\](.+)", re.ASCII)


def parse_condition(token: str) -> Condition:
    """
    Parse one leaf token.

    The field may be a dotted path (``author.name``); the operator is any
    run of word characters and is not checked against
    :class:`~rest_query.operators.FilterOperator`. The value must be
    non-empty.
    """
    match = CONDITION_RE.fullmatch(token)
    if match is None:
        raise InvalidConditionError(token)
    field, operator, raw_value = match.groups()
    return Condition(field=field, operator=operator, value=coerce_value(raw_value))
