"""``limit``/``offset`` parameters -> Pagination."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from .exceptions import InvalidPaginationError
from .models import Pagination
from .values import is_numeric

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_pagination_value(key: str, raw: str) -> int:
    """Validate one bound; fractional parts are truncated (``"10.9"`` -> 10)."""
    if not is_numeric(raw):
        raise InvalidPaginationError(key, raw)
    value = int(Decimal(raw.strip()))
    if value < 0:
        raise InvalidPaginationError(key, raw)
    return value


def parse_pagination(
    params: Mapping[str, str],
    *,
    limit_key: str = "limit",
    offset_key: str = "offset",
) -> Pagination:
    """Build :class:`Pagination` from whichever bounds *params* holds."""
    limit = params.get(limit_key)
    offset = params.get(offset_key)
    return Pagination(
        limit=parse_pagination_value(limit_key, limit) if limit is not None else None,
        offset=(
            parse_pagination_value(offset_key, offset) if offset is not None else None
        ),
    )
