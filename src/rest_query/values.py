"""Raw condition value -> typed scalar."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FilterValue

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


def is_numeric(value: str) -> bool:
    """Return ``True`` for a finite decimal number, surrounding blanks allowed."""
    text = value.strip()
    if _NUMBER_RE.fullmatch(text) is None:
        return False
    # 1e400 matches the pattern but overflows to inf
    return math.isfinite(float(text))


def coerce_value(raw: str) -> FilterValue:
    """
    Convert a raw condition value to ``None``, a number, or the string itself.

    ``"null"`` becomes ``None``; integral literals become ``int`` and other
    numeric literals ``float``. Anything else, ``"notnull"`` included, is
    returned unchanged.
    """
    if raw == "null":
        return None
    if is_numeric(raw):
        text = raw.strip()
        if _INTEGER_RE.fullmatch(text):
            return int(text)
        return float(text)
    return raw
