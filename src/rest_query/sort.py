"""``sort`` parameter -> SortSpec list."""

from __future__ import annotations

from .exceptions import InvalidSortDirectionError, MissingSortFieldError
from .models import SortSpec
from .operators import SortDirection


def parse_sort(value: str) -> tuple[SortSpec, ...]:
    """
    Parse ``field[:direction][,field[:direction]...]``.

    Direction defaults to ``asc`` when the colon or the text after it is
    missing.
    """
    specs: list[SortSpec] = []
    for item in value.split(","):
        field, _, direction = item.partition(":")
        if not field:
            raise MissingSortFieldError()
        if not direction:
            specs.append(SortSpec(field=field))
            continue
        try:
            specs.append(SortSpec(field=field, direction=SortDirection(direction)))
        except ValueError as e:
            raise InvalidSortDirectionError(direction) from e
    return tuple(specs)
