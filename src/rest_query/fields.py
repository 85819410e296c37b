"""``fields`` parameter -> per-resource field selection."""

from __future__ import annotations

from .exceptions import InvalidFieldsSelectionError


def parse_fields(value: str) -> dict[str, tuple[str, ...]]:
    """Parse ``resource:field1,field2`` into ``{resource: (field1, field2)}``."""
    resource, _, selection = value.partition(":")
    if not resource or not selection:
        raise InvalidFieldsSelectionError(value)
    return {resource: tuple(selection.split(","))}
