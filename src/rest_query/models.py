"""
Query descriptor models.

``Query`` is what :func:`rest_query.parse_url` returns. The filter tree is
an explicit tagged union of :class:`Condition` leaves and :class:`Group`
nodes, discriminated on ``type``.

All models are frozen; a parse builds them fresh and never shares them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .operators import RECOGNIZED_OPERATORS, LogicalOperator, SortDirection

if TYPE_CHECKING:
    from collections.abc import Iterator

FilterValue = Union[None, int, float, str]


class Condition(BaseModel):
    """Leaf node: ``field[operator]value``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["condition"] = "condition"
    field: str
    operator: str
    value: FilterValue = None

    @property
    def path(self) -> tuple[str, ...]:
        """Dot-separated field path, e.g. ``("author", "name")``."""
        return tuple(self.field.split("."))

    @property
    def is_recognized_operator(self) -> bool:
        return self.operator in RECOGNIZED_OPERATORS

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "operator": self.operator,
            "value": self.value,
        }


class Group(BaseModel):
    """
    Node combining its children under one logical operator.

    ``logical`` is whichever of ``and``/``or`` appeared *last* among the
    direct children in the filter string, so ``a;b|c`` is a single ``or``
    group. Use parentheses to mix operators.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["group"] = "group"
    logical: LogicalOperator = LogicalOperator.AND
    conditions: tuple[FilterNode, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.conditions

    def iter_conditions(self) -> Iterator[Condition]:
        """Yield every leaf condition, depth-first, left to right."""
        for node in self.conditions:
            if isinstance(node, Group):
                yield from node.iter_conditions()
            else:
                yield node

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "group",
            "logical": self.logical.value,
            "conditions": [node.to_dict() for node in self.conditions],
        }


FilterNode = Annotated[Union[Condition, Group], Field(discriminator="type")]

Group.model_rebuild()


class SortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "direction": self.direction.value}


class Pagination(BaseModel):
    """Result window. Absent bounds stay ``None``."""

    model_config = ConfigDict(frozen=True)

    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)

    def to_dict(self) -> dict[str, int]:
        result: dict[str, int] = {}
        if self.limit is not None:
            result["limit"] = self.limit
        if self.offset is not None:
            result["offset"] = self.offset
        return result


class Query(BaseModel):
    """
    Structured form of a resource URL.

    Attributes:
        resource_type: First path segment; ``None`` only for an empty path.
        identifier: Second path segment, if any.
        filter: Root filter group (empty ``and`` group when no filter given).
        sort: Sort criteria in encounter order.
        fields: Field selection per resource name.
        pagination: ``limit``/``offset`` bounds.
    """

    model_config = ConfigDict(frozen=True)

    resource_type: str | None = None
    identifier: str | None = None
    filter: Group = Field(default_factory=Group)
    sort: tuple[SortSpec, ...] = ()
    fields: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    pagination: Pagination = Field(default_factory=Pagination)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the JSON-compatible wire shape (camelCase keys)."""
        return {
            "resourceType": self.resource_type,
            "identifier": self.identifier,
            "filter": self.filter.to_dict(),
            "sort": [spec.to_dict() for spec in self.sort],
            "fields": {name: list(cols) for name, cols in self.fields.items()},
            "pagination": self.pagination.to_dict(),
        }
