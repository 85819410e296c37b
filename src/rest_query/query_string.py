"""QueryStringBuilder — Query -> query string (pagination / HATEOAS links)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from .models import Group
from .operators import LogicalOperator

if TYPE_CHECKING:
    from .models import FilterNode, FilterValue, Query

_SAFE = "[]():;|,.\\?"
_SEPARATORS = {LogicalOperator.AND: ";", LogicalOperator.OR: "|"}


def render_value(value: FilterValue) -> str:
    if value is None:
        return "null"
    return str(value)


def render_filter(group: Group) -> str:
    """
    Render *group* in the filter grammar.

    Nested groups are parenthesised. An ``or`` group with fewer than two
    children keeps a trailing ``|`` so the operator survives a re-parse.
    """
    separator = _SEPARATORS[group.logical]
    text = separator.join(_render_node(node) for node in group.conditions)
    if group.logical is LogicalOperator.OR and len(group.conditions) < 2:
        text += separator
    return text


def _render_node(node: FilterNode) -> str:
    if isinstance(node, Group):
        return f"({render_filter(node)})"
    return f"{node.field}[{node.operator}]{render_value(node.value)}"


class QueryStringBuilder:
    """Build a query string from a :class:`~rest_query.models.Query`."""

    def build(
        self,
        query: Query,
        *,
        filter_key: str = "filter",
        sort_key: str = "sort",
        fields_key: str = "fields",
        limit_key: str = "limit",
        offset_key: str = "offset",
    ) -> str:
        """Produce the query string (without ``?``) that parses back to *query*."""
        params: list[tuple[str, str]] = []
        root = query.filter
        if not (root.is_empty and root.logical is LogicalOperator.AND):
            params.append((filter_key, render_filter(root)))
        if query.sort:
            params.append(
                (
                    sort_key,
                    ",".join(f"{s.field}:{s.direction.value}" for s in query.sort),
                )
            )
        for resource, columns in query.fields.items():
            params.append((fields_key, f"{resource}:{','.join(columns)}"))
        if query.pagination.limit is not None:
            params.append((limit_key, str(query.pagination.limit)))
        if query.pagination.offset is not None:
            params.append((offset_key, str(query.pagination.offset)))
        return urlencode(params, safe=_SAFE, quote_via=quote)

    def build_url(self, query: Query, **keys: str) -> str:
        """Produce ``resource[/identifier][?query]`` for *query*."""
        segments = [
            quote(segment, safe="")
            for segment in (query.resource_type, query.identifier)
            if segment is not None
        ]
        path = "/".join(segments)
        query_string = self.build(query, **keys)
        return f"{path}?{query_string}" if query_string else path
