"""QueryParser — resource URL -> Query descriptor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, unquote, urljoin, urlsplit

from .expression import DEFAULT_MAX_DEPTH, parse_filter
from .fields import parse_fields
from .models import Group, Pagination, Query
from .pagination import parse_pagination_value
from .sort import parse_sort

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import SortSpec

logger = logging.getLogger("rest_query.parser")

DEFAULT_BASE_URL = "http://localhost"


class QueryParser:
    """Parse resource URLs into :class:`~rest_query.models.Query` objects."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        filter_key: str = "filter",
        sort_key: str = "sort",
        fields_prefix: str = "fields",
        limit_key: str = "limit",
        offset_key: str = "offset",
        strict_groups: bool = False,
        max_filter_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """
        Initialize QueryParser.

        Args:
            base_url: Base that relative URLs are resolved against.
            filter_key: Name of the filter parameter.
            sort_key: Name of the sort parameter (may repeat).
            fields_prefix: Any parameter starting with this is a field
                selection, e.g. ``fields`` or ``fields[users]``.
            limit_key: Name of the page size parameter.
            offset_key: Name of the page offset parameter.
            strict_groups: Reject unbalanced parentheses in filters.
            max_filter_depth: Deepest group nesting accepted in a filter.
        """
        self._base_url = base_url
        self._filter_key = filter_key
        self._sort_key = sort_key
        self._fields_prefix = fields_prefix
        self._limit_key = limit_key
        self._offset_key = offset_key
        self._strict_groups = strict_groups
        self._max_filter_depth = max_filter_depth

    def parse(self, url: str) -> Query:
        """Split *url* into path and query parameters, decode both, and parse."""
        parts = urlsplit(urljoin(self._base_url, url))
        params = parse_qsl(parts.query, keep_blank_values=True)
        return self.parse_components(parts.path, params)

    def parse_components(self, path: str, params: Iterable[tuple[str, str]]) -> Query:
        """
        Parse a raw path and ordered, decoded query parameters.

        Parameters are handled in the given order: the last ``filter``
        wins, ``sort`` values concatenate, ``fields*`` selections merge
        per resource (later wins), and unknown names are ignored.
        """
        segments = [unquote(segment) for segment in path.split("/") if segment]
        resource_type = segments[0] if segments else None
        identifier = segments[1] if len(segments) > 1 else None

        filter_group = Group()
        sort: list[SortSpec] = []
        fields: dict[str, tuple[str, ...]] = {}
        bounds: dict[str, int] = {}

        for key, value in params:
            if key == self._filter_key:
                filter_group = parse_filter(
                    value,
                    strict=self._strict_groups,
                    max_depth=self._max_filter_depth,
                )
            elif key == self._sort_key:
                sort.extend(parse_sort(value))
            elif key.startswith(self._fields_prefix):
                fields.update(parse_fields(value))
            elif key == self._limit_key:
                bounds["limit"] = parse_pagination_value(key, value)
            elif key == self._offset_key:
                bounds["offset"] = parse_pagination_value(key, value)
            else:
                logger.debug("Ignoring unknown query parameter %r", key)

        query = Query(
            resource_type=resource_type,
            identifier=identifier,
            filter=filter_group,
            sort=tuple(sort),
            fields=fields,
            pagination=Pagination(**bounds),
        )
        logger.debug(
            "Parsed query for %s (identifier=%s, %d sort keys)",
            resource_type,
            identifier,
            len(query.sort),
        )
        return query


def parse_url(url: str, **options: Any) -> Query:
    """Parse *url* with a :class:`QueryParser` built from *options*."""
    return QueryParser(**options).parse(url)
