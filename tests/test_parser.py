"""End-to-end tests for QueryParser / parse_url."""

from __future__ import annotations

import pytest

from rest_query import (
    Condition,
    FilterTooDeepError,
    Group,
    InvalidFieldsSelectionError,
    InvalidPaginationError,
    LogicalOperator,
    MissingGroupDelimiterError,
    MissingSortFieldError,
    Pagination,
    Query,
    QueryParser,
    SortDirection,
    SortSpec,
    UnbalancedGroupError,
    parse_url,
)

# -- Path -----------------------------------------------------------------------


def test_resource_type_and_identifier() -> None:
    result = parse_url("users/12345")
    assert result.to_dict() == {
        "resourceType": "users",
        "identifier": "12345",
        "filter": {"type": "group", "logical": "and", "conditions": []},
        "sort": [],
        "fields": {},
        "pagination": {},
    }
    assert result == Query(resource_type="users", identifier="12345")


def test_collection_without_identifier(parser: QueryParser) -> None:
    result = parser.parse("users")
    assert result.resource_type == "users"
    assert result.identifier is None


def test_empty_url(parser: QueryParser) -> None:
    result = parser.parse("")
    assert result.resource_type is None
    assert result.identifier is None
    assert result.filter == Group()


def test_extra_slashes_are_ignored(parser: QueryParser) -> None:
    result = parser.parse("/users//42/")
    assert (result.resource_type, result.identifier) == ("users", "42")


def test_absolute_url(parser: QueryParser) -> None:
    result = parser.parse("https://api.example.com/users/7?limit=5")
    assert result.resource_type == "users"
    assert result.identifier == "7"
    assert result.pagination == Pagination(limit=5)


def test_percent_encoded_path_segment(parser: QueryParser) -> None:
    assert parser.parse("users/a%20b").identifier == "a b"


# -- Filter ---------------------------------------------------------------------


def test_filter_with_single_condition(parser: QueryParser) -> None:
    result = parser.parse("users?filter=age[gte]30")
    assert result.filter.to_dict() == {
        "type": "group",
        "logical": "and",
        "conditions": [{"field": "age", "operator": "gte", "value": 30}],
    }


def test_nested_filter_groups(parser: QueryParser) -> None:
    result = parser.parse("users?filter=(age[gte]30|age[lt]20);status[eq]active")
    assert result.filter.to_dict() == {
        "type": "group",
        "logical": "and",
        "conditions": [
            {
                "type": "group",
                "logical": "or",
                "conditions": [
                    {"field": "age", "operator": "gte", "value": 30},
                    {"field": "age", "operator": "lt", "value": 20},
                ],
            },
            {"field": "status", "operator": "eq", "value": "active"},
        ],
    }


def test_missing_delimiter_before_group(parser: QueryParser) -> None:
    with pytest.raises(MissingGroupDelimiterError):
        parser.parse("users?filter=age[gte]30(status[eq]active|age[lt]20)")


def test_encoded_filter(parser: QueryParser) -> None:
    result = parser.parse("users?filter=name%5Beq%5DJohn%20Doe")
    assert result.filter.conditions == (
        Condition(field="name", operator="eq", value="John Doe"),
    )


def test_plus_decodes_to_space(parser: QueryParser) -> None:
    result = parser.parse("users?filter=name[eq]John+Doe")
    assert list(result.filter.iter_conditions())[0].value == "John Doe"


def test_encoded_ampersand_stays_in_value(parser: QueryParser) -> None:
    result = parser.parse("users?filter=name[eq]Tom%26Jerry&limit=1")
    assert list(result.filter.iter_conditions())[0].value == "Tom&Jerry"
    assert result.pagination.limit == 1


def test_semicolon_is_not_a_parameter_separator(parser: QueryParser) -> None:
    result = parser.parse("users?filter=a[eq]1;b[eq]2|c[eq]3")
    assert result.filter.logical is LogicalOperator.OR
    assert len(result.filter.conditions) == 3


def test_last_filter_parameter_wins(parser: QueryParser) -> None:
    result = parser.parse("users?filter=a[eq]1&filter=b[eq]2")
    assert [c.field for c in result.filter.iter_conditions()] == ["b"]


def test_dotted_field_path(parser: QueryParser) -> None:
    result = parser.parse("posts?filter=author.name[like]%25john%25")
    cond = list(result.filter.iter_conditions())[0]
    assert cond.path == ("author", "name")
    assert cond.value == "%john%"


def test_strict_groups_option() -> None:
    with pytest.raises(UnbalancedGroupError):
        parse_url("users?filter=(a[eq]1", strict_groups=True)
    assert parse_url("users?filter=(a[eq]1").filter.conditions


def test_max_filter_depth_option() -> None:
    parser = QueryParser(max_filter_depth=1)
    assert parser.parse("users?filter=(a[eq]1);b[eq]2").filter.conditions
    with pytest.raises(FilterTooDeepError):
        parser.parse("users?filter=((a[eq]1))")


# -- Sort -----------------------------------------------------------------------


def test_sort_parameters(parser: QueryParser) -> None:
    result = parser.parse("users?sort=name:asc,created_at:desc")
    assert result.sort == (
        SortSpec(field="name", direction=SortDirection.ASC),
        SortSpec(field="created_at", direction=SortDirection.DESC),
    )


def test_sort_without_direction(parser: QueryParser) -> None:
    result = parser.parse("users?sort=name,created_at")
    assert [s.to_dict() for s in result.sort] == [
        {"field": "name", "direction": "asc"},
        {"field": "created_at", "direction": "asc"},
    ]


def test_repeated_sort_parameters_concatenate(parser: QueryParser) -> None:
    result = parser.parse("users?sort=b&limit=1&sort=a:desc,c")
    assert [(s.field, s.direction.value) for s in result.sort] == [
        ("b", "asc"),
        ("a", "desc"),
        ("c", "asc"),
    ]


def test_missing_sort_field(parser: QueryParser) -> None:
    with pytest.raises(MissingSortFieldError):
        parser.parse("users?sort=:asc")


# -- Fields ---------------------------------------------------------------------


def test_field_selection(parser: QueryParser) -> None:
    result = parser.parse("users?fields=users:name,email")
    assert result.fields == {"users": ("name", "email")}


def test_field_selection_without_resource(parser: QueryParser) -> None:
    with pytest.raises(InvalidFieldsSelectionError):
        parser.parse("users?fields=name,email")


def test_fields_prefixed_parameters_merge(parser: QueryParser) -> None:
    result = parser.parse(
        "users?fields=users:name&fields[posts]=posts:title&fields=users:email"
    )
    assert result.fields == {"users": ("email",), "posts": ("title",)}


# -- Pagination -----------------------------------------------------------------


def test_pagination(parser: QueryParser) -> None:
    result = parser.parse("users?limit=10&offset=20")
    assert result.pagination.to_dict() == {"limit": 10, "offset": 20}


def test_invalid_pagination_names_first_bad_key(parser: QueryParser) -> None:
    with pytest.raises(InvalidPaginationError) as exc_info:
        parser.parse("users?limit=abc&offset=xyz")
    assert exc_info.value.field == "limit"


# -- Dispatch -------------------------------------------------------------------


def test_unknown_parameters_are_ignored(parser: QueryParser) -> None:
    assert parser.parse("users?page=2&q=x") == Query(resource_type="users")


def test_complex_url(parser: QueryParser) -> None:
    url = (
        "users/2979368b-790d-4b9a-b031-8d67d35b8359"
        "?sort=created_at:desc&sort=lastname:asc&filter=email[eq]null"
    )
    assert parser.parse(url).to_dict() == {
        "resourceType": "users",
        "identifier": "2979368b-790d-4b9a-b031-8d67d35b8359",
        "filter": {
            "type": "group",
            "logical": "and",
            "conditions": [{"field": "email", "operator": "eq", "value": None}],
        },
        "sort": [
            {"field": "created_at", "direction": "desc"},
            {"field": "lastname", "direction": "asc"},
        ],
        "fields": {},
        "pagination": {},
    }


def test_error_aborts_whole_parse(parser: QueryParser) -> None:
    with pytest.raises(InvalidPaginationError):
        parser.parse("users?filter=a[eq]1&sort=name&limit=nope")


def test_custom_parameter_names() -> None:
    parser = QueryParser(
        filter_key="where",
        sort_key="order_by",
        fields_prefix="select",
        limit_key="per_page",
        offset_key="skip",
    )
    result = parser.parse(
        "users?where=a[eq]1&order_by=a:desc&select=users:a&per_page=5&skip=10"
        "&filter=ignored"
    )
    assert result.filter.conditions == (Condition(field="a", operator="eq", value=1),)
    assert result.sort == (SortSpec(field="a", direction=SortDirection.DESC),)
    assert result.fields == {"users": ("a",)}
    assert result.pagination == Pagination(limit=5, offset=10)


def test_parse_components() -> None:
    parser = QueryParser()
    result = parser.parse_components(
        "/orders/9", [("filter", "total[gt]100"), ("sort", "total:desc")]
    )
    assert result.resource_type == "orders"
    assert result.identifier == "9"
    assert result.filter.conditions == (
        Condition(field="total", operator="gt", value=100),
    )
