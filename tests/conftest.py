"""Shared fixtures for rest_query tests."""

from __future__ import annotations

import pytest

from rest_query import QueryParser, QueryStringBuilder


@pytest.fixture
def parser() -> QueryParser:
    """Parser with default parameter names."""
    return QueryParser()


@pytest.fixture
def builder() -> QueryStringBuilder:
    return QueryStringBuilder()
