"""Shared fixtures for criticmark tests."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt

from criticmark import create_markdown
from criticmark.catalog import CATALOG, PatternSpec


@pytest.fixture
def md() -> MarkdownIt:
    """CommonMark parser with the criticmarkup namespace."""
    return create_markdown("criticmarkup")


@pytest.fixture(params=["criticmarkup", "mdmarkup"])
def namespace(request: pytest.FixtureRequest) -> str:
    """Both built-in namespaces; they must behave identically."""
    return request.param


@pytest.fixture
def ns_md(namespace: str) -> MarkdownIt:
    """Parser for the parametrized namespace."""
    return create_markdown(namespace)


@pytest.fixture(params=CATALOG, ids=lambda spec: spec.kind.value)
def spec(request: pytest.FixtureRequest) -> PatternSpec:
    return request.param

