from __future__ import annotations

import pytest

from tests._fixtures.graph_builder import GraphBuilder


@pytest.fixture
def graph_builder() -> GraphBuilder:
    """Provide an empty graph builder for each test."""
    return GraphBuilder()
