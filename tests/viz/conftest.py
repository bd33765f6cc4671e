"""Shared fixtures for visualization tests."""

import pytest

from forestviz import Edge, ForestvizConfig, GraphModel


@pytest.fixture()
def config() -> ForestvizConfig:
    return ForestvizConfig()


@pytest.fixture()
def simple_model() -> GraphModel:
    """Three nodes, one edge: two forests."""
    return GraphModel(nodes=(1, 2, 3), edges=(Edge(1, 2),))


@pytest.fixture()
def example_model() -> GraphModel:
    """The placeholder example from the input form."""
    return GraphModel(
        nodes=(2, 6, 7, 1, 5, 3, 9),
        edges=(Edge(2, 7), Edge(3, 5), Edge(1, 9), Edge(9, 6)),
        starting_node=1,
    )
