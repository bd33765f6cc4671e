"""Graph connectivity."""

from forestviz.graph.components import (
    Component,
    build_undirected_graph,
    find_components,
    forest_count,
)

__all__ = ["Component", "build_undirected_graph", "find_components", "forest_count"]
