"""Connected-component discovery for the rendered graph.

Components are found with depth-first traversal over an undirected
NetworkX graph built from the node sequence. Traversal order depends only
on the order of ``nodes`` and ``edges``, so the same input always yields
the same components with the same member ordering.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import networkx as nx

from forestviz.model.types import Edge, NodeId

Component = list[NodeId]


def build_undirected_graph(nodes: Iterable[NodeId], edges: Iterable[Edge]) -> nx.Graph:
    """Build an undirected graph restricted to the given nodes.

    Edges with an endpoint outside ``nodes`` are left out, so they never
    join components. Neighbor order follows edge order, which fixes the
    DFS visiting order.

    Example:
        >>> G = build_undirected_graph([1, 2, 3], [Edge(1, 2), Edge(2, 9)])
        >>> sorted(G.edges())
        [(1, 2)]
    """
    G = nx.Graph()
    G.add_nodes_from(nodes)
    G.add_edges_from(
        edge.endpoints
        for edge in edges
        if edge.source in G and edge.destination in G
    )
    return G


def find_components(nodes: Sequence[NodeId], edges: Sequence[Edge]) -> list[Component]:
    """Partition ``nodes`` into connected components.

    Components come back in the order their root first appears in
    ``nodes``; members are listed in DFS discovery order. Isolated nodes
    form singleton components and duplicate node identifiers are visited
    once.

    Args:
        nodes: Node identifiers in input order
        edges: Edges in input order (treated as bidirectional)

    Returns:
        List of components, each a list of node identifiers

    Example:
        >>> find_components([1, 2, 3], [Edge(1, 2)])
        [[1, 2], [3]]
    """
    G = build_undirected_graph(nodes, edges)
    visited: set[NodeId] = set()
    components: list[Component] = []

    for root in nodes:
        if root in visited:
            continue
        # dfs_preorder_nodes walks an explicit stack of neighbor iterators,
        # matching recursive DFS order without recursion-depth limits.
        component = list(nx.dfs_preorder_nodes(G, root))
        visited.update(component)
        components.append(component)

    return components


def forest_count(components: Sequence[Component]) -> int:
    """Number of connected components ("forests") shown to the user."""
    return len(components)
