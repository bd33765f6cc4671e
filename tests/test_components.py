"""Tests for connected-component discovery."""

from forestviz import Edge, find_components, forest_count
from forestviz.graph import build_undirected_graph


def _edges(*pairs):
    return [Edge(a, b) for a, b in pairs]


class TestFindComponents:
    def test_single_edge_and_isolated_node(self):
        components = find_components([1, 2, 3], _edges((1, 2)))
        assert components == [[1, 2], [3]]
        assert forest_count(components) == 2

    def test_example_graph(self):
        nodes = [2, 6, 7, 1, 5, 3, 9]
        edges = _edges((2, 7), (3, 5), (1, 9), (9, 6))
        components = find_components(nodes, edges)

        assert components == [[2, 7], [6, 9, 1], [5, 3]]
        assert forest_count(components) == 3

    def test_empty(self):
        assert find_components([], []) == []
        assert forest_count([]) == 0

    def test_isolated_nodes_are_singletons(self):
        assert find_components([4, 5, 6], []) == [[4], [5], [6]]

    def test_edges_are_bidirectional(self):
        assert find_components([1, 2], _edges((2, 1))) == [[1, 2]]

    def test_depth_first_order(self):
        # 1 -> 2 -> 4 is explored before returning to 1 -> 3
        components = find_components([1, 2, 3, 4], _edges((1, 2), (1, 3), (2, 4)))
        assert components == [[1, 2, 4, 3]]

    def test_neighbor_order_follows_edge_order(self):
        components = find_components([1, 2, 3], _edges((1, 3), (1, 2)))
        assert components == [[1, 3, 2]]

    def test_self_loop(self):
        assert find_components([1, 2], _edges((1, 1))) == [[1], [2]]

    def test_cycle(self):
        components = find_components([1, 2, 3], _edges((1, 2), (2, 3), (3, 1)))
        assert components == [[1, 2, 3]]

    def test_unknown_endpoints_do_not_join_components(self):
        components = find_components([1, 3], _edges((1, 2), (2, 3)))
        assert components == [[1], [3]]

    def test_unknown_endpoints_never_create_components(self):
        components = find_components([1], _edges((7, 8)))
        assert components == [[1]]

    def test_duplicate_nodes_visited_once(self):
        assert find_components([1, 1, 2], []) == [[1], [2]]

    def test_partitions_nodes(self):
        nodes = [10, 20, 30, 40, 50, 60, 70]
        edges = _edges((10, 40), (40, 70), (20, 50), (99, 30))
        components = find_components(nodes, edges)

        members = [n for c in components for n in c]
        assert len(members) == len(set(members))
        assert set(members) == set(nodes)

    def test_idempotent(self):
        nodes = [2, 6, 7, 1, 5, 3, 9]
        edges = _edges((2, 7), (3, 5), (1, 9), (9, 6))
        assert find_components(nodes, edges) == find_components(nodes, edges)

    def test_long_chain_does_not_hit_recursion_limit(self):
        n = 5000
        nodes = list(range(n))
        edges = _edges(*((i, i + 1) for i in range(n - 1)))
        components = find_components(nodes, edges)
        assert components == [nodes]


class TestBuildUndirectedGraph:
    def test_restricted_to_nodes(self):
        G = build_undirected_graph([1, 2, 3], _edges((1, 2), (2, 9)))
        assert set(G.nodes()) == {1, 2, 3}
        assert G.number_of_edges() == 1

    def test_repeated_edges_collapse(self):
        G = build_undirected_graph([1, 2], _edges((1, 2), (2, 1), (1, 2)))
        assert G.number_of_edges() == 1
