"""Tests for pathfinding algorithms."""
import pytest

from nodegraph import Node, NodeNotFoundError, Path


def by_name(costs):
    return {node.get_name(): cost for node, cost in costs.items()}


class TestDijkstra:
    """Tests for dijkstra."""

    def test_relaxation_through_cheaper_path(self, graph, build):
        """A->C->B (cost 2) beats the direct A->B edge (cost 4)."""
        build(graph, [("A", "B", 4), ("A", "C", 1), ("C", "B", 1)], directed=True)
        assert by_name(graph.dijkstra("A")) == {"A": 0, "C": 1, "B": 2}

    def test_keys_are_graph_nodes(self, graph, build):
        """Result is keyed by the graph's own Node objects."""
        build(graph, [("A", "B", 3)])
        costs = graph.dijkstra("A")
        assert costs[graph.get_node("B")] == 3

    def test_start_cost_is_zero(self, triangle):
        """Start node always costs 0."""
        costs = triangle.dijkstra("B")
        assert costs[triangle.get_node("B")] == 0

    def test_unreachable_node_absent(self, graph, build):
        """Unreachable nodes are not in the result."""
        build(graph, [("A", "B", 1)], directed=True)
        graph.get_or_create_node("C")
        result = by_name(graph.dijkstra("A"))
        assert "C" not in result
        assert result == {"A": 0, "B": 1}

    def test_respects_direction(self, graph, build):
        """Edges are only followed forward."""
        build(graph, [("B", "A", 1)], directed=True)
        assert by_name(graph.dijkstra("A")) == {"A": 0}

    def test_unknown_start(self, graph):
        """Unknown start is created and maps to 0."""
        assert by_name(graph.dijkstra("Z")) == {"Z": 0}
        assert graph.contains_node("Z")

    def test_zero_weight_edges(self, graph, build):
        """Zero-weight edges are allowed."""
        build(graph, [("A", "B", 0), ("B", "C", 0)])
        assert by_name(graph.dijkstra("A")) == {"A": 0, "B": 0, "C": 0}

    def test_larger_graph(self, graph, build):
        """Classic weighted example."""
        build(graph, [
            ("S", "A", 7), ("S", "B", 2), ("S", "C", 3),
            ("A", "D", 4), ("B", "A", 3), ("B", "D", 4), ("B", "H", 1),
            ("C", "L", 2), ("D", "F", 5), ("H", "F", 3), ("H", "G", 2),
            ("G", "E", 2), ("L", "I", 4), ("L", "J", 4), ("I", "K", 4),
            ("J", "K", 4), ("K", "E", 5),
        ])
        costs = by_name(graph.dijkstra("S"))
        assert costs["A"] == 5
        assert costs["D"] == 6
        assert costs["F"] == 6
        assert costs["E"] == 7
        assert costs["K"] == 12
        assert len(costs) == len(graph)

    def test_cost_tie_between_same_named_nodes(self, graph, build):
        """Equal-cost nodes sharing a name do not break the heap."""
        build(graph, [("A", "B", 1)], directed=True)
        outsider = Node("B")
        graph.get_node("A").add_directed_edge_to_node(outsider, 1)
        costs = graph.dijkstra("A")
        assert costs[graph.get_node("B")] == 1
        assert costs[outsider] == 1
        assert len(costs) == 3

    def test_negative_weight_rejected(self, graph, build):
        """Negative weights are not supported."""
        build(graph, [("A", "B", -1)], directed=True)
        with pytest.raises(ValueError):
            graph.dijkstra("A")


class TestShortestPath:
    """Tests for shortest_path."""

    def test_same_node(self, graph):
        """Path from a node to itself."""
        graph.get_or_create_node("A")
        path = graph.shortest_path("A", "A")
        assert path.nodes == ["A"]
        assert path.cost == 0

    def test_reconstructs_relaxed_path(self, graph, build):
        """Path goes through the cheaper intermediate node."""
        build(graph, [("A", "B", 4), ("A", "C", 1), ("C", "B", 1)], directed=True)
        path = graph.shortest_path("A", "B")
        assert path == Path(nodes=["A", "C", "B"], cost=2)
        assert len(path) == 3

    def test_unreachable(self, graph, build):
        """Unreachable end returns None."""
        build(graph, [("A", "B", 1)], directed=True)
        assert graph.shortest_path("B", "A") is None

    def test_missing_node(self, graph):
        """Missing endpoints raise instead of being created."""
        graph.get_or_create_node("A")
        with pytest.raises(NodeNotFoundError):
            graph.shortest_path("A", "missing")
        assert not graph.contains_node("missing")

    def test_to_dict(self, triangle):
        """Path serializes to a dict."""
        assert triangle.shortest_path("A", "C").to_dict() == {"path": ["A", "C"], "cost": 3}
