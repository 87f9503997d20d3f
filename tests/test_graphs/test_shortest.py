"""Tests for shortest path algorithms."""

import logging
import math
from io import StringIO

import pytest

from quiver.graphs import (
    INFINITY,
    DirectedGraph,
    PathResult,
    Status,
    UndirectedGraph,
    bellman_ford,
    dijkstra,
    get_shortest_path,
    shortest_paths,
)
from quiver.logging import configure_logging


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    @pytest.mark.parametrize("cls", [DirectedGraph, UndirectedGraph])
    def test_simple_path(self, cls):
        """Test a two-edge path in both graph kinds."""
        G = cls()
        G.add_edge("a", "b", 1.0)
        G.add_edge("b", "c", 2.0)

        result = get_shortest_path(G, "a", "c")
        assert result == PathResult(Status.OK, ["a", "b", "c"], 3.0)
        assert result.ok

    @pytest.mark.parametrize("cls", [DirectedGraph, UndirectedGraph])
    def test_shorter_indirect_path_wins(self, cls):
        """Test that a longer direct edge does not change the answer."""
        G = cls()
        G.add_edge("a", "b", 1.0)
        G.add_edge("b", "c", 2.0)
        G.add_edge("a", "c", 5.0)

        result = get_shortest_path(G, "a", "c")
        assert result.path == ["a", "b", "c"]
        assert result.weight == 3.0

    def test_no_path_between_isolated_vertices(self):
        """Test NO_PATH for disconnected vertices."""
        G = DirectedGraph()
        G.add_vertex("a")
        G.add_vertex("b")

        result = get_shortest_path(G, "a", "b")
        assert result.status is Status.NO_PATH
        assert not result.ok
        assert result.path == []
        assert result.weight is None

    def test_direction_respected(self):
        """Test that a directed edge cannot be walked backwards."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1.0)
        assert get_shortest_path(G, "b", "a") == PathResult.no_path()

    def test_undirected_both_ways(self):
        """Test that an undirected edge can be walked either way."""
        G = UndirectedGraph()
        G.add_edge("a", "b", 1.0)
        assert get_shortest_path(G, "b", "a").path == ["b", "a"]

    @pytest.mark.parametrize("start,finish", [("a", "z"), ("z", "a"), ("y", "z")])
    def test_missing_endpoint(self, start, finish):
        """Test NO_PATH when either endpoint is absent."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1)
        assert get_shortest_path(G, start, finish).status is Status.NO_PATH

    def test_start_equals_finish(self):
        """Test the zero-length path."""
        G = DirectedGraph()
        G.add_vertex("a")
        assert get_shortest_path(G, "a", "a") == PathResult(Status.OK, ["a"], 0)

    def test_integer_weights_stay_integers(self):
        """Test that integer weights give an integer total."""
        G = DirectedGraph()
        G.add_edge("a", "b", 2)
        G.add_edge("b", "c", 3)
        weight = get_shortest_path(G, "a", "c").weight
        assert weight == 5
        assert isinstance(weight, int)

    def test_longer_hop_count_but_lighter(self):
        """Test that the lightest path wins over the fewest hops."""
        G = DirectedGraph()
        G.add_edge("s", "t", 10)
        G.add_edge("s", "a", 1)
        G.add_edge("a", "b", 1)
        G.add_edge("b", "c", 1)
        G.add_edge("c", "t", 1)
        assert get_shortest_path(G, "s", "t") == PathResult(
            Status.OK, ["s", "a", "b", "c", "t"], 4
        )

    def test_early_termination_ignores_rest_of_graph(self):
        """Test that vertices past the target do not affect the result."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1)
        G.add_edge("b", "c", 1)
        for i in range(50):
            G.add_edge("c", i, 1)
        assert get_shortest_path(G, "a", "b").path == ["a", "b"]

    def test_tie_breaking_deterministic(self):
        """Test that equal-weight alternatives give a stable answer."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1)
        G.add_edge("a", "c", 1)
        G.add_edge("b", "d", 1)
        G.add_edge("c", "d", 1)
        first = get_shortest_path(G, "a", "d")
        assert first.weight == 2
        assert first.path == ["a", "b", "d"]
        assert get_shortest_path(G, "a", "d") == first

    def test_none_vertex_on_path(self):
        """Test that None is handled like any other vertex."""
        G = DirectedGraph()
        G.add_edge("a", None, 1)
        G.add_edge(None, "c", 1)

        assert get_shortest_path(G, "a", "c") == PathResult(Status.OK, ["a", None, "c"], 2)
        assert get_shortest_path(G, "a", None) == PathResult(Status.OK, ["a", None], 1)
        assert get_shortest_path(G, None, "c") == PathResult(Status.OK, [None, "c"], 1)
        assert get_shortest_path(G, None, None) == PathResult(Status.OK, [None], 0)

    def test_dijkstra_alias(self):
        """Test that dijkstra and the method alias match get_shortest_path."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1)
        assert dijkstra(G, "a", "b") == get_shortest_path(G, "a", "b")
        assert G.dijkstra("a", "b") == G.get_shortest_path("a", "b")

    def test_negative_weight_is_logged(self):
        """Test that a negative edge weight produces a warning."""
        G = DirectedGraph()
        G.add_edge("a", "b", -1)

        stream = StringIO()
        try:
            configure_logging(level=logging.WARNING, stream=stream)
            get_shortest_path(G, "a", "b")
        finally:
            configure_logging(level=logging.WARNING)
        assert "negative weight" in stream.getvalue()


class TestBellmanFord:
    """Tests for Bellman-Ford."""

    def test_simple_distances(self):
        """Test distances on a small directed graph."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1)
        G.add_edge("b", "c", 2)
        G.add_edge("a", "c", 5)

        result = shortest_paths(G, "a")
        assert result.status is Status.OK
        assert result.distances == {"a": 0, "b": 1, "c": 3}

    def test_negative_weights_without_cycle(self):
        """Test that negative edges are handled when no cycle exists."""
        G = DirectedGraph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "C", -2.0)
        assert shortest_paths(G, "A").distances == {"A": 0, "B": 1.0, "C": -1.0}

    def test_unreachable_is_infinity(self):
        """Test that unreachable vertices keep the infinity sentinel."""
        G = UndirectedGraph()
        G.add_edge("a", "b", 1)
        G.add_vertex("c")

        distances = shortest_paths(G, "a").distances
        assert distances["a"] == 0
        assert distances["b"] == 1
        assert distances["c"] == INFINITY
        assert math.isinf(distances["c"])

    @pytest.mark.parametrize("cls", [DirectedGraph, UndirectedGraph])
    def test_negative_cycle(self, cls):
        """Test a cycle a -> b -> c -> a of total weight -1."""
        G = cls()
        G.add_edge("a", "b", 1)
        G.add_edge("b", "c", -3)
        G.add_edge("c", "a", 1)

        result = shortest_paths(G, "a")
        assert result.status is Status.NEGATIVE_CYCLE
        assert not result.ok
        assert result.distances == {}
        assert bellman_ford(G, "a") is None

    def test_unreachable_negative_cycle_ignored(self):
        """Test that a negative cycle the source cannot reach is not reported."""
        G = DirectedGraph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("C", "D", 1.0)
        G.add_edge("D", "C", -3.0)

        result = shortest_paths(G, "A")
        assert result.ok
        assert result.distances["C"] == INFINITY

    def test_single_negative_undirected_edge_is_cycle(self):
        """Test that an undirected negative edge can be walked back and forth."""
        G = UndirectedGraph()
        G.add_edge("a", "b", -1)
        assert shortest_paths(G, "a").status is Status.NEGATIVE_CYCLE

    def test_single_vertex(self):
        """Test a graph with one vertex and no relaxation passes."""
        G = DirectedGraph()
        G.add_vertex("a")
        assert shortest_paths(G, "a").distances == {"a": 0}

    def test_negative_self_loop(self):
        """Test that a negative self-loop at the source is a negative cycle."""
        G = DirectedGraph()
        G.add_edge("a", "a", -1)
        assert shortest_paths(G, "a").status is Status.NEGATIVE_CYCLE

    def test_source_absent(self):
        """Test that an unknown source still maps to 0 and reaches nothing."""
        G = DirectedGraph()
        G.add_edge("a", "b", 1)
        assert shortest_paths(G, "z").distances == {"a": INFINITY, "b": INFINITY, "z": 0}

    def test_vertex_keyed_edge_list(self):
        """Test the pre-flattened edge list keyed by vertex."""
        edges = {
            "a": [("a", "b", 1), ("a", "c", 4)],
            "b": [("b", "c", 2)],
            "c": [],
            "d": [],
        }
        result = shortest_paths(edges, "a")
        assert result.distances == {"a": 0, "b": 1, "c": 3, "d": INFINITY}

    def test_plain_edge_triples(self):
        """Test an iterable of (u, v, w) triples."""
        result = shortest_paths([("a", "b", 1), ("b", "c", -3), ("c", "a", 1)], "a")
        assert result.status is Status.NEGATIVE_CYCLE

        result = shortest_paths(iter([("x", "y", 2)]), "x")
        assert result.distances == {"x": 0, "y": 2}

    def test_unsupported_input(self):
        """Test that unsupported inputs raise TypeError."""
        with pytest.raises(TypeError):
            shortest_paths(42, "a")
        with pytest.raises(TypeError):
            shortest_paths("abc", "a")

    def test_methods_match_functions(self):
        """Test the graph method forms."""
        G = DirectedGraph()
        G.add_edge("a", "b", 2)
        assert G.shortest_paths("a") == shortest_paths(G, "a")
        assert G.bellman_ford("a") == {"a": 0, "b": 2}
