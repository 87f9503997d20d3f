"""Tests for cycle detection."""

import sys

import pytest

from quiver.graphs import DirectedGraph, UndirectedGraph, is_acyclic, is_cyclic


class TestDirectedCycles:
    """Tests for back-edge cycle detection on directed graphs."""

    def test_empty_graph(self):
        """Test that the empty graph is acyclic."""
        assert is_acyclic(DirectedGraph())

    def test_chain_is_acyclic(self):
        """Test a simple chain."""
        G = DirectedGraph()
        G.add_edge("a", "b")
        G.add_edge("b", "c")
        assert is_acyclic(G)
        assert not is_cyclic(G)

    def test_triangle_is_cyclic(self):
        """Test a directed 3-cycle."""
        G = DirectedGraph()
        G.add_edge("a", "b")
        G.add_edge("b", "c")
        G.add_edge("c", "a")
        assert not is_acyclic(G)
        assert is_cyclic(G)

    def test_self_loop_is_cyclic(self):
        """Test that a self-loop counts as a cycle."""
        G = DirectedGraph()
        G.add_edge("a", "a")
        assert is_cyclic(G)

    def test_two_way_edge_is_cyclic(self):
        """Test that a -> b -> a is a directed cycle."""
        G = DirectedGraph()
        G.add_edge("a", "b")
        G.add_edge("b", "a")
        assert is_cyclic(G)

    def test_diamond_is_acyclic(self):
        """Test that a cross edge into a finished vertex is not a cycle."""
        G = DirectedGraph()
        G.add_edge("a", "b")
        G.add_edge("a", "c")
        G.add_edge("b", "d")
        G.add_edge("c", "d")
        assert is_acyclic(G)

    def test_cycle_in_second_component(self):
        """Test that every component is searched."""
        G = DirectedGraph()
        G.add_edge("a", "b")
        G.add_edge("x", "y")
        G.add_edge("y", "z")
        G.add_edge("z", "x")
        assert is_cyclic(G)

    def test_deep_chain(self):
        """Test a chain deeper than the recursion limit."""
        G = DirectedGraph()
        n = sys.getrecursionlimit() + 500
        for i in range(n):
            G.add_edge(i, i + 1)
        assert is_acyclic(G)
        G.add_edge(n, 0)
        assert is_cyclic(G)


class TestUndirectedCycles:
    """Tests for parent-aware cycle detection on undirected graphs."""

    def test_single_edge_is_acyclic(self):
        """Test that the reverse traversal of one edge is not a cycle."""
        G = UndirectedGraph()
        G.add_edge("a", "b")
        assert is_acyclic(G)
        assert not is_cyclic(G)

    def test_path_and_star_are_acyclic(self):
        """Test trees."""
        path = UndirectedGraph()
        path.add_edge("a", "b")
        path.add_edge("b", "c")
        assert is_acyclic(path)

        star = UndirectedGraph()
        for leaf in ["a", "b", "c"]:
            star.add_edge("center", leaf)
        assert is_acyclic(star)

    def test_isolated_vertices(self):
        """Test a graph without edges."""
        G = UndirectedGraph()
        for v in ["a", "b", "c"]:
            G.add_vertex(v)
        assert is_acyclic(G)

    def test_triangle_and_square_are_cyclic(self):
        """Test the smallest cycles."""
        triangle = UndirectedGraph()
        triangle.add_edge("a", "b")
        triangle.add_edge("b", "c")
        triangle.add_edge("c", "a")
        assert is_cyclic(triangle)

        square = UndirectedGraph()
        square.add_edge("a", "b")
        square.add_edge("b", "c")
        square.add_edge("c", "d")
        square.add_edge("d", "a")
        assert is_cyclic(square)

    def test_self_loop_is_cyclic(self):
        """Test that an undirected self-loop is a cycle."""
        G = UndirectedGraph()
        G.add_edge("a", "a")
        assert is_cyclic(G)

    def test_forest_with_cycle_in_one_tree(self):
        """Test detection in a later component."""
        G = UndirectedGraph()
        G.add_edge("a", "b")
        G.add_edge("c", "d")
        G.add_edge("d", "e")
        G.add_edge("e", "c")
        assert G.is_cyclic()


@pytest.mark.parametrize("cls", [DirectedGraph, UndirectedGraph])
def test_is_cyclic_is_negation(cls):
    """Test that is_cyclic is always the negation of is_acyclic."""
    G = cls()
    G.add_edge(1, 2)
    assert is_cyclic(G) is (not is_acyclic(G))
    G.add_edge(2, 3)
    G.add_edge(3, 1)
    assert is_cyclic(G) is (not is_acyclic(G))
