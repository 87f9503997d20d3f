"""Invariant checks for graph values."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from .debug_mode import is_debug_enabled

if TYPE_CHECKING:
    from ..graphs.core import BaseGraph


def dangling_endpoints(graph: BaseGraph) -> List[Tuple]:
    """
    Return the (u, v) adjacency entries that name a vertex missing from the
    vertex set.

    Parameters
    ----------
    graph:
        DirectedGraph or UndirectedGraph.

    Returns
    -------
    list of tuple
        Offending (u, v) pairs; empty for a well-formed graph.
    """
    missing = []
    for u, targets in graph.adj.items():
        for v in targets:
            if u not in graph.vertex_set or v not in graph.vertex_set:
                missing.append((u, v))
    return missing


def is_symmetric(graph: BaseGraph) -> bool:
    """
    Check whether every stored edge (u, v, w) has a mirror (v, u, w).

    Parameters
    ----------
    graph:
        DirectedGraph or UndirectedGraph.

    Returns
    -------
    bool
        True if the adjacency relation is symmetric with equal weights.
    """
    for u, targets in graph.adj.items():
        for v, weight in targets.items():
            back = graph.adj.get(v, {})
            if u not in back or back[u] != weight:
                return False
    return True


def assert_consistent(graph: BaseGraph) -> None:
    """
    Assert that every vertex referenced by an edge is in the vertex set.

    Raises
    ------
    ValueError
        If an adjacency entry references an unknown vertex.
    """
    missing = dangling_endpoints(graph)
    if missing:
        raise ValueError(
            f"Graph adjacency references vertices outside the vertex set: {missing}"
        )


def assert_symmetric(graph: BaseGraph) -> None:
    """
    Assert that an undirected graph stores both directions of every edge
    with the same weight.

    Raises
    ------
    ValueError
        If the graph is undirected and the relation is not symmetric.
    """
    if graph.directed:
        return
    if not is_symmetric(graph):
        raise ValueError("Undirected graph has an edge without a matching reverse edge")


def check_graph(graph: BaseGraph) -> None:
    """Validate graph invariants when debug mode is enabled."""
    if not is_debug_enabled():
        return
    assert_consistent(graph)
    assert_symmetric(graph)
