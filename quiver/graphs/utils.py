"""
Utility functions for graph algorithms.

Provides helpers for deterministic vertex ordering, vertex indexing, edge
iteration, path reconstruction and a numpy adjacency-matrix view.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np

if TYPE_CHECKING:
    from .core import BaseGraph


def _fallback_key(vertex: Hashable) -> Tuple[str, str]:
    return (type(vertex).__name__, str(vertex))


def sort_vertices(vertices: Iterable[Hashable]) -> List[Hashable]:
    """
    Return vertices in a deterministic total order.

    Mutually comparable vertices (all strings, all ints, tuples of those, ...)
    keep their natural order. Mixed types that cannot be compared fall back
    to ordering by (type name, str(vertex)).

    Args:
        vertices: Iterable of hashable vertices.

    Returns:
        Sorted list of vertices.

    Example:
        >>> sort_vertices(['c', 'a', 'b'])
        ['a', 'b', 'c']
        >>> sort_vertices([2, 'a', 1])
        [1, 2, 'a']
    """
    items = list(vertices)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=_fallback_key)


def canonical_pair(u: Hashable, v: Hashable) -> Tuple[Hashable, Hashable]:
    """Return (u, v) ordered so the smaller endpoint comes first."""
    first, second = sort_vertices([u, v])
    return first, second


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are deduplicated and ordered with sort_vertices.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sort_vertices(set(nodes))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def edges_from_graph(graph: BaseGraph) -> Iterable[Tuple[Hashable, Hashable, float]]:
    """
    Return iterator over every stored (u, v, weight) adjacency entry.

    Unlike ``graph.edges()``, undirected edges are yielded in both
    directions. This is the flattened view consumed by Bellman-Ford.

    Args:
        graph: DirectedGraph or UndirectedGraph.

    Yields:
        (u, v, weight) tuples, sources in vertex order, targets in vertex order.
    """
    for u in sort_vertices(graph.adj.keys()):
        targets = graph.adj[u]
        for v in sort_vertices(targets.keys()):
            yield u, v, targets[v]


def reconstruct_path(
    parent: Dict[Hashable, Hashable], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct path from source to target using a predecessor map.

    The map should come from a shortest-path search where parent[node] is
    the previous node on the shortest path. The source has no entry, so any
    hashable value (None included) can appear on the path.

    Args:
        parent: Dictionary mapping node -> previous node.
        target: Target node to reconstruct path to.

    Returns:
        List of nodes from source to target (inclusive), or None if the
        parent map loops back on itself.

    Example:
        >>> parent = {'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
    """
    path = [target]
    visited = {target}
    current = target
    while current in parent:
        current = parent[current]
        if current in visited:
            # Cycle in the parent map (never produced by a valid search)
            return None
        visited.add(current)
        path.append(current)

    path.reverse()
    return path


def adjacency_matrix(
    graph: BaseGraph, nodes: Optional[List[Hashable]] = None
) -> Tuple[np.ndarray, List[Hashable]]:
    """
    Dense weight matrix of a graph.

    Entry [i, j] holds the weight of edge i->j, ``np.inf`` when there is no
    such edge and 0 on the diagonal unless a self-loop is stored. Undirected
    graphs yield a symmetric matrix.

    Args:
        graph: DirectedGraph or UndirectedGraph.
        nodes: Optional subset of nodes to include (defaults to all vertices).

    Returns:
        Tuple of ((n, n) float array, index_to_node list).

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('A', 'B', 2.0)
        >>> W, order = adjacency_matrix(G)
        >>> W[0, 1], W[1, 0]
        (2.0, inf)
    """
    if nodes is None:
        nodes = graph.vertices()

    node_to_idx, idx_to_node = node_index_map(nodes)
    n = len(idx_to_node)

    W = np.full((n, n), np.inf)
    np.fill_diagonal(W, 0.0)

    for u in idx_to_node:
        i = node_to_idx[u]
        for v, weight in graph.adj.get(u, {}).items():
            if v in node_to_idx:
                W[i, node_to_idx[v]] = weight

    return W, idx_to_node
