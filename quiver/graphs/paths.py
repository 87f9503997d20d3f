"""
All simple paths between two vertices.

Enumeration is exponential in the worst case and intended for small graphs;
callers are responsible for bounding the input size.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, FrozenSet, Hashable, List, Tuple

from ..diagnostics import check_graph
from ..logging import get_logger
from .results import Weight

if TYPE_CHECKING:
    from .core import BaseGraph

logger = get_logger(__name__)


def get_paths(
    graph: BaseGraph, start: Hashable, finish: Hashable
) -> List[Tuple[List[Hashable], Weight]]:
    """
    Enumerate every simple path from start to finish.

    A path is extended until it reaches finish, so no returned path passes
    through finish in the middle. Weights are summed from an integer 0,
    keeping the caller's numeric type (integer weights give integer totals).

    Args:
        graph: DirectedGraph or UndirectedGraph.
        start: Start vertex.
        finish: Target vertex.

    Returns:
        List of (path, total_weight) tuples in depth-first order over sorted
        successors. ``[([start], 0)]`` when start == finish; empty when no
        path exists or either vertex is absent.

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('a', 'b', 1.0)
        >>> G.add_edge('b', 'c', 2.0)
        >>> G.add_edge('a', 'c', 5.0)
        >>> get_paths(G, 'a', 'c')
        [(['a', 'b', 'c'], 3.0), (['a', 'c'], 5.0)]
    """
    if not graph.has_vertex(start) or not graph.has_vertex(finish):
        return []

    check_graph(graph)

    found: List[Tuple[List[Hashable], Weight]] = []
    stack: List[Tuple[List[Hashable], FrozenSet[Hashable], Weight]] = [
        ([start], frozenset([start]), 0)
    ]

    while stack:
        path, on_path, weight = stack.pop()
        current = path[-1]

        if current == finish:
            found.append((path, weight))
            continue

        targets = graph.adj.get(current, {})
        # Reverse sorted order so the smallest successor is expanded first
        for v in reversed(graph.successors(current)):
            if v not in on_path:
                stack.append((path + [v], on_path | {v}, weight + targets[v]))

    logger.debug("found %d simple paths %r -> %r", len(found), start, finish)
    return found
