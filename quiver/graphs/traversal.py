"""
Graph traversal: reachability and depth-first post-order.

Both traversals use an explicit stack, so deep graphs do not exhaust the
interpreter's recursion limit. Successors are visited in sorted order for
reproducible results.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.3 (DFS).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterable, List, Set, Tuple

from ..diagnostics import check_graph
from ..logging import get_logger
from .utils import sort_vertices

if TYPE_CHECKING:
    from .core import BaseGraph

logger = get_logger(__name__)


def reachable(graph: BaseGraph, starts: Iterable[Hashable]) -> List[Hashable]:
    """
    Vertices reachable from any of the start vertices.

    Directed graphs follow edges forward only; undirected graphs follow
    edges both ways. Every start vertex present in the graph is included
    (a zero-length path counts). Start vertices absent from the graph are
    ignored.

    Args:
        graph: DirectedGraph or UndirectedGraph.
        starts: Iterable of start vertices.

    Returns:
        Sorted list of reachable vertices.

    Complexity: O(V + E).

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('a', 'b')
        >>> G.add_edge('b', 'c')
        >>> reachable(G, ['b'])
        ['b', 'c']
    """
    check_graph(graph)

    seen: Set[Hashable] = set()
    stack = [v for v in starts if graph.has_vertex(v)]

    while stack:
        u = stack.pop()
        if u in seen:
            continue
        seen.add(u)
        for v in graph.successors(u):
            if v not in seen:
                stack.append(v)

    return sort_vertices(seen)


def postorder(graph: BaseGraph) -> List[Hashable]:
    """
    Depth-first post-order over the whole graph.

    Roots are taken from the full vertex set in sorted order so disconnected
    components are covered. A vertex is emitted only after every vertex
    first discovered through it has been emitted.

    Args:
        graph: DirectedGraph or UndirectedGraph.

    Returns:
        List of all vertices in finish order.

    Complexity: O(V + E).

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('a', 'b')
        >>> G.add_edge('b', 'c')
        >>> postorder(G)
        ['c', 'b', 'a']
    """
    check_graph(graph)

    order: List[Hashable] = []
    visited: Set[Hashable] = set()

    for root in graph.vertices():
        if root in visited:
            continue

        stack: List[Tuple[Hashable, bool]] = [(root, False)]  # (node, is_finished)
        while stack:
            u, is_finished = stack.pop()

            if is_finished:
                order.append(u)
                continue
            if u in visited:
                continue

            visited.add(u)
            stack.append((u, True))

            # Push in reverse sorted order so the smallest successor is explored first
            for v in reversed(graph.successors(u)):
                if v not in visited:
                    stack.append((v, False))

    logger.debug("postorder visited %d vertices", len(order))
    return order
