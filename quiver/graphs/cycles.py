"""
Cycle detection for directed and undirected graphs.

Directed graphs have a cycle iff a depth-first search meets a back-edge,
i.e. an edge into a vertex still on the active search path (self-loops
included). Undirected graphs have a cycle iff the search reaches an
already-visited vertex through any edge other than the one it arrived by;
without that exception every undirected edge would look like a 2-cycle.

Both searches keep an explicit stack of (vertex, successor iterator) frames
instead of recursing.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.3, Lemma 22.11 (white-path / back-edge characterisation).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Hashable, Iterator, List, Set, Tuple

from ..diagnostics import check_graph
from ..logging import get_logger

if TYPE_CHECKING:
    from .core import BaseGraph

logger = get_logger(__name__)

_WHITE, _GRAY, _BLACK = 0, 1, 2

_ROOT = object()


def _directed_has_cycle(graph: BaseGraph) -> bool:
    color: Dict[Hashable, int] = {v: _WHITE for v in graph.vertices()}

    for root in graph.vertices():
        if color[root] != _WHITE:
            continue

        color[root] = _GRAY
        stack: List[Tuple[Hashable, Iterator[Hashable]]] = [
            (root, iter(graph.successors(root)))
        ]
        while stack:
            u, successors = stack[-1]
            advanced = False
            for v in successors:
                if color[v] == _GRAY:
                    logger.debug("back-edge %r -> %r closes a cycle", u, v)
                    return True
                if color[v] == _WHITE:
                    color[v] = _GRAY
                    stack.append((v, iter(graph.successors(v))))
                    advanced = True
                    break
            if not advanced:
                color[u] = _BLACK
                stack.pop()

    return False


def _undirected_has_cycle(graph: BaseGraph) -> bool:
    visited: Set[Hashable] = set()

    for root in graph.vertices():
        if root in visited:
            continue

        visited.add(root)
        stack: List[Tuple[Hashable, object, Iterator[Hashable]]] = [
            (root, _ROOT, iter(graph.successors(root)))
        ]
        while stack:
            u, parent, neighbors = stack[-1]
            advanced = False
            for v in neighbors:
                if v == parent:
                    # The edge we arrived by
                    continue
                if v in visited:
                    logger.debug("edge %r - %r reaches a visited vertex", u, v)
                    return True
                visited.add(v)
                stack.append((v, u, iter(graph.successors(v))))
                advanced = True
                break
            if not advanced:
                stack.pop()

    return False


def is_acyclic(graph: BaseGraph) -> bool:
    """
    Return True if the graph contains no cycle.

    Args:
        graph: DirectedGraph or UndirectedGraph.

    Returns:
        True for an acyclic graph (including the empty graph).

    Complexity: O(V + E).

    Example:
        >>> G = UndirectedGraph()
        >>> G.add_edge('a', 'b')
        >>> is_acyclic(G)
        True
        >>> G.add_edge('b', 'c')
        >>> G.add_edge('c', 'a')
        >>> is_acyclic(G)
        False
    """
    check_graph(graph)
    if graph.directed:
        return not _directed_has_cycle(graph)
    return not _undirected_has_cycle(graph)


def is_cyclic(graph: BaseGraph) -> bool:
    """Return True if the graph contains at least one cycle."""
    return not is_acyclic(graph)
