"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm answers single-pair queries on graphs with non-negative
edge weights. Bellman-Ford computes single-source distances with arbitrary
weights and reports negative cycles reachable from the source.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Set, Tuple

from ..diagnostics import check_graph
from ..logging import get_logger
from .priority_queue import PriorityQueue
from .results import DistanceResult, PathResult, Status, Weight
from .utils import edges_from_graph, reconstruct_path

if TYPE_CHECKING:
    from .core import BaseGraph

logger = get_logger(__name__)

EdgeTriple = Tuple[Hashable, Hashable, Weight]


def get_shortest_path(graph: BaseGraph, start: Hashable, finish: Hashable) -> PathResult:
    """
    Dijkstra's algorithm for a single-pair shortest path.

    The search stops as soon as finish is taken off the queue, since its
    distance is final at that point. Edge weights must be non-negative; a
    negative weight is logged as a warning and the result is then
    unspecified.

    Args:
        graph: DirectedGraph or UndirectedGraph.
        start: Start vertex.
        finish: Target vertex.

    Returns:
        PathResult with status OK, the vertex path and its total weight, or
        status NO_PATH if finish is unreachable or either vertex is absent.

    Complexity: O(E log V) using a binary heap priority queue.

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> get_shortest_path(G, 'A', 'C')
        PathResult(status=<Status.OK: 'ok'>, path=['A', 'B', 'C'], weight=3.0)
    """
    if not graph.has_vertex(start) or not graph.has_vertex(finish):
        return PathResult.no_path()

    check_graph(graph)

    dist: Dict[Hashable, Weight] = {v: math.inf for v in graph.vertex_set}
    parent: Dict[Hashable, Hashable] = {}
    dist[start] = 0

    pq = PriorityQueue()
    pq.enqueue(0, start)
    settled: Set[Hashable] = set()

    while not pq.is_empty():
        d, u = pq.dequeue_with_priority()

        if u in settled or d > dist[u]:
            # Stale entry superseded by a later, shorter push
            continue
        settled.add(u)

        if u == finish:
            break

        targets = graph.adj.get(u, {})
        for v in graph.successors(u):
            if v in settled:
                continue
            weight = targets[v]
            if weight < 0:
                logger.warning(
                    "Dijkstra met negative weight %r on edge (%r, %r); result is unspecified",
                    weight,
                    u,
                    v,
                )
            new_dist = d + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                pq.enqueue(new_dist, v)

    logger.debug("dijkstra %r -> %r settled %d vertices", start, finish, len(settled))

    if dist[finish] == math.inf:
        return PathResult.no_path()

    path = reconstruct_path(parent, finish)
    return PathResult.found(path, dist[finish])


def dijkstra(graph: BaseGraph, start: Hashable, finish: Hashable) -> PathResult:
    """Alias of get_shortest_path."""
    return get_shortest_path(graph, start, finish)


def _extract_graph_data(graph: Any) -> Tuple[List[Hashable], List[EdgeTriple]]:
    """Flatten any supported Bellman-Ford input into (vertices, edges)."""
    if hasattr(graph, "vertex_set") and hasattr(graph, "adj"):
        check_graph(graph)
        return list(graph.vertex_set), list(edges_from_graph(graph))

    if isinstance(graph, Mapping):
        # Edge list keyed by vertex: {vertex: [(u, v, w), ...]}
        vertices = dict.fromkeys(graph.keys())
        edges = []
        for triples in graph.values():
            for u, v, w in triples:
                vertices.setdefault(u)
                vertices.setdefault(v)
                edges.append((u, v, w))
        return list(vertices), edges

    if isinstance(graph, Iterable) and not isinstance(graph, (str, bytes)):
        vertices = {}
        edges = []
        for u, v, w in graph:
            vertices.setdefault(u)
            vertices.setdefault(v)
            edges.append((u, v, w))
        return list(vertices), edges

    raise TypeError(
        f"bellman_ford expects a graph, a vertex-keyed edge list or an iterable "
        f"of (u, v, weight) triples, got {type(graph).__name__}"
    )


def shortest_paths(graph: Any, source: Hashable) -> DistanceResult:
    """
    Bellman-Ford algorithm for single-source shortest distances.

    All edges are relaxed in |V| - 1 passes (none when |V| <= 1); one more
    pass then checks whether any edge can still be relaxed, which means a
    negative cycle is reachable from source. Undirected graphs contribute
    each edge in both directions, so a single negative undirected edge is a
    negative cycle.

    Args:
        graph: DirectedGraph/UndirectedGraph, an edge list keyed by vertex
            (``{vertex: [(u, v, w), ...]}``) or an iterable of (u, v, w).
        source: Source vertex. It always appears in the result with
            distance 0.

    Returns:
        DistanceResult with status OK and a vertex -> distance mapping
        (``math.inf`` for unreachable vertices), or status NEGATIVE_CYCLE.

    Raises:
        TypeError: If graph is none of the supported forms.

    Complexity: O(VE).

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', -2)
        >>> shortest_paths(G, 'A').distances
        {'A': 0, 'B': 1, 'C': -1}
    """
    vertices, edges = _extract_graph_data(graph)

    dist: Dict[Hashable, Weight] = {v: math.inf for v in vertices}
    dist[source] = 0

    n = len(dist)
    for _ in range(max(n - 1, 0)):
        for u, v, weight in edges:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight

    for u, v, weight in edges:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            logger.info("negative cycle reachable from %r through edge (%r, %r)", source, u, v)
            return DistanceResult.negative_cycle()

    logger.debug(
        "bellman-ford from %r: %d vertices, %d edges, %d passes",
        source,
        n,
        len(edges),
        max(n - 1, 0),
    )
    return DistanceResult(Status.OK, dist)


def bellman_ford(graph: Any, source: Hashable) -> Optional[Dict[Hashable, Weight]]:
    """
    Convenience form of shortest_paths.

    Returns:
        The distance mapping, or None when a negative cycle is detected.

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('a', 'b', 1)
        >>> G.add_edge('b', 'a', -3)
        >>> bellman_ford(G, 'a') is None
        True
    """
    result = shortest_paths(graph, source)
    return result.distances if result.ok else None
