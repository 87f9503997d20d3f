"""
Core graph data structures.

Provides DirectedGraph and UndirectedGraph, weighted graphs stored as an
adjacency map ``{source: {target: weight}}`` plus a vertex set. Logic that
does not depend on edge direction lives in BaseGraph; the variants only
specialise edge storage and reporting.

Graphs are mutable builders: add_vertex/add_edge update the graph in place
and every query leaves it untouched. Callers sharing a graph between
threads must serialise writers themselves; use copy() for an independent
value.

Vertex lists, neighbour lists and edge lists are returned in sorted order
for deterministic behaviour.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from .cliques import cliques
from .cycles import is_acyclic, is_cyclic
from .paths import get_paths
from .results import DistanceResult, PathResult, Weight
from .shortest import bellman_ford, get_shortest_path, shortest_paths
from .traversal import postorder, reachable
from .utils import canonical_pair, sort_vertices

#: Distance of an unreachable vertex.
INFINITY = math.inf

Edge = Tuple[Hashable, Hashable, Weight]


class BaseGraph(ABC):
    """
    Weighted graph with adjacency-map representation.

    Attributes:
        directed: True for DirectedGraph, False for UndirectedGraph.
        vertex_set: Set of all vertices.
        adj: Adjacency map vertex -> {neighbour: weight}. Every key and
            every neighbour is a member of vertex_set.
        labels: Optional per-vertex labels.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - successors, neighbors: O(d log d) where d is the degree (sorting)
        - vertices: O(V log V)
        - edges: O(E log E)
    """

    directed: bool = False

    def __init__(self) -> None:
        self.vertex_set: Set[Hashable] = set()
        self.adj: Dict[Hashable, Dict[Hashable, Weight]] = {}
        self.labels: Dict[Hashable, Any] = {}

    # -- construction -----------------------------------------------------

    def add_vertex(self, vertex: Hashable, label: Any = None) -> None:
        """
        Add a vertex to the graph.

        Adding an existing vertex is a no-op, except that a non-None label
        replaces the stored one.

        Args:
            vertex: Hashable vertex identifier.
            label: Optional label to attach.
        """
        self.vertex_set.add(vertex)
        if label is not None:
            self.labels[vertex] = label

    @abstractmethod
    def add_edge(self, u: Hashable, v: Hashable, weight: Weight = 1) -> None:
        """Add (or overwrite) the edge u -> v."""

    def _put(self, u: Hashable, v: Hashable, weight: Weight) -> None:
        self.vertex_set.add(u)
        self.vertex_set.add(v)
        self.adj.setdefault(u, {})[v] = weight

    def get_label(self, vertex: Hashable) -> Any:
        """Return the label of vertex, or None."""
        return self.labels.get(vertex)

    def set_label(self, vertex: Hashable, label: Any) -> None:
        """Set the label of an existing vertex; unknown vertices are ignored."""
        if vertex in self.vertex_set:
            self.labels[vertex] = label

    def copy(self) -> "BaseGraph":
        """Return an independent copy of the graph."""
        clone = type(self)()
        clone.vertex_set = set(self.vertex_set)
        clone.adj = {u: dict(targets) for u, targets in self.adj.items()}
        clone.labels = dict(self.labels)
        return clone

    # -- queries ----------------------------------------------------------

    def vertices(self) -> List[Hashable]:
        """Return all vertices in sorted order."""
        return sort_vertices(self.vertex_set)

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self.vertex_set

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return v in self.adj.get(u, {})

    def weight(self, u: Hashable, v: Hashable) -> Optional[Weight]:
        """Return the weight of edge u -> v, or None if there is no such edge."""
        return self.adj.get(u, {}).get(v)

    def num_vertices(self) -> int:
        return len(self.vertex_set)

    def num_edges(self) -> int:
        return len(self.edges())

    def successors(self, vertex: Hashable) -> List[Hashable]:
        """
        Vertices reachable from vertex over a single edge, in sorted order.

        For undirected graphs this is the same as neighbors().
        """
        return sort_vertices(self.adj.get(vertex, {}).keys())

    @abstractmethod
    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """Sorted, de-duplicated vertices sharing an edge with vertex."""

    @abstractmethod
    def edges(self) -> List[Edge]:
        """All edges as (u, v, weight) tuples in deterministic order."""

    @abstractmethod
    def edges_of(self, vertex: Hashable) -> List[Edge]:
        """All edges touching vertex."""

    @abstractmethod
    def edges_between(self, u: Hashable, v: Hashable) -> List[Edge]:
        """All edges joining u and v."""

    @abstractmethod
    def symmetric_adjacency(self) -> Dict[Hashable, Set[Hashable]]:
        """
        Symmetric, loop-free neighbour sets used for clique enumeration.

        Every vertex is a key, including isolated ones.
        """

    # -- algorithms -------------------------------------------------------

    def reachable(self, starts: Iterable[Hashable]) -> List[Hashable]:
        return reachable(self, starts)

    def postorder(self) -> List[Hashable]:
        return postorder(self)

    def is_acyclic(self) -> bool:
        return is_acyclic(self)

    def is_cyclic(self) -> bool:
        return is_cyclic(self)

    def get_shortest_path(self, start: Hashable, finish: Hashable) -> PathResult:
        return get_shortest_path(self, start, finish)

    dijkstra = get_shortest_path

    def get_paths(self, start: Hashable, finish: Hashable) -> List[Tuple[List[Hashable], Weight]]:
        return get_paths(self, start, finish)

    def shortest_paths(self, source: Hashable) -> DistanceResult:
        return shortest_paths(self, source)

    def bellman_ford(self, source: Hashable) -> Optional[Dict[Hashable, Weight]]:
        return bellman_ford(self, source)

    def cliques(self) -> List[List[Hashable]]:
        return cliques(self)

    # -- dunder -----------------------------------------------------------

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self.vertex_set

    def __len__(self) -> int:
        return len(self.vertex_set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseGraph):
            return NotImplemented
        return (
            self.directed == other.directed
            and self.vertex_set == other.vertex_set
            and self.adj == other.adj
            and self.labels == other.labels
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertices()!r}, "
            f"edges={self.edges()!r})"
        )


class DirectedGraph(BaseGraph):
    """
    Directed weighted graph.

    Example:
        >>> G = DirectedGraph()
        >>> G.add_edge('A', 'B', 2.5)
        >>> G.edges()
        [('A', 'B', 2.5)]
        >>> G.neighbors('B')
        ['A']
    """

    directed = True

    def add_edge(self, u: Hashable, v: Hashable, weight: Weight = 1) -> None:
        """
        Add a weighted edge from u to v.

        Missing endpoints are added. An existing u -> v edge has its weight
        replaced.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (default 1).
        """
        self._put(u, v, weight)

    def predecessors(self, vertex: Hashable) -> List[Hashable]:
        """Vertices with an edge into vertex, in sorted order."""
        return sort_vertices(u for u, targets in self.adj.items() if vertex in targets)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return successors and predecessors of vertex, sorted and unique.

        Args:
            vertex: Vertex to get neighbours for.

        Returns:
            Sorted list of neighbours; empty if vertex is not in the graph.
        """
        found = set(self.adj.get(vertex, {}))
        found.update(u for u, targets in self.adj.items() if vertex in targets)
        return sort_vertices(found)

    def edges(self) -> List[Edge]:
        return [
            (u, v, self.adj[u][v])
            for u in sort_vertices(self.adj)
            for v in sort_vertices(self.adj[u])
        ]

    def num_edges(self) -> int:
        return sum(len(targets) for targets in self.adj.values())

    def edges_of(self, vertex: Hashable) -> List[Edge]:
        """
        Outgoing edges of vertex followed by its incoming edges.

        A self-loop is reported once.
        """
        outgoing = [(vertex, v, w) for v, w in self._sorted_targets(vertex)]
        incoming = [
            (u, vertex, self.adj[u][vertex])
            for u in self.predecessors(vertex)
            if u != vertex
        ]
        return outgoing + incoming

    def edges_between(self, u: Hashable, v: Hashable) -> List[Edge]:
        found = []
        if self.has_edge(u, v):
            found.append((u, v, self.adj[u][v]))
        if u != v and self.has_edge(v, u):
            found.append((v, u, self.adj[v][u]))
        return found

    def symmetric_adjacency(self) -> Dict[Hashable, Set[Hashable]]:
        return {
            u: {
                v
                for v in self.adj.get(u, {})
                if v != u and u in self.adj.get(v, {})
            }
            for u in self.vertex_set
        }

    def _sorted_targets(self, vertex: Hashable) -> List[Tuple[Hashable, Weight]]:
        targets = self.adj.get(vertex, {})
        return [(v, targets[v]) for v in sort_vertices(targets)]


class UndirectedGraph(BaseGraph):
    """
    Undirected weighted graph.

    Each edge is stored in both directions with the same weight; add_edge
    always updates both entries.

    Example:
        >>> G = UndirectedGraph()
        >>> G.add_edge('B', 'A', 1.0)
        >>> G.edges()
        [('A', 'B', 1.0)]
        >>> G.edges_of('A')
        [('A', 'B', 1.0)]
    """

    directed = False

    def add_edge(self, u: Hashable, v: Hashable, weight: Weight = 1) -> None:
        """
        Add a weighted edge between u and v.

        Missing endpoints are added. Both directions are written with the
        same weight, replacing any previous weight.

        Args:
            u: One endpoint.
            v: Other endpoint.
            weight: Edge weight (default 1).
        """
        self._put(u, v, weight)
        self._put(v, u, weight)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return neighbours of vertex in sorted order.

        Args:
            vertex: Vertex to get neighbours for.

        Returns:
            Sorted list of neighbours; empty if vertex is not in the graph.
        """
        return self.successors(vertex)

    def edges(self) -> List[Edge]:
        """
        Return list of all edges with weights.

        Each edge appears once as (u, v, w) with u the smaller endpoint.
        """
        edges_list = []
        for u in sort_vertices(self.adj):
            for v in sort_vertices(self.adj[u]):
                if canonical_pair(u, v) == (u, v):
                    edges_list.append((u, v, self.adj[u][v]))
        return edges_list

    def edges_of(self, vertex: Hashable) -> List[Edge]:
        """Edges incident to vertex, each reported as (vertex, other, weight)."""
        targets = self.adj.get(vertex, {})
        return [(vertex, v, targets[v]) for v in sort_vertices(targets)]

    def edges_between(self, u: Hashable, v: Hashable) -> List[Edge]:
        if not self.has_edge(u, v):
            return []
        first, second = canonical_pair(u, v)
        return [(first, second, self.adj[u][v])]

    def symmetric_adjacency(self) -> Dict[Hashable, Set[Hashable]]:
        return {
            u: {v for v in self.adj.get(u, {}) if v != u}
            for u in self.vertex_set
        }
