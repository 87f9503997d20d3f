"""
Kind-tagged graph facade.

Graph wraps a DirectedGraph or UndirectedGraph chosen at construction and
forwards every operation to it unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from .cliques import cliques
from .core import BaseGraph, DirectedGraph, Edge, UndirectedGraph
from .cycles import is_acyclic, is_cyclic
from .paths import get_paths
from .results import DistanceResult, PathResult, Weight
from .shortest import bellman_ford, dijkstra, get_shortest_path, shortest_paths
from .traversal import postorder, reachable

_KINDS = {
    "directed": DirectedGraph,
    "undirected": UndirectedGraph,
}


class Graph:
    """
    Directed or undirected graph selected by a kind tag.

    Args:
        kind: "directed" (default) or "undirected".

    Raises:
        ValueError: If kind is not recognised.

    Example:
        >>> G = Graph(kind="undirected")
        >>> G.add_edge('a', 'b', 1.0)
        >>> G.add_edge('b', 'c', 2.0)
        >>> G.get_shortest_path('a', 'c').path
        ['a', 'b', 'c']
    """

    def __init__(self, kind: str = "directed"):
        if kind not in _KINDS:
            raise ValueError(
                f"Unknown graph kind {kind!r}; expected one of {sorted(_KINDS)}"
            )
        self.kind = kind
        self.impl: BaseGraph = _KINDS[kind]()

    @classmethod
    def from_impl(cls, impl: BaseGraph) -> "Graph":
        """Wrap an existing DirectedGraph or UndirectedGraph."""
        graph = cls("directed" if impl.directed else "undirected")
        graph.impl = impl
        return graph

    # Storage is exposed so Graph can be passed wherever a BaseGraph is accepted

    @property
    def directed(self) -> bool:
        return self.impl.directed

    @property
    def vertex_set(self) -> Set[Hashable]:
        return self.impl.vertex_set

    @property
    def adj(self) -> Dict[Hashable, Dict[Hashable, Weight]]:
        return self.impl.adj

    def add_vertex(self, vertex: Hashable, label: Any = None) -> None:
        self.impl.add_vertex(vertex, label)

    def add_edge(self, u: Hashable, v: Hashable, weight: Weight = 1) -> None:
        self.impl.add_edge(u, v, weight)

    def get_label(self, vertex: Hashable) -> Any:
        return self.impl.get_label(vertex)

    def set_label(self, vertex: Hashable, label: Any) -> None:
        self.impl.set_label(vertex, label)

    def copy(self) -> "Graph":
        return Graph.from_impl(self.impl.copy())

    def vertices(self) -> List[Hashable]:
        return self.impl.vertices()

    def edges(self) -> List[Edge]:
        return self.impl.edges()

    def edges_of(self, vertex: Hashable) -> List[Edge]:
        return self.impl.edges_of(vertex)

    def edges_between(self, u: Hashable, v: Hashable) -> List[Edge]:
        return self.impl.edges_between(u, v)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        return self.impl.neighbors(vertex)

    def successors(self, vertex: Hashable) -> List[Hashable]:
        return self.impl.successors(vertex)

    def weight(self, u: Hashable, v: Hashable) -> Optional[Weight]:
        return self.impl.weight(u, v)

    def num_vertices(self) -> int:
        return self.impl.num_vertices()

    def num_edges(self) -> int:
        return self.impl.num_edges()

    def has_vertex(self, vertex: Hashable) -> bool:
        return self.impl.has_vertex(vertex)

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return self.impl.has_edge(u, v)

    def symmetric_adjacency(self) -> Dict[Hashable, Set[Hashable]]:
        return self.impl.symmetric_adjacency()

    def reachable(self, starts: Iterable[Hashable]) -> List[Hashable]:
        return reachable(self.impl, starts)

    def postorder(self) -> List[Hashable]:
        return postorder(self.impl)

    def is_acyclic(self) -> bool:
        return is_acyclic(self.impl)

    def is_cyclic(self) -> bool:
        return is_cyclic(self.impl)

    def get_shortest_path(self, start: Hashable, finish: Hashable) -> PathResult:
        return get_shortest_path(self.impl, start, finish)

    def dijkstra(self, start: Hashable, finish: Hashable) -> PathResult:
        return dijkstra(self.impl, start, finish)

    def get_paths(self, start: Hashable, finish: Hashable) -> List[Tuple[List[Hashable], Weight]]:
        return get_paths(self.impl, start, finish)

    def shortest_paths(self, source: Hashable) -> DistanceResult:
        return shortest_paths(self.impl, source)

    def bellman_ford(self, source: Hashable) -> Optional[Dict[Hashable, Weight]]:
        return bellman_ford(self.impl, source)

    def cliques(self) -> List[List[Hashable]]:
        return cliques(self.impl)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self.impl

    def __len__(self) -> int:
        return len(self.impl)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Graph):
            return self.impl == other.impl
        if isinstance(other, BaseGraph):
            return self.impl == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(kind={self.kind!r}, vertices={self.vertices()!r}, edges={self.edges()!r})"
