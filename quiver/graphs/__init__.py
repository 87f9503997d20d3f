"""
Graph algorithms package for quiver.

This package provides:
- Graph data structures (DirectedGraph, UndirectedGraph, and the Graph facade)
- A stable min-priority queue
- Reachability and depth-first post-order
- Direction-aware cycle detection
- Shortest paths (Dijkstra, Bellman-Ford with negative-cycle detection)
- All simple paths between two vertices
- Maximal clique enumeration (Bron-Kerbosch with pivoting)

All algorithms are deterministic and use sorted vertex ordering for
reproducibility.
"""

from .cliques import cliques
from .core import INFINITY, BaseGraph, DirectedGraph, UndirectedGraph
from .cycles import is_acyclic, is_cyclic
from .graph import Graph
from .paths import get_paths
from .priority_queue import PriorityQueue
from .results import DistanceResult, PathResult, Status
from .shortest import bellman_ford, dijkstra, get_shortest_path, shortest_paths
from .traversal import postorder, reachable
from .utils import (
    adjacency_matrix,
    canonical_pair,
    edges_from_graph,
    node_index_map,
    reconstruct_path,
    sort_vertices,
)

__all__ = [
    "INFINITY",
    "BaseGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "Graph",
    "PriorityQueue",
    "Status",
    "PathResult",
    "DistanceResult",
    "reachable",
    "postorder",
    "is_acyclic",
    "is_cyclic",
    "get_shortest_path",
    "dijkstra",
    "shortest_paths",
    "bellman_ford",
    "get_paths",
    "cliques",
    "adjacency_matrix",
    "canonical_pair",
    "edges_from_graph",
    "node_index_map",
    "reconstruct_path",
    "sort_vertices",
]

# Example usage:
# from quiver.graphs import DirectedGraph, get_shortest_path
#
# G = DirectedGraph()
# G.add_edge('A', 'B', 1.0)
# G.add_edge('B', 'C', 2.0)
# result = get_shortest_path(G, 'A', 'C')
# result.path, result.weight  # (['A', 'B', 'C'], 3.0)
