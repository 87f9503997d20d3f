"""quiver - weighted directed and undirected graphs with a deterministic algorithm suite."""

__version__ = "0.1.0"

from .diagnostics import (
    assert_consistent,
    assert_symmetric,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .graphs import (
    INFINITY,
    BaseGraph,
    DirectedGraph,
    DistanceResult,
    Graph,
    PathResult,
    PriorityQueue,
    Status,
    UndirectedGraph,
    adjacency_matrix,
    bellman_ford,
    cliques,
    dijkstra,
    edges_from_graph,
    get_paths,
    get_shortest_path,
    is_acyclic,
    is_cyclic,
    node_index_map,
    postorder,
    reachable,
    reconstruct_path,
    shortest_paths,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph structures
    "INFINITY",
    "BaseGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "Graph",
    "PriorityQueue",
    # Results
    "Status",
    "PathResult",
    "DistanceResult",
    # Algorithms
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
    # Utilities
    "adjacency_matrix",
    "edges_from_graph",
    "node_index_map",
    "reconstruct_path",
    # Diagnostics
    "assert_consistent",
    "assert_symmetric",
    "debug_context",
    "is_debug_enabled",
    "set_debug_enabled",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
