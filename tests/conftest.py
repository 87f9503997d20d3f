"""Pytest configuration and shared fixtures for quiver tests.

This module provides:
- A deterministic numpy RNG fixture
- A random weighted graph factory for cross-check tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from quiver.graphs import DirectedGraph, UndirectedGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable:
    """Factory building small random graphs with non-negative integer weights.

    Returns:
        Callable (n_vertices, edge_prob, directed) -> graph.
    """

    def build(n_vertices: int = 6, edge_prob: float = 0.4, directed: bool = True):
        graph = DirectedGraph() if directed else UndirectedGraph()
        for v in range(n_vertices):
            graph.add_vertex(v)
        for u in range(n_vertices):
            for v in range(n_vertices):
                if u == v or (not directed and v < u):
                    continue
                if rng.random() < edge_prob:
                    graph.add_edge(u, v, int(rng.integers(0, 10)))
        return graph

    return build
