"""Process-wide switch for graph invariant checking.

While debug mode is on, every algorithm entry point in quiver.graphs calls
check_graph(), which verifies that each adjacency entry names a vertex in
the vertex set and that undirected graphs store every edge in both
directions. The checks cost O(V + E) per call, so they are off by default.

The initial state comes from the QUIVER_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "QUIVER_DEBUG"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _parse_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


_debug_enabled: bool = _parse_flag(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return True when graph algorithms validate their input first."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn invariant checking on or off for the whole process.

    Args:
        enabled: True to make check_graph() validate every graph passed to
            an algorithm; False to skip validation.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Scope invariant checking to a block, restoring the previous state after.

    Args:
        enabled: Debug state inside the block (default True).

    Example:
        >>> G = UndirectedGraph()
        >>> G.add_edge('a', 'b')
        >>> del G.adj['b']['a']  # break symmetry
        >>> with debug_context(True):
        ...     G.get_shortest_path('a', 'b')
        Traceback (most recent call last):
        ...
        ValueError: Undirected graph has an edge without a matching reverse edge
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
