"""Diagnostics and debugging utilities for quiver."""

from .core import (
    assert_consistent,
    assert_symmetric,
    check_graph,
    dangling_endpoints,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_consistent",
    "assert_symmetric",
    "check_graph",
    "dangling_endpoints",
    "is_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
