"""Diagnostics and debugging utilities for indexgraph."""

from .core import (
    assert_graph_invariants,
    assert_pseudo_forest,
    assert_unique_elements,
    structural_problems,
)
from .debug_mode import (
    check_invariants,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "structural_problems",
    "assert_graph_invariants",
    "assert_unique_elements",
    "assert_pseudo_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_invariants",
]
