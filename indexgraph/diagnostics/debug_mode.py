"""
Debug mode for indexgraph.

While debug mode is on, every mutating graph operation re-checks the
structural invariants of the graph it changed through :func:`check_invariants`
and raises AssertionError on the first violation. The initial state comes from
the ``INDEXGRAPH_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator

DEBUG_ENV_VAR = "INDEXGRAPH_DEBUG"

_TRUE_VALUES = ("1", "true", "yes", "on")

InvariantCheck = Callable[[Any], None]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUE_VALUES


_debug_enabled: bool = _env_flag(DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return whether graph mutations currently re-check their invariants."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable invariant checking after mutations."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable debug mode.

    The previous state is restored on exit, including when the block raises.
    Bulk construction of large graphs usually runs under
    ``debug_context(False)``, since each check walks the whole graph.

    Example:
        >>> with debug_context(False):
        ...     g = Graph(range(10_000))
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous


def check_invariants(graph: Any, *checks: InvariantCheck) -> None:
    """
    Run each of ``checks`` on ``graph`` when debug mode is enabled.

    Graph variants call this after every mutation with the assertions that
    describe their own guarantees, e.g.
    ``check_invariants(self, assert_pseudo_forest)``. Nothing runs when debug
    mode is off.

    Args:
        graph: Graph or graph variant that was just mutated.
        *checks: Callables raising AssertionError when an invariant is broken.

    Raises:
        AssertionError: From the first failing check.
    """
    if not _debug_enabled:
        return
    for check in checks:
        check(graph)
