"""Constructors for common graph shapes.

Built only through the public ``add_vertex``/``add_edge`` API, so the usual
invariant checks apply.
"""

from typing import Any, Iterable, Optional, Sequence

from .core import Graph, V


def star_graph(
    center: V, leaves: Iterable[V], directed: bool = False, weight: Optional[Any] = None
) -> Graph[V]:
    """
    Build a star: ``center`` at index 0 joined to every leaf.

    Leaves take indices 1, 2, ... in the given order. Directed stars point
    from the center outward.

    Example:
        >>> g = star_graph("hub", ["a", "b", "c"])
        >>> g.neighbors(0)
        [1, 2, 3]
    """
    graph: Graph[V] = Graph([center])
    for leaf in leaves:
        index = graph.add_vertex(leaf)
        graph.add_edge(0, index, directed, weight)
    return graph


def complete_graph(vertices: Sequence[V], weight: Optional[Any] = None) -> Graph[V]:
    """
    Build the complete undirected graph on ``vertices``.

    Edges are added for every index pair ``i < j`` in lexicographic order.
    No self-loops.
    """
    graph: Graph[V] = Graph(vertices)
    n = graph.vertex_count
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(i, j, weight=weight)
    return graph


__all__ = ["star_graph", "complete_graph"]
