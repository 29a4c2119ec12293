"""
Single-source shortest paths: Dijkstra's algorithm.

Precondition: every edge reachable from the root carries a non-negative
weight. Violations are reported with ValueError as soon as the offending edge
is relaxed; the algorithm is not defined for negative weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import itertools
from typing import Any, Dict, List, Optional, Tuple

from .core import Graph
from .edge import Edge
from .logging import get_logger
from .utils import distance_map

logger = get_logger(__name__)


def dijkstra(
    graph: Graph, root: int, start_distance: Any = 0
) -> Tuple[List[Optional[Any]], Dict[int, Edge]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes the minimum cumulative weight from ``root`` to every vertex of
    the graph, plus the edge used to reach each vertex on its shortest path.

    Args:
        graph: Graph whose reachable edges have non-negative weights.
        root: Index to measure distances from.
        start_distance: Distance assigned to the root (default 0).

    Returns:
        Tuple of:
        - distances: List indexed by vertex, ``None`` for unreachable vertices
        - path: Dictionary mapping vertex index -> edge on its shortest path
          (the root has no entry). Pass it to ``reconstruct_path``.

    Raises:
        IndexOutOfRange: If ``root`` is not a valid index.
        ValueError: If a reachable edge is unweighted or has a negative weight.

    Complexity: O(E log E) using a binary heap with lazy deletion.

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> _ = g.add_edge(0, 1, directed=True, weight=1)
        >>> _ = g.add_edge(1, 2, directed=True, weight=2)
        >>> distances, path = dijkstra(g, 0)
        >>> distances
        [0, 1, 3]
    """
    graph.vertex_at(root)

    distances: List[Optional[Any]] = [None] * graph.vertex_count
    distances[root] = start_distance
    path: Dict[int, Edge] = {}
    visited = [False] * graph.vertex_count

    # (distance, push order, vertex): push order breaks ties deterministically
    counter = itertools.count()
    pq: List[Tuple[Any, int, int]] = [(start_distance, next(counter), root)]

    while pq:
        dist_u, _, u = heapq.heappop(pq)
        if visited[u]:
            continue
        visited[u] = True

        for edge in graph.edges(u):
            if edge.weight is None:
                raise ValueError(f"Dijkstra requires weighted edges. Found unweighted edge {edge}")
            if edge.weight < 0:
                raise ValueError(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {edge.weight} on edge ({edge.u}, {edge.v})"
                )
            if visited[edge.v]:
                continue

            new_dist = dist_u + edge.weight
            old_dist = distances[edge.v]
            if old_dist is None or new_dist < old_dist:
                distances[edge.v] = new_dist
                path[edge.v] = edge
                heapq.heappush(pq, (new_dist, next(counter), edge.v))

    logger.debug(
        "Dijkstra from %d reached %d of %d vertices",
        root, sum(visited), graph.vertex_count,
    )
    return distances, path


def dijkstra_by_vertex(
    graph: Graph, root: Any, start_distance: Any = 0
) -> Tuple[Dict[Any, Optional[Any]], Dict[int, Edge]]:
    """
    Run :func:`dijkstra` from the first vertex equal to ``root``.

    Returns:
        Tuple of (vertex -> distance dictionary, path map). Both are empty if
        ``root`` is not in the graph.

    Example:
        >>> g = Graph(["A", "B"])
        >>> _ = g.add_edge(0, 1, weight=5)
        >>> dijkstra_by_vertex(g, "A")[0]
        {'A': 0, 'B': 5}
    """
    index = graph.index_of(root)
    if index is None:
        return {}, {}
    distances, path = dijkstra(graph, index, start_distance)
    return distance_map(graph, distances), path


__all__ = ["dijkstra", "dijkstra_by_vertex"]
