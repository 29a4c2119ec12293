"""
Minimum spanning trees: Jarník/Prim.

The frontier is a binary heap of edges leaving the tree. Entries whose far
endpoint joined the tree after they were pushed are discarded when popped
(lazy deletion), so an edge closing a cycle is never added.

References:
    - Sedgewick, Wayne. "Algorithms", 4th ed., Section 4.3 (lazy Prim).
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2.
"""

import heapq
import itertools
from typing import Any, List, Optional, Sequence, Tuple

from .core import Graph
from .edge import Edge
from .logging import get_logger
from .unionfind import UnionFind

logger = get_logger(__name__)


def _grow_tree(graph: Graph, start: int, visited: List[bool]) -> List[Edge]:
    tree: List[Edge] = []
    counter = itertools.count()
    frontier: List[Tuple[Any, int, Edge]] = []

    def visit(index: int) -> None:
        visited[index] = True
        for edge in graph.edges(index):
            if edge.weight is None:
                raise ValueError(f"Minimum spanning tree requires weighted edges. Found {edge}")
            if not visited[edge.v]:
                heapq.heappush(frontier, (edge.weight, next(counter), edge))

    visit(start)
    while frontier:
        _, _, edge = heapq.heappop(frontier)
        if visited[edge.v]:
            continue
        tree.append(edge)
        visit(edge.v)

    return tree


def mst(graph: Graph, start: int = 0) -> List[Edge]:
    """
    Jarník/Prim minimum spanning tree of the component containing ``start``.

    Edges are followed in their stored direction, so for undirected graphs the
    result spans the whole connected component. Ties between equal weights are
    broken by push order.

    Args:
        graph: Weighted graph.
        start: Index to grow the tree from (default 0).

    Returns:
        Tree edges in the order they were added, each pointing away from the
        tree. Empty for an empty graph or an isolated start vertex.

    Raises:
        IndexOutOfRange: If ``start`` is not a valid index of a non-empty graph.
        ValueError: If an unweighted edge is reached.

    Complexity: O(E log E).

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> _ = g.add_edge(0, 1, weight=1)
        >>> _ = g.add_edge(1, 2, weight=2)
        >>> _ = g.add_edge(0, 2, weight=3)
        >>> total_weight(mst(g))
        3
    """
    if graph.vertex_count == 0:
        return []
    graph.vertex_at(start)

    tree = _grow_tree(graph, start, [False] * graph.vertex_count)
    logger.debug("MST from %d has %d edges", start, len(tree))
    return tree


def minimum_spanning_forest(graph: Graph) -> List[Edge]:
    """
    Minimum spanning forest: one Prim tree per component.

    Trees are grown from every still-unvisited vertex in index order.

    Returns:
        Concatenated tree edges; ``vertex_count - components`` edges for an
        undirected graph.
    """
    visited = [False] * graph.vertex_count
    forest: List[Edge] = []
    for root in range(graph.vertex_count):
        if not visited[root]:
            forest.extend(_grow_tree(graph, root, visited))
    return forest


def total_weight(edges: Sequence[Edge]) -> Optional[Any]:
    """
    Sum the weights of ``edges``.

    Returns:
        The total, or None for an empty sequence.
    """
    if not edges:
        return None
    total = edges[0].weight
    for edge in edges[1:]:
        total = total + edge.weight
    return total


def is_spanning_forest(vertex_count: int, edges: Sequence[Edge]) -> bool:
    """
    Check that ``edges`` never join two vertices already connected.

    Every edge is passed through a Union-Find; a failed union means the edge
    set contains a cycle and cannot be a tree or forest.
    """
    uf = UnionFind(range(vertex_count))
    return all(uf.union(edge.u, edge.v) for edge in edges)


__all__ = [
    "mst",
    "minimum_spanning_forest",
    "total_weight",
    "is_spanning_forest",
]
