"""
Topological sorting.

Depth-first topological sort driven by an explicit stack, so deep graphs do
not hit the recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4 (Topological sort).
"""

from typing import List, Optional

from .core import Graph

_UNVISITED, _ACTIVE, _DONE = 0, 1, 2


def topological_sort(graph: Graph) -> Optional[List[int]]:
    """
    Order vertex indices so that every edge points forward.

    Roots are tried in index order and edges in adjacency order, so the
    result is deterministic. Undirected edges go both ways and therefore make
    the graph cyclic.

    Returns:
        Vertex indices in topological order, or None if the graph has a cycle.

    Example:
        >>> g = Graph(["shirt", "tie", "jacket"])
        >>> _ = g.add_edge(0, 1, directed=True)
        >>> _ = g.add_edge(1, 2, directed=True)
        >>> topological_sort(g)
        [0, 1, 2]
    """
    n = graph.vertex_count
    state = [_UNVISITED] * n
    finished: List[int] = []

    for root in range(n):
        if state[root] != _UNVISITED:
            continue
        state[root] = _ACTIVE
        # (vertex, its edges, position of the next edge to explore)
        stack = [(root, graph.edges(root), 0)]
        while stack:
            u, edges, position = stack.pop()
            if position < len(edges):
                stack.append((u, edges, position + 1))
                v = edges[position].v
                if state[v] == _ACTIVE:
                    return None
                if state[v] == _UNVISITED:
                    state[v] = _ACTIVE
                    stack.append((v, graph.edges(v), 0))
            else:
                state[u] = _DONE
                finished.append(u)

    finished.reverse()
    return finished


def is_dag(graph: Graph) -> bool:
    """Whether the graph is a directed acyclic graph."""
    return topological_sort(graph) is not None


__all__ = ["topological_sort", "is_dag"]
