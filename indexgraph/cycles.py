"""
Cycle detection and enumeration.

``find_cycles`` enumerates elementary cycles by breadth-first expansion of open
paths. The remaining helpers treat every edge as an undirected link and use a
Union-Find to spot the first edge that closes a cycle.

References:
    - Liu, Hongbo, and Jiaxin Wang. "A new way to enumerate cycles in graph."
      AICT-ICIW'06, IEEE, 2006.
"""

from collections import deque
from typing import List, Optional

from .core import Graph
from .edge import Edge
from .unionfind import UnionFind


def find_cycles(graph: Graph, max_length: Optional[int] = None) -> List[List[Edge]]:
    """
    Enumerate the elementary cycles of a graph.

    Each cycle is reported once per sequence of stored edges, starting and
    ending at its lowest vertex index. Edges are followed in their stored
    direction, so an undirected edge ``u <-> v`` forms the two-edge cycle
    ``u -> v -> u`` and parallel edges yield separate cycles.

    Args:
        graph: Graph to inspect.
        max_length: Longest cycle to report, in edges. None for no limit.

    Returns:
        Cycles ordered by length, then by starting index.

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> for u, v in [(0, 1), (1, 2), (2, 0)]:
        ...     _ = g.add_edge(u, v, directed=True)
        >>> [[str(e) for e in c] for c in find_cycles(g)]
        [['0 -> 1', '1 -> 2', '2 -> 0']]
    """
    cycles: List[List[Edge]] = []
    # Open paths: (head index, edges so far)
    open_paths = deque((i, []) for i in range(graph.vertex_count))

    while open_paths:
        head, path = open_paths.popleft()
        if max_length is not None and len(path) >= max_length:
            # Paths come out in non-decreasing length
            break

        tail = path[-1].v if path else head
        on_path = {head}.union(edge.v for edge in path)
        for edge in graph.edges(tail):
            if edge.v == head:
                cycles.append(path + [edge])
            elif edge.v > head and edge.v not in on_path:
                open_paths.append((head, path + [edge]))

    return cycles


def closing_edge(graph: Graph) -> Optional[Edge]:
    """
    Return the first edge that closes a cycle in the underlying undirected graph.

    Edges are scanned in adjacency order. Each undirected edge is considered
    once (from its lower endpoint); directed edges count as plain links.

    Returns:
        The offending edge, or None if the graph is a forest.
    """
    uf = UnionFind(range(graph.vertex_count))
    for edge in graph.edge_list():
        if not edge.directed and edge.u > edge.v:
            continue
        if not edge.directed and edge.u == edge.v:
            return edge
        if not uf.union(edge.u, edge.v):
            return edge
    return None


def is_forest(graph: Graph) -> bool:
    """Whether the underlying undirected graph has no cycle."""
    return closing_edge(graph) is None


def find_tree_root(graph: Graph) -> Optional[int]:
    """
    Return the root of a graph shaped like a rooted tree.

    The graph qualifies when its underlying undirected graph is connected and
    acyclic and exactly one vertex has no incoming edge (undirected edges
    count as incoming at both ends).

    Returns:
        Index of the root, or None if the graph is empty or not a rooted tree.

    Example:
        >>> g = Graph(["root", "a", "b"])
        >>> _ = g.add_edge(0, 1, directed=True)
        >>> _ = g.add_edge(0, 2, directed=True)
        >>> find_tree_root(g)
        0
    """
    if graph.vertex_count == 0 or not is_forest(graph):
        return None

    uf = UnionFind(range(graph.vertex_count))
    has_incoming = [False] * graph.vertex_count
    for edge in graph.edge_list():
        uf.union(edge.u, edge.v)
        has_incoming[edge.v] = True

    if uf.component_count != 1:
        return None
    roots = [i for i, incoming in enumerate(has_incoming) if not incoming]
    return roots[0] if len(roots) == 1 else None


__all__ = ["find_cycles", "closing_edge", "is_forest", "find_tree_root"]
