"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, mapping edge paths back to vertex
values, keying index-based results by vertex, and dense matrix export.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np

from .core import Graph
from .edge import Edge


def reconstruct_path(path: Mapping[int, Edge], source: int, target: int) -> List[Edge]:
    """
    Reconstruct the edge path from ``source`` to ``target``.

    ``path`` maps each discovered vertex index to the edge used to reach it,
    as produced by the traversal and shortest-path engines.

    Args:
        path: Predecessor-edge map.
        source: Index the search started from.
        target: Index to reconstruct the path to.

    Returns:
        Edges from source to target in travel order. Empty if ``target`` is the
        source or was never reached.

    Example:
        >>> path = {1: Edge(0, 1, True), 2: Edge(1, 2, True)}
        >>> [str(e) for e in reconstruct_path(path, 0, 2)]
        ['0 -> 1', '1 -> 2']
    """
    if target == source or target not in path:
        return []

    edges: List[Edge] = []
    current = target
    # A well-formed map never revisits a vertex; the bound guards against cycles
    for _ in range(len(path)):
        edge = path[current]
        edges.append(edge)
        current = edge.u
        if current == source:
            edges.reverse()
            return edges
        if current not in path:
            break
    return []


def edges_to_vertices(graph: Graph, edges: Sequence[Edge]) -> List[Any]:
    """
    Return the vertex values visited by an edge path.

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> e1 = g.add_edge(0, 1)
        >>> e2 = g.add_edge(1, 2)
        >>> edges_to_vertices(g, [e1, e2])
        ['A', 'B', 'C']
    """
    if not edges:
        return []
    vertices = [graph.vertex_at(edges[0].u)]
    vertices.extend(graph.vertex_at(edge.v) for edge in edges)
    return vertices


def distance_map(graph: Graph, distances: Sequence[Optional[Any]]) -> Dict[Any, Optional[Any]]:
    """
    Key a per-index distance list by vertex value.

    Vertices must be hashable. When several vertices compare equal, the last
    one wins.
    """
    return {graph.vertex_at(i): d for i, d in enumerate(distances)}


def adjacency_matrix(graph: Graph, weighted: bool = True) -> np.ndarray:
    """
    Build the dense adjacency matrix of a graph.

    Entry ``[i, j]`` holds the weight of the edge from ``i`` to ``j`` (or 1.0
    for unweighted edges, or when ``weighted`` is False). Parallel edges keep
    the smallest weight. Missing edges are 0.

    Args:
        graph: Graph to export.
        weighted: Whether to use edge weights.

    Returns:
        (n, n) float array in vertex index order. Undirected graphs give a
        symmetric matrix.

    Example:
        >>> g = Graph(["A", "B"])
        >>> _ = g.add_edge(0, 1, weight=2.0)
        >>> adjacency_matrix(g)
        array([[0., 2.],
               [2., 0.]])
    """
    n = graph.vertex_count
    W = np.zeros((n, n))
    seen = np.zeros((n, n), dtype=bool)

    for edge in graph.edge_list():
        value = float(edge.weight) if weighted and edge.weighted else 1.0
        if not seen[edge.u, edge.v] or value < W[edge.u, edge.v]:
            W[edge.u, edge.v] = value
        seen[edge.u, edge.v] = True

    return W


__all__ = [
    "reconstruct_path",
    "edges_to_vertices",
    "distance_map",
    "adjacency_matrix",
]
