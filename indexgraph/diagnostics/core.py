"""Structural invariant checks for graphs.

These checks describe implementation bugs, not bad input, so the ``assert_*``
helpers raise AssertionError. Graph mutations call them automatically while
debug mode is enabled (see ``indexgraph.diagnostics.debug_mode``).
"""

from __future__ import annotations

from collections import Counter
from typing import List, Sequence

from indexgraph.edge import Edge


def structural_problems(vertex_count: int, adjacency: Sequence[Sequence[Edge]]) -> List[str]:
    """
    List every violation of the Graph Store invariants.

    Checked invariants:

    - there is exactly one adjacency list per vertex;
    - every edge stored in list ``i`` has ``u == i`` and ``0 <= v < vertex_count``;
    - every undirected edge ``(u, v, w)`` is matched by the same number of
      reversals ``(v, u, w)`` (undirected self-loops are stored in pairs).

    Parameters
    ----------
    vertex_count:
        Number of vertices in the graph.
    adjacency:
        Adjacency lists, one per vertex index.

    Returns
    -------
    list of str
        Human-readable problem descriptions; empty when the structure is sound.
    """
    problems: List[str] = []

    if len(adjacency) != vertex_count:
        problems.append(
            f"{len(adjacency)} adjacency lists for {vertex_count} vertices"
        )

    undirected: Counter = Counter()
    for i, edges in enumerate(adjacency):
        for edge in edges:
            if edge.u != i:
                problems.append(f"edge {edge} stored in adjacency list {i}")
            if not 0 <= edge.v < vertex_count:
                problems.append(f"edge {edge} points outside [0, {vertex_count})")
            if not edge.directed:
                undirected[(edge.u, edge.v, edge.weight)] += 1

    for (u, v, weight), count in undirected.items():
        if u == v:
            if count % 2:
                problems.append(f"undirected self-loop at {u} is not stored in pairs")
        elif undirected.get((v, u, weight), 0) != count:
            problems.append(f"undirected edge {u} <-> {v} has no matching reversal")

    return problems


def assert_graph_invariants(graph) -> None:
    """
    Assert the Graph Store invariants for ``graph``.

    Raises
    ------
    AssertionError
        If any invariant listed in :func:`structural_problems` is broken.
    """
    problems = structural_problems(graph.vertex_count, graph.adjacency_lists())
    if problems:
        raise AssertionError("Graph invariants violated: " + "; ".join(problems))


def assert_unique_elements(graph) -> None:
    """
    Assert that no two vertices compare equal and no ``u -> v`` pair repeats.

    Directedness and weights do not take part, so a directed and an undirected
    edge from ``u`` to ``v`` count as a duplicate.

    Raises
    ------
    AssertionError
        If a duplicate vertex or edge is found.
    """
    vertices = list(graph)
    for i, vertex in enumerate(vertices):
        if vertex in vertices[i + 1:]:
            raise AssertionError(f"Duplicate vertex {vertex!r} at index {i}")

    seen = set()
    for edge in graph.edge_list():
        if edge.u == edge.v and not edge.directed:
            # Undirected self-loops legitimately occupy two slots
            continue
        if (edge.u, edge.v) in seen:
            raise AssertionError(f"Duplicate edge {edge}")
        seen.add((edge.u, edge.v))


def assert_pseudo_forest(graph) -> None:
    """
    Assert that every vertex has at most one outgoing edge, all directed.

    Raises
    ------
    AssertionError
        If a vertex has several outgoing edges or an undirected edge exists.
    """
    for i in range(graph.vertex_count):
        edges = graph.edges(i)
        if len(edges) > 1:
            raise AssertionError(f"Vertex {i} has {len(edges)} outgoing edges")
        if edges and not edges[0].directed:
            raise AssertionError(f"Undirected edge {edges[0]} in a pseudo-forest")
