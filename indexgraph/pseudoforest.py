"""
Directed Pseudo-Forest.

Every vertex has at most one outgoing edge, so following successors from any
vertex either stops at a root or falls into exactly one cycle. Built on top of
UniqueElementsGraph, so duplicate vertices and edges are rejected as well.
"""

from typing import Any, Dict, Generic, Iterable, List, Optional

from .core import V
from .diagnostics import assert_pseudo_forest, check_invariants
from .edge import Edge
from .errors import InvariantViolation
from .logging import get_logger
from .unique import GraphQueryDelegate, UniqueElementsGraph

logger = get_logger(__name__)


class DirectedPseudoForest(GraphQueryDelegate, Generic[V]):
    """
    Directed graph with out-degree at most one.

    Adding an edge that is already stored is a no-op. Adding a second,
    different outgoing edge to a vertex raises InvariantViolation, or is
    ignored when ``strict`` is False.

    Example:
        >>> f = DirectedPseudoForest(["a", "b", "c"])
        >>> _ = f.add_edge(0, 1)
        >>> _ = f.add_edge(1, 2)
        >>> _ = f.add_edge(2, 1)
        >>> [str(e) for e in f.find_cycle(0)]
        ['1 -> 2', '2 -> 1']
    """

    def __init__(self, vertices: Optional[Iterable[V]] = None, strict: bool = True):
        self._graph: UniqueElementsGraph[V] = UniqueElementsGraph(vertices)
        self.strict = strict

    def add_vertex(self, vertex: V) -> int:
        return self._graph.add_vertex(vertex)

    def add_edge(self, u: int, v: int, weight: Optional[Any] = None) -> Optional[Edge]:
        """
        Add the directed edge ``u -> v``.

        Returns:
            The stored edge, or None if it was a duplicate or was ignored.

        Raises:
            IndexOutOfRange: If ``u`` or ``v`` is not a valid index.
            InvariantViolation: If ``u`` already has a different outgoing
                edge and the forest is strict.
        """
        if self._graph.edge_exists(u, v):
            logger.debug("Edge %d -> %d already stored, ignoring", u, v)
            return None

        existing = self.outgoing_edge(u)
        if existing is not None:
            message = f"Vertex {u} already has outgoing edge {existing}"
            if self.strict:
                raise InvariantViolation(message)
            logger.debug("%s, ignoring %d -> %d", message, u, v)
            return None

        edge = self._graph.add_edge(u, v, directed=True, weight=weight)
        self._check_invariants()
        return edge

    def insert_edge(self, edge: Edge) -> Optional[Edge]:
        if not edge.directed:
            raise InvariantViolation(f"Undirected edge {edge} in a pseudo-forest")
        return self.add_edge(edge.u, edge.v, edge.weight)

    def remove_vertex(self, index: int) -> V:
        return self._graph.remove_vertex(index)

    def remove_vertex_value(self, vertex: V) -> bool:
        return self._graph.remove_vertex_value(vertex)

    def remove_edge(self, edge: Edge) -> bool:
        return self._graph.remove_edge(edge)

    def unedge(self, u: int, v: int, bidirectional: bool = True) -> int:
        return self._graph.unedge(u, v, bidirectional)

    def outgoing_edge(self, index: int) -> Optional[Edge]:
        """The single edge leaving ``index``, or None for a root."""
        edges = self._graph.edges(index)
        return edges[0] if edges else None

    def successor(self, index: int) -> Optional[int]:
        edge = self.outgoing_edge(index)
        return None if edge is None else edge.v

    def roots(self) -> List[int]:
        """Indices of the vertices without an outgoing edge."""
        return [i for i in range(self.vertex_count) if self.outgoing_edge(i) is None]

    def find_cycle(self, start: int) -> List[Edge]:
        """
        Follow successors from ``start`` and return the cycle reached.

        The walk visits every vertex at most once, so it takes at most
        ``vertex_count`` steps.

        Returns:
            Edges of the cycle in traversal order, starting at the first cycle
            vertex reached. Empty if the walk ends at a root.

        Raises:
            IndexOutOfRange: If ``start`` is not a valid index.
        """
        position: Dict[int, int] = {}
        walk: List[Edge] = []
        current = start
        while current not in position:
            position[current] = len(walk)
            edge = self.outgoing_edge(current)
            if edge is None:
                return []
            walk.append(edge)
            current = edge.v
        return walk[position[current]:]

    def cycles(self) -> List[List[Edge]]:
        """
        Return every cycle once.

        Walks start from each vertex in index order; a cycle is reported from
        the first of its vertices reached by the walk that discovers it.
        """
        walk_of: Dict[int, int] = {}
        found: List[List[Edge]] = []
        for start in range(self.vertex_count):
            current: Optional[int] = start
            while current is not None and current not in walk_of:
                walk_of[current] = start
                current = self.successor(current)
            if current is not None and walk_of[current] == start:
                found.append(self.find_cycle(current))
        return found

    def has_cycle(self) -> bool:
        return bool(self.cycles())

    def _check_invariants(self) -> None:
        check_invariants(self, assert_pseudo_forest)


__all__ = ["DirectedPseudoForest"]
