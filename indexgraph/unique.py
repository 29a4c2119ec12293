"""
Unique-Elements Graph.

A graph that never holds two equal vertices and never connects a vertex pair
twice in the same direction. It wraps a plain Graph and intercepts every mutation;
read-only queries are delegated to the wrapped store so all algorithms accept
it unchanged.
"""

from typing import Any, Generic, Iterable, Iterator, Optional, Sequence

from .core import Graph, V
from .diagnostics import assert_unique_elements, check_invariants
from .edge import Edge
from .errors import InvariantViolation
from .logging import get_logger

logger = get_logger(__name__)

# Read-only surface shared by every graph variant
GRAPH_QUERIES = frozenset({
    "vertices",
    "vertex_count",
    "edge_count",
    "vertex_at",
    "index_of",
    "contains_vertex",
    "contains_edge",
    "edge_exists",
    "neighbors",
    "neighbor_vertices",
    "edges",
    "edge_list",
    "adjacency_lists",
})


class GraphQueryDelegate:
    """
    Forward the read-only graph queries to ``self._graph``.

    Mutating methods are deliberately absent: each variant defines its own.
    """

    _graph: Any

    def __getattr__(self, name: str) -> Any:
        if name in GRAPH_QUERIES:
            return getattr(self._graph, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def to_graph(self) -> Graph:
        """Return a plain, independent Graph with the same content."""
        graph = self._graph
        return graph.to_graph() if isinstance(graph, GraphQueryDelegate) else graph.copy()

    def __len__(self) -> int:
        return len(self._graph)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._graph)

    def __getitem__(self, index: int) -> Any:
        return self._graph[index]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph

    def __str__(self) -> str:
        return str(self._graph)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertex_count}, edges={self.edge_count})"


class UniqueElementsGraph(GraphQueryDelegate, Generic[V]):
    """
    Graph without duplicate vertices or edges.

    ``add_vertex`` returns the index of an equal vertex if one exists, and
    ``add_edge`` ignores an edge ``u -> v`` when any edge from ``u`` to ``v``
    is already stored, directed or not (weights are not compared). An
    undirected edge whose reverse direction ``v -> u`` is already stored is
    kept as the directed edge ``u -> v``, so each direction is connected once.

    Args:
        vertices: Initial vertices; duplicates are collapsed.
        strict: Raise InvariantViolation on duplicate insertion instead of
            ignoring it.

    Example:
        >>> g = UniqueElementsGraph(["A", "B", "A"])
        >>> g.vertices
        ['A', 'B']
        >>> g.add_edge(0, 1) is not None, g.add_edge(1, 0) is None
        (True, True)
    """

    def __init__(self, vertices: Optional[Iterable[V]] = None, strict: bool = False):
        self._graph: Graph[V] = Graph()
        self.strict = strict
        if vertices is not None:
            for vertex in vertices:
                self.add_vertex(vertex)

    @classmethod
    def from_path(cls, path: Sequence[V], directed: bool = False) -> "UniqueElementsGraph[V]":
        """
        Build a graph whose edges follow ``path`` from first to last vertex.

        Repeated vertices are collapsed, so a path that revisits a vertex
        produces a cycle.
        """
        graph = cls(path)
        for a, b in zip(path, path[1:]):
            graph.add_edge_by_vertices(a, b, directed)
        return graph

    @classmethod
    def from_cycle(cls, cycle: Sequence[V], directed: bool = False) -> "UniqueElementsGraph[V]":
        """Build a path graph over ``cycle`` closed by an edge from last to first."""
        graph = cls.from_path(cycle, directed)
        if cycle:
            graph.add_edge_by_vertices(cycle[-1], cycle[0], directed)
        return graph

    @classmethod
    def union_of(cls, *graphs: Any) -> "UniqueElementsGraph":
        """
        Merge graphs, identifying equal vertices.

        Vertices keep the order of first appearance across ``graphs``; edges
        are re-addressed through vertex values, so equal edges collapse.
        """
        union = cls()
        for graph in graphs:
            for vertex in graph:
                union.add_vertex(vertex)
            for edge in graph.edge_list():
                if not edge.directed and edge.u > edge.v:
                    # The lower endpoint already added both directions
                    continue
                union.add_edge_by_vertices(
                    graph[edge.u], graph[edge.v], edge.directed, edge.weight
                )
        return union

    def add_vertex(self, vertex: V) -> int:
        """
        Add ``vertex`` unless an equal vertex exists.

        Returns:
            Index of the new or existing vertex.

        Raises:
            InvariantViolation: In strict mode, if an equal vertex exists.
        """
        existing = self._graph.index_of(vertex)
        if existing is not None:
            self._duplicate(f"Vertex {vertex!r} already stored at index {existing}")
            return existing
        index = self._graph.add_vertex(vertex)
        self._check_invariants()
        return index

    def add_edge(
        self, u: int, v: int, directed: bool = False, weight: Optional[Any] = None
    ) -> Optional[Edge]:
        """
        Add an edge unless ``u`` is already connected to ``v``.

        Returns:
            The stored edge, or None if it was a duplicate.

        Raises:
            IndexOutOfRange: If ``u`` or ``v`` is not a valid index.
            InvariantViolation: In strict mode, if the edge is a duplicate.
        """
        return self.insert_edge(Edge(u, v, directed, weight))

    def insert_edge(self, edge: Edge) -> Optional[Edge]:
        if self._graph.edge_exists(edge.u, edge.v):
            self._duplicate(f"Vertex {edge.u} already connected to {edge.v}, edge {edge}")
            return None
        if not edge.directed and self._graph.edge_exists(edge.v, edge.u):
            logger.debug("Edge %d -> %d already stored, adding %s as directed", edge.v, edge.u, edge)
            edge = Edge(edge.u, edge.v, True, edge.weight)
        self._graph.insert_edge(edge)
        self._check_invariants()
        return edge

    def add_edge_by_vertices(
        self, a: V, b: V, directed: bool = False, weight: Optional[Any] = None
    ) -> Optional[Edge]:
        """Add an edge between vertex values; None if absent or duplicate."""
        u = self._graph.index_of(a)
        v = self._graph.index_of(b)
        if u is None or v is None:
            return None
        return self.add_edge(u, v, directed, weight)

    def remove_vertex(self, index: int) -> V:
        return self._graph.remove_vertex(index)

    def remove_vertex_value(self, vertex: V) -> bool:
        return self._graph.remove_vertex_value(vertex)

    def remove_edge(self, edge: Edge) -> bool:
        return self._graph.remove_edge(edge)

    def unedge(self, u: int, v: int, bidirectional: bool = True) -> int:
        return self._graph.unedge(u, v, bidirectional)

    def _duplicate(self, message: str) -> None:
        if self.strict:
            raise InvariantViolation(message)
        logger.debug("%s, ignoring", message)

    def _check_invariants(self) -> None:
        check_invariants(self, assert_unique_elements)


__all__ = ["UniqueElementsGraph", "GraphQueryDelegate", "GRAPH_QUERIES"]
