"""
Core graph data structure.

Provides the index-addressed Graph Store: a dense sequence of vertices plus one
adjacency list of Edge values per vertex. Vertices are referred to by their
integer position everywhere (edges, predecessor maps, visited sets), so the
store re-indexes its edges whenever a vertex is removed.
"""

from numbers import Integral
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .diagnostics import assert_graph_invariants, check_invariants
from .edge import Edge
from .errors import IndexOutOfRange
from .logging import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class Graph(Generic[V]):
    """
    Graph with index-addressed vertices and per-vertex adjacency lists.

    Supports directed and undirected, weighted and unweighted edges in the same
    graph. An undirected edge ``u <-> v`` is stored as ``Edge(u, v)`` in the
    list of ``u`` and as its reversal ``Edge(v, u)`` in the list of ``v``; both
    are always added and removed together.

    Attributes:
        vertices: Copy of the vertex sequence (index -> vertex value).

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - remove_vertex: O(V + E)
        - neighbors / edges: O(deg(v))
        - index_of: O(V), vertices are compared by equality

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> g.add_edge(0, 1)
        Edge(u=0, v=1, directed=False, weight=None)
        >>> g.neighbors(1)
        [0]
    """

    def __init__(self, vertices: Optional[Iterable[V]] = None):
        """
        Initialize a graph, optionally with an initial vertex sequence.

        Args:
            vertices: Vertices to add, in index order.
        """
        self._vertices: List[V] = []
        self._adjacency: List[List[Edge]] = []
        if vertices is not None:
            for vertex in vertices:
                self.add_vertex(vertex)

    # Queries

    @property
    def vertices(self) -> List[V]:
        return list(self._vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of stored edges (an undirected edge counts twice)."""
        return sum(len(edges) for edges in self._adjacency)

    def vertex_at(self, index: int) -> V:
        self._check_index(index)
        return self._vertices[index]

    def index_of(self, vertex: V) -> Optional[int]:
        """Return the index of the first vertex equal to ``vertex``, or None."""
        for i, candidate in enumerate(self._vertices):
            if candidate == vertex:
                return i
        return None

    def contains_vertex(self, vertex: V) -> bool:
        return self.index_of(vertex) is not None

    def contains_edge(self, edge: Edge) -> bool:
        """Whether an edge equal to ``edge`` is stored at ``edge.u``."""
        if not 0 <= edge.u < len(self._adjacency):
            return False
        return edge in self._adjacency[edge.u]

    def edge_exists(self, u: int, v: int) -> bool:
        """Whether any edge leads from index ``u`` to index ``v``."""
        self._check_index(u)
        self._check_index(v)
        return any(edge.v == v for edge in self._adjacency[u])

    def neighbors(self, index: int) -> List[int]:
        """
        Return the target indices of the edges leaving ``index``.

        Neighbors are listed in adjacency-list (insertion) order and repeat
        when parallel edges exist.

        Raises:
            IndexOutOfRange: If ``index`` is not a valid vertex index.
        """
        self._check_index(index)
        return [edge.v for edge in self._adjacency[index]]

    def neighbor_vertices(self, index: int) -> List[V]:
        return [self._vertices[i] for i in self.neighbors(index)]

    def edges(self, index: int) -> List[Edge]:
        """
        Return the edges stored at ``index`` in insertion order.

        Raises:
            IndexOutOfRange: If ``index`` is not a valid vertex index.
        """
        self._check_index(index)
        return list(self._adjacency[index])

    def edge_list(self) -> List[Edge]:
        """Return every stored edge, grouped by source index."""
        return [edge for edges in self._adjacency for edge in edges]

    def adjacency_lists(self) -> List[List[Edge]]:
        return [list(edges) for edges in self._adjacency]

    # Mutation

    def add_vertex(self, vertex: V) -> int:
        """
        Append a vertex and return its index.

        Args:
            vertex: Vertex value; duplicates are allowed in a plain Graph.

        Returns:
            Index of the new vertex.
        """
        self._vertices.append(vertex)
        self._adjacency.append([])
        index = len(self._vertices) - 1
        logger.debug("Added vertex %r at index %d", vertex, index)
        self._check_invariants()
        return index

    def add_edge(
        self, u: int, v: int, directed: bool = False, weight: Optional[Any] = None
    ) -> Edge:
        """
        Add an edge from ``u`` to ``v``.

        For undirected edges the reversal is appended to the list of ``v`` as
        well.

        Args:
            u: Source index.
            v: Target index.
            directed: Whether the edge is one-way.
            weight: Optional numeric weight.

        Returns:
            The edge stored at ``u``.

        Raises:
            IndexOutOfRange: If ``u`` or ``v`` is not a valid vertex index.
        """
        return self.insert_edge(Edge(u, v, directed, weight))

    def insert_edge(self, edge: Edge) -> Edge:
        """Add an existing Edge value; see :meth:`add_edge`."""
        self._check_index(edge.u)
        self._check_index(edge.v)
        self._adjacency[edge.u].append(edge)
        if not edge.directed:
            self._adjacency[edge.v].append(edge.reversed())
        logger.debug("Added edge %s", edge)
        self._check_invariants()
        return edge

    def add_edge_by_vertices(
        self, a: V, b: V, directed: bool = False, weight: Optional[Any] = None
    ) -> Optional[Edge]:
        """
        Add an edge between the first vertices equal to ``a`` and ``b``.

        Returns:
            The stored edge, or None if either vertex is not in the graph.
        """
        u = self.index_of(a)
        v = self.index_of(b)
        if u is None or v is None:
            return None
        return self.add_edge(u, v, directed, weight)

    def remove_vertex(self, index: int) -> V:
        """
        Remove the vertex at ``index`` together with every edge touching it.

        All vertices above ``index`` move down one position, and every
        remaining edge referencing such a vertex is re-indexed to match.

        Returns:
            The removed vertex value.

        Raises:
            IndexOutOfRange: If ``index`` is not a valid vertex index.
        """
        self._check_index(index)
        vertex = self._vertices.pop(index)
        del self._adjacency[index]
        dropped = 0
        for i, edges in enumerate(self._adjacency):
            kept = [edge.shifted(index) for edge in edges if edge.v != index]
            dropped += len(edges) - len(kept)
            self._adjacency[i] = kept
        logger.debug(
            "Removed vertex %r at index %d (%d incoming edges dropped)", vertex, index, dropped
        )
        self._check_invariants()
        return vertex

    def remove_vertex_value(self, vertex: V) -> bool:
        """Remove the first vertex equal to ``vertex``; False if absent."""
        index = self.index_of(vertex)
        if index is None:
            return False
        self.remove_vertex(index)
        return True

    def remove_edge(self, edge: Edge) -> bool:
        """
        Remove the first stored edge equal to ``edge``.

        For undirected edges the matching reversal at ``edge.v`` is removed as
        well. Removing an edge that is not present is a no-op.

        Returns:
            True if an edge was removed, False if none matched.

        Raises:
            IndexOutOfRange: If ``edge.u`` or ``edge.v`` is not a valid index.
        """
        self._check_index(edge.u)
        self._check_index(edge.v)
        edges = self._adjacency[edge.u]
        if edge not in edges:
            logger.debug("Edge %s not found, nothing removed", edge)
            return False
        edges.remove(edge)
        if not edge.directed:
            self._adjacency[edge.v].remove(edge.reversed())
        logger.debug("Removed edge %s", edge)
        self._check_invariants()
        return True

    def unedge(self, u: int, v: int, bidirectional: bool = True) -> int:
        """
        Remove every edge from ``u`` to ``v``.

        Undirected edges always leave together with their reversal. With
        ``bidirectional`` set, directed edges from ``v`` to ``u`` are removed
        too.

        Returns:
            Number of adjacency entries removed.
        """
        self._check_index(u)
        self._check_index(v)
        doomed = [edge for edge in self._adjacency[u] if edge.v == v]
        if bidirectional:
            doomed += [edge for edge in self._adjacency[v] if edge.v == u and edge.directed]
        # Undirected self-loops appear twice in doomed but hold two slots
        before = self.edge_count
        for edge in doomed:
            if edge in self._adjacency[edge.u]:
                self.remove_edge(edge)
        return before - self.edge_count

    # Derived graphs

    def copy(self) -> "Graph[V]":
        return Graph.from_adjacency(self._vertices, self._adjacency)

    def reversed(self) -> "Graph[V]":
        """
        Return a new graph with every directed edge flipped.

        Undirected edges are unaffected since they already go both ways.
        """
        result: Graph[V] = Graph(self._vertices)
        for edges in self._adjacency:
            loops = 0
            for edge in edges:
                if edge.directed:
                    result.insert_edge(edge.reversed())
                elif edge.u < edge.v:
                    result.insert_edge(edge)
                elif edge.u == edge.v:
                    # Undirected self-loops occupy two consecutive slots
                    if loops % 2 == 0:
                        result.insert_edge(edge)
                    loops += 1
        return result

    @classmethod
    def from_adjacency(cls, vertices: Iterable[V], adjacency: Iterable[Iterable[Edge]]) -> "Graph[V]":
        """
        Build a graph from explicit adjacency lists, keeping their exact order.

        Used by decoders that must reproduce the per-vertex edge order. The
        caller is responsible for providing a structurally valid pairing; it is
        checked when debug mode is enabled.
        """
        graph = cls()
        graph._vertices = list(vertices)
        graph._adjacency = [list(edges) for edges in adjacency]
        graph._check_invariants()
        return graph

    # Internal helpers

    def _check_index(self, index: int) -> None:
        if not isinstance(index, Integral) or not 0 <= index < len(self._vertices):
            raise IndexOutOfRange(index, len(self._vertices))

    def _check_invariants(self) -> None:
        check_invariants(self, assert_graph_invariants)

    # Collection protocol

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._vertices))

    def __getitem__(self, index: int) -> V:
        return self.vertex_at(index)

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._vertices == other._vertices and self._adjacency == other._adjacency

    def __str__(self) -> str:
        lines = []
        for i, vertex in enumerate(self._vertices):
            lines.append(f"{vertex} -> {self.neighbor_vertices(i)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertex_count}, edges={self.edge_count})"


__all__ = ["Graph"]
