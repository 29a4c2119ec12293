"""
Edge value type.

An edge connects two vertex positions of a graph. Edges never hold vertex
values, only indices, so they stay valid as long as the owning graph re-indexes
them when a vertex is removed (see ``Graph.remove_vertex``).
"""

from dataclasses import dataclass, replace
from numbers import Real
from typing import Optional


@dataclass(frozen=True)
class Edge:
    """
    Connection from vertex index ``u`` to vertex index ``v``.

    ``u`` is always the index of the vertex whose adjacency list stores the
    edge. An undirected edge is stored twice: once at ``u`` and once, reversed,
    at ``v``.

    Attributes:
        u: Source index (owner of the adjacency list).
        v: Target index.
        directed: Whether the edge only goes from ``u`` to ``v``.
        weight: Optional numeric weight; ``None`` for unweighted edges.

    Example:
        >>> e = Edge(0, 1, weight=2.5)
        >>> e.reversed()
        Edge(u=1, v=0, directed=False, weight=2.5)
    """

    u: int
    v: int
    directed: bool = False
    weight: Optional[Real] = None

    @property
    def weighted(self) -> bool:
        return self.weight is not None

    def reversed(self) -> "Edge":
        """Return the same edge pointing from ``v`` to ``u``."""
        return Edge(self.v, self.u, self.directed, self.weight)

    def shifted(self, removed: int) -> "Edge":
        """
        Return the edge re-indexed after the vertex at ``removed`` is dropped.

        Every endpoint above ``removed`` moves down by one. Callers must have
        discarded edges touching ``removed`` beforehand.
        """
        u = self.u - 1 if self.u > removed else self.u
        v = self.v - 1 if self.v > removed else self.v
        if u == self.u and v == self.v:
            return self
        return replace(self, u=u, v=v)

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        # Unweighted edges sort before weighted ones
        if self.weight is None:
            return other.weight is not None
        if other.weight is None:
            return False
        return self.weight < other.weight

    def __str__(self) -> str:
        arrow = "->" if self.directed else "<->"
        if self.weight is None:
            return f"{self.u} {arrow} {self.v}"
        return f"{self.u} {arrow} {self.v} ({self.weight})"


__all__ = ["Edge"]
