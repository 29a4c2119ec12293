"""Exception types raised by indexgraph.

All of these are recoverable: they report bad input to the caller and leave the
graph untouched. Broken internal invariants are reported separately by the
assertion helpers in ``indexgraph.diagnostics``.
"""


class GraphError(Exception):
    """Base class for indexgraph errors."""


class IndexOutOfRange(GraphError, IndexError):
    """A vertex index outside ``[0, vertex_count)`` was passed to an operation."""

    def __init__(self, index: int, vertex_count: int):
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex index {index} out of range [0, {vertex_count})"
        )


class InvariantViolation(GraphError, ValueError):
    """A mutation would break a guarantee of a specialized graph variant."""


__all__ = [
    "GraphError",
    "IndexOutOfRange",
    "InvariantViolation",
]
