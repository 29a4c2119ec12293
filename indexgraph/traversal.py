"""
Graph traversal algorithms: BFS and DFS.

Both searches return the edge path from a source index to the first vertex
matching a goal (either a target index or a predicate on vertex values).
Edges are explored in adjacency-list order unless a ``visit_order`` callable
reorders them, so results are deterministic for a fixed insertion order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, List, Optional, Sequence, Tuple

from .core import Graph
from .edge import Edge
from .logging import get_logger
from .utils import reconstruct_path

logger = get_logger(__name__)

Predicate = Callable[[Any], bool]
VisitOrder = Callable[[List[Edge]], Sequence[Edge]]
Visitor = Callable[[int], Optional[bool]]


def _goal_test(graph: Graph, target: Optional[int], until: Optional[Predicate]) -> Callable[[int], bool]:
    if (target is None) == (until is None):
        raise ValueError("Exactly one of 'target' or 'until' must be given")
    if target is not None:
        graph.vertex_at(target)  # validates the index
        return lambda index: index == target
    return lambda index: until(graph.vertex_at(index))


def _walk(
    graph: Graph,
    source: int,
    depth_first: bool,
    visit_order: Optional[VisitOrder] = None,
    expand: Optional[Callable[[int], bool]] = None,
) -> Iterator[Tuple[Optional[Edge], int]]:
    """
    Yield ``(edge, vertex)`` for every vertex reached from ``source``.

    ``edge`` is the edge the vertex was reached through, None for the source.
    Each vertex is yielded once. The neighbours of a yielded vertex are
    explored after the consumer resumes the iterator, and only if ``expand``
    (when given) returns True for it.

    BFS marks vertices visited when queued; DFS marks them when popped, so the
    last edge pushed towards a vertex is the one it is reached through.
    """
    graph.vertex_at(source)
    visited = [False] * graph.vertex_count
    visited[source] = True
    frontier: Deque[Edge] = deque()
    pop = frontier.pop if depth_first else frontier.popleft

    def push_neighbours(vertex: int) -> None:
        edges = graph.edges(vertex)
        if visit_order is not None:
            edges = list(visit_order(edges))
            if depth_first:
                # The stack pops the last push first
                edges.reverse()
        for edge in edges:
            if not visited[edge.v]:
                if not depth_first:
                    visited[edge.v] = True
                frontier.append(edge)

    yield None, source
    if expand is None or expand(source):
        push_neighbours(source)

    while frontier:
        edge = pop()
        if depth_first:
            if visited[edge.v]:
                continue
            visited[edge.v] = True
        yield edge, edge.v
        if expand is None or expand(edge.v):
            push_neighbours(edge.v)


def _search(
    graph: Graph,
    source: int,
    target: Optional[int],
    until: Optional[Predicate],
    depth_first: bool,
    visit_order: Optional[VisitOrder],
) -> List[Edge]:
    graph.vertex_at(source)
    is_goal = _goal_test(graph, target, until)
    path: Dict[int, Edge] = {}

    for edge, current in _walk(graph, source, depth_first, visit_order):
        if edge is not None:
            path[current] = edge
        if is_goal(current):
            return reconstruct_path(path, source, current)

    logger.debug("%s from %d found no goal", "DFS" if depth_first else "BFS", source)
    return []


def dfs(
    graph: Graph,
    source: int,
    target: Optional[int] = None,
    *,
    until: Optional[Predicate] = None,
    visit_order: Optional[VisitOrder] = None,
) -> List[Edge]:
    """
    Depth-first search from ``source`` using an explicit stack.

    Vertices are marked visited when popped; a popped vertex that was already
    visited is skipped. Without ``visit_order`` the stack follows the most
    recently added edge first. With it, the edges of each vertex are explored
    in the order the callable returns them.

    Args:
        graph: Graph to search.
        source: Index to start from.
        target: Goal vertex index.
        until: Goal predicate called with vertex values.
        visit_order: Callable receiving the edges leaving the current vertex
            and returning the same edges in the order to explore them.

    Returns:
        Edge path from source to the first goal vertex found. Empty if no goal
        is reachable or if the source itself is a goal. Not necessarily the
        shortest path.

    Raises:
        IndexOutOfRange: If ``source`` or ``target`` is not a valid index.
        ValueError: Unless exactly one of ``target`` and ``until`` is given.

    Complexity: O(V + E), plus the cost of ``visit_order``.

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> _ = g.add_edge(0, 1)
        >>> _ = g.add_edge(1, 2)
        >>> [str(e) for e in dfs(g, 0, 2)]
        ['0 <-> 1', '1 <-> 2']
    """
    return _search(graph, source, target, until, True, visit_order)


def bfs(
    graph: Graph,
    source: int,
    target: Optional[int] = None,
    *,
    until: Optional[Predicate] = None,
    visit_order: Optional[VisitOrder] = None,
) -> List[Edge]:
    """
    Breadth-first search from ``source``.

    Vertices are marked visited when enqueued, so each one enters the queue
    once and the returned path uses the minimum number of edges. Ties between
    equally short paths are broken by adjacency-list order, or by the order
    ``visit_order`` returns.

    Args:
        graph: Graph to search.
        source: Index to start from.
        target: Goal vertex index.
        until: Goal predicate called with vertex values.
        visit_order: Callable receiving the edges leaving the current vertex
            and returning the same edges in the order to enqueue them.

    Returns:
        Shortest edge path (by edge count) from source to the first goal
        vertex reached. Empty if unreachable or if the source is a goal.

    Raises:
        IndexOutOfRange: If ``source`` or ``target`` is not a valid index.
        ValueError: Unless exactly one of ``target`` and ``until`` is given.

    Complexity: O(V + E), plus the cost of ``visit_order``.

    Example:
        >>> g = Graph(["A", "B", "C"])
        >>> _ = g.add_edge(0, 1)
        >>> _ = g.add_edge(1, 2)
        >>> _ = g.add_edge(0, 2)
        >>> [str(e) for e in bfs(g, 0, 2)]
        ['0 <-> 2']
    """
    return _search(graph, source, target, until, False, visit_order)


def _visit(
    graph: Graph,
    source: int,
    visitor: Visitor,
    depth_first: bool,
    visit_order: Optional[VisitOrder],
) -> None:
    for _ in _walk(
        graph,
        source,
        depth_first,
        visit_order,
        expand=lambda index: visitor(index) is not False,
    ):
        pass


def visit_bfs(
    graph: Graph,
    source: int,
    visitor: Visitor,
    *,
    visit_order: Optional[VisitOrder] = None,
) -> None:
    """
    Call ``visitor`` on every vertex index reachable from ``source``, breadth first.

    The source is visited first. When ``visitor`` returns False the neighbours
    of that vertex are not explored through it; any other return value
    (including None) continues the traversal.

    Raises:
        IndexOutOfRange: If ``source`` is not a valid index.
    """
    _visit(graph, source, visitor, False, visit_order)


def visit_dfs(
    graph: Graph,
    source: int,
    visitor: Visitor,
    *,
    visit_order: Optional[VisitOrder] = None,
) -> None:
    """Depth-first counterpart of :func:`visit_bfs`."""
    _visit(graph, source, visitor, True, visit_order)


def routes(
    graph: Graph,
    source: int,
    until: Predicate,
    *,
    depth_first: bool = False,
    visit_order: Optional[VisitOrder] = None,
) -> List[List[Edge]]:
    """
    Find routes from ``source`` to every vertex matching ``until``.

    Breadth first by default, so each route is a shortest path by edge count.
    With ``depth_first=True`` each route follows the DFS tree instead. The
    source itself is never reported, even when it matches.

    Args:
        graph: Graph to search.
        source: Index to start from.
        until: Predicate called with vertex values.
        depth_first: Walk the graph depth first.
        visit_order: Callable reordering the edges leaving each vertex.

    Returns:
        One edge path per matching reachable vertex, in discovery order.

    Raises:
        IndexOutOfRange: If ``source`` is not a valid index.
    """
    path: Dict[int, Edge] = {}
    found: List[List[Edge]] = []

    for edge, current in _walk(graph, source, depth_first, visit_order):
        if edge is None:
            continue
        path[current] = edge
        if until(graph.vertex_at(current)):
            found.append(reconstruct_path(path, source, current))

    return found


__all__ = ["dfs", "bfs", "visit_bfs", "visit_dfs", "routes"]
