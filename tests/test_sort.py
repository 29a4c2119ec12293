"""Tests for topological sorting."""

from indexgraph import Graph, is_dag, topological_sort
from indexgraph.diagnostics import debug_context


def assert_topological(graph, order):
    position = {v: i for i, v in enumerate(order)}
    assert sorted(order) == list(range(graph.vertex_count))
    for edge in graph.edge_list():
        assert position[edge.u] < position[edge.v]


class TestTopologicalSort:
    """Tests for the iterative DFS sort."""

    def test_diamond(self):
        """Every edge points forward in the order."""
        G = Graph(["a", "b", "c", "d"])
        G.add_edge(0, 1, directed=True)
        G.add_edge(0, 2, directed=True)
        G.add_edge(1, 3, directed=True)
        G.add_edge(2, 3, directed=True)
        order = topological_sort(G)
        assert order == [0, 2, 1, 3]
        assert_topological(G, order)

    def test_isolated_vertices(self):
        """Isolated vertices are all placed."""
        assert topological_sort(Graph(["a", "b", "c"])) == [2, 1, 0]

    def test_empty(self):
        """The empty graph sorts to an empty order."""
        assert topological_sort(Graph()) == []
        assert is_dag(Graph())

    def test_cycle_returns_none(self):
        """A directed cycle has no order."""
        G = Graph(["a", "b", "c"])
        G.add_edge(0, 1, directed=True)
        G.add_edge(1, 2, directed=True)
        G.add_edge(2, 0, directed=True)
        assert topological_sort(G) is None
        assert not is_dag(G)

    def test_self_loop_is_cycle(self):
        """A self-loop prevents ordering."""
        G = Graph(["a"])
        G.add_edge(0, 0, directed=True)
        assert topological_sort(G) is None

    def test_undirected_edge_is_cycle(self):
        """An undirected edge counts as a two-cycle."""
        G = Graph(["a", "b"])
        G.add_edge(0, 1)
        assert topological_sort(G) is None

    def test_clothing(self):
        """Classic dressing order example."""
        items = ["undershorts", "pants", "belt", "shirt", "tie", "jacket", "socks", "shoes", "watch"]
        G = Graph(items)
        for a, b in [
            ("undershorts", "pants"),
            ("undershorts", "shoes"),
            ("pants", "belt"),
            ("pants", "shoes"),
            ("belt", "jacket"),
            ("shirt", "belt"),
            ("shirt", "tie"),
            ("tie", "jacket"),
            ("socks", "shoes"),
        ]:
            G.add_edge_by_vertices(a, b, directed=True)
        assert_topological(G, topological_sort(G))

    def test_long_chain(self):
        """No recursion limit on long chains."""
        n = 3000
        with debug_context(False):
            G = Graph(range(n))
            for i in reversed(range(n - 1)):
                G.add_edge(i, i + 1, directed=True)
        assert topological_sort(G) == list(range(n))
