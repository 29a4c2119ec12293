"""Tests for minimum spanning tree algorithms."""

import pytest

from indexgraph import (
    Edge,
    Graph,
    IndexOutOfRange,
    is_spanning_forest,
    minimum_spanning_forest,
    mst,
    total_weight,
)


class TestPrim:
    """Tests for Jarník/Prim."""

    def test_mst_triangle(self):
        """The heaviest triangle edge is left out."""
        G = Graph(["A", "B", "C"])
        G.add_edge(0, 1, weight=1.0)
        G.add_edge(1, 2, weight=2.0)
        G.add_edge(0, 2, weight=3.0)

        tree = mst(G)

        assert tree == [Edge(0, 1, False, 1.0), Edge(1, 2, False, 2.0)]
        assert total_weight(tree) == 3.0

    def test_mst_edges_point_away_from_tree(self):
        """Tree edges are oriented from the tree towards the new vertex."""
        G = Graph(["A", "B", "C"])
        G.add_edge(1, 0, weight=1)
        G.add_edge(2, 1, weight=1)
        tree = mst(G, start=0)
        assert [(e.u, e.v) for e in tree] == [(0, 1), (1, 2)]

    def test_mst_empty_graph(self):
        """The empty graph has an empty tree."""
        assert mst(Graph()) == []

    def test_mst_single_vertex(self):
        """A lone vertex has an empty tree."""
        assert mst(Graph(["A"])) == []

    def test_mst_only_spans_start_component(self):
        """Only the component of the start vertex is spanned."""
        G = Graph(["A", "B", "C", "D"])
        G.add_edge(0, 1, weight=1)
        G.add_edge(2, 3, weight=2)
        assert mst(G) == [Edge(0, 1, False, 1)]
        assert mst(G, start=2) == [Edge(2, 3, False, 2)]

    def test_mst_ignores_self_loops(self):
        """Self-loops never enter the tree."""
        G = Graph(["A", "B"])
        G.add_edge(0, 0, weight=0)
        G.add_edge(0, 1, weight=4)
        assert mst(G) == [Edge(0, 1, False, 4)]

    def test_mst_unweighted_raises(self):
        """Unweighted edges cannot be compared."""
        G = Graph(["A", "B"])
        G.add_edge(0, 1)
        with pytest.raises(ValueError):
            mst(G)

    def test_mst_bad_start(self):
        """An invalid start index raises."""
        with pytest.raises(IndexOutOfRange):
            mst(Graph(["A"]), start=3)

    def test_mst_city_graph(self, weighted_city_graph):
        """Reference MST weight on the 12-city graph."""
        tree = mst(weighted_city_graph)
        assert len(tree) == 11
        assert total_weight(tree) == 6513
        assert is_spanning_forest(weighted_city_graph.vertex_count, tree)

    def test_mst_city_graph2(self, weighted_city_graph2):
        """Reference MST weight on the 15-city graph."""
        tree = mst(weighted_city_graph2)
        assert len(tree) == 14
        assert total_weight(tree) == 5372

    def test_mst_same_weight_from_any_start(self, weighted_city_graph):
        """The tree weight does not depend on the start vertex."""
        for start in range(weighted_city_graph.vertex_count):
            assert total_weight(mst(weighted_city_graph, start)) == 6513


class TestSpanningForest:
    """Tests for forests and helpers."""

    def test_forest_covers_all_components(self):
        """The forest spans every component."""
        G = Graph(["A", "B", "C", "D", "E"])
        G.add_edge(0, 1, weight=1)
        G.add_edge(1, 2, weight=2)
        G.add_edge(0, 2, weight=3)
        G.add_edge(3, 4, weight=5)
        forest = minimum_spanning_forest(G)
        assert len(forest) == 3
        assert total_weight(forest) == 8

    def test_total_weight_empty(self):
        """An empty edge list has no weight."""
        assert total_weight([]) is None

    def test_is_spanning_forest_detects_cycle(self):
        """A cycle is not a spanning forest."""
        edges = [Edge(0, 1, weight=1), Edge(1, 2, weight=1), Edge(2, 0, weight=1)]
        assert is_spanning_forest(3, edges[:2])
        assert not is_spanning_forest(3, edges)
