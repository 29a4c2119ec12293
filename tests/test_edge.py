"""Tests for the Edge value type."""

import dataclasses

import pytest

from indexgraph import Edge


class TestEdge:
    """Tests for Edge construction and helpers."""

    def test_defaults(self):
        """Edges are undirected and unweighted by default."""
        e = Edge(0, 1)
        assert not e.directed
        assert e.weight is None
        assert not e.weighted

    def test_reversed_keeps_direction_flag_and_weight(self):
        """reversed() swaps endpoints only."""
        e = Edge(2, 5, directed=True, weight=1.5)
        assert e.reversed() == Edge(5, 2, True, 1.5)
        assert e.reversed().reversed() == e

    def test_frozen(self):
        """Edges are immutable values."""
        e = Edge(0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            e.u = 3

    def test_hashable(self):
        """Equal edges hash equally."""
        assert len({Edge(0, 1, weight=3), Edge(0, 1, weight=3)}) == 1


class TestShifted:
    """Tests for re-indexing after vertex removal."""

    def test_endpoints_above_removed_move_down(self):
        """Indices above the removed one drop by one."""
        assert Edge(3, 5, True, 7).shifted(2) == Edge(2, 4, True, 7)

    def test_endpoints_below_removed_unchanged(self):
        """An unaffected edge is returned as is."""
        e = Edge(0, 1)
        assert e.shifted(4) is e

    def test_mixed_endpoints(self):
        """Each endpoint is shifted independently."""
        assert Edge(1, 4).shifted(2) == Edge(1, 3)
        assert Edge(4, 1).shifted(2) == Edge(3, 1)


class TestOrderingAndFormatting:
    """Tests for weight ordering and string output."""

    def test_orders_by_weight(self):
        """Edges compare by weight."""
        assert Edge(0, 1, weight=1) < Edge(5, 6, weight=2)
        assert not Edge(0, 1, weight=2) < Edge(5, 6, weight=1)

    def test_unweighted_sorts_first(self):
        """Missing weights compare lower than any weight."""
        assert Edge(0, 1) < Edge(0, 1, weight=0)
        assert not Edge(0, 1, weight=0) < Edge(0, 1)
        assert not Edge(0, 1) < Edge(1, 2)

    def test_sorted(self):
        """sorted orders edges by ascending weight."""
        edges = [Edge(0, 1, weight=3), Edge(0, 2, weight=1), Edge(0, 3, weight=2)]
        assert [e.weight for e in sorted(edges)] == [1, 2, 3]

    def test_str(self):
        """Arrows show direction and weights are appended."""
        assert str(Edge(0, 1)) == "0 <-> 1"
        assert str(Edge(0, 1, directed=True)) == "0 -> 1"
        assert str(Edge(2, 3, weight=4.5)) == "2 <-> 3 (4.5)"
