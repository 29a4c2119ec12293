"""Tests for debug mode and structural invariant checks."""

import pytest

from indexgraph import DirectedPseudoForest, Edge, Graph, UniqueElementsGraph
from indexgraph.diagnostics import (
    assert_graph_invariants,
    assert_pseudo_forest,
    assert_unique_elements,
    check_invariants,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    structural_problems,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        # Back to previous (False in this block)
        assert not is_debug_enabled()

        set_debug_enabled(True)
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_after_error() -> None:
    """The previous state is restored when the block raises."""
    original = is_debug_enabled()
    with pytest.raises(RuntimeError):
        with debug_context(not original):
            raise RuntimeError("boom")
    assert is_debug_enabled() == original


def test_test_suite_runs_in_debug_mode() -> None:
    """The autouse fixture turns debug checks on for every test."""
    assert is_debug_enabled()


def test_corruption_detected_only_in_debug_mode() -> None:
    """A broken pairing passes silently with debug off and fails with it on."""
    G = Graph(["A", "B"])
    G._adjacency[0].append(Edge(0, 1))

    with debug_context(False):
        G.add_vertex("C")

    with pytest.raises(AssertionError, match="no matching reversal"):
        G.add_vertex("D")


def test_check_invariants_runs_checks_only_in_debug_mode() -> None:
    """check_invariants calls every check in order, and none while debug is off."""
    calls = []
    G = Graph(["A"])

    check_invariants(G, lambda g: calls.append(("first", g)), lambda g: calls.append(("second", g)))
    assert calls == [("first", G), ("second", G)]

    with debug_context(False):
        check_invariants(G, lambda g: calls.append(("off", g)))
    assert len(calls) == 2


def test_check_invariants_propagates_first_failure() -> None:
    """The first failing check stops the remaining ones."""
    calls = []

    def failing(graph):
        raise AssertionError("broken")

    with pytest.raises(AssertionError, match="broken"):
        check_invariants(Graph(), failing, calls.append)
    assert calls == []


class TestStructuralProblems:
    """Tests for the invariant listing."""

    def test_sound_graph(self):
        """A well-formed graph has no problems."""
        G = Graph(["A", "B"])
        G.add_edge(0, 1, weight=2)
        G.add_edge(1, 1)
        assert structural_problems(G.vertex_count, G.adjacency_lists()) == []
        assert_graph_invariants(G)

    def test_list_count(self):
        """One adjacency list is needed per vertex."""
        assert structural_problems(2, [[]]) == ["1 adjacency lists for 2 vertices"]

    def test_wrong_owner_and_range(self):
        """Misplaced and dangling edges are both reported."""
        problems = structural_problems(2, [[Edge(1, 0, True)], [Edge(1, 5, True)]])
        assert problems == [
            "edge 1 -> 0 stored in adjacency list 0",
            "edge 1 -> 5 points outside [0, 2)",
        ]

    def test_weight_mismatch_breaks_pairing(self):
        """Reversals must carry the same weight."""
        problems = structural_problems(2, [[Edge(0, 1, weight=1)], [Edge(1, 0, weight=2)]])
        assert len(problems) == 2

    def test_unpaired_self_loop(self):
        """An undirected self-loop needs two slots."""
        assert structural_problems(1, [[Edge(0, 0)]]) == [
            "undirected self-loop at 0 is not stored in pairs"
        ]


class TestVariantAssertions:
    """Tests for the specialized variant checks."""

    def test_unique_elements(self):
        """Repeated vertices and repeated pairs are rejected."""
        assert_unique_elements(UniqueElementsGraph.from_cycle(["A", "B", "C"]))

        G = Graph(["A", "B"])
        G.add_edge(0, 1, directed=True)
        G.add_edge(0, 1, directed=True)
        with pytest.raises(AssertionError, match="Duplicate edge"):
            assert_unique_elements(G)

        with pytest.raises(AssertionError, match="Duplicate vertex"):
            assert_unique_elements(Graph(["A", "A"]))

    def test_unique_elements_allows_self_loop_pair(self):
        """The two slots of an undirected self-loop are not duplicates."""
        G = Graph(["A"])
        G.add_edge(0, 0)
        assert_unique_elements(G)

    def test_pseudo_forest(self):
        """Out-degree above one and undirected edges are rejected."""
        f = DirectedPseudoForest(["a", "b"])
        f.add_edge(0, 1)
        f.add_edge(1, 0)
        assert_pseudo_forest(f)

        G = Graph(["a", "b", "c"])
        G.add_edge(0, 1, directed=True)
        G.add_edge(0, 2, directed=True)
        with pytest.raises(AssertionError, match="2 outgoing edges"):
            assert_pseudo_forest(G)

        H = Graph(["a", "b"])
        H.add_edge(0, 1)
        with pytest.raises(AssertionError, match="Undirected"):
            assert_pseudo_forest(H)
