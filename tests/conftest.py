"""Pytest configuration and shared fixtures for indexgraph tests.

This module provides:
- A deterministic numpy RNG fixture
- Debug mode enabled for every test, so each mutation re-checks invariants
- The textbook city graphs used by the scenario tests
"""

import os

import numpy as np
import pytest

from indexgraph import Graph
from indexgraph.diagnostics import debug_context

CITIES = [
    "Seattle", "San Francisco", "Los Angeles", "Denver", "Kansas City", "Chicago",
    "Boston", "New York", "Atlanta", "Miami", "Dallas", "Houston",
]

CITY_EDGES = [
    ("Seattle", "Chicago", 2097),
    ("Seattle", "Denver", 1331),
    ("Seattle", "San Francisco", 807),
    ("San Francisco", "Denver", 1267),
    ("San Francisco", "Los Angeles", 381),
    ("Los Angeles", "Denver", 1015),
    ("Los Angeles", "Kansas City", 1663),
    ("Los Angeles", "Dallas", 1435),
    ("Denver", "Chicago", 1003),
    ("Denver", "Kansas City", 599),
    ("Kansas City", "Chicago", 533),
    ("Kansas City", "New York", 1260),
    ("Kansas City", "Atlanta", 864),
    ("Kansas City", "Dallas", 496),
    ("Chicago", "Boston", 983),
    ("Chicago", "New York", 787),
    ("Boston", "New York", 214),
    ("Atlanta", "New York", 888),
    ("Atlanta", "Dallas", 781),
    ("Atlanta", "Houston", 810),
    ("Atlanta", "Miami", 661),
    ("Houston", "Miami", 1187),
    ("Houston", "Dallas", 239),
]

CITIES2 = [
    "Seattle", "San Francisco", "Los Angeles", "Riverside", "Phoenix", "Chicago",
    "Boston", "New York", "Atlanta", "Miami", "Dallas", "Houston", "Detroit",
    "Philadelphia", "Washington",
]

CITY2_EDGES = [
    ("Seattle", "Chicago", 1737),
    ("Seattle", "San Francisco", 678),
    ("San Francisco", "Riverside", 386),
    ("San Francisco", "Los Angeles", 348),
    ("Los Angeles", "Riverside", 50),
    ("Los Angeles", "Phoenix", 357),
    ("Riverside", "Phoenix", 307),
    ("Riverside", "Chicago", 1704),
    ("Phoenix", "Dallas", 887),
    ("Phoenix", "Houston", 1015),
    ("Dallas", "Chicago", 805),
    ("Dallas", "Atlanta", 721),
    ("Dallas", "Houston", 225),
    ("Houston", "Atlanta", 702),
    ("Houston", "Miami", 968),
    ("Atlanta", "Chicago", 588),
    ("Atlanta", "Washington", 543),
    ("Atlanta", "Miami", 604),
    ("Miami", "Washington", 923),
    ("Chicago", "Detroit", 238),
    ("Detroit", "Boston", 613),
    ("Detroit", "Washington", 396),
    ("Detroit", "New York", 482),
    ("Boston", "New York", 190),
    ("New York", "Philadelphia", 81),
    ("Philadelphia", "Washington", 123),
]


def build_city_graph(cities, edges, weighted=True) -> Graph:
    graph = Graph(cities)
    for a, b, weight in edges:
        graph.add_edge_by_vertices(a, b, weight=weight if weighted else None)
    return graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps tests reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_invariants():
    """Run every test with debug mode on so mutations assert their invariants."""
    with debug_context(True):
        yield


@pytest.fixture
def city_graph() -> Graph:
    """Unweighted 12-city graph."""
    return build_city_graph(CITIES, CITY_EDGES, weighted=False)


@pytest.fixture
def weighted_city_graph() -> Graph:
    """Weighted 12-city graph (distances in miles)."""
    return build_city_graph(CITIES, CITY_EDGES)


@pytest.fixture
def city_graph2() -> Graph:
    """Unweighted 15-city graph plus an isolated Cleveland."""
    return build_city_graph(CITIES2 + ["Cleveland"], CITY2_EDGES, weighted=False)


@pytest.fixture
def weighted_city_graph2() -> Graph:
    """Weighted 15-city graph."""
    return build_city_graph(CITIES2, CITY2_EDGES)
