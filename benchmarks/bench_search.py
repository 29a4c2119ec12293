"""Benchmark traversal, shortest path and spanning tree engines."""

import time
from typing import Dict

import numpy as np

from indexgraph import Graph, bfs, dfs, dijkstra, mst
from indexgraph.diagnostics import debug_context


def random_weighted_graph(n: int, degree: int, seed: int = 0) -> Graph:
    """Connected random graph: a ring plus ``degree`` random chords per vertex."""
    rng = np.random.default_rng(seed)
    graph = Graph(range(n))
    for i in range(n):
        graph.add_edge(i, (i + 1) % n, weight=int(rng.integers(1, 100)))
        for j in rng.integers(0, n, size=degree):
            graph.add_edge(i, int(j), weight=int(rng.integers(1, 100)))
    return graph


def benchmark_engines(n: int, degree: int = 4, repeats: int = 5) -> Dict[str, float]:
    """Time each engine on the same graph.

    Args:
        n: Number of vertices.
        degree: Random chords added per vertex.
        repeats: Runs per engine; the best time is reported.

    Returns:
        Dictionary with the best time per engine in seconds.
    """
    # Invariant checks would dominate the timings
    with debug_context(False):
        graph = random_weighted_graph(n, degree)

    engines = {
        "bfs": lambda: bfs(graph, 0, n - 1),
        "dfs": lambda: dfs(graph, 0, n - 1),
        "dijkstra": lambda: dijkstra(graph, 0),
        "mst": lambda: mst(graph),
    }

    results: Dict[str, float] = {"n_vertices": n, "n_edges": graph.edge_count}
    for name, run in engines.items():
        best = float("inf")
        for _ in range(repeats):
            start = time.perf_counter()
            run()
            best = min(best, time.perf_counter() - start)
        results[f"{name}_sec"] = best
    return results


if __name__ == "__main__":
    for n in (1_000, 10_000):
        results = benchmark_engines(n)
        print(f"{n} vertices, {results['n_edges']} stored edges:")
        for name in ("bfs", "dfs", "dijkstra", "mst"):
            print(f"  {name:<9} {results[f'{name}_sec'] * 1e3:.2f} ms")
