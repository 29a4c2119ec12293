"""Performance benchmarks for indexgraph.

This package contains microbenchmarks for hot paths in the library,
including searches, Dijkstra and spanning tree construction.
"""
