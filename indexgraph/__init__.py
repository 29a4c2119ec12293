"""indexgraph - an index-addressed graph library with classic graph algorithms."""

__version__ = "0.1.0"

# Constructors
from .constructors import complete_graph, star_graph

# Graph store
from .core import Graph

# Cycles and ordering
from .cycles import closing_edge, find_cycles, find_tree_root, is_forest

# Diagnostics
from .diagnostics import (
    assert_graph_invariants,
    assert_pseudo_forest,
    assert_unique_elements,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .edge import Edge
from .errors import GraphError, IndexOutOfRange, InvariantViolation

# I/O
from .io import (
    dump_json_graph,
    graph_to_json,
    json_graph_schema,
    json_to_graph,
    load_json_graph,
    validate_json_graph,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Minimum spanning trees
from .mst import is_spanning_forest, minimum_spanning_forest, mst, total_weight

# Specialized variants
from .pseudoforest import DirectedPseudoForest

# Shortest paths
from .shortest import dijkstra, dijkstra_by_vertex
from .sort import is_dag, topological_sort

# Traversal
from .traversal import bfs, dfs, routes, visit_bfs, visit_dfs
from .unionfind import UnionFind
from .unique import UniqueElementsGraph

# Utilities
from .utils import adjacency_matrix, distance_map, edges_to_vertices, reconstruct_path

__all__ = [
    "__version__",
    # Graph store
    "Graph",
    "Edge",
    "UniqueElementsGraph",
    "DirectedPseudoForest",
    "star_graph",
    "complete_graph",
    # Errors
    "GraphError",
    "IndexOutOfRange",
    "InvariantViolation",
    # Algorithms
    "dfs",
    "bfs",
    "routes",
    "visit_bfs",
    "visit_dfs",
    "dijkstra",
    "dijkstra_by_vertex",
    "mst",
    "minimum_spanning_forest",
    "total_weight",
    "is_spanning_forest",
    "UnionFind",
    "find_cycles",
    "closing_edge",
    "is_forest",
    "find_tree_root",
    "topological_sort",
    "is_dag",
    # Utilities
    "reconstruct_path",
    "edges_to_vertices",
    "distance_map",
    "adjacency_matrix",
    # I/O
    "graph_to_json",
    "json_to_graph",
    "dump_json_graph",
    "load_json_graph",
    "json_graph_schema",
    "validate_json_graph",
    # Diagnostics
    "assert_graph_invariants",
    "assert_unique_elements",
    "assert_pseudo_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
