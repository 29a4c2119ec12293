"""JSON import and export for graphs.

Converts Graph objects to and from the interchange format described in
schema.py. Vertex values must be JSON-serializable.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from indexgraph.core import Graph
from indexgraph.edge import Edge

from .schema import JSON_GRAPH_VERSION, validate_json_graph


def graph_to_json(graph: Graph, metadata: Optional[dict] = None) -> dict:
    """
    Convert a graph to the JSON format.

    Parameters
    ----------
    graph : Graph
        Graph to convert. Specialized variants are accepted too.
    metadata : dict, optional
        JSON-serializable metadata stored alongside the graph.

    Returns
    -------
    dict
        JSON object following the schema defined in schema.py.
    """
    result: Dict[str, Any] = {
        "version": JSON_GRAPH_VERSION,
        "vertices": graph.vertices,
        "adjacency": [
            [
                {"u": edge.u, "v": edge.v, "directed": edge.directed, "weight": edge.weight}
                for edge in edges
            ]
            for edges in graph.adjacency_lists()
        ],
    }

    if metadata:
        result["metadata"] = metadata

    return result


def json_to_graph(obj: dict) -> Graph:
    """
    Convert a JSON object to a Graph.

    Parameters
    ----------
    obj : dict
        JSON object following the schema defined in schema.py.

    Returns
    -------
    Graph
        Graph with the same vertex order and adjacency order.

    Raises
    ------
    ValueError
        If the object is malformed or breaks the graph store invariants.
    """
    validate_json_graph(obj)

    if obj["version"] != JSON_GRAPH_VERSION:
        raise ValueError(
            f"Unsupported JSON graph version {obj['version']!r}, "
            f"expected {JSON_GRAPH_VERSION!r}."
        )

    adjacency = [
        [Edge(e["u"], e["v"], e["directed"], e.get("weight")) for e in edges]
        for edges in obj["adjacency"]
    ]
    return Graph.from_adjacency(obj["vertices"], adjacency)


def dump_json_graph(graph: Graph, path: str, metadata: Optional[dict] = None) -> None:
    """
    Write a graph to a JSON file.

    Parameters
    ----------
    graph : Graph
        Graph to write.
    path : str
        Path to output JSON file.
    metadata : dict, optional
        Metadata stored in the file.
    """
    obj = graph_to_json(graph, metadata)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)


def load_json_graph(path: str) -> Graph:
    """
    Load a graph from a JSON file.

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not describe a valid graph.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON graph file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return json_to_graph(obj)


__all__ = [
    "graph_to_json",
    "json_to_graph",
    "dump_json_graph",
    "load_json_graph",
]
