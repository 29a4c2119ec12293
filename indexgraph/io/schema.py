"""JSON schema definition and validation for graphs.

This module defines the interchange format used by ``indexgraph.io``. It keeps
the exact vertex order and the exact per-vertex adjacency order, so a decoded
graph is indistinguishable from the encoded one.

Schema Structure:
    {
        "version": "indexgraph-json-1.0",
        "vertices": [<any JSON value>, ...],
        "adjacency": [
            [                                   # one list per vertex index
                {
                    "u": <integer>,             # must equal the list index
                    "v": <integer>,
                    "directed": <bool>,
                    "weight": <number or null>,
                },
                ...
            ],
            ...
        ],
        "metadata": {...}                       # optional
    }

Undirected edges appear twice: once in the list of ``u`` and once, reversed,
in the list of ``v``.
"""

from __future__ import annotations

from numbers import Real

from indexgraph.diagnostics import structural_problems
from indexgraph.edge import Edge

JSON_GRAPH_VERSION = "indexgraph-json-1.0"


def json_graph_schema() -> dict:
    """
    Return the schema (as a Python dict) of the JSON graph format.

    This is a structural description, not a full JSON Schema document.

    Returns
    -------
    dict
        Field definitions and constraints.
    """
    return {
        "version": {
            "type": "string",
            "description": f"Format version identifier, e.g. '{JSON_GRAPH_VERSION}'",
            "required": True,
        },
        "vertices": {
            "type": "list",
            "description": "Vertex values in index order",
            "required": True,
        },
        "adjacency": {
            "type": "list",
            "description": "One edge list per vertex index, in stored order",
            "required": True,
            "items": {
                "u": {
                    "type": "integer",
                    "description": "Source index; equals the owning list index",
                    "required": True,
                },
                "v": {
                    "type": "integer",
                    "description": "Target index (0-based)",
                    "required": True,
                    "min": 0,
                },
                "directed": {
                    "type": "bool",
                    "description": "Whether the edge is one-way",
                    "required": True,
                },
                "weight": {
                    "type": "number",
                    "description": "Edge weight, null for unweighted edges",
                    "required": False,
                    "default": None,
                },
            },
        },
        "metadata": {
            "type": "dict",
            "description": "Optional metadata (producer, notes, etc.)",
            "required": False,
        },
    }


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_json_graph(obj: dict) -> None:
    """
    Validate a JSON graph object against the schema.

    Checks required fields and types, then the structural rules of the graph
    store: every index in range, ``u`` equal to the owning list index, and
    every undirected edge matched by its reversal.

    Parameters
    ----------
    obj : dict
        JSON object to validate.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON graph must be a dictionary object.")

    if "version" not in obj:
        raise ValueError("JSON graph missing required field 'version'.")
    if not isinstance(obj["version"], str):
        raise ValueError("Field 'version' must be a string.")

    if "vertices" not in obj:
        raise ValueError("JSON graph missing required field 'vertices'.")
    if not isinstance(obj["vertices"], list):
        raise ValueError("Field 'vertices' must be a list.")

    if "adjacency" not in obj:
        raise ValueError("JSON graph missing required field 'adjacency'.")
    if not isinstance(obj["adjacency"], list):
        raise ValueError("Field 'adjacency' must be a list.")

    n = len(obj["vertices"])
    if len(obj["adjacency"]) != n:
        raise ValueError(
            f"Field 'adjacency' has {len(obj['adjacency'])} lists for {n} vertices."
        )

    adjacency = []
    for i, edges in enumerate(obj["adjacency"]):
        if not isinstance(edges, list):
            raise ValueError(f"adjacency[{i}] must be a list.")
        parsed = []
        for j, entry in enumerate(edges):
            where = f"adjacency[{i}][{j}]"
            if not isinstance(entry, dict):
                raise ValueError(f"{where} must be a dictionary object.")
            for field in ("u", "v"):
                if field not in entry:
                    raise ValueError(f"{where} missing required field '{field}'.")
                if not _is_int(entry[field]):
                    raise ValueError(
                        f"{where}: field '{field}' must be an integer, "
                        f"got {type(entry[field]).__name__}."
                    )
                if not 0 <= entry[field] < n:
                    raise ValueError(
                        f"{where}: {field} = {entry[field]} is out of range [0, {n})."
                    )
            if "directed" not in entry:
                raise ValueError(f"{where} missing required field 'directed'.")
            if not isinstance(entry["directed"], bool):
                raise ValueError(f"{where}: field 'directed' must be a boolean.")
            weight = entry.get("weight")
            if weight is not None and (isinstance(weight, bool) or not isinstance(weight, Real)):
                raise ValueError(
                    f"{where}: field 'weight' must be a number or null, "
                    f"got {type(weight).__name__}."
                )
            parsed.append(Edge(entry["u"], entry["v"], entry["directed"], weight))
        adjacency.append(parsed)

    problems = structural_problems(n, adjacency)
    if problems:
        raise ValueError("Invalid graph structure: " + "; ".join(problems))

    if "metadata" in obj and not isinstance(obj["metadata"], dict):
        raise ValueError("Field 'metadata' must be a dictionary.")


__all__ = ["JSON_GRAPH_VERSION", "json_graph_schema", "validate_json_graph"]
