"""
Serialization of graphs to plain data and JSON.

Shape::

    {
        "id": 0,
        "name": "triangle",
        "directed": false,
        "adjacencyLists": [["1", ["2", "3"]], ["2", ["1", "3"]], ["3", ["1", "2"]]]
    }

Adjacency lists are stored as [vertex, neighbours] pairs so that vertex
order survives the round trip.
"""

from __future__ import annotations

import json
from typing import Any

from .graph import Graph
from .validation import MalformedGraphDataError, UnknownVertexError

_SCALARS = (str, int, float, bool)


def to_dict(g: Graph[Any]) -> dict[str, Any]:
    """Plain-data form of a graph."""
    return {
        "id": g.id,
        "name": g.name,
        "directed": g.directed,
        "adjacencyLists": [[u, list(vs)] for u, vs in g.adjacency.items()],
    }


def from_dict(data: Any) -> Graph[Any]:
    """
    Rebuild a graph from its plain-data form.

    Raises:
        MalformedGraphDataError: If required fields are missing or mistyped
    """
    if not isinstance(data, dict):
        raise MalformedGraphDataError(f"Graph data must be an object, got {type(data).__name__}")

    graph_id = data.get("id")
    name = data.get("name")
    directed = data.get("directed")
    lists = data.get("adjacencyLists")

    if not isinstance(graph_id, int) or isinstance(graph_id, bool):
        raise MalformedGraphDataError(f"'id' must be an integer, got {graph_id!r}")
    if not isinstance(name, str):
        raise MalformedGraphDataError(f"'name' must be a string, got {name!r}")
    if not isinstance(directed, bool):
        raise MalformedGraphDataError(f"'directed' must be a boolean, got {directed!r}")
    if not isinstance(lists, list):
        raise MalformedGraphDataError(f"'adjacencyLists' must be a list, got {lists!r}")

    adj: dict[Any, list[Any]] = {}
    for i, entry in enumerate(lists):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise MalformedGraphDataError(f"adjacencyLists[{i}] must be a [vertex, neighbours] pair")
        vertex, neighbours = entry
        if not isinstance(vertex, _SCALARS):
            raise MalformedGraphDataError(f"adjacencyLists[{i}]: invalid vertex {vertex!r}")
        if not isinstance(neighbours, list) or not all(isinstance(v, _SCALARS) for v in neighbours):
            raise MalformedGraphDataError(f"adjacencyLists[{i}]: neighbours must be a list of vertices")
        if vertex in adj:
            raise MalformedGraphDataError(f"adjacencyLists[{i}]: vertex {vertex!r} is listed twice")
        adj[vertex] = neighbours

    try:
        return Graph(graph_id, name, directed, adj)
    except UnknownVertexError as e:
        raise MalformedGraphDataError(f"Neighbour {e.vertex!r} has no adjacency list") from e


def to_json(g: Graph[Any], **kwargs: Any) -> str:
    """JSON text of ``to_dict(g)``; kwargs go to ``json.dumps``."""
    return json.dumps(to_dict(g), **kwargs)


def from_json(text: str) -> Graph[Any]:
    """
    Parse a graph from JSON text.

    Raises:
        MalformedGraphDataError: If the text is not JSON or has the wrong shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedGraphDataError(f"Invalid JSON graph data: {e}") from e
    return from_dict(data)


__all__ = [
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
