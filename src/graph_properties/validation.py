"""
Errors and input validation for graph analysis.

Provides the exception hierarchy raised by graph lookups, deserialization
and the declaration adapter, plus validation helpers for adjacency data
supplied by external producers. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import Any, Hashable, Mapping, Optional, Sequence


class GraphError(ValueError):
    """Base exception for recoverable graph errors."""

    pass


class UnknownVertexError(GraphError):
    """Raised when a vertex is not a key of the adjacency mapping."""

    def __init__(self, vertex: Any, graph_name: Optional[str] = None) -> None:
        self.vertex = vertex
        where = f" {graph_name!r}" if graph_name else ""
        super().__init__(f"Vertex {vertex!r} is not in graph{where}")


class IndexOutOfRangeError(GraphError, IndexError):
    """Raised when a neighbour index is not below the vertex degree."""

    def __init__(self, vertex: Any, index: int, degree: int) -> None:
        self.vertex = vertex
        self.index = index
        self.degree = degree
        super().__init__(
            f"Vertex {vertex!r} has degree {degree}: cannot access neighbour #{index}"
        )


class EdgeNotFoundError(GraphError):
    """Raised when no neighbour slot of u holds v."""

    def __init__(self, source: Any, target: Any, graph_name: Optional[str] = None) -> None:
        self.source = source
        self.target = target
        where = f" {graph_name!r}" if graph_name else ""
        super().__init__(f"Edge from {source!r} to {target!r} is not in graph{where}")


class UnsupportedOperationError(GraphError, NotImplementedError):
    """Raised when an analysis does not support the given kind of graph."""

    pass


class MalformedGraphDataError(GraphError):
    """Raised when serialized graph data does not have the expected shape."""

    pass


class UnknownGraphError(GraphError):
    """Raised when a graph id is not present in a store."""

    def __init__(self, graph_id: Any) -> None:
        self.graph_id = graph_id
        super().__init__(f"No graph with id {graph_id!r}")


class InvalidDeclarationError(GraphError):
    """Raised when a parsed graph declaration is malformed."""

    pass


class AlgorithmInvariantError(RuntimeError):
    """
    Raised when an algorithm reaches a state that correct DFS sequencing
    cannot produce (e.g. a missing discovery index).

    Not a GraphError: this signals a defect, not bad input.
    """

    pass


def must_get(mapping: Mapping[Any, Any], key: Any, what: str = "value") -> Any:
    """Look up ``key`` or fail with AlgorithmInvariantError."""
    try:
        return mapping[key]
    except KeyError:
        raise AlgorithmInvariantError(f"INTERNAL ERROR: no {what} for {key!r}") from None


def _is_key(mapping: Mapping[Any, Any], key: Any) -> bool:
    try:
        return key in mapping
    except TypeError:
        return False


def validate_adjacency(
    adjacency: Mapping[Hashable, Sequence[Hashable]],
    strict: bool = True,
) -> list[tuple[Hashable, str]]:
    """
    Validate that every neighbour is also a vertex of the mapping.

    Args:
        adjacency: Mapping from vertex to its ordered neighbours
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (vertex, issue_description) tuples

    Raises:
        UnknownVertexError: If strict=True and a phantom neighbour is found
    """
    issues: list[tuple[Hashable, str]] = []

    for u, neighbours in adjacency.items():
        for k, v in enumerate(neighbours):
            if not _is_key(adjacency, v):
                issues.append((u, f"Vertex {u!r}: neighbour #{k} {v!r} is not a vertex"))

    if strict and issues:
        first = issues[0][0]
        phantom = next(v for v in adjacency[first] if not _is_key(adjacency, v))
        raise UnknownVertexError(phantom)

    return issues


def validate_symmetry(
    adjacency: Mapping[Hashable, Sequence[Hashable]],
    strict: bool = True,
) -> list[tuple[Hashable, str]]:
    """
    Validate that undirected adjacency is symmetric with matching multiplicities.

    Args:
        adjacency: Mapping from vertex to its ordered neighbours
        strict: If True, raises on invalid

    Returns:
        List of (vertex, issue_description) tuples

    Raises:
        GraphError: If strict=True and asymmetric entries are found
    """
    issues: list[tuple[Hashable, str]] = []

    for u, neighbours in adjacency.items():
        for v in set(neighbours):
            forward = list(neighbours).count(v)
            backward = list(adjacency.get(v, ())).count(u)
            if forward != backward:
                issues.append(
                    (
                        u,
                        f"Vertex {u!r}: {forward} edge(s) to {v!r} but {backward} back",
                    )
                )

    if strict and issues:
        msg = "Asymmetric adjacency:\n" + "\n".join(issue[1] for issue in issues)
        raise GraphError(msg)

    return issues


__all__ = [
    "GraphError",
    "UnknownVertexError",
    "IndexOutOfRangeError",
    "EdgeNotFoundError",
    "UnsupportedOperationError",
    "MalformedGraphDataError",
    "UnknownGraphError",
    "InvalidDeclarationError",
    "AlgorithmInvariantError",
    "must_get",
    "validate_adjacency",
    "validate_symmetry",
]
