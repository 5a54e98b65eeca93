"""
Immutable adjacency-map graph.

A graph is a pair G=(V,E). This representation stores, for each vertex,
the ordered list of its neighbours. The order matters: the k-th neighbour
of u addresses the edge slot (u, k) used throughout the DFS hooks.

- Undirected graphs: unordered pairs, symmetric adjacency, no loops expected.
- Directed graphs ("digraphs"): ordered pairs, loops and parallel arcs allowed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Hashable, Mapping, Sequence, TypeVar

from .properties import compute_properties
from .validation import (
    EdgeNotFoundError,
    IndexOutOfRangeError,
    UnknownVertexError,
    validate_adjacency,
)

if TYPE_CHECKING:
    from .properties import GraphProperties

V = TypeVar("V", bound=Hashable)


class Graph(Generic[V]):
    """
    Finite graph over hashable vertex identifiers.

    The adjacency data is copied on construction and never mutated afterwards.
    ``properties`` is computed once, eagerly, and cached.

    Example:
        g = Graph(0, "path", False, {"1": ["2"], "2": ["1", "3"], "3": ["2"]})
        g.deg("2")                # 2
        g.adj_at("2", 1)          # "3"
        g.properties.is_tree      # True

    Attributes:
        id: Identity of this graph within a working set
        name: Display label (may be empty)
        directed: True for digraph semantics
        properties: Cached GraphProperties record
    """

    __slots__ = ("_id", "_name", "_directed", "_adj", "_properties")

    def __init__(
        self,
        graph_id: int,
        name: str,
        directed: bool,
        adjacency: Mapping[V, Sequence[V]],
    ) -> None:
        """
        Initialize graph from adjacency data.

        Args:
            graph_id: Integer identity (used as lookup key by consumers)
            name: Display label
            directed: True if the graph is a digraph
            adjacency: Mapping from vertex to its ordered neighbours

        Raises:
            UnknownVertexError: If a neighbour is not itself a vertex
        """
        self._id = int(graph_id)
        self._name = name
        self._directed = bool(directed)
        self._adj: dict[V, tuple[V, ...]] = {u: tuple(vs) for u, vs in adjacency.items()}
        validate_adjacency(self._adj)
        self._properties: GraphProperties = compute_properties(self)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def properties(self) -> GraphProperties:
        """Structural properties, computed at construction."""
        return self._properties

    @property
    def adjacency(self) -> dict[V, list[V]]:
        """Copy of the adjacency mapping."""
        return {u: list(vs) for u, vs in self._adj.items()}

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def _lookup(self, u: V) -> tuple[V, ...]:
        try:
            return self._adj[u]
        except (KeyError, TypeError):
            raise UnknownVertexError(u, self._name) from None

    def deg(self, u: V) -> int:
        """Number of neighbour slots of u."""
        return len(self._lookup(u))

    def adj_at(self, u: V, k: int) -> V:
        """The k-th neighbour of u in adjacency order."""
        adj = self._lookup(u)
        if k < 0 or k >= len(adj):
            raise IndexOutOfRangeError(u, k, len(adj))
        return adj[k]

    def neighbours(self, u: V) -> tuple[V, ...]:
        """All neighbours of u in adjacency order."""
        return self._lookup(u)

    def edge_index(self, u: V, v: V) -> int:
        """First slot k with adj_at(u, k) == v."""
        for k, w in enumerate(self._lookup(u)):
            if w == v:
                return k
        raise EdgeNotFoundError(u, v, self._name)

    def vertices(self) -> list[V]:
        """All vertices in insertion order."""
        return list(self._adj)

    def edges(self) -> list[tuple[V, V]]:
        """Every (u, v) slot, following adjacency order."""
        return [(u, v) for u, vs in self._adj.items() for v in vs]

    def order(self) -> int:
        return len(self._adj)

    def size(self) -> int:
        """Number of arcs (digraph) or edges (undirected graph)."""
        slots = sum(len(vs) for vs in self._adj.values())
        return slots if self._directed else slots // 2

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __contains__(self, u: Any) -> bool:
        try:
            return u in self._adj
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._adj)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._id == other._id
            and self._name == other._name
            and self._directed == other._directed
            and list(self._adj.items()) == list(other._adj.items())
        )

    def __hash__(self) -> int:
        return hash((self._id, self._name, self._directed))

    def __repr__(self) -> str:
        kind = "digraph" if self._directed else "graph"
        return f"Graph(id={self._id}, name={self._name!r}, {kind}, n={self.order()}, m={self.size()})"


__all__ = ["Graph"]
