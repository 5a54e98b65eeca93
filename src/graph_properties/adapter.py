"""
Adapter from parsed graph declarations to Graph objects.

A declaration lists explicit vertices and edge chains (``a -- b -- c`` is
the chain ``["a", "b", "c"]``), independent of the text format it was
parsed from. The adjacency map is built as follows:

1. Every declared vertex is registered with no neighbours.
2. Every chain is split into consecutive pairs; unknown vertices are
   created on the fly.
3. Self-loops are only kept in digraphs.
4. Undirected edges are mirrored into the reverse direction.
5. Undirected neighbour lists are deduplicated (parallel edges collapse).

Vertex identifiers are converted to strings.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Hashable, Sequence

from .graph import Graph
from .validation import InvalidDeclarationError

if TYPE_CHECKING:
    from typing_extensions import Self


@dataclass
class GraphDeclaration:
    """
    One parsed graph.

    Attributes:
        name: Display name (may be empty)
        directed: True for a digraph
        vertices: Explicitly declared vertices
        edges: Edge chains, each naming two or more vertices
    """

    name: str = ""
    directed: bool = False
    vertices: Sequence[Hashable] = field(default_factory=list)
    edges: Sequence[Sequence[Hashable]] = field(default_factory=list)


def build_adjacency(
    vertices: Sequence[Hashable],
    edges: Sequence[Sequence[Hashable]],
    directed: bool,
) -> dict[str, list[str]]:
    """
    Build an adjacency map from declared vertices and edge chains.

    Args:
        vertices: Explicitly declared vertices
        edges: Edge chains
        directed: True for digraph semantics

    Returns:
        Mapping from vertex id to its ordered neighbours

    Raises:
        InvalidDeclarationError: If a chain names fewer than two vertices
    """
    adj: dict[str, list[str]] = {}

    for vertex in vertices:
        adj.setdefault(str(vertex), [])

    for i, chain in enumerate(edges):
        if isinstance(chain, (str, bytes)) or len(chain) < 2:
            raise InvalidDeclarationError(
                f"Edge chain {i} must name at least two vertices, got {chain!r}"
            )
        ids = [str(v) for v in chain]
        for u, v in zip(ids, ids[1:]):
            source = adj.setdefault(u, [])
            target = adj.setdefault(v, [])
            if u == v and not directed:
                warnings.warn(
                    f"Self-loop on {u!r} dropped: loops are only allowed in digraphs",
                    UserWarning,
                    stacklevel=2,
                )
                continue
            source.append(v)
            if not directed:
                target.append(u)

    if not directed:
        adj = {u: list(dict.fromkeys(vs)) for u, vs in adj.items()}

    return adj


def graph_from_declaration(declaration: GraphDeclaration, graph_id: int) -> Graph[str]:
    """Build the Graph for one declaration."""
    adj = build_adjacency(declaration.vertices, declaration.edges, declaration.directed)
    return Graph(graph_id, declaration.name, declaration.directed, adj)


def graphs_from_declarations(
    declarations: Sequence[GraphDeclaration],
    start_id: int = 0,
) -> list[Graph[str]]:
    """Build one Graph per declaration; ids are assigned by position."""
    return [
        graph_from_declaration(declaration, start_id + i)
        for i, declaration in enumerate(declarations)
    ]


class GraphBuilder:
    """
    Fluent programmatic construction, following the adapter rules.

    Example:
        g = (
            GraphBuilder("bowtie")
            .add_path("a", "b", "x", "a")
            .add_path("x", "c", "d", "x")
            .build(graph_id=3)
        )
    """

    def __init__(self, name: str = "", *, directed: bool = False) -> None:
        self._name = name
        self._directed = directed
        self._vertices: list[Any] = []
        self._edges: list[list[Any]] = []

    def add_vertex(self, vertex: Hashable) -> Self:
        self._vertices.append(vertex)
        return self

    def add_vertices(self, vertices: Sequence[Hashable]) -> Self:
        self._vertices.extend(vertices)
        return self

    def add_edge(self, u: Hashable, v: Hashable) -> Self:
        self._edges.append([u, v])
        return self

    def add_path(self, *vertices: Hashable) -> Self:
        """Add the chain v0 -- v1 -- ... -- vk."""
        self._edges.append(list(vertices))
        return self

    def declaration(self) -> GraphDeclaration:
        return GraphDeclaration(
            name=self._name,
            directed=self._directed,
            vertices=list(self._vertices),
            edges=[list(chain) for chain in self._edges],
        )

    def build(self, graph_id: int = 0) -> Graph[str]:
        return graph_from_declaration(self.declaration(), graph_id)


__all__ = [
    "GraphDeclaration",
    "GraphBuilder",
    "build_adjacency",
    "graph_from_declaration",
    "graphs_from_declarations",
]
