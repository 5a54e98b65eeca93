"""
On-demand queries for a rendering layer.

A rendering layer knows graphs by id and lets the user pick a root vertex;
``GraphStore`` answers the per-root questions (spanning tree, cutvertices,
vertex colouring) without caching anything on the graphs themselves.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .biconnectivity import cutvertices
from .colouring import colour_vertices
from .dfs import spanning_tree
from .graph import Graph
from .properties import GraphProperties
from .validation import UnknownGraphError


class GraphStore:
    """
    Graphs of a working set, keyed by id.

    Example:
        store = GraphStore(graphs_from_declarations(declarations))
        store.spanning_tree(0, "a")     # [("a", "b"), ("b", "c")]
        store.cutvertices(0, "a")       # ["b"]
    """

    def __init__(self, graphs: Optional[Iterable[Graph[Any]]] = None) -> None:
        self._graphs: dict[int, Graph[Any]] = {}
        for g in graphs or ():
            self.add(g)

    def add(self, g: Graph[Any]) -> None:
        """Add or replace the graph with id ``g.id``."""
        self._graphs[g.id] = g

    def remove(self, graph_id: int) -> None:
        self.get(graph_id)
        del self._graphs[graph_id]

    def get(self, graph_id: int) -> Graph[Any]:
        try:
            return self._graphs[graph_id]
        except KeyError:
            raise UnknownGraphError(graph_id) from None

    def __contains__(self, graph_id: object) -> bool:
        return graph_id in self._graphs

    def __iter__(self) -> Iterator[Graph[Any]]:
        return iter(self._graphs.values())

    def __len__(self) -> int:
        return len(self._graphs)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def properties(self, graph_id: int) -> GraphProperties:
        return self.get(graph_id).properties

    def spanning_tree(self, graph_id: int, root: Any) -> list[tuple[Any, Any]]:
        """(parent, child) tree edges of the DFS tree grown from root."""
        return spanning_tree(self.get(graph_id), root)

    def cutvertices(self, graph_id: int, root: Any) -> list[Any]:
        """Cutvertices of the part of the graph reachable from root."""
        return cutvertices(self.get(graph_id), root)

    def vertex_colouring(self, graph_id: int, root: Any) -> dict[Any, int]:
        """Greedy colouring that starts at root."""
        return colour_vertices(self.get(graph_id), root)


__all__ = ["GraphStore"]
