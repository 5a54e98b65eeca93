"""
Biconnected components and cutvertices (Hopcroft, Tarjan).

A component is biconnected if any two of its vertices are joined by two
internally disjoint paths. A vertex w separates u and v if every path from
u to v contains w; such a vertex is a cutvertex.

DFS numbers every vertex in discovery order and tracks its low-point, the
smallest discovery index reachable through descendants and at most one
back edge. Edges are stacked as they are explored; when a tree edge (u, v)
returns with low(v) >= d(u), the edges above (u, v) form one component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Hashable, Optional, TypeVar

from .dfs import DfsHooks, dfs
from .types import Colour, GraphView, TraceCallback, TraceType, emit
from .validation import AlgorithmInvariantError, must_get

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


@dataclass
class BiconnectedComponents(Generic[V]):
    """
    Result of a biconnectivity decomposition.

    Attributes:
        cutvertices: Vertices whose removal splits their component
        components: One adjacency map per maximal biconnected subgraph
    """

    cutvertices: set[V] = field(default_factory=set)
    components: list[dict[V, list[V]]] = field(default_factory=list)

    def __iter__(self):
        # Allows `cutvertices, components = find_biconnected_components(g)`
        yield self.cutvertices
        yield self.components


def find_biconnected_components(
    g: GraphView[V],
    root: Optional[V] = None,
    *,
    trace: Optional[TraceCallback] = None,
) -> BiconnectedComponents[V]:
    """
    Extract the cutvertices and maximal biconnected subgraphs.

    A DFS root is a cutvertex only if it has two or more tree children;
    any other vertex u is one if some child v has low(v) >= d(u).

    Args:
        g: Input graph
        root: If given, only the part of the graph reachable from root
        trace: Optional diagnostic sink

    Returns:
        BiconnectedComponents. A biconnected graph has no cutvertices and
        exactly one component.

    Raises:
        UnknownVertexError: If root is not a vertex of g
    """
    discovery: dict[V, int] = {}
    lowpt: dict[V, int] = {}
    edges: list[tuple[V, V]] = []
    components: list[list[tuple[V, V]]] = []
    children: dict[V, int] = {}
    roots: list[V] = []
    separating: list[V] = []

    def pre_visit(u: V, parent: Optional[V]) -> None:
        discovery[u] = len(discovery)
        lowpt[u] = discovery[u]
        children[u] = 0
        if parent is None:
            roots.append(u)

    def pre_explore(u: V, k: int, colour: Colour, parent: Optional[V]) -> None:
        v = g.adj_at(u, k)
        if colour is Colour.white:
            edges.append((u, v))
            children[u] += 1
            return
        du = must_get(discovery, u, "discovery index")
        dv = must_get(discovery, v, "discovery index")
        if dv < du and v != parent:
            edges.append((u, v))
            lowpt[u] = min(lowpt[u], dv)

    def post_explore(u: V, k: int, colour: Colour, parent: Optional[V]) -> None:
        if colour is not Colour.white:
            return
        v = g.adj_at(u, k)
        lv = must_get(lowpt, v, "low-point")
        lowpt[u] = min(must_get(lowpt, u, "low-point"), lv)
        if lv < discovery[u]:
            return

        # Edges above (u, v) all start inside the subtree of v
        dv = discovery[v]
        component: list[tuple[V, V]] = []
        while edges and must_get(discovery, edges[-1][0], "discovery index") >= dv:
            component.append(edges.pop())
        if not edges or edges[-1] != (u, v):
            raise AlgorithmInvariantError(f"INTERNAL ERROR: tree edge {(u, v)!r} is not on the edge stack")
        component.append(edges.pop())
        components.append(component)
        separating.append(u)
        logger.debug("Component split at %r: %d edge(s)", u, len(component))
        emit(trace, TraceType.component, u, list(component))

    dfs(g, DfsHooks(pre_visit=pre_visit, pre_explore=pre_explore, post_explore=post_explore), root=root)

    root_set = set(roots)
    cutvertices: set[V] = set()
    for u in separating:
        if u in root_set and children[u] < 2:
            continue
        if u not in cutvertices:
            cutvertices.add(u)
            logger.debug("Cutvertex %r", u)
            emit(trace, TraceType.cutvertex, u)

    return BiconnectedComponents(
        cutvertices=cutvertices,
        components=[_to_adjacency(component, g.directed) for component in components],
    )


def _to_adjacency(component: list[tuple[V, V]], directed: bool) -> dict[V, list[V]]:
    """Rebuild an adjacency map from collected edge pairs."""
    adj: dict[V, list[V]] = {}
    for u, v in reversed(component):
        adj.setdefault(u, []).append(v)
        if not directed:
            adj.setdefault(v, []).append(u)
        else:
            adj.setdefault(v, [])
    return adj


def is_biconnected(g: GraphView[V]) -> bool:
    """True iff the whole graph has no cutvertex."""
    return not find_biconnected_components(g).cutvertices


def cutvertices(g: GraphView[V], root: Optional[V] = None) -> list[V]:
    """Cutvertices relative to ``root``, in vertex order."""
    found = find_biconnected_components(g, root).cutvertices
    return [u for u in g.vertices() if u in found]


__all__ = [
    "BiconnectedComponents",
    "find_biconnected_components",
    "is_biconnected",
    "cutvertices",
]
