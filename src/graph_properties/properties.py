"""
Aggregated structural properties of a graph.

``compute_properties`` runs every analysis once and collects the results
into a read-only record. ``Graph`` calls it at construction time.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Hashable, Optional, TypeVar

from .biconnectivity import is_biconnected
from .bipartite import chromaticity, decompose_bipartite
from .colouring import colourability
from .connectivity import (
    is_acyclic,
    is_complete,
    is_connected,
    is_cycle,
    is_eulerian,
    is_gear,
    is_wheel,
)
from .planarity import is_planar
from .types import GraphView

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class GraphProperties:
    """
    Structural properties of one graph.

    Attributes:
        is_connected: Any two vertices are linked by a path (one DFS root).
        is_biconnected: The graph has no cutvertex.
        is_acyclic: The graph contains no cycle (a forest).
        is_cycle: Every vertex has degree 2.
        is_tree: Connected and acyclic.
        is_complete: Every vertex is adjacent to every other vertex.
        is_bipartite: The vertices split into two classes such that every
            edge has its ends in different classes.
        is_complete_bipartite: Every vertex of one class is adjacent to every
            vertex of the other, e.g. ``1--4 1--5 2--4 2--5``.
        is_star: Complete bipartite with a class of size 1, e.g. ``1--2 1--3 1--4``.
        is_eulerian: Admits a closed walk using every edge exactly once.
        is_wheel: Degree pattern of a cycle of length n-1 plus a hub,
            e.g. ``1--2--3--4--1 1--5 2--5 3--5 4--5``.
        is_gear: Order/size pattern of a wheel with one vertex inserted
            between every two outer vertices.
        colourability: Number of colours used by the greedy colouring. Every
            planar graph is 4-colourable, so this is an upper bound only.
        chromaticity: 2 for bipartite graphs, otherwise None (the chromatic
            number is not computed in general).
        is_planar: Admits a crossing-free drawing in the plane. Always False
            for digraphs.
    """

    is_connected: bool
    is_biconnected: bool
    is_acyclic: bool
    is_cycle: bool
    is_tree: bool
    is_complete: bool
    is_bipartite: bool
    is_complete_bipartite: bool
    is_star: bool
    is_eulerian: bool
    is_wheel: bool
    is_gear: bool
    colourability: int
    chromaticity: Optional[int]
    is_planar: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_properties(g: GraphView[V]) -> GraphProperties:
    """Run every analysis on g and collect the results."""
    connected = is_connected(g)
    acyclic = is_acyclic(g)

    partition = decompose_bipartite(g)
    complete_bipartite = False
    star = False
    if partition is not None:
        p, q = partition
        complete_bipartite = g.size() == len(p) * len(q)
        star = complete_bipartite and min(len(p), len(q)) == 1

    return GraphProperties(
        is_connected=connected,
        is_biconnected=is_biconnected(g),
        is_acyclic=acyclic,
        is_cycle=is_cycle(g),
        is_tree=connected and acyclic,
        is_complete=is_complete(g),
        is_bipartite=partition is not None,
        is_complete_bipartite=complete_bipartite,
        is_star=star,
        is_eulerian=is_eulerian(g),
        is_wheel=is_wheel(g),
        is_gear=is_gear(g),
        colourability=colourability(g),
        chromaticity=chromaticity(g),
        is_planar=False if g.directed else is_planar(g),
    )


__all__ = [
    "GraphProperties",
    "compute_properties",
]
