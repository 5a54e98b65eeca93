"""
Greedy vertex colouring (Welsh-Powell ordering).

Vertices are coloured in descending degree order, each taking the smallest
colour not used by an already coloured neighbour. On loopless undirected
graphs this uses at most D(G)+1 colours, where D(G) is the maximum degree.
The result is not necessarily a minimum colouring.
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional, TypeVar

from .types import GraphView, TraceCallback, TraceType, emit
from .validation import UnknownVertexError

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


def colour_vertices(
    g: GraphView[V],
    root: Optional[V] = None,
    *,
    trace: Optional[TraceCallback] = None,
) -> dict[V, int]:
    """
    Colour the vertices so that no two adjacent vertices share a colour.

    Args:
        g: Input graph
        root: If given, this vertex is coloured first
        trace: Optional diagnostic sink

    Returns:
        Mapping from vertex to colour in {0, 1, ..., D(G)}

    Raises:
        UnknownVertexError: If root is not a vertex of g
    """
    vertices = g.vertices()
    if root is not None and root not in vertices:
        raise UnknownVertexError(root)
    if g.order() < 2:
        return {u: 0 for u in vertices}

    # Stable sort keeps vertex order among equal degrees
    ordering = sorted(vertices, key=g.deg, reverse=True)
    max_deg = g.deg(ordering[0])

    if root is not None:
        ordering.remove(root)
        ordering.insert(0, root)

    # In digraphs an arc constrains both of its ends
    conflicts: dict[V, list[V]] = {u: list(g.neighbours(u)) for u in vertices}
    if g.directed:
        for u, v in g.edges():
            conflicts[v].append(u)

    colouring: dict[V, int] = {}
    for u in ordering:
        used = {colouring[v] for v in conflicts[u] if v in colouring and v != u}
        limit = max(max_deg, len(used)) + 1
        chosen = min(c for c in range(limit + 1) if c not in used)
        colouring[u] = chosen
        emit(trace, TraceType.colour, u, chosen)

    logger.debug("Coloured %d vertices with %d colours", len(colouring), len(set(colouring.values())))
    return colouring


def colourability(g: GraphView[V]) -> int:
    """Number of colours used by the greedy colouring without a root."""
    return len(set(colour_vertices(g).values()))


__all__ = [
    "colour_vertices",
    "colourability",
]
