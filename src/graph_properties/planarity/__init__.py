"""Planarity testing using the LR-planarity algorithm.

Tests undirected graphs in linear time. Based on the Left-Right planarity
criterion of de Fraysseix and Rosenstiehl, in the formulation of Brandes.

Stages:
    1. Edge-count bound: m > 3n - 6 (n > 2) rejects without any DFS.
    2. DFS orientation with heights, low-points and nesting depths
       per edge slot (``compute_lowpoints``).
    3. Left/right constraint merging over the nesting-depth order.

Public API:
    is_planar(g) -> bool
    check_planarity(g) -> PlanarityResult
    compute_lowpoints(g) -> LowPoints
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional, TypeVar

from ..types import GraphView, TraceCallback, TraceType, emit
from ..validation import UnsupportedOperationError
from ._lowpoints import compute_lowpoints
from ._lr_partition import LRPartition
from ._types import LowPoints, PlanarityResult, SimpleView

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


def check_planarity(
    g: GraphView[V],
    *,
    trace: Optional[TraceCallback] = None,
) -> PlanarityResult:
    """Test planarity and return detailed results.

    Loops, parallel edges and one-sided adjacency entries are dropped
    first; low-point slots then refer to the simplified view.

    Args:
        g: Undirected input graph.
        trace: Optional diagnostic sink.

    Returns:
        PlanarityResult with is_planar flag, reason and orientation data.

    Raises:
        UnsupportedOperationError: If g is directed.
    """
    if g.directed:
        raise UnsupportedOperationError("Planarity check is not implemented for directed graphs")

    if not _is_simple(g):
        g = _simplify(g)

    n = g.order()
    m = g.size()
    if n > 2 and m > 3 * n - 6:
        logger.debug("Not planar: m=%d > 3n-6=%d", m, 3 * n - 6)
        emit(trace, TraceType.rejected, None, {"order": n, "size": m})
        return PlanarityResult(is_planar=False, reason="edge-bound")

    lowpoints = compute_lowpoints(g, trace=trace)

    # Every graph on at most 4 vertices is planar
    if n <= 4:
        return PlanarityResult(is_planar=True, reason="trivial", lowpoints=lowpoints)

    if not LRPartition(g, lowpoints, trace=trace).run():
        return PlanarityResult(is_planar=False, reason="lr-conflict", lowpoints=lowpoints)
    return PlanarityResult(is_planar=True, reason="lr-ok", lowpoints=lowpoints)


def _is_simple(g: GraphView[V]) -> bool:
    """No loops, no repeated neighbours, symmetric adjacency."""
    for u in g.vertices():
        nbrs = g.neighbours(u)
        if u in nbrs or len(set(nbrs)) != len(nbrs):
            return False
        if any(u not in g.neighbours(v) for v in nbrs):
            return False
    return True


def _simplify(g: GraphView[V]) -> SimpleView:
    """Remove self-loops and collapse parallel edges (symmetric closure)."""
    adj: dict[V, list[V]] = {u: [] for u in g.vertices()}
    seen: set[frozenset[V]] = set()
    for u, v in g.edges():
        if u == v:
            continue
        key = frozenset((u, v))
        if key in seen:
            continue
        seen.add(key)
        adj[u].append(v)
        adj[v].append(u)
    return SimpleView(adj)


def is_planar(g: GraphView[V]) -> bool:
    """Test whether a graph is planar.

    This is the simple boolean API. For richer results (reason, low-points),
    use ``check_planarity`` instead.
    """
    return check_planarity(g).is_planar


__all__ = [
    "is_planar",
    "check_planarity",
    "compute_lowpoints",
    "LowPoints",
    "PlanarityResult",
]
