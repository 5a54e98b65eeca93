"""
Phase 1 of the LR-planarity test: DFS orientation, heights, low-points
and nesting depths, computed per edge slot (u, k).

For an oriented slot e = (u, k) leading to v:
- tree edge:  lowpt(e) = min lowpt over the slots of v, or height(u)
- back edge:  lowpt(e) = height(v), lowpt2(e) = height(u)
- nesting_depth(e) = 2 * lowpt(e) + [lowpt2(e) < height(u)]

The low-points of each slot are folded into the parent's tree slot once
the slot has been explored.
"""

from __future__ import annotations

import logging
from typing import Hashable, Optional, TypeVar

from ..dfs import DfsHooks, dfs
from ..types import Colour, EdgeSlot, GraphView, TraceCallback, TraceType, emit
from ..validation import must_get
from ._types import LowPoints

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


def compute_lowpoints(
    g: GraphView[V],
    *,
    trace: Optional[TraceCallback] = None,
) -> LowPoints:
    """
    Orient the graph by DFS and compute heights, low-points and nesting depths.

    Args:
        g: Undirected input graph
        trace: Optional diagnostic sink

    Returns:
        LowPoints record
    """
    lp = LowPoints()
    height = lp.height
    lowpt = lp.lowpt
    lowpt2 = lp.lowpt2

    def pre_visit(u: V, parent: Optional[V]) -> None:
        if parent is None:
            height[u] = 0
            lp.roots.append(u)
        else:
            height[u] = must_get(height, parent, "height") + 1

    def pre_explore(u: V, k: int, colour: Colour, parent: Optional[V]) -> None:
        v = g.adj_at(u, k)
        if colour is Colour.white:
            slot = (u, k)
            lp.parent_slot[v] = slot
            lowpt[slot] = height[u]
            lowpt2[slot] = height[u]
        elif colour is Colour.grey and v != parent:
            slot = (u, k)
            lowpt[slot] = height[v]
            lowpt2[slot] = height[u]

    def post_explore(u: V, k: int, colour: Colour, parent: Optional[V]) -> None:
        e: EdgeSlot = (u, k)
        if e not in lowpt:
            return

        lp.nesting_depth[e] = 2 * lowpt[e]
        if lowpt2[e] < height[u]:
            # chordal
            lp.nesting_depth[e] += 1

        if parent is None:
            return
        pe = must_get(lp.parent_slot, u, "parent slot")
        if lowpt[e] < lowpt[pe]:
            lowpt2[pe] = min(lowpt[pe], lowpt2[e])
            lowpt[pe] = lowpt[e]
        elif lowpt[e] > lowpt[pe]:
            lowpt2[pe] = min(lowpt2[pe], lowpt[e])
        else:
            lowpt2[pe] = min(lowpt2[pe], lowpt2[e])

    dfs(g, DfsHooks(pre_visit=pre_visit, pre_explore=pre_explore, post_explore=post_explore))

    logger.debug(
        "Orientation: %d root(s), %d oriented slot(s)", len(lp.roots), len(lp.nesting_depth)
    )
    emit(trace, TraceType.lowpoints, None, lp)
    return lp
