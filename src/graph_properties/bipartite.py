"""
Bipartition by DFS branch tracking.

A graph is bipartite if and only if it contains no odd cycle. Every back
edge (u, v) closes the cycle formed by the branch slice from v to u; the
first odd one found stops the search. Without odd cycles, the parity of
the DFS depth is a valid two-colouring.
"""

from __future__ import annotations

from typing import Hashable, Optional, TypeVar

from .dfs import DfsHooks, dfs
from .types import Colour, GraphView

V = TypeVar("V", bound=Hashable)


class _OddCycleFound(Exception):
    """Stops the traversal once an odd cycle is known."""


def decompose_bipartite(g: GraphView[V]) -> Optional[tuple[list[V], list[V]]]:
    """
    Split the vertices into two classes such that every edge crosses classes.

    Args:
        g: Input graph

    Returns:
        (class_a, class_b) in discovery order, class_a holding the DFS roots,
        or None if the graph has an odd cycle.

    Example:
        >>> decompose_bipartite(path)      # 1 -- 2 -- 3
        (['1', '3'], ['2'])
    """
    branch: list[V] = []
    position: dict[V, int] = {}
    depth: dict[V, int] = {}
    discovered: list[V] = []

    def pre_visit(u: V, parent: Optional[V]) -> None:
        position[u] = len(branch)
        depth[u] = len(branch)
        branch.append(u)
        discovered.append(u)

    def pre_explore(u: V, k: int, colour: Colour, parent: Optional[V]) -> None:
        if colour is Colour.white:
            return
        v = g.adj_at(u, k)
        if colour is Colour.grey:
            if not g.directed and len(branch) >= 2 and v == branch[-2]:
                return
            cycle = branch[position[v] :]
            if len(cycle) % 2 == 1:
                raise _OddCycleFound()
        elif g.directed and depth[u] % 2 == depth[v] % 2:
            # Cross or forward arc between same-parity vertices
            raise _OddCycleFound()

    def post_visit(u: V, parent: Optional[V]) -> None:
        branch.pop()
        del position[u]

    try:
        dfs(g, DfsHooks(pre_visit=pre_visit, pre_explore=pre_explore, post_visit=post_visit))
    except _OddCycleFound:
        return None

    class_a = [u for u in discovered if depth[u] % 2 == 0]
    class_b = [u for u in discovered if depth[u] % 2 == 1]
    return class_a, class_b


def is_bipartite(g: GraphView[V]) -> bool:
    return decompose_bipartite(g) is not None


def is_complete_bipartite(g: GraphView[V]) -> bool:
    """A complete bipartite graph K[p,q] has m = p*q edges."""
    partition = decompose_bipartite(g)
    if partition is None:
        return False
    p, q = partition
    return g.size() == len(p) * len(q)


def is_star(g: GraphView[V]) -> bool:
    """Complete bipartite with one class of size 1."""
    partition = decompose_bipartite(g)
    if partition is None:
        return False
    p, q = partition
    return g.size() == len(p) * len(q) and min(len(p), len(q)) == 1


def chromaticity(g: GraphView[V]) -> Optional[int]:
    """
    2 for bipartite graphs, otherwise None.

    The chromatic number is not computed in the general case.
    """
    if is_bipartite(g):
        return 2
    return None


__all__ = [
    "decompose_bipartite",
    "is_bipartite",
    "is_complete_bipartite",
    "is_star",
    "chromaticity",
]
