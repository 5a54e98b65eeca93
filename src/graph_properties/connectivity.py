"""
Connectivity, acyclicity and degree-pattern classifiers.

All traversal-based checks are single DFS passes driven by hooks.
For digraphs, ``is_connected`` only tests reachability from the first
root in vertex order; strong connectivity is not computed.
"""

from __future__ import annotations

from typing import Hashable, Optional, TypeVar

import numpy as np

from .bipartite import is_bipartite
from .degrees import degree_sequence
from .dfs import DfsHooks, dfs
from .types import Colour, GraphView

V = TypeVar("V", bound=Hashable)


def is_connected(g: GraphView[V]) -> bool:
    """True iff a single DFS root reaches every vertex."""
    roots = [u for u, parent in dfs(g).items() if parent is None]
    return len(roots) == 1


def is_acyclic(g: GraphView[V]) -> bool:
    """
    True iff DFS finds no back edge.

    In undirected graphs the edge back to the immediate predecessor is the
    same edge as the tree edge and does not count.
    """
    branch: list[V] = []
    found = False

    def pre_visit(u: V, parent: Optional[V]) -> None:
        branch.append(u)

    def pre_explore(u: V, k: int, colour: Colour, parent: Optional[V]) -> None:
        nonlocal found
        if colour is not Colour.grey:
            return
        if not g.directed and len(branch) >= 2 and g.adj_at(u, k) == branch[-2]:
            return
        found = True

    def post_visit(u: V, parent: Optional[V]) -> None:
        branch.pop()

    dfs(g, DfsHooks(pre_visit=pre_visit, pre_explore=pre_explore, post_visit=post_visit))
    return not found


def is_tree(g: GraphView[V]) -> bool:
    return is_connected(g) and is_acyclic(g)


def is_cycle(g: GraphView[V]) -> bool:
    """
    Every vertex has degree 2.

    Disjoint unions of cycles also pass this check.
    """
    return bool(np.all(degree_sequence(g) == 2))


def is_eulerian(g: GraphView[V]) -> bool:
    """Connected with every degree even (Euler)."""
    return is_connected(g) and bool(np.all(degree_sequence(g) % 2 == 0))


def is_complete(g: GraphView[V]) -> bool:
    """Edge count equals n(n-1)/2."""
    n = g.order()
    return 2 * g.size() == n * (n - 1)


def is_wheel(g: GraphView[V]) -> bool:
    """
    One hub of degree n-1, every other vertex of degree 3.

    Degree pattern only; not a proof that the graph is a wheel.
    """
    if g.order() < 4:
        return False
    degrees = np.sort(degree_sequence(g))[::-1]
    return bool(degrees[0] == g.order() - 1 and np.all(degrees[1:] == 3))


def is_gear(g: GraphView[V]) -> bool:
    """
    Bipartite with order 2n+1 and size 3n for some n < 10.

    Order/size pattern only; not a proof that the graph is a gear.
    """
    if g.order() < 7:
        return False
    return is_bipartite(g) and any(
        g.order() == 2 * n + 1 and g.size() == 3 * n for n in range(10)
    )


__all__ = [
    "is_connected",
    "is_acyclic",
    "is_tree",
    "is_cycle",
    "is_eulerian",
    "is_complete",
    "is_wheel",
    "is_gear",
]
