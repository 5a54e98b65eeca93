"""
Random graph generation.

Produces undirected graphs in the style of Erdős-Rényi: every ordered
pair of distinct vertices is joined with probability ``p``, after which
the adjacency is mirrored and deduplicated. Useful as test input and
for demonstrating the analyses on unknown structure.
"""

from __future__ import annotations

import random
from typing import Callable, Hashable, Optional, TypeVar

from .graph import Graph
from .validation import GraphError

T = TypeVar("T", bound=Hashable)


def random_graph(
    n: int,
    p: float,
    graph_id: int = 0,
    vertex_id: Callable[[int], T] = str,  # type: ignore[assignment]
    *,
    name: str = "random",
    seed: Optional[int] = None,
) -> Graph[T]:
    """
    Generate a random undirected graph.

    Args:
        n: Order of the graph
        p: Probability that an ordered pair (u, v) produces the edge {u, v}
        graph_id: Id of the generated graph
        vertex_id: Maps 0..n-1 to unique vertex identifiers
        name: Display name
        seed: Random seed for reproducible graphs

    Returns:
        Loop-free undirected Graph without parallel edges

    Raises:
        GraphError: If n < 0 or p is not in [0, 1]
    """
    if n < 0:
        raise GraphError(f"n must be >= 0, got {n}")
    if p < 0 or p > 1:
        raise GraphError(f"p must be in [0, 1], got {p}")

    rng = random.Random(seed)
    ids = [vertex_id(i) for i in range(n)]
    adj: dict[T, list[T]] = {u: [] for u in ids}

    for u in ids:
        for v in ids:
            if u != v and rng.random() < p:
                adj[u].append(v)
                adj[v].append(u)

    adj = {u: list(dict.fromkeys(vs)) for u, vs in adj.items()}
    return Graph(graph_id, name, False, adj)


__all__ = ["random_graph"]
