"""
Degree statistics and matrix views of a graph.

Arrays follow ``vertices()`` order so that row i always refers to the
i-th vertex. Used by the degree-pattern classifiers and by rendering
consumers that want a dense view of the graph.
"""

from __future__ import annotations

from typing import Hashable, TypeVar

import numpy as np

from .types import GraphView

V = TypeVar("V", bound=Hashable)


def degree_sequence(g: GraphView[V]) -> np.ndarray:
    """
    Degree of every vertex, in vertex order.

    For digraphs this is the out-degree.

    Returns:
        Integer array of shape (order,)
    """
    return np.fromiter((g.deg(u) for u in g.vertices()), dtype=np.int64, count=g.order())


def max_degree(g: GraphView[V]) -> int:
    """Largest degree, or 0 for the empty graph."""
    degrees = degree_sequence(g)
    if degrees.size == 0:
        return 0
    return int(degrees.max())


def adjacency_matrix(g: GraphView[V]) -> np.ndarray:
    """
    Dense adjacency matrix in vertex order.

    Entry (i, j) counts the slots of vertex i that hold vertex j, so
    parallel arcs of a digraph count more than once.

    Returns:
        Integer array of shape (order, order)
    """
    vertices = g.vertices()
    index = {u: i for i, u in enumerate(vertices)}
    matrix = np.zeros((len(vertices), len(vertices)), dtype=np.int64)
    for u, v in g.edges():
        matrix[index[u], index[v]] += 1
    return matrix


__all__ = [
    "degree_sequence",
    "max_degree",
    "adjacency_matrix",
]
