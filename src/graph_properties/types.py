"""
Common types for graph property analysis.

This module provides the fundamental types shared by all algorithms:
- Colour: DFS vertex marking (unvisited / in progress / finished)
- TraceType: Diagnostic event kinds
- TraceEvent: Payload passed to trace callbacks
- GraphView: Read-only capability interface accepted by every algorithm
"""

from __future__ import annotations

from enum import IntEnum
from typing import (
    Any,
    Callable,
    Hashable,
    Optional,
    Protocol,
    Sequence,
    TypedDict,
    TypeVar,
    runtime_checkable,
)

V = TypeVar("V", bound=Hashable)


class Colour(IntEnum):
    """
    DFS vertex marking.

    The colour of an edge's target at exploration time classifies the edge:
    - white: tree edge (target not yet discovered)
    - grey: back edge (target is on the current DFS branch)
    - black: forward or cross edge (target already finished)
    """

    white = 0
    grey = 1
    black = 2


class TraceType(IntEnum):
    """Diagnostic events emitted by the analyses."""

    cutvertex = 0
    component = 1
    colour = 2
    lowpoints = 3
    rejected = 4
    conflict = 5


class TraceEvent(TypedDict, total=False):
    """Event payload passed to trace callbacks."""

    type: TraceType
    vertex: Optional[Any]
    detail: Any


TraceCallback = Callable[[TraceEvent], None]

# An edge slot (u, k) addresses the k-th neighbour of u.
EdgeSlot = tuple[Any, int]


@runtime_checkable
class GraphView(Protocol[V]):
    """
    Read-only access to a finite graph.

    Algorithms only depend on this interface, so alternative backing
    representations can be analysed without inheriting from ``Graph``.
    """

    @property
    def directed(self) -> bool: ...

    def deg(self, u: V) -> int: ...

    def adj_at(self, u: V, k: int) -> V: ...

    def neighbours(self, u: V) -> Sequence[V]: ...

    def edge_index(self, u: V, v: V) -> int: ...

    def vertices(self) -> list[V]: ...

    def edges(self) -> list[tuple[V, V]]: ...

    def order(self) -> int: ...

    def size(self) -> int: ...


def emit(trace: Optional[TraceCallback], event_type: TraceType, vertex: Any = None, detail: Any = None) -> None:
    """Send an event to ``trace`` if one is installed."""
    if trace is None:
        return
    trace(TraceEvent(type=event_type, vertex=vertex, detail=detail))


__all__ = [
    "Colour",
    "TraceType",
    "TraceEvent",
    "TraceCallback",
    "EdgeSlot",
    "GraphView",
    "emit",
]
