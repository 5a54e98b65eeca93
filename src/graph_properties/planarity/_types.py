"""Internal data structures for LR-planarity testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..types import EdgeSlot

# Back edge slot, or None for an empty interval end
Edge = Optional[EdgeSlot]


@dataclass
class LowPoints:
    """
    DFS orientation data for the LR test.

    Only oriented slots are recorded: tree edges point from parent to child,
    back edges from descendant to ancestor. The slot leading back to the
    parent, and slots reaching an already finished descendant, are the
    other end of an oriented edge and carry no entry.

    Attributes:
        height: DFS tree depth of every vertex, 0 at each root
        parent_slot: For every non-root vertex, the tree slot that discovered it
        lowpt: Lowest height reachable through the slot and one back edge
        lowpt2: Second lowest such height (height of the source if none)
        nesting_depth: 2*lowpt, plus 1 when the slot is chordal (lowpt2 < height)
        roots: DFS roots in traversal order
    """

    height: dict[Any, int] = field(default_factory=dict)
    parent_slot: dict[Any, EdgeSlot] = field(default_factory=dict)
    lowpt: dict[EdgeSlot, int] = field(default_factory=dict)
    lowpt2: dict[EdgeSlot, int] = field(default_factory=dict)
    nesting_depth: dict[EdgeSlot, int] = field(default_factory=dict)
    roots: list[Any] = field(default_factory=list)

    def is_tree_slot(self, slot: EdgeSlot, target: Any) -> bool:
        return self.parent_slot.get(target) == slot

    def ordered_slots(self, u: Any, degree: int) -> list[EdgeSlot]:
        """Oriented slots of u sorted by nesting depth (stable)."""
        slots = [(u, k) for k in range(degree) if (u, k) in self.nesting_depth]
        return sorted(slots, key=self.nesting_depth.__getitem__)


@dataclass
class PlanarityResult:
    """Result of a planarity test.

    Attributes:
        is_planar: Whether the graph is planar.
        reason: "trivial", "edge-bound", "lr-conflict" or "lr-ok".
        lowpoints: Orientation data, None when rejected by the edge bound.
    """

    is_planar: bool
    reason: str
    lowpoints: Optional[LowPoints] = None


@dataclass(eq=False)
class Interval:
    """An interval of back edges in the LR-planarity algorithm.

    low and high are back edge slots. None means the interval is empty.
    """

    low: Edge = None
    high: Edge = None

    def empty(self) -> bool:
        return self.low is None and self.high is None

    def copy(self) -> Interval:
        return Interval(low=self.low, high=self.high)


@dataclass(eq=False)
class ConflictPair:
    """A left/right interval pair on the constraint stack.

    Stack entries are compared by identity.
    """

    left: Interval = field(default_factory=Interval)
    right: Interval = field(default_factory=Interval)

    def swap(self) -> None:
        self.left, self.right = self.right, self.left


class SimpleView:
    """
    Loop-free, duplicate-free, symmetric view of an undirected graph.

    Slot numbers refer to this view, not to the graph it was built from.
    """

    __slots__ = ("_adj",)

    directed = False

    def __init__(self, adjacency: dict[Any, list[Any]]) -> None:
        self._adj = adjacency

    def deg(self, u: Any) -> int:
        return len(self._adj[u])

    def adj_at(self, u: Any, k: int) -> Any:
        return self._adj[u][k]

    def neighbours(self, u: Any) -> list[Any]:
        return self._adj[u]

    def edge_index(self, u: Any, v: Any) -> int:
        return self._adj[u].index(v)

    def vertices(self) -> list[Any]:
        return list(self._adj)

    def edges(self) -> list[tuple[Any, Any]]:
        return [(u, v) for u, vs in self._adj.items() for v in vs]

    def order(self) -> int:
        return len(self._adj)

    def size(self) -> int:
        return sum(len(vs) for vs in self._adj.values()) // 2
