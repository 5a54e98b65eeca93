"""
Phase 2 of the LR-planarity test (de Fraysseix & Rosenstiehl).

Following:
    Brandes, U. (2009). The Left-Right Planarity Test (technical report).

Intervals store back-edge slots. The constraint stack tracks which back
edges must go to the same side of the DFS tree path and which to opposite
sides; a pair that cannot be split into a left and a right interval proves
the graph non-planar.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..types import EdgeSlot, GraphView, TraceCallback, TraceType, emit
from ..validation import AlgorithmInvariantError, must_get
from ._types import ConflictPair, Interval, LowPoints

logger = logging.getLogger(__name__)

# Stack frame types for the iterative traversal
_ENTER = 0  # process ordered slots of v starting at index idx
_INTEGRATE = 1  # integrate the return edges of the slot at idx


class LRPartition:
    """Constraint-stack state of the LR test over one oriented graph."""

    def __init__(
        self,
        g: GraphView[Any],
        lowpoints: LowPoints,
        trace: Optional[TraceCallback] = None,
    ) -> None:
        self.g = g
        self.lp = lowpoints
        self.trace = trace

        self.ordered: dict[Any, list[EdgeSlot]] = {
            u: lowpoints.ordered_slots(u, g.deg(u)) for u in g.vertices()
        }

        self.S: list[ConflictPair] = []
        self.stack_bottom: dict[EdgeSlot, Optional[ConflictPair]] = {}
        self.lowpt_edge: dict[EdgeSlot, EdgeSlot] = {}
        self.ref: dict[EdgeSlot, Optional[EdgeSlot]] = {}

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------

    def _target(self, e: EdgeSlot) -> Any:
        return self.g.adj_at(e[0], e[1])

    def _lowpt(self, e: Optional[EdgeSlot]) -> int:
        return must_get(self.lp.lowpt, e, "low-point")

    def _conflicting(self, iv: Interval, b: EdgeSlot) -> bool:
        return not iv.empty() and self._lowpt(iv.high) > self._lowpt(b)

    def _lowest(self, cp: ConflictPair) -> int:
        """Return the lowest lowpoint of a conflict pair's intervals."""
        if cp.left.empty():
            return self._lowpt(cp.right.low)
        if cp.right.empty():
            return self._lowpt(cp.left.low)
        return min(self._lowpt(cp.left.low), self._lowpt(cp.right.low))

    def _top(self) -> Optional[ConflictPair]:
        return self.S[-1] if self.S else None

    # -------------------------------------------------------------------
    # Testing
    # -------------------------------------------------------------------

    def run(self) -> bool:
        """Test every DFS tree; False on the first unresolvable conflict."""
        for root in self.lp.roots:
            self.S.clear()
            if not self._test_tree(root):
                return False
        return True

    def _test_tree(self, root: Any) -> bool:
        height = self.lp.height
        parent_slot = self.lp.parent_slot
        stack: list[tuple[int, Any, int]] = [(_ENTER, root, 0)]

        while stack:
            ftype, v, idx = stack[-1]
            slots = self.ordered[v]

            if ftype == _ENTER:
                if idx >= len(slots):
                    stack.pop()
                    # Remove back edges returning to parent of v
                    if v in parent_slot:
                        self._remove_back_edges(parent_slot[v])
                    continue

                ei = slots[idx]
                w = self._target(ei)
                self.stack_bottom[ei] = self._top()
                stack[-1] = (_ENTER, v, idx + 1)

                if self.lp.is_tree_slot(ei, w):
                    stack.append((_INTEGRATE, v, idx))
                    stack.append((_ENTER, w, 0))
                else:
                    self.lowpt_edge[ei] = ei
                    self.S.append(ConflictPair(right=Interval(low=ei, high=ei)))
                    stack.append((_INTEGRATE, v, idx))

            else:
                stack.pop()
                ei = slots[idx]
                if self._lowpt(ei) >= height[v]:
                    continue
                e = parent_slot.get(v)
                if e is None:
                    continue
                if idx == 0:
                    self.lowpt_edge[e] = self.lowpt_edge.get(ei, ei)
                elif not self._add_constraints(ei, e):
                    logger.debug("LR conflict while integrating slot %r", ei)
                    emit(self.trace, TraceType.conflict, ei[0], ei)
                    return False

        return True

    def _add_constraints(self, ei: EdgeSlot, e: EdgeSlot) -> bool:
        cp = ConflictPair()

        # Merge return edges of ei into cp.right
        sb = self.stack_bottom.get(ei)
        while True:
            if not self.S:
                raise AlgorithmInvariantError(f"INTERNAL ERROR: constraint stack empty at {ei!r}")
            q = self.S.pop()
            if not q.left.empty():
                q.swap()
            if not q.left.empty():
                return False
            if self._lowpt(q.right.low) > self._lowpt(e):
                if cp.right.empty():
                    cp.right = q.right.copy()
                else:
                    self.ref[cp.right.low] = q.right.high
                cp.right.low = q.right.low
            else:
                # Align with the lowpoint edge of the parent slot
                self.ref[q.right.low] = self.lowpt_edge.get(e, e)
            if self._top() is sb:
                break

        # Merge conflicting return edges of earlier siblings
        while self.S and (
            self._conflicting(self.S[-1].left, ei) or self._conflicting(self.S[-1].right, ei)
        ):
            q = self.S.pop()
            if self._conflicting(q.right, ei):
                q.swap()
            if self._conflicting(q.right, ei):
                return False
            if cp.right.low is not None:
                self.ref[cp.right.low] = q.right.high
            else:
                cp.right.high = q.right.high
            if q.right.low is not None:
                cp.right.low = q.right.low
            if cp.left.empty():
                cp.left = q.left.copy()
            else:
                self.ref[cp.left.low] = q.left.high
            cp.left.low = q.left.low

        if not cp.left.empty() or not cp.right.empty():
            self.S.append(cp)
        return True

    def _remove_back_edges(self, e: EdgeSlot) -> None:
        u = e[0]
        hu = self.lp.height[u]

        # Drop entire conflict pairs whose lowest return is u
        while self.S and self._lowest(self.S[-1]) == hu:
            self.S.pop()

        if self.S:
            pair = self.S.pop()
            # Trim left interval
            while pair.left.high is not None and self._target(pair.left.high) == u:
                pair.left.high = self.ref.get(pair.left.high)
            if pair.left.high is None and pair.left.low is not None:
                self.ref[pair.left.low] = pair.right.low
                pair.left.low = None
            # Trim right interval
            while pair.right.high is not None and self._target(pair.right.high) == u:
                pair.right.high = self.ref.get(pair.right.high)
            if pair.right.high is None and pair.right.low is not None:
                self.ref[pair.right.low] = pair.left.low
                pair.right.low = None
            self.S.append(pair)

        # ref[e] is the highest return edge still on the stack
        if self._lowpt(e) < hu:
            top = self._top() or ConflictPair()
            hl = top.left.high
            hr = top.right.high
            if hl is not None and (hr is None or self._lowpt(hl) > self._lowpt(hr)):
                self.ref[e] = hl
            else:
                self.ref[e] = hr
