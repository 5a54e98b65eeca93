"""
Depth-first search engine (Hopcroft, Tarjan).

Every analysis in this package is a set of hooks plugged into ``dfs``.
Traversal order is fixed by adjacency order, so discovery numbering and
low-points are deterministic.

The engine keeps an explicit stack of frames instead of recursing, so deep
graphs do not hit the interpreter recursion limit. Hooks fire in exactly
the order a recursive implementation would fire them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, TypeVar

from .types import Colour, GraphView
from .validation import UnknownVertexError

V = TypeVar("V", bound=Hashable)

VertexHook = Callable[[Any, Optional[Any]], None]
EdgeHook = Callable[[Any, int, Colour, Optional[Any]], None]


@dataclass
class DfsHooks:
    """
    Callbacks invoked during traversal. All are optional.

    Attributes:
        pre_visit: (u, parent) on first discovery of u, before u turns grey
        pre_explore: (u, k, colour, parent) before edge slot k of u is followed;
            colour is the colour of adj_at(u, k) at that moment
        post_explore: (u, k, colour, parent) after the recursive visit for slot k
            returns, or right away when the slot does not recurse
        post_visit: (u, parent) after all slots of u, before u turns black
    """

    pre_visit: Optional[VertexHook] = None
    pre_explore: Optional[EdgeHook] = None
    post_explore: Optional[EdgeHook] = None
    post_visit: Optional[VertexHook] = None


class _Frame:
    __slots__ = ("vertex", "parent", "index", "pending")

    def __init__(self, vertex: Any, parent: Any) -> None:
        self.vertex = vertex
        self.parent = parent
        self.index = 0
        # Colour observed for the slot whose subtree is being visited
        self.pending: Optional[Colour] = None


def dfs(
    g: GraphView[V],
    hooks: Optional[DfsHooks] = None,
    *,
    root: Optional[V] = None,
) -> dict[V, Optional[V]]:
    """
    Run a depth-first search over the graph.

    Vertices are tried as roots in ``vertices()`` order; a vertex already
    reached from an earlier root is skipped, so the result holds one
    predecessor tree per component.

    Args:
        g: Input graph
        hooks: Callbacks to run at the discovery steps
        root: If given, only the tree grown from this vertex is traversed

    Returns:
        Predecessor map. Roots map to None. When ``root`` is given, only the
        reached vertices are present.

    Raises:
        UnknownVertexError: If ``root`` is not a vertex of g

    Example:
        >>> pred = dfs(g)
        >>> roots = [u for u, p in pred.items() if p is None]
    """
    if hooks is None:
        hooks = DfsHooks()

    colour: dict[V, Colour] = {u: Colour.white for u in g.vertices()}

    if root is not None:
        if not _is_vertex(colour, root):
            raise UnknownVertexError(root)
        predecessor: dict[V, Optional[V]] = {root: None}
        visit_dfs(g, root, colour, predecessor, hooks)
        return predecessor

    predecessor = {u: None for u in colour}
    for u in g.vertices():
        if colour[u] is not Colour.white:
            continue
        visit_dfs(g, u, colour, predecessor, hooks)
    return predecessor


def _is_vertex(colour: dict[Any, Colour], u: Any) -> bool:
    try:
        return u in colour
    except TypeError:
        return False


def visit_dfs(
    g: GraphView[V],
    u: V,
    colour: dict[V, Colour],
    predecessor: dict[V, Optional[V]],
    hooks: DfsHooks,
) -> None:
    """Visit every vertex reachable from u that is still white."""
    pre_visit = hooks.pre_visit
    pre_explore = hooks.pre_explore
    post_explore = hooks.post_explore
    post_visit = hooks.post_visit

    if pre_visit is not None:
        pre_visit(u, predecessor.get(u))
    colour[u] = Colour.grey
    stack = [_Frame(u, predecessor.get(u))]

    while stack:
        frame = stack[-1]
        w = frame.vertex

        if frame.pending is not None:
            # Returned from the subtree of slot frame.index
            if post_explore is not None:
                post_explore(w, frame.index, frame.pending, frame.parent)
            frame.pending = None
            frame.index += 1
            continue

        if frame.index >= g.deg(w):
            if post_visit is not None:
                post_visit(w, frame.parent)
            colour[w] = Colour.black
            stack.pop()
            continue

        k = frame.index
        v = g.adj_at(w, k)
        c = colour.get(v)
        if c is None:
            raise UnknownVertexError(v)

        if pre_explore is not None:
            pre_explore(w, k, c, frame.parent)

        if c is Colour.white:
            predecessor[v] = w
            frame.pending = c
            if pre_visit is not None:
                pre_visit(v, w)
            colour[v] = Colour.grey
            stack.append(_Frame(v, w))
        else:
            if post_explore is not None:
                post_explore(w, k, c, frame.parent)
            frame.index += 1


def spanning_tree(g: GraphView[V], root: V) -> list[tuple[V, V]]:
    """
    Tree edges of the DFS tree grown from ``root``.

    Args:
        g: Input graph
        root: Start vertex

    Returns:
        (parent, child) pairs in discovery order.
    """
    tree: list[tuple[V, V]] = []

    def on_discover(u: V, parent: Optional[V]) -> None:
        if parent is not None:
            tree.append((parent, u))

    dfs(g, DfsHooks(pre_visit=on_discover), root=root)
    return tree


def connected_components(g: GraphView[V]) -> list[list[V]]:
    """
    Vertices grouped by DFS tree, one list per root, in discovery order.

    For digraphs the trees depend on vertex order and need not be the
    weakly connected components.
    """
    components: list[list[V]] = []

    def on_discover(u: V, parent: Optional[V]) -> None:
        if parent is None:
            components.append([])
        components[-1].append(u)

    dfs(g, DfsHooks(pre_visit=on_discover))
    return components


__all__ = [
    "DfsHooks",
    "dfs",
    "visit_dfs",
    "spanning_tree",
    "connected_components",
]
