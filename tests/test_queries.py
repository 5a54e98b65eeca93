"""Tests for the GraphStore query layer."""

from __future__ import annotations

import pytest

from graph_properties import (
    GraphDeclaration,
    GraphStore,
    UnknownGraphError,
    UnknownVertexError,
    graphs_from_declarations,
)


def _make_store() -> GraphStore:
    return GraphStore(
        graphs_from_declarations(
            [
                GraphDeclaration(name="path", edges=[["a", "b", "c"]]),
                GraphDeclaration(name="bowtie", edges=[["a", "b", "x", "a"], ["x", "c", "d", "x"]]),
            ]
        )
    )


class TestGraphStore:
    """Tests for store bookkeeping."""

    def test_lookup(self) -> None:
        store = _make_store()
        assert len(store) == 2
        assert 1 in store
        assert store.get(1).name == "bowtie"
        assert [g.id for g in store] == [0, 1]

    def test_unknown_graph(self) -> None:
        with pytest.raises(UnknownGraphError):
            _make_store().get(5)

    def test_add_replaces(self) -> None:
        store = _make_store()
        replacement = graphs_from_declarations([GraphDeclaration(name="new")])[0]
        store.add(replacement)
        assert store.get(0).name == "new"
        assert len(store) == 2

    def test_remove(self) -> None:
        store = _make_store()
        store.remove(0)
        assert 0 not in store
        with pytest.raises(UnknownGraphError):
            store.remove(0)


class TestQueries:
    """Tests for the per-root queries."""

    def test_spanning_tree(self) -> None:
        assert _make_store().spanning_tree(0, "b") == [("b", "a"), ("b", "c")]

    def test_cutvertices(self) -> None:
        store = _make_store()
        assert store.cutvertices(0, "a") == ["b"]
        assert store.cutvertices(1, "c") == ["x"]

    def test_vertex_colouring(self) -> None:
        colouring = _make_store().vertex_colouring(1, "d")
        assert colouring["d"] == 0
        assert len(set(colouring.values())) == 3

    def test_properties(self) -> None:
        assert _make_store().properties(0).is_tree

    def test_unknown_graph_in_query(self) -> None:
        with pytest.raises(UnknownGraphError):
            _make_store().cutvertices(9, "a")

    def test_unknown_root(self) -> None:
        with pytest.raises(UnknownVertexError):
            _make_store().spanning_tree(0, "z")
