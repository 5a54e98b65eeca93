"""Tests for the declaration adapter and the fluent builder."""

from __future__ import annotations

import pytest

from graph_properties import (
    Graph,
    GraphBuilder,
    GraphDeclaration,
    InvalidDeclarationError,
    build_adjacency,
    graph_from_declaration,
    graphs_from_declarations,
)


class TestBuildAdjacency:
    """Tests for build_adjacency."""

    def test_chains_and_explicit_vertices(self) -> None:
        adj = build_adjacency(
            vertices=list(range(9)),
            edges=[[0, 1, 2], [4, 5, 1], [7, 8], [7, 4, 7]],
            directed=False,
        )
        assert adj == {
            "0": ["1"],
            "1": ["0", "2", "5"],
            "2": ["1"],
            "3": [],
            "4": ["5", "7"],
            "5": ["4", "1"],
            "6": [],
            "7": ["8", "4"],
            "8": ["7"],
        }

    def test_implicit_vertices_created(self) -> None:
        adj = build_adjacency([], [["a", "b"]], directed=False)
        assert adj == {"a": ["b"], "b": ["a"]}

    def test_undirected_self_loop_warns_and_is_dropped(self) -> None:
        with pytest.warns(UserWarning, match="Self-loop"):
            adj = build_adjacency([], [["a", "a"], ["a", "b"]], directed=False)
        assert adj == {"a": ["b"], "b": ["a"]}

    def test_loop_only_vertex_is_kept(self) -> None:
        with pytest.warns(UserWarning):
            adj = build_adjacency([], [["a", "a"]], directed=False)
        assert adj == {"a": []}

    def test_digraph_keeps_loops_and_parallel_arcs(self) -> None:
        adj = build_adjacency([], [["a", "a", "b"], ["a", "b"]], directed=True)
        assert adj == {"a": ["a", "b", "b"], "b": []}

    def test_parallel_edges_collapse(self) -> None:
        adj = build_adjacency([], [["a", "b", "a", "b"]], directed=False)
        assert adj == {"a": ["b"], "b": ["a"]}

    @pytest.mark.parametrize("chain", [[], ["a"], "ab"])
    def test_short_chain_rejected(self, chain) -> None:
        with pytest.raises(InvalidDeclarationError):
            build_adjacency([], [chain], directed=False)

    def test_invalid_declaration_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            build_adjacency([], [["a"]], directed=True)


class TestGraphFromDeclaration:
    """Tests for graph_from_declaration and graphs_from_declarations."""

    def test_single(self) -> None:
        decl = GraphDeclaration(name="tri", directed=False, edges=[["1", "2", "3", "1"]])
        g = graph_from_declaration(decl, 4)
        assert isinstance(g, Graph)
        assert g.id == 4
        assert g.name == "tri"
        assert g.properties.is_cycle

    def test_ids_by_position(self) -> None:
        decls = [
            GraphDeclaration(name="a", edges=[[1, 2]]),
            GraphDeclaration(name="b", directed=True, edges=[[1, 2]]),
        ]
        graphs = graphs_from_declarations(decls, start_id=10)
        assert [g.id for g in graphs] == [10, 11]
        assert [g.directed for g in graphs] == [False, True]


class TestGraphBuilder:
    """Tests for GraphBuilder."""

    def test_fluent_chain(self) -> None:
        g = GraphBuilder("bowtie").add_path("a", "b", "x", "a").add_path("x", "c", "d", "x").build(graph_id=3)
        assert g.id == 3
        assert g.order() == 5
        assert g.size() == 6

    def test_matches_declaration(self) -> None:
        builder = GraphBuilder("p", directed=True).add_vertex("z").add_edge("a", "b")
        decl = builder.declaration()
        assert decl == GraphDeclaration(name="p", directed=True, vertices=["z"], edges=[["a", "b"]])
        assert builder.build() == graph_from_declaration(decl, 0)

    def test_vertices_become_strings(self) -> None:
        g = GraphBuilder().add_edge(1, 2).build()
        assert g.vertices() == ["1", "2"]
