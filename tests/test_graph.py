"""Tests for the Graph model and input validation."""

from __future__ import annotations

import pytest

from graph_properties import (
    EdgeNotFoundError,
    Graph,
    GraphError,
    GraphView,
    IndexOutOfRangeError,
    UnknownVertexError,
    random_graph,
    validate_adjacency,
    validate_symmetry,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_triangle() -> Graph[str]:
    return Graph(0, "triangle", False, {"1": ["2", "3"], "2": ["1", "3"], "3": ["1", "2"]})


def _make_digraph() -> Graph[str]:
    """Digraph with a loop and parallel arcs."""
    return Graph(1, "loops", True, {"a": ["a", "b", "b"], "b": []})


# =========================================================================
# Accessors
# =========================================================================


class TestAccessors:
    """Test degree, neighbour and edge lookups."""

    def test_deg(self) -> None:
        g = _make_triangle()
        assert g.deg("1") == 2

    def test_adj_at_follows_adjacency_order(self) -> None:
        g = _make_triangle()
        assert g.adj_at("2", 0) == "1"
        assert g.adj_at("2", 1) == "3"

    def test_neighbours(self) -> None:
        g = _make_triangle()
        assert list(g.neighbours("3")) == ["1", "2"]

    def test_edge_index(self) -> None:
        g = _make_triangle()
        assert g.edge_index("1", "3") == 1

    def test_edge_index_first_match(self) -> None:
        """With parallel arcs the first slot is returned."""
        g = _make_digraph()
        assert g.edge_index("a", "b") == 1

    def test_vertices_keep_insertion_order(self) -> None:
        g = Graph(0, "", False, {"z": [], "a": [], "m": []})
        assert g.vertices() == ["z", "a", "m"]

    def test_contains_and_len(self) -> None:
        g = _make_triangle()
        assert "1" in g
        assert "4" not in g
        assert len(g) == 3

    def test_adjacency_is_a_copy(self) -> None:
        g = _make_triangle()
        adj = g.adjacency
        adj["1"].append("1")
        assert g.deg("1") == 2

    def test_is_graph_view(self) -> None:
        assert isinstance(_make_triangle(), GraphView)


class TestSizes:
    """Test order, size and edge enumeration."""

    def test_undirected_size_counts_edges_once(self) -> None:
        g = _make_triangle()
        assert g.order() == 3
        assert g.size() == 3
        assert len(g.edges()) == 6

    def test_directed_size_counts_arcs(self) -> None:
        g = _make_digraph()
        assert g.size() == 3
        assert g.edges() == [("a", "a"), ("a", "b"), ("a", "b")]

    def test_size_matches_edges_on_random_graphs(self) -> None:
        """Undirected size counts each edge slot pair once."""
        for seed in range(20):
            g = random_graph(12, 0.3, vertex_id=int, seed=seed)
            assert g.size() == len(g.edges()) // 2
            assert validate_symmetry(g.adjacency) == []

    def test_empty_graph(self) -> None:
        g = Graph(0, "", False, {})
        assert g.order() == 0
        assert g.size() == 0
        assert g.edges() == []


# =========================================================================
# Errors
# =========================================================================


class TestErrors:
    """Test that lookups fail with the documented errors."""

    def test_unknown_vertex(self) -> None:
        g = _make_triangle()
        with pytest.raises(UnknownVertexError) as info:
            g.deg("9")
        assert info.value.vertex == "9"

    def test_unhashable_vertex_is_unknown(self) -> None:
        g = _make_triangle()
        with pytest.raises(UnknownVertexError):
            g.neighbours(["1"])  # type: ignore[arg-type]

    def test_index_out_of_range(self) -> None:
        g = _make_triangle()
        with pytest.raises(IndexOutOfRangeError):
            g.adj_at("1", 2)

    def test_negative_index_out_of_range(self) -> None:
        g = _make_triangle()
        with pytest.raises(IndexOutOfRangeError):
            g.adj_at("1", -1)

    def test_index_error_is_also_builtin_index_error(self) -> None:
        g = _make_triangle()
        with pytest.raises(IndexError):
            g.adj_at("1", 5)

    def test_edge_not_found(self) -> None:
        g = Graph(0, "path", False, {"1": ["2"], "2": ["1", "3"], "3": ["2"]})
        with pytest.raises(EdgeNotFoundError):
            g.edge_index("1", "3")

    def test_unhashable_neighbour_rejected(self) -> None:
        with pytest.raises(UnknownVertexError) as info:
            Graph(0, "", True, {"1": [["2"]]})
        assert info.value.vertex == ["2"]

    def test_phantom_neighbour_rejected(self) -> None:
        with pytest.raises(UnknownVertexError) as info:
            Graph(0, "", False, {"1": ["2"]})
        assert info.value.vertex == "2"

    def test_errors_are_graph_errors(self) -> None:
        for cls in (UnknownVertexError, IndexOutOfRangeError, EdgeNotFoundError):
            assert issubclass(cls, GraphError)
            assert issubclass(cls, ValueError)


class TestEquality:
    """Test value equality used by serialization round trips."""

    def test_equal_graphs(self) -> None:
        assert _make_triangle() == _make_triangle()
        assert hash(_make_triangle()) == hash(_make_triangle())

    def test_id_matters(self) -> None:
        a = _make_triangle()
        b = Graph(7, a.name, a.directed, a.adjacency)
        assert a != b

    def test_adjacency_order_matters(self) -> None:
        a = _make_triangle()
        b = Graph(0, "triangle", False, {"1": ["3", "2"], "2": ["1", "3"], "3": ["1", "2"]})
        assert a != b

    def test_repr(self) -> None:
        assert repr(_make_triangle()) == "Graph(id=0, name='triangle', graph, n=3, m=3)"


# =========================================================================
# Validation helpers
# =========================================================================


class TestValidateAdjacency:
    """Tests for validate_adjacency."""

    def test_valid(self) -> None:
        assert validate_adjacency({"1": ["2"], "2": ["1"]}) == []

    def test_non_strict_reports_issues(self) -> None:
        issues = validate_adjacency({"1": ["2", "3"]}, strict=False)
        assert len(issues) == 2
        assert issues[0][0] == "1"

    def test_strict_raises(self) -> None:
        with pytest.raises(UnknownVertexError):
            validate_adjacency({"1": ["2"]})


class TestValidateSymmetry:
    """Tests for validate_symmetry."""

    def test_symmetric(self) -> None:
        assert validate_symmetry({"1": ["2"], "2": ["1"]}) == []

    def test_one_sided_entry(self) -> None:
        issues = validate_symmetry({"1": ["2"], "2": []}, strict=False)
        assert [u for u, _ in issues] == ["1"]

    def test_multiplicity_mismatch_raises(self) -> None:
        with pytest.raises(GraphError, match="Asymmetric adjacency"):
            validate_symmetry({"1": ["2", "2"], "2": ["1"]})
