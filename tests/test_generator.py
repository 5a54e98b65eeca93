"""Tests for random graph generation."""

from __future__ import annotations

import pytest

from graph_properties import GraphError, random_graph, validate_symmetry


class TestRandomGraph:
    """Tests for random_graph."""

    def test_seed_is_reproducible(self) -> None:
        assert random_graph(20, 0.3, seed=7) == random_graph(20, 0.3, seed=7)

    def test_order_and_ids(self) -> None:
        g = random_graph(4, 0.5, graph_id=9, seed=1)
        assert g.id == 9
        assert g.name == "random"
        assert g.vertices() == ["0", "1", "2", "3"]

    def test_custom_vertex_ids(self) -> None:
        g = random_graph(3, 1.0, vertex_id=lambda i: f"v{i}")
        assert g.vertices() == ["v0", "v1", "v2"]

    def test_simple_and_symmetric(self) -> None:
        for seed in range(10):
            g = random_graph(15, 0.4, vertex_id=int, seed=seed)
            assert not g.directed
            assert validate_symmetry(g.adjacency) == []
            for u in g.vertices():
                nbrs = list(g.neighbours(u))
                assert u not in nbrs
                assert len(nbrs) == len(set(nbrs))

    def test_p_zero_has_no_edges(self) -> None:
        assert random_graph(10, 0.0, seed=3).size() == 0

    def test_p_one_is_complete(self) -> None:
        g = random_graph(6, 1.0)
        assert g.size() == 15
        assert g.properties.is_complete

    def test_empty(self) -> None:
        assert random_graph(0, 0.5).order() == 0

    @pytest.mark.parametrize("n,p", [(-1, 0.5), (3, -0.1), (3, 1.5)])
    def test_invalid_arguments(self, n: int, p: float) -> None:
        with pytest.raises(GraphError):
            random_graph(n, p)
