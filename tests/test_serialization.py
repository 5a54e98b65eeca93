"""Tests for plain-data and JSON serialization."""

from __future__ import annotations

import json

import pytest

from graph_properties import (
    Graph,
    GraphBuilder,
    MalformedGraphDataError,
    from_dict,
    from_json,
    to_dict,
    to_json,
)


def _make_triangle() -> Graph[str]:
    return GraphBuilder("triangle").add_path("1", "2", "3", "1").build(graph_id=2)


class TestToDict:
    """Tests for the serialized shape."""

    def test_shape(self) -> None:
        assert to_dict(_make_triangle()) == {
            "id": 2,
            "name": "triangle",
            "directed": False,
            "adjacencyLists": [["1", ["2", "3"]], ["2", ["1", "3"]], ["3", ["2", "1"]]],
        }

    def test_json_is_plain(self) -> None:
        data = json.loads(to_json(_make_triangle()))
        assert data["name"] == "triangle"

    def test_json_kwargs(self) -> None:
        assert "\n" in to_json(_make_triangle(), indent=2)


class TestRoundTrip:
    """Graphs survive serialization unchanged."""

    def test_undirected(self) -> None:
        g = _make_triangle()
        assert from_json(to_json(g)) == g

    def test_digraph_with_loops(self) -> None:
        g = Graph(5, "loops", True, {"a": ["a", "b", "b"], "b": [], "c": ["a"]})
        h = from_dict(to_dict(g))
        assert h == g
        assert h.vertices() == ["a", "b", "c"]

    def test_integer_vertices(self) -> None:
        g = Graph(0, "", False, {1: [2], 2: [1]})
        assert from_json(to_json(g)) == g

    def test_properties_recomputed(self) -> None:
        g = _make_triangle()
        assert from_json(to_json(g)).properties == g.properties


class TestMalformed:
    """Malformed data raises MalformedGraphDataError."""

    def _valid(self) -> dict:
        return to_dict(_make_triangle())

    def test_not_an_object(self) -> None:
        with pytest.raises(MalformedGraphDataError):
            from_dict([1, 2])

    @pytest.mark.parametrize("field", ["id", "name", "directed", "adjacencyLists"])
    def test_missing_field(self, field: str) -> None:
        data = self._valid()
        del data[field]
        with pytest.raises(MalformedGraphDataError, match=field):
            from_dict(data)

    @pytest.mark.parametrize(
        "field,value",
        [("id", "0"), ("id", True), ("name", 3), ("directed", "no"), ("adjacencyLists", {})],
    )
    def test_mistyped_field(self, field: str, value) -> None:
        data = self._valid()
        data[field] = value
        with pytest.raises(MalformedGraphDataError):
            from_dict(data)

    def test_entry_not_a_pair(self) -> None:
        data = self._valid()
        data["adjacencyLists"].append(["4"])
        with pytest.raises(MalformedGraphDataError, match="pair"):
            from_dict(data)

    def test_neighbours_not_a_list(self) -> None:
        data = self._valid()
        data["adjacencyLists"][0][1] = "23"
        with pytest.raises(MalformedGraphDataError, match="neighbours"):
            from_dict(data)

    def test_unhashable_vertex(self) -> None:
        data = self._valid()
        data["adjacencyLists"][0][0] = ["1"]
        with pytest.raises(MalformedGraphDataError, match="invalid vertex"):
            from_dict(data)

    def test_phantom_neighbour(self) -> None:
        data = self._valid()
        data["adjacencyLists"][0][1].append("9")
        with pytest.raises(MalformedGraphDataError, match="'9'"):
            from_dict(data)

    def test_vertex_listed_twice(self) -> None:
        """A repeated vertex would drop the arcs of its first entry."""
        data = {
            "id": 0,
            "name": "",
            "directed": True,
            "adjacencyLists": [["a", ["b"]], ["b", []], ["a", []]],
        }
        with pytest.raises(MalformedGraphDataError, match="listed twice"):
            from_dict(data)

    def test_invalid_json(self) -> None:
        with pytest.raises(MalformedGraphDataError):
            from_json("{not json")
