import json

import pytest

from wayfind.domain.errors import LoadError, NotFoundError
from wayfind.runtime.resources import (
    load_bundled_graph,
    load_graph,
    load_graph_from_path,
    parse_graph,
)

DOC = {
    "nodes": {"a": {"x": 1, "y": 2}, "b": {"x": 3.5, "y": 4}},
    "edges": [{"from": "a", "to": "b", "dist": 7, "access": True}],
}


def test_load_from_mapping():
    g = load_graph(DOC)
    assert g.node("b").x == 3.5
    e = g.edges[0]
    assert (e.start, e.end, e.cost, e.accessible) == ("a", "b", 7.0, True)


def test_load_from_json_text_and_path(tmp_path):
    assert len(load_graph(json.dumps(DOC))) == 2
    p = tmp_path / "g.json"
    p.write_text(json.dumps(DOC), encoding="utf-8")
    assert len(load_graph(p).edges) == 1
    assert len(load_graph(str(p)).edges) == 1


def test_missing_edges_field_means_no_edges():
    g = load_graph({"nodes": {"a": {"x": 0, "y": 0}}})
    assert g.edges == ()


@pytest.mark.parametrize(
    "doc,match",
    [
        ({"edges": []}, "invalid graph document"),
        ({"nodes": {"a": {"x": 0}}}, "invalid graph document"),
        ({"nodes": {"a": {"x": 0, "y": 0}}, "extra": 1}, "invalid graph document"),
        (
            {"nodes": {"a": {"x": 0, "y": 0}}, "edges": [{"from": "a", "to": "z", "dist": 1, "access": True}]},
            "unknown node 'z'",
        ),
        (
            {"nodes": {"a": {"x": 0, "y": 0}}, "edges": [{"from": "a", "to": "a", "dist": -1, "access": True}]},
            "invalid graph document",
        ),
        (
            {"nodes": {"a": {"x": 0, "y": 0}}, "edges": [{"from": "a", "to": "a", "dist": 1, "access": "yes"}]},
            "invalid graph document",
        ),
        (
            {"nodes": {"a": {"x": 0, "y": 0}}, "edges": [{"from": "a", "to": "a", "dist": "5", "access": True}]},
            "invalid graph document",
        ),
        (
            {"nodes": {"a": {"x": 0, "y": 0}}, "edges": [{"from": "a", "to": "a", "dist": True, "access": True}]},
            "invalid graph document",
        ),
        ({"nodes": {"a": {"x": "10", "y": 0}}}, "invalid graph document"),
        ({"nodes": {"a": {"x": 0, "y": False}}}, "invalid graph document"),
    ],
)
def test_malformed_documents_raise_load_error(doc, match):
    with pytest.raises(LoadError, match=match):
        load_graph(doc)


def test_non_object_document():
    with pytest.raises(LoadError, match="must be an object"):
        parse_graph([1, 2, 3])


def test_missing_file_and_bad_json(tmp_path):
    with pytest.raises(LoadError, match="not found"):
        load_graph(tmp_path / "nope.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoadError, match="malformed JSON"):
        load_graph(bad)
    with pytest.raises(LoadError, match="malformed JSON"):
        load_graph("{not json")


def test_load_error_chains_the_cause():
    with pytest.raises(LoadError) as ei:
        load_graph({"nodes": 3})
    assert ei.value.__cause__ is not None


def test_path_loads_are_cached_until_cleared(tmp_path):
    p = tmp_path / "g.json"
    p.write_text(json.dumps(DOC), encoding="utf-8")
    first = load_graph(p)
    p.write_text(json.dumps({"nodes": {"a": {"x": 0, "y": 0}}}), encoding="utf-8")
    assert load_graph(p) is first
    load_graph_from_path.cache_clear()
    assert len(load_graph(p)) == 1


def test_unsupported_format():
    with pytest.raises(LoadError, match="Unsupported"):
        load_graph_from_path("whatever.graphml", "graphml")


def test_bundled_station_graph():
    g = load_bundled_graph("station")
    assert {"entry", "security", "ramp", "lift_p1", "p1_top", "toilet", "medical"} <= set(g.nodes)
    assert load_bundled_graph("station") is g  # loaded once
    with pytest.raises(NotFoundError):
        load_bundled_graph("airport")
