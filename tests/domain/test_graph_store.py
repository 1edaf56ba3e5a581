import pytest

from conftest import make_graph
from wayfind.domain.entities.geography import Edge, Node, Point
from wayfind.domain.errors import LoadError, NotFoundError
from wayfind.domain.graph import Graph


def test_lookup_and_iteration(triangle: Graph):
    a = triangle.node("A")
    assert a == Node("A", Point(0.0, 0.0))
    assert (a.x, a.y) == (0.0, 0.0)
    assert "C" in triangle and "Z" not in triangle
    assert len(triangle) == 4
    assert [e.start for e in triangle.edges] == ["A", "B", "A"]


def test_unknown_node_raises_not_found(triangle: Graph):
    with pytest.raises(NotFoundError) as ei:
        triangle.node("Z")
    assert ei.value.key == "Z"
    assert isinstance(ei.value, LookupError)


def test_graph_is_read_only(triangle: Graph):
    with pytest.raises(TypeError):
        triangle.nodes["Z"] = Node("Z", Point(1.0, 1.0))
    assert isinstance(triangle.edges, tuple)


def test_dangling_edge_is_a_load_error():
    with pytest.raises(LoadError, match="unknown node 'Q'"):
        make_graph({"A": (0, 0)}, [("A", "Q", 1, True)])


@pytest.mark.parametrize("cost", [-1.0, float("inf"), float("nan")])
def test_invalid_cost_is_a_load_error(cost):
    with pytest.raises(LoadError, match="invalid cost"):
        make_graph({"A": (0, 0), "B": (1, 1)}, [("A", "B", cost, True)])


def test_duplicate_node_ids_rejected():
    n = Node("A", Point(0.0, 0.0))
    with pytest.raises(LoadError, match="duplicate"):
        Graph([n, n], [])


def test_mismatched_key_rejected():
    with pytest.raises(LoadError):
        Graph({"A": Node("B", Point(0.0, 0.0))}, [])


def test_source_edges_are_copied():
    edges = [Edge("A", "A", 1.0)]
    g = make_graph({"A": (0, 0)}, [])
    g2 = Graph(g.nodes, edges)
    edges.append(Edge("A", "A", 2.0))
    assert len(g2.edges) == 1
