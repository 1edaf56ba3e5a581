import pytest

from wayfind.domain.entities.geography import Edge, Node, Point
from wayfind.domain.graph import Graph
from wayfind.runtime.resources import load_bundled_graph


def make_graph(nodes: dict[str, tuple[float, float]], edges: list[tuple]) -> Graph:
    """edges: (from, to, cost, accessible)"""
    return Graph(
        {nid: Node(nid, Point(x, y)) for nid, (x, y) in nodes.items()},
        [Edge(a, b, float(c), ok) for a, b, c, ok in edges],
    )


@pytest.fixture
def triangle() -> Graph:
    # A-B 5 accessible, B-C 2 stairs, A-C 10 accessible; D is isolated
    return make_graph(
        {"A": (0.0, 0.0), "B": (100.0, 0.0), "C": (100.0, 100.0), "D": (500.0, 500.0)},
        [("A", "B", 5, True), ("B", "C", 2, False), ("A", "C", 10, True)],
    )


@pytest.fixture
def station() -> Graph:
    return load_bundled_graph("station")
