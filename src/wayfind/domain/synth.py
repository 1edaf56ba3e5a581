# wayfind/domain/synth.py
import numpy as np

from wayfind.domain.entities.geography import Edge, Node, Point
from wayfind.domain.graph import Graph


def random_graph(
    rng: np.random.Generator,
    n_nodes: int,
    n_edges: int,
    *,
    p_accessible: float = 0.7,
    canvas: tuple[float, float] = (1000.0, 600.0),
    max_cost: float = 100.0,
    integer_costs: bool = True,
) -> Graph:
    """
    Uniform random graph on the canvas; endpoints may coincide (self-loops) and
    repeat (parallel edges). Integer costs make tie-breaking observable.
    """
    if n_nodes < 1:
        raise ValueError("n_nodes must be >= 1")
    w, h = canvas
    ids = [f"n{i:03d}" for i in range(n_nodes)]
    xs = rng.uniform(0.0, w, size=n_nodes)
    ys = rng.uniform(0.0, h, size=n_nodes)
    nodes = [Node(nid, Point(float(x), float(y))) for nid, x, y in zip(ids, xs, ys)]

    ends = rng.integers(0, n_nodes, size=(n_edges, 2))
    if integer_costs:
        costs = rng.integers(0, int(max_cost) + 1, size=n_edges).astype(float)
    else:
        costs = rng.uniform(0.0, max_cost, size=n_edges)
    access = rng.random(n_edges) < p_accessible
    edges = [
        Edge(ids[int(a)], ids[int(b)], float(c), bool(ok))
        for (a, b), c, ok in zip(ends, costs, access)
    ]
    return Graph(nodes, edges)
