# wayfind/domain/mechanics/mechanics_neighbors.py
from weakref import WeakKeyDictionary

from wayfind.app.protocols import NeighborResolver
from wayfind.domain.entities.geography import Neighbor
from wayfind.domain.graph import Graph


def neighbors_of(graph: Graph, node_id: str) -> list[Neighbor]:
    """
    Scan every edge once. An edge leaving node_id yields its far end, an edge
    arriving at node_id yields its near end. The elif keeps a self-loop to a
    single entry.
    """
    out = []
    for e in graph.edges:
        if e.start == node_id:
            out.append(Neighbor(e.end, e.cost, e.accessible))
        elif e.end == node_id:
            out.append(Neighbor(e.start, e.cost, e.accessible))
    return out


def build_adjacency(graph: Graph) -> dict[str, tuple[Neighbor, ...]]:
    """Same entries as neighbors_of, for every node, in one pass over the edges."""
    adj: dict[str, list[Neighbor]] = {nid: [] for nid in graph.nodes}
    for e in graph.edges:
        adj[e.start].append(Neighbor(e.end, e.cost, e.accessible))
        if not e.is_loop:
            adj[e.end].append(Neighbor(e.start, e.cost, e.accessible))
    return {nid: tuple(lst) for nid, lst in adj.items()}


class ScanNeighborResolver(NeighborResolver):
    def neighbors(self, graph: Graph, node_id: str) -> list[Neighbor]:
        graph.require(node_id)
        return neighbors_of(graph, node_id)


class IndexedNeighborResolver(NeighborResolver):
    """Builds the adjacency index the first time a graph is seen, then only reads it."""

    def __init__(self):
        self._index: WeakKeyDictionary[Graph, dict[str, tuple[Neighbor, ...]]] = (
            WeakKeyDictionary()
        )

    def index(self, graph: Graph) -> dict[str, tuple[Neighbor, ...]]:
        adj = self._index.get(graph)
        if adj is None:
            adj = self._index[graph] = build_adjacency(graph)
        return adj

    def neighbors(self, graph: Graph, node_id: str) -> list[Neighbor]:
        graph.require(node_id)
        return list(self.index(graph)[node_id])
