import heapq
import math
from abc import ABC, abstractmethod

from wayfind.app.protocols import NeighborResolver, Router
from wayfind.domain.entities.route import Route
from wayfind.domain.graph import Graph
from wayfind.domain.mechanics.mechanics_neighbors import ScanNeighborResolver
from wayfind.search.hooks import NoopHooks, SearchHooks

# node_id -> (predecessor id, cost of the edge used to reach node_id)
Via = dict[str, tuple[str, float]]


class DijkstraRouter(Router, ABC):
    """
    Single-source Dijkstra stopping at the target.
    The unsettled node with the smallest (distance, id) is settled next, so ties
    resolve in lexicographic id order and repeated queries return the same Route.
    Every call builds its own distance and predecessor tables.
    """

    def __init__(
        self, neighbors: NeighborResolver | None = None, hooks: SearchHooks | None = None
    ):
        self.neighbors = neighbors or ScanNeighborResolver()
        self.hooks = hooks or NoopHooks()

    def shortest_path(self, graph: Graph, start: str, end: str, accessible: bool = False) -> Route:
        graph.require(start, end)
        if start == end:
            return Route((graph.node(start),), 0.0, ())
        dist, via = self._search(graph, start, end, accessible)
        return _reconstruct(graph, dist, via, start, end)

    def distance(self, graph: Graph, start: str, end: str, accessible: bool = False) -> float:
        return self.shortest_path(graph, start, end, accessible).cost

    def _relax(self, graph, u, d, accessible, dist, via) -> list[tuple[str, float]]:
        """Record every strict improvement reachable from u and return them."""
        improved = []
        for nb in self.neighbors.neighbors(graph, u):
            if accessible and not nb.accessible:
                continue
            cand = d + nb.cost
            if cand < dist.get(nb.id, math.inf):
                dist[nb.id] = cand
                via[nb.id] = (u, nb.cost)
                improved.append((nb.id, cand))
        return improved

    @abstractmethod
    def _search(self, graph: Graph, start: str, end: str, accessible: bool) -> tuple[dict, Via]:
        """Fill the distance and predecessor tables until end settles or nothing is reachable."""


class LinearDijkstraRouter(DijkstraRouter):
    """O(V^2): rescans the whole frontier for its minimum on every step."""

    def _search(self, graph, start, end, accessible):
        dist = {nid: math.inf for nid in graph.nodes}
        dist[start] = 0.0
        via: Via = {}
        frontier = set(graph.nodes)
        while frontier:
            u = min(frontier, key=lambda n: (dist[n], n))
            frontier.remove(u)
            d = dist[u]
            if d == math.inf:
                break  # everything left is unreachable
            self.hooks.settle(u, distance=d)
            if u == end:
                break
            self._relax(graph, u, d, accessible, dist, via)
        return dist, via


class HeapDijkstraRouter(DijkstraRouter):
    """
    O((V+E) log V) with a binary heap of (distance, id) entries.
    Stale entries are skipped on pop; settle order matches LinearDijkstraRouter.
    """

    def _search(self, graph, start, end, accessible):
        dist = {start: 0.0}
        via: Via = {}
        settled: set[str] = set()
        heap = [(0.0, start)]
        while heap:
            d, u = heapq.heappop(heap)
            if u in settled or d > dist[u]:
                continue
            settled.add(u)
            self.hooks.settle(u, distance=d)
            if u == end:
                break
            for v, dv in self._relax(graph, u, d, accessible, dist, via):
                heapq.heappush(heap, (dv, v))
        return dist, via


def _reconstruct(graph: Graph, dist: dict, via: Via, start: str, end: str) -> Route:
    if end not in via:
        return Route.not_found()
    ids, legs = [end], []
    while ids[-1] != start:
        prev, cost = via[ids[-1]]
        ids.append(prev)
        legs.append(cost)
    ids.reverse()
    legs.reverse()
    return Route(tuple(graph.node(n) for n in ids), dist[end], tuple(legs))
