# wayfind/domain/mechanics/mechanics_core.py
import time
from dataclasses import dataclass, field

from wayfind.app.protocols import FacilityLookup, Router
from wayfind.domain.entities.geography import Node
from wayfind.domain.entities.route import Route
from wayfind.domain.errors import WayfindError
from wayfind.domain.graph import Graph
from wayfind.search.hooks import NoopHooks, SearchHooks


@dataclass
class Wayfinder:
    """
    Convenience façade over the loaded graph, the router and the facility directory.
    The graph is shared read-only; the accessibility mode travels with each call.
    """

    graph: Graph
    router: Router
    facilities: FacilityLookup
    hooks: SearchHooks = field(default_factory=NoopHooks)

    def route(self, source: str, dest: str, accessible: bool = False) -> Route:
        self.hooks.query_start(source=source, dest=dest, accessible=accessible)
        t0 = time.perf_counter()
        try:
            route = self.router.shortest_path(self.graph, source, dest, accessible)
        except WayfindError as exc:
            self.hooks.error(exc=exc, source=source, dest=dest, accessible=accessible)
            raise
        self.hooks.query_end(
            source=source,
            dest=dest,
            accessible=accessible,
            route=route,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return route

    def distance(self, source: str, dest: str, accessible: bool = False) -> float:
        return self.route(source, dest, accessible).cost

    def facility(self, category: str) -> Node:
        try:
            node = self.facilities.lookup(self.graph, category)
        except WayfindError as exc:
            self.hooks.error(exc=exc, category=category)
            raise
        self.hooks.facility(category=category, node_id=node.id)
        return node

    def node(self, node_id: str) -> Node:
        return self.graph.node(node_id)
