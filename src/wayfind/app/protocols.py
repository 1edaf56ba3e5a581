from typing import Protocol, runtime_checkable

from wayfind.domain.entities.geography import Neighbor, Node
from wayfind.domain.entities.route import Route
from wayfind.domain.graph import Graph


# ------------- Search --------------------
@runtime_checkable
class NeighborResolver(Protocol):
    """
    Responsibilities:
      • List every node one edge away from node_id, in either stored direction.
      • Annotate each entry with the edge cost and accessibility flag.
    A self-loop yields exactly one entry pointing back at node_id.
    """

    def neighbors(self, graph: Graph, node_id: str) -> list[Neighbor]: ...


@runtime_checkable
class Router(Protocol):
    """
    Responsibilities:
      • Compute the minimum-cost route between two node ids.
      • Drop non-accessible edges entirely when accessible=True.
    Unknown ids raise NotFoundError; unreachable targets return an empty Route.
    """

    def shortest_path(
        self, graph: Graph, start: str, end: str, accessible: bool = False
    ) -> Route: ...


@runtime_checkable
class FacilityLookup(Protocol):
    def lookup(self, graph: Graph, category: str) -> Node: ...
    def categories(self) -> list[str]: ...


# ------------- Output --------------------
class Sink(Protocol):
    def write(self, ev) -> None: ...
