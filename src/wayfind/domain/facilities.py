# wayfind/domain/facilities.py
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from wayfind.domain.entities.geography import Node
from wayfind.domain.errors import NotFoundError
from wayfind.domain.graph import Graph


@dataclass(frozen=True)
class FacilityDirectory:
    """Facility category label -> the single node highlighted for it. No path search."""

    targets: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "targets", MappingProxyType(dict(self.targets)))

    def categories(self) -> list[str]:
        return sorted(self.targets)

    def validate(self, graph: Graph) -> None:
        """Every target must name a node of graph."""
        for category in self.categories():
            graph.require(self.targets[category])

    def lookup(self, graph: Graph, category: str) -> Node:
        try:
            node_id = self.targets[category]
        except KeyError:
            raise NotFoundError("facility", category) from None
        return graph.node(node_id)
