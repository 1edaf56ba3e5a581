import math
from dataclasses import dataclass, field

from wayfind.domain.entities.geography import Node, Point, Segment


@dataclass(frozen=True)
class Route:
    """
    Ordered nodes from source to destination.
    Empty => no route under the requested mode; one node => start == end.
    """

    nodes: tuple[Node, ...] = ()
    cost: float = math.inf
    leg_costs: tuple[float, ...] = field(default=())  # len(nodes) - 1 entries

    @classmethod
    def not_found(cls) -> "Route":
        return cls()

    @property
    def found(self) -> bool:
        return bool(self.nodes)

    @property
    def drawable(self) -> bool:
        return len(self.nodes) >= 2

    @property
    def ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    @property
    def points(self) -> list[Point]:
        return [n.point for n in self.nodes]

    def segments(self) -> list[Segment]:
        return [
            Segment(a.point, b.point, c)
            for a, b, c in zip(self.nodes, self.nodes[1:], self.leg_costs)
        ]

    def __len__(self) -> int:
        return len(self.nodes)
