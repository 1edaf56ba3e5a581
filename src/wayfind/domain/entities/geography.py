from dataclasses import dataclass


# Core geometry types; coordinates live in the virtual canvas (reference 1000x600)
@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Node:
    id: str
    point: Point

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y


@dataclass(frozen=True)
class Edge:
    start: str  # "from" in the graph document
    end: str  # "to"
    cost: float
    accessible: bool = True

    @property
    def is_loop(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class Neighbor:
    id: str
    cost: float
    accessible: bool


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    cost: float
