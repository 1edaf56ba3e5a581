# wayfind/app/presenter.py
from dataclasses import dataclass, field
from typing import Literal

from wayfind.config.models import CanvasModel
from wayfind.domain.entities.geography import Node, Point
from wayfind.domain.entities.route import Route

Status = Literal["route", "no_route", "same_location", "facility"]

STYLE_NORMAL = "route-normal"
STYLE_ACCESS = "route-access"


@dataclass(frozen=True)
class Overlay:
    """What a map front-end needs to draw one answer: a polyline and a pin."""

    status: Status
    points: str = ""  # SVG polyline "x,y x,y ..."
    style: str = STYLE_NORMAL
    pin: tuple[float, float] | None = None  # percent of canvas width/height
    path: list[str] = field(default_factory=list)
    cost: float | None = None
    message: str = ""


def _num(v: float) -> str:
    v = float(v)
    return str(int(v)) if v.is_integer() else repr(v)


def polyline_points(points: list[Point]) -> str:
    return " ".join(f"{_num(p.x)},{_num(p.y)}" for p in points)


class RoutePresenter:
    """Turns engine results into overlays; never searches."""

    def __init__(self, canvas: CanvasModel | None = None):
        self.canvas = canvas or CanvasModel()

    def pin_percent(self, p: Point) -> tuple[float, float]:
        return (p.x * 100.0 / self.canvas.width, p.y * 100.0 / self.canvas.height)

    def style(self, accessible: bool) -> str:
        return STYLE_ACCESS if accessible else STYLE_NORMAL

    def same_location(self, accessible: bool) -> Overlay:
        return Overlay(
            status="same_location",
            style=self.style(accessible),
            message="You are already at the destination!",
        )

    def present(self, route: Route, accessible: bool) -> Overlay:
        if not route.drawable:
            return Overlay(
                status="no_route",
                style=self.style(accessible),
                message="No route between these locations in the current mode.",
            )
        end = route.nodes[-1]
        return Overlay(
            status="route",
            points=polyline_points(route.points),
            style=self.style(accessible),
            pin=self.pin_percent(end.point),
            path=route.ids,
            cost=route.cost,
        )

    def highlight(self, category: str, node: Node) -> Overlay:
        return Overlay(
            status="facility",
            pin=self.pin_percent(node.point),
            path=[node.id],
            message=category,
        )
