# wayfind/app/build.py
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from wayfind.app.presenter import Overlay, RoutePresenter
from wayfind.app.protocols import Sink
from wayfind.config.models import WayfindModel
from wayfind.domain.graph import Graph
from wayfind.domain.mechanics.mechanics_core import Wayfinder
from wayfind.domain.mechanics.mechanics_factory import build_wayfinder
from wayfind.io.query_logging import QueryLogging  # JSON logs
from wayfind.io.recorder import JsonlSink, Recorder
from wayfind.search.hooks import NoopHooks


@dataclass
class App:
    wayfinder: Wayfinder
    presenter: RoutePresenter
    recorder: Recorder

    def find_route(self, source: str, dest: str, accessible: bool = False) -> Overlay:
        """Same-location requests are answered here and never reach the engine."""
        if source == dest:
            # still reject unknown ids before answering
            self.wayfinder.graph.require(source)
            overlay = self.presenter.same_location(accessible)
        else:
            route = self.wayfinder.route(source, dest, accessible)
            overlay = self.presenter.present(route, accessible)
        self.recorder.emit(overlay)
        return overlay

    def highlight_facility(self, category: str) -> Overlay:
        node = self.wayfinder.facility(category)
        overlay = self.presenter.highlight(category, node)
        self.recorder.emit(overlay)
        return overlay


def build(
    cfg: WayfindModel | Mapping | None = None,
    *,
    graph: Graph | None = None,
    sinks: Sequence[Sink] | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = WayfindModel()
    else:
        model = cfg if isinstance(cfg, WayfindModel) else WayfindModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        QueryLogging(run_id=model.name, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Graph, router, facilities (graph is loaded exactly once, here)
    wayfinder = build_wayfinder(model, graph=graph, hooks=hooks)

    # 3) Output
    recorder = Recorder(*(sinks if sinks is not None else [JsonlSink()]))
    presenter = RoutePresenter(model.canvas)
    return App(wayfinder=wayfinder, presenter=presenter, recorder=recorder)
