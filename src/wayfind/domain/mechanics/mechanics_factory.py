# wayfind/domain/mechanics/mechanics_factory.py

from wayfind.config.models import WayfindModel
from wayfind.domain.facilities import FacilityDirectory
from wayfind.domain.graph import Graph
from wayfind.domain.mechanics.mechanics_core import Wayfinder
from wayfind.runtime.registries import make_neighbors, make_router, resolve_graph
from wayfind.search.hooks import NoopHooks, SearchHooks


def build_wayfinder(
    cfg: WayfindModel,
    *,
    graph: Graph | None = None,
    graphs: dict[str, Graph] | None = None,
    hooks: SearchHooks | None = None,
) -> Wayfinder:
    hooks = hooks or NoopHooks()
    g = resolve_graph(cfg.graph, deps={"graph": graph, "graphs": graphs})
    source = "override" if graph is not None else cfg.graph.model_dump()
    hooks.graph_loaded(nodes=len(g.nodes), edges=len(g.edges), source=source)

    facilities = FacilityDirectory(cfg.facilities)
    facilities.validate(g)

    neighbors = make_neighbors(cfg.neighbors)
    router = make_router(cfg.router, deps={"neighbors": neighbors, "hooks": hooks})
    return Wayfinder(graph=g, router=router, facilities=facilities, hooks=hooks)
