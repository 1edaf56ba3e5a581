import pytest
from pydantic import ValidationError

from wayfind.config.models import (
    GraphByName,
    GraphByPath,
    NeighborsIndexedModel,
    NeighborsScanModel,
    RouterHeapModel,
    RouterLinearModel,
    WayfindModel,
)
from wayfind.domain.errors import LoadError, NotFoundError
from wayfind.domain.mechanics.mechanics_factory import build_wayfinder
from wayfind.domain.mechanics.mechanics_neighbors import (
    IndexedNeighborResolver,
    ScanNeighborResolver,
)
from wayfind.domain.mechanics.mechanics_routers import HeapDijkstraRouter, LinearDijkstraRouter
from wayfind.runtime.registries import make_neighbors, make_router, resolve_graph


def test_defaults():
    m = WayfindModel()
    assert isinstance(m.graph, GraphByName) and m.graph.name == "station"
    assert m.router.kind == "heap" and m.neighbors.kind == "indexed"
    assert (m.canvas.width, m.canvas.height) == (1000.0, 600.0)
    assert m.facilities["lift"] == "lift_p1"


def test_discriminated_unions_from_dicts():
    m = WayfindModel.model_validate(
        {
            "graph": {"by": "path", "file": "~/g.json"},
            "router": {"kind": "linear"},
            "neighbors": {"kind": "scan"},
        }
    )
    assert isinstance(m.graph, GraphByPath) and not m.graph.file.startswith("~")
    assert isinstance(m.router, RouterLinearModel)
    assert isinstance(m.neighbors, NeighborsScanModel)


@pytest.mark.parametrize(
    "data",
    [
        {"router": {"kind": "astar"}},
        {"unknown": 1},
        {"canvas": {"width": 0}},
        {"facilities": {"toilet": ""}},
    ],
)
def test_invalid_config_rejected(data):
    with pytest.raises(ValidationError):
        WayfindModel.model_validate(data)


def test_factories_by_kind():
    assert isinstance(make_neighbors(NeighborsScanModel()), ScanNeighborResolver)
    assert isinstance(make_neighbors(NeighborsIndexedModel()), IndexedNeighborResolver)
    nb = ScanNeighborResolver()
    r = make_router(RouterLinearModel(), deps={"neighbors": nb})
    assert isinstance(r, LinearDijkstraRouter) and r.neighbors is nb
    assert isinstance(make_router(RouterHeapModel(), deps={}), HeapDijkstraRouter)


def test_resolve_graph_prefers_override_then_named(triangle):
    assert resolve_graph(GraphByName(), deps={"graph": triangle}) is triangle
    assert resolve_graph(GraphByName(name="t"), deps={"graphs": {"t": triangle}}) is triangle
    assert "entry" in resolve_graph(GraphByName(), deps={})
    with pytest.raises(ValueError):
        resolve_graph(None, deps={})
    with pytest.raises(LoadError):
        resolve_graph(GraphByPath(file="/definitely/not/here.json"), deps={})


def test_build_wayfinder_checks_facility_targets(triangle):
    cfg = WayfindModel(facilities={"lift": "A"})
    wf = build_wayfinder(cfg, graph=triangle)
    assert wf.facility("lift").id == "A"
    with pytest.raises(NotFoundError):
        build_wayfinder(WayfindModel(facilities={"lift": "nowhere"}), graph=triangle)
