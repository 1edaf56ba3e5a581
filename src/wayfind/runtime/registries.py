# runtime/registries.py
from collections.abc import Callable
from typing import Any

from wayfind.app.protocols import NeighborResolver, Router
from wayfind.config.models import (
    GraphByName,
    GraphByPath,
    GraphRef,
    NeighborsIndexedModel,
    NeighborsScanModel,
    NeighborsUnion,
    RouterHeapModel,
    RouterLinearModel,
    RouterUnion,
)
from wayfind.domain.graph import Graph
from wayfind.domain.mechanics.mechanics_neighbors import (
    IndexedNeighborResolver,
    ScanNeighborResolver,
)
from wayfind.domain.mechanics.mechanics_routers import HeapDijkstraRouter, LinearDijkstraRouter
from wayfind.runtime.resources import load_bundled_graph, load_graph_from_path

NeighborsFactory = Callable[[NeighborsUnion, dict], NeighborResolver]
RouterFactory = Callable[[RouterUnion, dict], Router]

_neighbors_registry: dict[str, NeighborsFactory] = {}
_router_registry: dict[str, RouterFactory] = {}


# ------------------- Graph sources ---------------------------


def resolve_graph(ref: GraphRef | None, *, deps: dict) -> Graph:
    """
    deps can include:
      - 'graphs': dict[str, Graph]  # prebuilt graphs by name
      - 'graph': Graph              # a direct override
    """
    if "graph" in deps and deps["graph"] is not None:
        return deps["graph"]
    if ref is None:
        raise ValueError("No graph provided")
    if isinstance(ref, GraphByName):
        graphs: dict[str, Any] = deps.get("graphs") or {}
        if ref.name in graphs:
            return graphs[ref.name]
        return load_bundled_graph(ref.name)
    if isinstance(ref, GraphByPath):
        return load_graph_from_path(ref.file, ref.fmt)
    raise TypeError(ref)


# ------------------- Neighbor resolvers ---------------------------


def register_neighbors(kind: str):
    def deco(fn: NeighborsFactory):
        _neighbors_registry[kind] = fn
        return fn

    return deco


def make_neighbors(cfg: NeighborsUnion, *, deps: dict | None = None) -> NeighborResolver:
    try:
        factory = _neighbors_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown neighbors kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_neighbors("scan")
def _make_scan(cfg: NeighborsScanModel, deps):
    return ScanNeighborResolver()


@register_neighbors("indexed")
def _make_indexed(cfg: NeighborsIndexedModel, deps):
    return IndexedNeighborResolver()


# --------------------- Routers  ---------------------


def register_router(kind: str):
    def deco(fn: RouterFactory):
        _router_registry[kind] = fn
        return fn

    return deco


def make_router(cfg: RouterUnion, *, deps: dict) -> Router:
    try:
        factory = _router_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown router kind {cfg.kind!r}") from None
    return factory(cfg, deps)


@register_router("linear")
def _make_linear(cfg: RouterLinearModel, deps):
    return LinearDijkstraRouter(neighbors=deps.get("neighbors"), hooks=deps.get("hooks"))


@register_router("heap")
def _make_heap(cfg: RouterHeapModel, deps):
    return HeapDijkstraRouter(neighbors=deps.get("neighbors"), hooks=deps.get("hooks"))
