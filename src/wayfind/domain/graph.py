# wayfind/domain/graph.py
from collections.abc import Iterable, Iterator, Mapping
from math import isfinite
from types import MappingProxyType

from wayfind.domain.entities.geography import Edge, Node
from wayfind.domain.errors import LoadError, NotFoundError


class Graph:
    """
    Read-only station graph: nodes keyed by id plus edges in document order.
    Edges are stored once per physical connection and are traversable both ways.
    Endpoints are validated here so the search never meets a dangling id.
    """

    def __init__(self, nodes: Mapping[str, Node] | Iterable[Node], edges: Iterable[Edge]):
        if isinstance(nodes, Mapping):
            table = dict(nodes)
        else:
            table = {}
            for n in nodes:
                if n.id in table:
                    raise LoadError(f"duplicate node id {n.id!r}")
                table[n.id] = n
        for key, n in table.items():
            if key != n.id:
                raise LoadError(f"node keyed {key!r} carries id {n.id!r}")
            if not (isfinite(n.x) and isfinite(n.y)):
                raise LoadError(f"node {key!r} has a non-finite coordinate")

        edge_list = tuple(edges)
        for i, e in enumerate(edge_list):
            for end in (e.start, e.end):
                if end not in table:
                    raise LoadError(
                        f"edge #{i} ({e.start!r} -> {e.end!r}) references unknown node {end!r}"
                    )
            if not isfinite(e.cost) or e.cost < 0:
                raise LoadError(
                    f"edge #{i} ({e.start!r} -> {e.end!r}) has invalid cost {e.cost!r}"
                )

        self._nodes = table
        self._view = MappingProxyType(table)
        self._edges = edge_list

    @property
    def nodes(self) -> Mapping[str, Node]:
        return self._view

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    def node(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NotFoundError("node", node_id) from None

    def require(self, *node_ids: str) -> None:
        for nid in node_ids:
            if nid not in self._nodes:
                raise NotFoundError("node", nid)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"
