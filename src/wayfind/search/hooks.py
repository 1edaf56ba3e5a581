# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def graph_loaded(self, *, nodes, edges, source): ...
    def query_start(self, *, source, dest, accessible): ...
    def settle(self, node_id, *, distance): ...
    def query_end(self, *, source, dest, accessible, route, ms): ...
    def facility(self, *, category, node_id): ...
    def error(self, *, exc: BaseException, **kw): ...


class NoopHooks:
    def graph_loaded(self, **_):
        pass

    def query_start(self, **_):
        pass

    def settle(self, *_, **__):
        pass

    def query_end(self, **_):
        pass

    def facility(self, **_):
        pass

    def error(self, **_):
        pass
