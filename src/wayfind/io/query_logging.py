# io/query_logging.py
import json
import logging
import sys

from wayfind.search.hooks import NoopHooks


def _default_json_logger(name="wayfind", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class QueryLogging(NoopHooks):
    """
    One place to shape and emit structured logs for graph loading and route queries.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)
        self._settled = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def graph_loaded(self, *, nodes: int, edges: int, source):
        self._emit("INFO", "graph_loaded", nodes=nodes, edges=edges, source=source)

    def query_start(self, *, source: str, dest: str, accessible: bool):
        self._settled = 0
        if self.debug:
            self._emit("DEBUG", "query_start", source=source, dest=dest, accessible=accessible)

    def settle(self, node_id: str, *, distance: float):
        self._settled += 1
        if self.debug:
            self._emit("DEBUG", "settle", node=node_id, distance=distance)

    def query_end(self, *, source: str, dest: str, accessible: bool, route, ms: float):
        self._emit(
            "INFO",
            "route" if route.found else "no_route",
            source=source,
            dest=dest,
            accessible=accessible,
            path=route.ids,
            cost=route.cost if route.found else None,
            settled=self._settled,
            ms=round(ms, 3),
        )

    def facility(self, *, category: str, node_id: str):
        self._emit("INFO", "facility", category=category, node=node_id)

    def error(self, *, exc: BaseException, **extra):
        self._emit("ERROR", "query_error", error=str(exc), error_type=type(exc).__name__, **extra)
