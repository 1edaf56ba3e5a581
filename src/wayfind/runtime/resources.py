# wayfind/runtime/resources.py
import json
from collections.abc import Mapping
from functools import lru_cache
from os import PathLike
from pathlib import Path

from pydantic import ValidationError

from wayfind.config.models import GraphDocModel
from wayfind.domain.entities.geography import Edge, Node, Point
from wayfind.domain.errors import LoadError, NotFoundError
from wayfind.domain.graph import Graph

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# bundled graph name -> file under DATA_DIR
BUNDLED = {"station": "station.json"}

GraphSource = Mapping | str | PathLike


def graph_from_document(doc: GraphDocModel) -> Graph:
    nodes = {nid: Node(nid, Point(n.x, n.y)) for nid, n in doc.nodes.items()}
    edges = [Edge(e.start, e.end, e.dist, e.access) for e in doc.edges]
    return Graph(nodes, edges)


def parse_graph(data, *, origin: str = "<document>") -> Graph:
    """Validate an already-decoded graph document."""
    if not isinstance(data, Mapping):
        raise LoadError(f"{origin}: graph document must be an object, got {type(data).__name__}")
    try:
        doc = GraphDocModel.model_validate(data)
    except ValidationError as exc:
        raise LoadError(f"{origin}: invalid graph document: {exc}") from exc
    return graph_from_document(doc)


def load_graph(source: GraphSource) -> Graph:
    """
    Accepts a decoded mapping, a JSON text (starting with '{') or a path to a JSON file.
    Any failure is raised as LoadError before the graph is ever queried.
    Paths are loaded once per process through load_graph_from_path; edits to the
    file afterwards are not seen until load_graph_from_path.cache_clear().
    """
    if isinstance(source, Mapping):
        return parse_graph(source)
    if isinstance(source, str) and source.lstrip().startswith("{"):
        try:
            data = json.loads(source)
        except json.JSONDecodeError as exc:
            raise LoadError(f"<text>: malformed JSON: {exc}") from exc
        return parse_graph(data, origin="<text>")
    if isinstance(source, (str, PathLike)):
        return load_graph_from_path(str(Path(source).expanduser().resolve()), "json")
    raise LoadError(f"unsupported graph source type {type(source).__name__}")


@lru_cache(maxsize=8)
def load_graph_from_path(file: str, fmt: str = "json") -> Graph:
    if fmt != "json":
        raise LoadError(f"Unsupported graph fmt {fmt!r}")
    try:
        with open(file, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise LoadError(f"{file}: graph file not found") from exc
    except OSError as exc:
        raise LoadError(f"{file}: cannot read graph file: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LoadError(f"{file}: malformed JSON: {exc}") from exc
    return parse_graph(data, origin=file)


def load_bundled_graph(name: str) -> Graph:
    try:
        fname = BUNDLED[name]
    except KeyError:
        raise NotFoundError("bundled graph", name) from None
    return load_graph_from_path(str(DATA_DIR / fname), "json")
