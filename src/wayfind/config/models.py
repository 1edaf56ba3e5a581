import os
from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_validator,
)


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class CanvasModel(BaseModel):
    """Virtual drawing surface the node coordinates live in."""

    model_config = ConfigDict(extra="forbid")
    width: float = 1000.0
    height: float = 600.0

    @field_validator("width", "height")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not v > 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


# ----------------- GRAPH DOCUMENT ---------------------


class NodeDocModel(BaseModel):
    # strict: numeric strings and booleans are not coordinates
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)
    x: StrictFloat
    y: StrictFloat


class EdgeDocModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, allow_inf_nan=False)
    start: StrictStr = Field(alias="from")
    end: StrictStr = Field(alias="to")
    dist: StrictFloat = Field(ge=0)
    access: StrictBool


class GraphDocModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    nodes: dict[str, NodeDocModel]
    edges: list[EdgeDocModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_endpoints(self):
        for i, e in enumerate(self.edges):
            for end in (e.start, e.end):
                if end not in self.nodes:
                    raise ValueError(
                        f"edge #{i} ({e.start!r} -> {e.end!r}) references unknown node {end!r}"
                    )
        return self


# ----------------- GRAPH SOURCES ---------------------


class GraphByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["json"] = "json"

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class GraphByName(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["name"] = "name"
    name: str = "station"


GraphRef = Annotated[GraphByPath | GraphByName, Field(discriminator="by")]

# ----------------- NEIGHBOR RESOLVERS ---------------------


class NeighborsScanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["scan"] = "scan"


class NeighborsIndexedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["indexed"] = "indexed"


NeighborsUnion = Annotated[
    NeighborsScanModel | NeighborsIndexedModel,
    Field(discriminator="kind"),
]

# ----------------- ROUTERS ---------------------


class RouterLinearModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear"] = "linear"


class RouterHeapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["heap"] = "heap"


RouterUnion = Annotated[
    RouterLinearModel | RouterHeapModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


def _default_facilities() -> dict[str, str]:
    return {"toilet": "toilet", "lift": "lift_p1", "food": "food", "medical": "medical"}


class WayfindModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "station"
    graph: GraphRef = Field(default_factory=GraphByName)
    neighbors: NeighborsUnion = Field(default_factory=NeighborsIndexedModel)
    router: RouterUnion = Field(default_factory=RouterHeapModel)
    facilities: dict[str, str] = Field(default_factory=_default_facilities)
    canvas: CanvasModel = CanvasModel()
    log: LogModel = LogModel()

    @field_validator("facilities")
    @classmethod
    def _no_blank_targets(cls, v: dict[str, str]) -> dict[str, str]:
        for category, node_id in v.items():
            if not category or not node_id:
                raise ValueError("facility categories and node ids must be non-empty")
        return v
