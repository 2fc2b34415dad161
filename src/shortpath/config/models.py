from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class EditorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    node_radius: float = Field(default=20.0, gt=0)  # hit radius around a node centre
    overlap_factor: float = Field(default=2.5, gt=0)  # new nodes closer than radius * factor are refused

    @property
    def overlap_radius(self) -> float:
        return self.node_radius * self.overlap_factor

    @property
    def edge_hit_radius(self) -> float:
        return self.node_radius / 3


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "shortpath"
    run_id: str = "local"
    log: LogModel = LogModel()
    editor: EditorModel = EditorModel()
