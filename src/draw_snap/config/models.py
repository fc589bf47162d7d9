from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- SNAPPING ---------------------


class SnapOptionsModel(BaseModel):
    # camelCase aliases match the options hosts already send
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    snap_px: float = Field(15.0, alias="snapPx")
    snap_vertex_priority_distance: float = Field(1.25, alias="snapVertexPriorityDistance")  # km
    snap_to_mid_points: bool = Field(False, alias="snapToMidPoints")

    @field_validator("snap_px")
    @classmethod
    def _px_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("snapPx must be > 0")
        return v

    @field_validator("snap_vertex_priority_distance")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class SnapConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    snap: bool = True
    guides: bool = False
    snap_options: SnapOptionsModel = Field(default_factory=SnapOptionsModel, alias="snapOptions")


# ------------------------------------------------------------------


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    options: SnapConfigModel = Field(default_factory=SnapConfigModel)
    log: LogModel = LogModel()
