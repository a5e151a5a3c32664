from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- SEARCH ENGINES ---------------------


class SearchAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"


class SearchFrontierModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["frontier"] = "frontier"
    max_expansions: int = 1000  # hard cap on popped candidates

    @field_validator("max_expansions")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_expansions must be >= 1")
        return v


SearchUnion = Annotated[SearchAStarModel | SearchFrontierModel, Field(discriminator="kind")]


# ----------------- GRAPH / BENCH ---------------------


class GridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: int = 40
    height: int = 40
    spacing: float = 1.0
    diagonal: bool = False

    @field_validator("width", "height")
    def _at_least_one(cls, v: int, info: ValidationInfo) -> int:
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v

    @field_validator("spacing")
    @classmethod
    def _spacing_positive(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("spacing must be > 0")
        return v


class BenchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    queries: int = Field(default=1000, ge=1)
    seed: int = 123


# ------------------------------------------------------------------


class NavModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchUnion = Field(default_factory=SearchAStarModel)
    grid: GridModel = GridModel()
    bench: BenchModel = BenchModel()
