"""Request/response contracts for JSON callers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridstar.core.boundary import decode_obstacles, encode_path
from gridstar.core.grid import Coordinate, Grid
from gridstar.core.pathfinding import Aborted, PathFound, SearchOutcome


class SearchRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int
    height: int
    start: tuple[int, int]
    end: tuple[int, int]
    obstacles: list[int] = Field(default_factory=list)
    diagonal: bool = False

    @field_validator("obstacles")
    @classmethod
    def validate_pairs(cls, value: list[int]) -> list[int]:
        if len(value) % 2 != 0:
            raise ValueError("obstacles must be interleaved x, y pairs")
        return value

    def to_grid(self) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            obstacles=decode_obstacles(self.obstacles, self.width, self.height),
            diagonal=self.diagonal,
        )

    @property
    def start_coord(self) -> Coordinate:
        return (self.start[0], self.start[1])

    @property
    def end_coord(self) -> Coordinate:
        return (self.end[0], self.end[1])


class SearchStatus(str, Enum):
    PATH_FOUND = "PATH_FOUND"
    UNREACHABLE = "UNREACHABLE"
    ABORTED = "ABORTED"


class SearchResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: SearchStatus
    path: list[int] = Field(default_factory=list)
    cost: float | None = None
    expanded: int = 0

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        if isinstance(outcome, PathFound):
            return cls(
                status=SearchStatus.PATH_FOUND,
                path=encode_path(outcome.path),
                cost=outcome.cost,
                expanded=outcome.expanded,
            )
        if isinstance(outcome, Aborted):
            return cls(status=SearchStatus.ABORTED, expanded=outcome.expanded)
        return cls(status=SearchStatus.UNREACHABLE, expanded=outcome.expanded)
