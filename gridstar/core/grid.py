"""Grid model: bounds, walkability and neighbor enumeration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from gridstar.core.errors import InvalidEndpoints, InvalidGrid

Coordinate = tuple[int, int]

# Fixed order keeps tie-breaking in the search reproducible.
ORTHOGONAL_STEPS: tuple[Coordinate, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))
DIAGONAL_STEPS: tuple[Coordinate, ...] = ((1, -1), (1, 1), (-1, 1), (-1, -1))

DIAGONAL_COST = math.sqrt(2)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    obstacles: frozenset[Coordinate] = field(default_factory=frozenset)
    diagonal: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidGrid(
                f"Grid dimensions must be positive, got {self.width}x{self.height}."
            )
        obstacles = frozenset(self.obstacles)
        for coord in obstacles:
            if not self.in_bounds(coord):
                raise InvalidGrid(
                    f"Obstacle {coord} is outside a {self.width}x{self.height} grid."
                )
        object.__setattr__(self, "obstacles", obstacles)

    def in_bounds(self, coord: Coordinate) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, coord: Coordinate) -> bool:
        if not self.in_bounds(coord):
            return False
        return coord not in self.obstacles

    def neighbors(self, coord: Coordinate) -> list[Coordinate]:
        """Walkable neighbors: up, right, down, left, then diagonals if enabled."""
        x, y = coord
        steps: Iterable[Coordinate] = ORTHOGONAL_STEPS
        if self.diagonal:
            steps = ORTHOGONAL_STEPS + DIAGONAL_STEPS
        candidates = [(x + dx, y + dy) for dx, dy in steps]
        return [pos for pos in candidates if self.is_walkable(pos)]

    @staticmethod
    def step_cost(a: Coordinate, b: Coordinate) -> float:
        if a[0] != b[0] and a[1] != b[1]:
            return DIAGONAL_COST
        return 1


def validate_endpoints(grid: Grid, start: Coordinate, end: Coordinate) -> None:
    if start == end:
        raise InvalidEndpoints(f"Start and end are the same cell {start}.")
    for label, coord in (("Start", start), ("End", end)):
        if not grid.in_bounds(coord):
            raise InvalidEndpoints(
                f"{label} {coord} is outside a {grid.width}x{grid.height} grid."
            )
        if coord in grid.obstacles:
            raise InvalidEndpoints(f"{label} {coord} is an obstacle.")
