"""Grid-based pathfinding (A*)."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import Union

from gridstar.core.grid import DIAGONAL_COST, Coordinate, Grid, validate_endpoints
from gridstar.infra.logger import get_logger

log = get_logger(__name__)

Path = tuple[Coordinate, ...]


@dataclass(frozen=True)
class PathFound:
    path: Path
    cost: float
    expanded: int

    @property
    def steps(self) -> int:
        return len(self.path) - 1


@dataclass(frozen=True)
class Unreachable:
    expanded: int


@dataclass(frozen=True)
class Aborted:
    expanded: int


SearchOutcome = Union[PathFound, Unreachable, Aborted]


class PathFinder:
    """A* over a static grid; each call owns its frontier and score maps."""

    def __init__(self, grid: Grid, *, max_steps: int | None = None) -> None:
        if max_steps is not None and max_steps <= 0:
            raise ValueError("max_steps must be positive when set.")
        self._grid = grid
        self._max_steps = max_steps

    def find_path(self, start: Coordinate, end: Coordinate) -> SearchOutcome:
        validate_endpoints(self._grid, start, end)

        # (f, h, seq, g, coord): lower f, then lower h, then first inserted.
        open_set: list[tuple[float, float, int, float, Coordinate]] = []
        seq = 0
        start_h = self._heuristic(start, end)
        heapq.heappush(open_set, (start_h, start_h, seq, 0, start))
        came_from: dict[Coordinate, Coordinate] = {}
        g_score: dict[Coordinate, float] = {start: 0}
        closed: set[Coordinate] = set()
        expanded = 0

        while open_set:
            _, _, _, g, current = heapq.heappop(open_set)
            if current in closed or g > g_score.get(current, math.inf):
                continue
            if current == end:
                path = self._reconstruct_path(came_from, current)
                log.debug(
                    "Path found %s -> %s: %d steps, %d expanded",
                    start,
                    end,
                    len(path) - 1,
                    expanded,
                )
                return PathFound(path=path, cost=g, expanded=expanded)

            if self._max_steps is not None and expanded >= self._max_steps:
                log.debug("Search aborted %s -> %s after %d", start, end, expanded)
                return Aborted(expanded=expanded)
            closed.add(current)
            expanded += 1

            for neighbor in self._grid.neighbors(current):
                if neighbor in closed:
                    continue
                tentative = g + self._grid.step_cost(current, neighbor)
                if tentative < g_score.get(neighbor, math.inf):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    h = self._heuristic(neighbor, end)
                    seq += 1
                    heapq.heappush(open_set, (tentative + h, h, seq, tentative, neighbor))

        log.debug("No path %s -> %s, %d expanded", start, end, expanded)
        return Unreachable(expanded=expanded)

    def _heuristic(self, a: Coordinate, b: Coordinate) -> float:
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        if not self._grid.diagonal:
            return dx + dy
        return (dx + dy) + (DIAGONAL_COST - 2) * min(dx, dy)

    @staticmethod
    def _reconstruct_path(
        came_from: dict[Coordinate, Coordinate], current: Coordinate
    ) -> Path:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return tuple(path)


def find_path(
    grid: Grid,
    start: Coordinate,
    end: Coordinate,
    *,
    max_steps: int | None = None,
) -> SearchOutcome:
    return PathFinder(grid, max_steps=max_steps).find_path(start, end)
