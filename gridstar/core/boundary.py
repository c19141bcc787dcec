"""Flat integer marshalling for callers that cannot pass structured values.

Obstacles come in and paths go out as interleaved ``x, y`` sequences, e.g.
``[1, 0, 1, 1]`` for the cells ``(1, 0)`` and ``(1, 1)``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from gridstar.core.errors import InvalidGrid, SearchAborted
from gridstar.core.grid import Coordinate, Grid
from gridstar.core.pathfinding import Aborted, PathFound, find_path


def decode_obstacles(
    values: Sequence[int], width: int, height: int
) -> frozenset[Coordinate]:
    if len(values) % 2 != 0:
        raise InvalidGrid(
            f"Obstacle list must hold x, y pairs; got {len(values)} values."
        )
    if width <= 0 or height <= 0:
        raise InvalidGrid(f"Grid dimensions must be positive, got {width}x{height}.")
    obstacles: set[Coordinate] = set()
    for index in range(0, len(values), 2):
        x, y = values[index], values[index + 1]
        if isinstance(x, bool) or isinstance(y, bool):
            raise InvalidGrid(f"Obstacle pair at index {index} is not integral.")
        if not isinstance(x, int) or not isinstance(y, int):
            raise InvalidGrid(f"Obstacle pair at index {index} is not integral.")
        if not (0 <= x < width and 0 <= y < height):
            raise InvalidGrid(
                f"Obstacle ({x}, {y}) is outside a {width}x{height} grid."
            )
        obstacles.add((x, y))
    return frozenset(obstacles)


def encode_path(path: Iterable[Coordinate]) -> list[int]:
    flat: list[int] = []
    for x, y in path:
        flat.append(x)
        flat.append(y)
    return flat


def astar(
    cols: int,
    rows: int,
    start_x: int,
    start_y: int,
    end_x: int,
    end_y: int,
    obstacles: Sequence[int],
    *,
    diagonal: bool = False,
    max_steps: int | None = None,
) -> list[int]:
    """Return the path as flat ``x, y`` pairs, or ``[]`` when unreachable."""
    grid = Grid(
        width=cols,
        height=rows,
        obstacles=decode_obstacles(obstacles, cols, rows),
        diagonal=diagonal,
    )
    outcome = find_path(
        grid, (start_x, start_y), (end_x, end_y), max_steps=max_steps
    )
    if isinstance(outcome, Aborted):
        raise SearchAborted(outcome.expanded)
    if isinstance(outcome, PathFound):
        return encode_path(outcome.path)
    return []
