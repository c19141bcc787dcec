"""Load grid descriptions from ASCII maps and JSON requests."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from gridstar.core.contracts import SearchRequest
from gridstar.core.errors import InvalidEndpoints, InvalidGrid
from gridstar.core.grid import Coordinate, Grid

OBSTACLE_TILE = "#"
START_TILE = "S"
END_TILE = "E"
FREE_TILES = {".", " "}


@dataclass(frozen=True)
class GridDocument:
    grid: Grid
    start: Coordinate
    end: Coordinate


def parse_ascii_map(text: str, *, diagonal: bool = False) -> GridDocument:
    lines = [line.rstrip("\r") for line in text.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()
    width = max((len(line) for line in lines), default=0)
    padded = [line.ljust(width) for line in lines]

    obstacles: set[Coordinate] = set()
    starts: list[Coordinate] = []
    ends: list[Coordinate] = []
    for y, line in enumerate(padded):
        for x, tile in enumerate(line):
            if tile == OBSTACLE_TILE:
                obstacles.add((x, y))
            elif tile == START_TILE:
                starts.append((x, y))
            elif tile == END_TILE:
                ends.append((x, y))
            elif tile not in FREE_TILES:
                raise InvalidGrid(f"Unknown tile {tile!r} at ({x}, {y}).")

    grid = Grid(
        width=width, height=len(padded), obstacles=frozenset(obstacles), diagonal=diagonal
    )
    if len(starts) != 1 or len(ends) != 1:
        raise InvalidEndpoints(
            f"Map needs exactly one {START_TILE} and one {END_TILE}, "
            f"found {len(starts)} and {len(ends)}."
        )
    return GridDocument(grid=grid, start=starts[0], end=ends[0])


def load_ascii_map(path: Path, *, diagonal: bool = False) -> GridDocument:
    return parse_ascii_map(_read_text(path), diagonal=diagonal)


def load_request(path: Path) -> SearchRequest:
    return SearchRequest.model_validate(json.loads(_read_text(path)))


def document_from_request(request: SearchRequest) -> GridDocument:
    return GridDocument(
        grid=request.to_grid(), start=request.start_coord, end=request.end_coord
    )


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing grid file: {path}") from exc
