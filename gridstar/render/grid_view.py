"""Rich rendering for grids, paths and search outcomes."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridstar.core.grid import Coordinate, Grid
from gridstar.core.pathfinding import Aborted, PathFound, SearchOutcome

FREE_SYMBOL = "."
OBSTACLE_SYMBOL = "#"
START_SYMBOL = "S"
END_SYMBOL = "E"
PATH_SYMBOL = "*"

TILE_STYLES = {
    FREE_SYMBOL: "grey50",
    OBSTACLE_SYMBOL: "bright_magenta",
    START_SYMBOL: "bold bright_green",
    END_SYMBOL: "bold bright_red",
    PATH_SYMBOL: "bright_yellow",
}
CURSOR_STYLE = "reverse"


def render_grid_lines(
    grid: Grid,
    *,
    start: Coordinate | None = None,
    end: Coordinate | None = None,
    path: tuple[Coordinate, ...] | None = None,
    cursor: Coordinate | None = None,
    cell_width: int = 1,
) -> list[Text]:
    cells = [[FREE_SYMBOL] * grid.width for _ in range(grid.height)]
    for x, y in grid.obstacles:
        cells[y][x] = OBSTACLE_SYMBOL
    for x, y in path or ():
        cells[y][x] = PATH_SYMBOL
    if start is not None and grid.in_bounds(start):
        cells[start[1]][start[0]] = START_SYMBOL
    if end is not None and grid.in_bounds(end):
        cells[end[1]][end[0]] = END_SYMBOL

    lines: list[Text] = []
    for y, row in enumerate(cells):
        line = Text()
        for x, symbol in enumerate(row):
            style = TILE_STYLES[symbol]
            if cursor == (x, y):
                style = f"{style} {CURSOR_STYLE}"
            line.append(symbol.ljust(cell_width), style=style)
        lines.append(line)
    return lines


def render_outcome(
    grid: Grid,
    start: Coordinate,
    end: Coordinate,
    outcome: SearchOutcome,
) -> RenderableType:
    path = outcome.path if isinstance(outcome, PathFound) else None
    lines = render_grid_lines(grid, start=start, end=end, path=path, cell_width=2)
    board = Panel(Group(*lines), title=f"Grid {grid.width}x{grid.height}")
    return Group(board, _render_summary(start, end, outcome))


def outcome_label(outcome: SearchOutcome) -> str:
    if isinstance(outcome, PathFound):
        return f"Path found: {outcome.steps} steps"
    if isinstance(outcome, Aborted):
        return f"Aborted after {outcome.expanded} expansions"
    return "Unreachable"


def _render_summary(
    start: Coordinate, end: Coordinate, outcome: SearchOutcome
) -> RenderableType:
    table = Table(title="Search", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Start", f"{start[0]}, {start[1]}")
    table.add_row("End", f"{end[0]}, {end[1]}")
    table.add_row("Outcome", outcome_label(outcome))
    if isinstance(outcome, PathFound):
        table.add_row("Cost", f"{outcome.cost:g}")
    table.add_row("Expanded", str(outcome.expanded))
    return table
