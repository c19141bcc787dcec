from rich.console import Console

from gridstar.core.grid import Grid
from gridstar.core.pathfinding import Aborted, Unreachable, find_path
from gridstar.render.grid_view import outcome_label, render_grid_lines, render_outcome


def test_render_grid_lines_symbols() -> None:
    grid = Grid(width=3, height=2, obstacles=frozenset({(1, 0)}))
    lines = render_grid_lines(
        grid, start=(0, 0), end=(2, 0), path=((0, 0), (0, 1), (1, 1), (2, 1), (2, 0))
    )
    assert [line.plain for line in lines] == ["S#E", "***"]


def test_render_grid_lines_cell_width() -> None:
    grid = Grid(width=2, height=1)
    lines = render_grid_lines(grid, cell_width=2)
    assert lines[0].plain == ". . "


def test_render_outcome_sections() -> None:
    grid = Grid(width=4, height=3)
    outcome = find_path(grid, (0, 0), (3, 2))

    console = Console(width=80, record=True)
    console.print(render_outcome(grid, (0, 0), (3, 2), outcome))
    output = console.export_text()

    assert "Grid 4x3" in output
    assert "Path found: 5 steps" in output
    assert "Expanded" in output


def test_outcome_labels() -> None:
    assert outcome_label(Unreachable(expanded=3)) == "Unreachable"
    assert outcome_label(Aborted(expanded=3)) == "Aborted after 3 expansions"
