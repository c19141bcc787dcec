from rich.console import Console

from gridstar.core.config import EngineConfig
from gridstar.core.pathfinding import Aborted, PathFound, Unreachable
from gridstar.render.grid_editor import (
    EditorState,
    clear_grid,
    click_cell,
    move_cursor,
    render_editor_grid,
    resize,
    set_mode,
    solve,
    status_text,
)
from gridstar.render.textual_widgets import cell_at_offset


def test_click_places_and_toggles_start() -> None:
    state = EditorState(width=3, height=3)
    click_cell(state, (0, 0))
    assert state.start == (0, 0)

    click_cell(state, (1, 1))
    assert state.start == (0, 0)

    click_cell(state, (0, 0))
    assert state.start is None


def test_click_ignores_occupied_cells() -> None:
    state = EditorState(width=3, height=3)
    click_cell(state, (0, 0))
    set_mode(state, "obstacle")
    click_cell(state, (0, 0))
    assert state.obstacles == set()
    assert state.start == (0, 0)

    click_cell(state, (1, 0))
    click_cell(state, (1, 1))
    assert state.obstacles == {(1, 0), (1, 1)}
    click_cell(state, (1, 0))
    assert state.obstacles == {(1, 1)}


def test_click_outside_grid_is_ignored() -> None:
    state = EditorState(width=2, height=2)
    click_cell(state, (5, 5))
    assert state.start is None


def test_solve_requires_endpoints() -> None:
    state = EditorState(width=3, height=3)
    solve(state)
    assert state.outcome is None
    assert "start and an end" in state.last_message


def test_solve_finds_and_clears_path_on_edit() -> None:
    state = EditorState(width=5, height=5)
    click_cell(state, (0, 0))
    set_mode(state, "end")
    click_cell(state, (4, 4))
    solve(state)

    assert isinstance(state.outcome, PathFound)
    assert state.path is not None
    assert len(state.path) == 9
    assert state.last_message == "Path found: 8 steps"

    set_mode(state, "obstacle")
    click_cell(state, (2, 2))
    assert state.outcome is None


def test_solve_unreachable_and_aborted() -> None:
    state = EditorState(width=3, height=3)
    state.start = (0, 0)
    state.end = (2, 0)
    state.obstacles = {(1, 0), (1, 1), (1, 2)}
    solve(state)
    assert isinstance(state.outcome, Unreachable)

    state.obstacles = set()
    state.width = 30
    state.height = 30
    state.end = (29, 29)
    solve(state, EngineConfig(max_steps=2))
    assert isinstance(state.outcome, Aborted)


def test_resize_clears_and_clamps() -> None:
    state = EditorState(width=5, height=5, cursor=(4, 4))
    state.start = (0, 0)
    state.obstacles.add((1, 1))

    resize(state, 3, 0)

    assert (state.width, state.height) == (3, 1)
    assert state.start is None
    assert not state.obstacles
    assert state.cursor == (2, 0)


def test_clear_and_cursor() -> None:
    state = EditorState(width=3, height=3)
    state.start = (1, 1)
    clear_grid(state)
    assert state.start is None

    move_cursor(state, "LEFT")
    assert state.cursor == (0, 0)
    move_cursor(state, "DOWN")
    move_cursor(state, "RIGHT")
    assert state.cursor == (1, 1)


def test_render_editor_grid_and_status() -> None:
    state = EditorState(width=4, height=2)
    click_cell(state, (0, 0))
    result = render_editor_grid(state)

    assert result.columns == 4
    assert result.rows == 2
    assert cell_at_offset(result, 3, 1) == (1, 1)
    assert cell_at_offset(result, 8, 0) is None

    console = Console(width=80, record=True)
    console.print(result.renderable)
    console.print(status_text(state))
    output = console.export_text()
    assert output.startswith("S")
    assert "[begin]" in output
