"""Interactive grid editor: paint start, end and obstacles, then solve."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Group
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static

from gridstar.core.config import EngineConfig
from gridstar.core.errors import GridError
from gridstar.core.grid import Coordinate, Grid
from gridstar.core.pathfinding import PathFound, SearchOutcome, find_path
from gridstar.infra.logger import get_logger
from gridstar.render.grid_view import outcome_label, render_grid_lines
from gridstar.render.textual_app import GridstarApp
from gridstar.render.textual_widgets import CellClicked, GridRenderResult, GridWidget

log = get_logger(__name__)

MODES = ("begin", "end", "obstacle")
DEFAULT_SIZE = 10
MIN_SIZE = 1
MAX_SIZE = 50
CELL_WIDTH = 2


@dataclass
class EditorState:
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    mode: str = "begin"
    start: Coordinate | None = None
    end: Coordinate | None = None
    obstacles: set[Coordinate] = field(default_factory=set)
    cursor: Coordinate = (0, 0)
    outcome: SearchOutcome | None = None
    last_message: str = ""

    @property
    def path(self) -> tuple[Coordinate, ...] | None:
        if isinstance(self.outcome, PathFound):
            return self.outcome.path
        return None

    def grid(self, *, diagonal: bool = False) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            obstacles=frozenset(self.obstacles),
            diagonal=diagonal,
        )


def set_mode(state: EditorState, mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown paint mode {mode!r}.")
    state.mode = mode
    state.last_message = f"Mode: {mode}."


def click_cell(state: EditorState, cell: Coordinate) -> None:
    """Toggle the current mode on a cell; occupied cells and repeat endpoints are left alone."""
    x, y = cell
    if not (0 <= x < state.width and 0 <= y < state.height):
        return

    if _cell_mode(state, cell) == state.mode:
        _clear_cell(state, cell)
        state.outcome = None
        return
    if state.mode == "begin" and state.start is not None:
        return
    if state.mode == "end" and state.end is not None:
        return
    if _cell_mode(state, cell) is not None:
        return

    if state.mode == "begin":
        state.start = cell
    elif state.mode == "end":
        state.end = cell
    else:
        state.obstacles.add(cell)
    state.outcome = None


def resize(state: EditorState, width: int, height: int) -> None:
    # Resizing redraws an empty grid.
    state.width = max(MIN_SIZE, min(MAX_SIZE, width))
    state.height = max(MIN_SIZE, min(MAX_SIZE, height))
    clear_grid(state)
    state.cursor = (
        min(state.cursor[0], state.width - 1),
        min(state.cursor[1], state.height - 1),
    )
    state.last_message = f"Grid {state.width}x{state.height}."


def clear_grid(state: EditorState) -> None:
    state.start = None
    state.end = None
    state.obstacles.clear()
    state.outcome = None
    state.last_message = "Grid cleared."


def move_cursor(state: EditorState, key: str) -> None:
    x, y = state.cursor
    if key == "UP":
        y -= 1
    elif key == "DOWN":
        y += 1
    elif key == "LEFT":
        x -= 1
    elif key == "RIGHT":
        x += 1
    state.cursor = (
        max(0, min(state.width - 1, x)),
        max(0, min(state.height - 1, y)),
    )


def solve(state: EditorState, config: EngineConfig | None = None) -> None:
    config = config or EngineConfig()
    if state.start is None or state.end is None:
        state.outcome = None
        state.last_message = "Place a start and an end first."
        return
    try:
        state.outcome = find_path(
            state.grid(diagonal=config.diagonal),
            state.start,
            state.end,
            max_steps=config.max_steps,
        )
    except GridError as exc:
        state.outcome = None
        state.last_message = str(exc)
        return
    state.last_message = outcome_label(state.outcome)
    log.info("Editor search %s -> %s: %s", state.start, state.end, state.last_message)


def render_editor_grid(state: EditorState) -> GridRenderResult:
    lines = render_grid_lines(
        state.grid(),
        start=state.start,
        end=state.end,
        path=state.path,
        cursor=state.cursor,
        cell_width=CELL_WIDTH,
    )
    return GridRenderResult(
        renderable=Group(*lines),
        columns=state.width,
        rows=state.height,
        cell_width=CELL_WIDTH,
    )


def status_text(state: EditorState) -> Text:
    modes = " ".join(
        f"[{mode}]" if mode == state.mode else mode for mode in MODES
    )
    return Text(
        f"Mode: {modes} | Size: {state.width}x{state.height} | "
        f"Cursor: {state.cursor[0]}, {state.cursor[1]} | {state.last_message}",
        style="bold",
    )


def _cell_mode(state: EditorState, cell: Coordinate) -> str | None:
    if cell == state.start:
        return "begin"
    if cell == state.end:
        return "end"
    if cell in state.obstacles:
        return "obstacle"
    return None


def _clear_cell(state: EditorState, cell: Coordinate) -> None:
    if cell == state.start:
        state.start = None
    elif cell == state.end:
        state.end = None
    else:
        state.obstacles.discard(cell)


class GridEditorScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #grid {
        height: 1fr;
    }
    #status-bar {
        height: 3;
    }
    """

    BINDINGS = [
        ("b", "mode('begin')", "Start"),
        ("e", "mode('end')", "End"),
        ("o", "mode('obstacle')", "Obstacle"),
        ("x", "paint", "Paint"),
        ("enter", "solve", "Solve"),
        ("space", "solve", "Solve"),
        ("c", "clear", "Clear"),
        ("w", "resize(-1, 0)", "Narrower"),
        ("W", "resize(1, 0)", "Wider"),
        ("h", "resize(0, -1)", "Shorter"),
        ("H", "resize(0, 1)", "Taller"),
        ("up", "cursor('UP')", "Up"),
        ("down", "cursor('DOWN')", "Down"),
        ("left", "cursor('LEFT')", "Left"),
        ("right", "cursor('RIGHT')", "Right"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        state: EditorState | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        super().__init__()
        self.state = state or EditorState()
        self.config = config or EngineConfig()
        self._grid_widget: GridWidget | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield GridWidget(lambda: render_editor_grid(self.state), id="grid")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._grid_widget = self.query_one("#grid", GridWidget)
        self._status_bar = self.query_one("#status-bar", Static)
        self._refresh_ui()

    def on_cell_clicked(self, event: CellClicked) -> None:
        self.state.cursor = event.cell
        click_cell(self.state, event.cell)
        self._refresh_ui()

    def action_mode(self, mode: str) -> None:
        set_mode(self.state, mode)
        self._refresh_ui()

    def action_paint(self) -> None:
        click_cell(self.state, self.state.cursor)
        self._refresh_ui()

    def action_solve(self) -> None:
        solve(self.state, self.config)
        self._refresh_ui()

    def action_clear(self) -> None:
        clear_grid(self.state)
        self._refresh_ui()

    def action_resize(self, dx: int, dy: int) -> None:
        resize(self.state, self.state.width + dx, self.state.height + dy)
        self._refresh_ui()

    def action_cursor(self, key: str) -> None:
        move_cursor(self.state, key)
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _refresh_ui(self) -> None:
        if self._grid_widget:
            self._grid_widget.refresh()
        if self._status_bar:
            self._status_bar.update(status_text(self.state))


def run_grid_editor(
    *,
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    config: EngineConfig | None = None,
) -> None:
    state = EditorState()
    resize(state, width, height)
    state.last_message = ""
    app = GridstarApp(
        GridEditorScreen(state=state, config=config), title="gridstar editor"
    )
    app.run()
