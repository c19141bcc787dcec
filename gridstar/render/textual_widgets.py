"""Clickable grid widget for the editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich.console import RenderableType
from textual.events import Click
from textual.message import Message
from textual.widget import Widget

from gridstar.core.grid import Coordinate


@dataclass(frozen=True)
class GridRenderResult:
    renderable: RenderableType
    columns: int
    rows: int
    cell_width: int


def cell_at_offset(
    result: GridRenderResult, x: int, y: int
) -> Coordinate | None:
    if x < 0 or y < 0:
        return None
    column = x // result.cell_width
    if column >= result.columns or y >= result.rows:
        return None
    return (column, y)


class CellClicked(Message):
    """Message emitted when a click lands on a grid cell."""

    def __init__(self, *, cell: Coordinate) -> None:
        super().__init__()
        self.cell = cell


class GridWidget(Widget):
    """Render a grid and emit the clicked cell."""

    def __init__(
        self,
        render_grid: Callable[[], GridRenderResult],
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._render_grid = render_grid
        self._last: GridRenderResult | None = None

    def render(self) -> RenderableType:
        self._last = self._render_grid()
        return self._last.renderable

    def on_click(self, event: Click) -> None:
        if self._last is None:
            return
        offset = event.get_content_offset(self)
        if offset is None:
            return
        cell = cell_at_offset(self._last, offset.x, offset.y)
        if cell is not None:
            self.post_message(CellClicked(cell=cell))
