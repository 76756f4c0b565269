from __future__ import annotations

import logging

from rich.cells import cell_len
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from ..dashboard import DashboardData
from ..layout import BORDER, origin, resolve
from ..widgets.base import WidgetResult

logger = logging.getLogger(__name__)

Cell = tuple[str, "Style | None"]

def _panel(res: WidgetResult, width: int, height: int) -> Panel:
    title = Text(res.title, style="bold red" if res.is_error else "bold")
    return Panel(
        Text.from_markup(res.body),
        title=title,
        title_align="left",
        border_style="red" if res.is_error else "green",
        width=width,
        height=height,
        padding=0,
    )

def _blit(canvas: list[list[Cell]], lines, x: int, y: int) -> None:
    for row, line in enumerate(lines):
        cy = y + row
        if cy >= len(canvas):
            break
        cx = x
        for seg in line:
            if seg.control:
                continue
            for ch in seg.text:
                w = cell_len(ch)
                if cx + w > len(canvas[cy]):
                    break
                canvas[cy][cx] = (ch, seg.style)
                # Wide glyphs own the following cell
                for extra in range(1, w):
                    canvas[cy][cx + extra] = ("", None)
                cx += w

def compose(dash: DashboardData, console: Console) -> list[Text]:
    grid = dash.grid
    if grid.empty:
        return []

    canvas: list[list[Cell]] = [[(" ", None)] * grid.total_width for _ in range(grid.total_height)]
    for res in dash.results:
        dims = resolve(res.position, grid)
        if not dims.content_width or not dims.content_height:
            logger.debug("Widget %s has no usable space, skipping", res.name)
            continue
        w, h = dims.content_width + BORDER, dims.content_height + BORDER
        x, y = origin(res.position, grid)
        lines = console.render_lines(_panel(res, w, h), console.options.update(width=w, height=h), pad=True)
        _blit(canvas, lines, x, y)

    rows = []
    for cells in canvas:
        t = Text(no_wrap=True, overflow="crop")
        for ch, style in cells:
            t.append(ch, style=style)
        rows.append(t)
    return rows

def render(dash: DashboardData, console: Console) -> list[Text]:
    rows = compose(dash, console)
    for row in rows:
        console.print(row, no_wrap=True, crop=True)
    return rows
