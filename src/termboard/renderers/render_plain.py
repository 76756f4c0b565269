from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ..dashboard import DashboardData
from .render_terminal import compose

def render(dash: DashboardData, console: Console) -> list[Text]:
    rows = [Text(row.plain.rstrip()) for row in compose(dash, console)]
    for row in rows:
        console.out(row.plain, highlight=False)
    return rows
