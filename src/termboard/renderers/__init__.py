from __future__ import annotations

from rich.console import Console
from rich.text import Text

from ..dashboard import DashboardData
from ..errors import ConfigurationError

from . import render_plain, render_terminal

RENDERERS = ("terminal", "plain")

def render_with(kind: str, dash: DashboardData, console: Console | None = None) -> list[Text]:
    kind = kind.lower().strip()
    console = console or Console()
    if kind == "terminal":
        return render_terminal.render(dash, console)
    if kind == "plain":
        return render_plain.render(dash, console)
    raise ConfigurationError(f"Unknown renderer: {kind}")
