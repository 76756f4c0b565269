from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from ..layout import ModulePosition

# Receives (title, body, is_error) once a widget has refreshed
RenderSink = Callable[[str, str, bool], None]

@dataclass(frozen=True)
class WidgetResult:
    name: str
    title: str
    body: str
    is_error: bool = False
    position: ModulePosition = ModulePosition()

class Widget(Protocol):
    title: str

    def refresh(self) -> None:
        ...
