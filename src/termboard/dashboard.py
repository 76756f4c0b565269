from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.markup import escape

from .config import Config
from .errors import ConfigurationError
from .layout import GridSpec, position_from_config
from .weather.registry import PluginRegistry
from .widgets import REGISTRY
from .widgets.base import Widget, WidgetResult

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class DashboardData:
    grid: GridSpec
    results: list[WidgetResult]

def collect_all(cfg: Config, registry: PluginRegistry) -> DashboardData:
    results: list[WidgetResult] = []
    for name, wcfg in cfg.enabled_widgets.items():
        kind = str(wcfg.get("type", name))
        position = position_from_config(wcfg)
        mod = REGISTRY.get(kind)
        if mod is None:
            results.append(WidgetResult(name=name, title=name, body=escape(f"Unknown widget type: {kind}"), is_error=True, position=position))
            continue

        def sink(title: str, body: str, is_error: bool, _name: str = name, _pos=position) -> None:
            results.append(WidgetResult(name=_name, title=title, body=body, is_error=is_error, position=_pos))

        widget: Widget = mod.create(wcfg, registry, sink)
        try:
            widget.refresh()
        except ConfigurationError:
            raise
        except Exception as e:
            logger.exception("Widget %s failed to refresh", name)
            results.append(WidgetResult(name=name, title=widget.title, body=escape(str(e)), is_error=True, position=position))
    return DashboardData(grid=cfg.grid, results=results)
