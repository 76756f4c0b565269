from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ..errors import ConfigurationError, convert
from ..weather.base import WeatherUnit, unit_from_token
from ..weather.pipeline import FetchFormatPipeline, PipelineResult, finish_text
from ..weather.registry import PluginRegistry
from .base import RenderSink

logger = logging.getLogger(__name__)

name = "prettyweather"
title = "Weather"

WTTR_URL = "https://wttr.in/{city}"
WTTR_UNIT_FLAGS = {
    WeatherUnit.METRIC: "m",
    WeatherUnit.IMPERIAL: "u",
    WeatherUnit.SI: "M",
    WeatherUnit.METRIC_MS: "M",
}
MODES = ("pipeline", "wttr")

@dataclass(frozen=True)
class WeatherSettings:
    title: str = title
    city: str = ""
    unit: str = "metric"
    backend: str = "openmeteo"
    frontend: str = "aat"
    view: str = "0"
    language: str = "en"
    mode: str = "pipeline"
    timeout: float | None = None

    @classmethod
    def from_config(cls, cfg: dict) -> "WeatherSettings":
        mode = str(cfg.get("mode", "pipeline")).lower()
        if mode not in MODES:
            raise ConfigurationError(f"Unknown prettyweather mode {mode!r}. Supported: {list(MODES)}")
        timeout = cfg.get("timeout")
        return cls(
            title=str(cfg.get("title", title)),
            city=str(cfg.get("city", "")).strip(),
            unit=str(cfg.get("unit", "metric")),
            backend=str(cfg.get("backend", "openmeteo")),
            frontend=str(cfg.get("frontend", "aat")),
            view=str(cfg.get("view", "0")),
            language=str(cfg.get("language", "en")),
            mode=mode,
            timeout=None if timeout is None else convert(timeout, float, "timeout"),
        )

def fetch_wttr(settings: WeatherSettings) -> PipelineResult:
    flag = WTTR_UNIT_FLAGS[unit_from_token(settings.unit)]
    try:
        r = requests.get(
            WTTR_URL.format(city=settings.city),
            params=f"{settings.view}{flag}",
            headers={"Accept-Language": settings.language, "User-Agent": "curl"},
            timeout=settings.timeout,
        )
        r.raise_for_status()
        return PipelineResult(text=finish_text(r.text))
    except Exception as e:
        logger.warning("wttr.in request for %r failed: %s", settings.city, e)
        return PipelineResult(error=e)

class PrettyWeatherWidget:
    def __init__(self, settings: WeatherSettings, registry: PluginRegistry, sink: RenderSink):
        self.settings = settings
        self.sink = sink
        self.pipeline = FetchFormatPipeline(registry)
        self.result = ""
        if settings.mode == "pipeline":
            self.pipeline.validate(settings.backend, settings.frontend)

    @property
    def title(self) -> str:
        return self.settings.title

    def fetch(self) -> PipelineResult:
        s = self.settings
        if s.mode == "wttr":
            return fetch_wttr(s)
        return self.pipeline.run(s.city, s.unit, s.backend, s.frontend)

    def refresh(self) -> None:
        self.result = self.fetch().display_text
        self.sink(self.title, self.result, False)

def create(cfg: dict, registry: PluginRegistry, sink: RenderSink) -> PrettyWeatherWidget:
    return PrettyWeatherWidget(WeatherSettings.from_config(cfg), registry, sink)
