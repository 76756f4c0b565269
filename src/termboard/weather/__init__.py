from __future__ import annotations

from .base import DailyForecast, Observation, WeatherCode, WeatherData, WeatherUnit, unit_from_token
from .pipeline import FetchFormatPipeline, PipelineResult
from .registry import PluginRegistry, default_registry

__all__ = [
    "DailyForecast",
    "FetchFormatPipeline",
    "Observation",
    "PipelineResult",
    "PluginRegistry",
    "WeatherCode",
    "WeatherData",
    "WeatherUnit",
    "default_registry",
    "unit_from_token",
]
