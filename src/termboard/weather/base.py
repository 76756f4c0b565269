from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Protocol

class WeatherUnit(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    SI = "si"
    METRIC_MS = "metric-ms"

    def temperature(self, celsius: float) -> tuple[float, str]:
        if self is WeatherUnit.IMPERIAL:
            return celsius * 1.8 + 32, "°F"
        if self is WeatherUnit.SI:
            return celsius + 273.15, "K"
        return celsius, "°C"

    def speed(self, kmph: float) -> tuple[float, str]:
        if self is WeatherUnit.IMPERIAL:
            return kmph / 1.609, "mph"
        if self in (WeatherUnit.SI, WeatherUnit.METRIC_MS):
            return kmph / 3.6, "m/s"
        return kmph, "km/h"

    def distance(self, meters: float) -> tuple[float, str]:
        if self is WeatherUnit.IMPERIAL:
            miles = meters / 1609.344
            if miles < 0.5:
                return meters * 3.28084, "ft"
            return miles, "mi"
        if self is WeatherUnit.SI or meters < 1000:
            return meters, "m"
        return meters / 1000, "km"

    def precipitation(self, mm: float) -> tuple[float, str]:
        if self is WeatherUnit.IMPERIAL:
            return mm / 25.4, "in"
        return mm, "mm"

_TOKENS = {
    "imperial": WeatherUnit.IMPERIAL,
    "si": WeatherUnit.SI,
    "metric-ms": WeatherUnit.METRIC_MS,
}

def unit_from_token(token: str | None) -> WeatherUnit:
    # Exact, case-sensitive; anything else is metric
    return _TOKENS.get(token or "", WeatherUnit.METRIC)

class WeatherCode(Enum):
    UNKNOWN = "unknown"
    SUNNY = "sunny"
    PARTLY_CLOUDY = "partly cloudy"
    CLOUDY = "cloudy"
    VERY_CLOUDY = "very cloudy"
    FOG = "fog"
    LIGHT_SHOWERS = "light showers"
    HEAVY_SHOWERS = "heavy showers"
    LIGHT_RAIN = "light rain"
    HEAVY_RAIN = "heavy rain"
    LIGHT_SNOW = "light snow"
    HEAVY_SNOW = "heavy snow"
    LIGHT_SLEET = "light sleet"
    THUNDERY_SHOWERS = "thundery showers"

@dataclass(frozen=True)
class Observation:
    time: datetime | None = None
    code: WeatherCode = WeatherCode.UNKNOWN
    description: str = ""
    temp_c: float | None = None
    feels_like_c: float | None = None
    humidity: int | None = None
    chance_of_rain: int | None = None
    precip_mm: float | None = None
    visible_dist_m: float | None = None
    wind_kmph: float | None = None
    wind_gust_kmph: float | None = None
    wind_dir_degree: int | None = None

@dataclass(frozen=True)
class DailyForecast:
    date: date
    code: WeatherCode = WeatherCode.UNKNOWN
    max_temp_c: float | None = None
    min_temp_c: float | None = None
    chance_of_rain: int | None = None

@dataclass(frozen=True)
class WeatherData:
    location: str
    current: Observation
    forecast: list[DailyForecast] = field(default_factory=list)

class Backend(Protocol):
    name: str

    def setup(self) -> None:
        ...

    def fetch(self, location: str, day_offset: int) -> WeatherData:
        ...

class Frontend(Protocol):
    name: str

    def setup(self) -> None:
        ...

    def format(self, observation: Observation, unit: WeatherUnit) -> list[str]:
        ...
