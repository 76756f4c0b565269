from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

import requests

from .base import DailyForecast, Observation, WeatherCode, WeatherData

logger = logging.getLogger(__name__)

# WMO weather interpretation codes, as used by Open-Meteo
WMO_CODES: dict[int, tuple[WeatherCode, str]] = {
    0: (WeatherCode.SUNNY, "Clear sky"),
    1: (WeatherCode.PARTLY_CLOUDY, "Mainly clear"),
    2: (WeatherCode.PARTLY_CLOUDY, "Partly cloudy"),
    3: (WeatherCode.CLOUDY, "Overcast"),
    45: (WeatherCode.FOG, "Fog"),
    48: (WeatherCode.FOG, "Depositing rime fog"),
    51: (WeatherCode.LIGHT_RAIN, "Light drizzle"),
    53: (WeatherCode.LIGHT_RAIN, "Drizzle"),
    55: (WeatherCode.LIGHT_RAIN, "Dense drizzle"),
    56: (WeatherCode.LIGHT_SLEET, "Freezing drizzle"),
    57: (WeatherCode.LIGHT_SLEET, "Dense freezing drizzle"),
    61: (WeatherCode.LIGHT_RAIN, "Slight rain"),
    63: (WeatherCode.HEAVY_RAIN, "Rain"),
    65: (WeatherCode.HEAVY_RAIN, "Heavy rain"),
    66: (WeatherCode.LIGHT_SLEET, "Freezing rain"),
    67: (WeatherCode.LIGHT_SLEET, "Heavy freezing rain"),
    71: (WeatherCode.LIGHT_SNOW, "Slight snow fall"),
    73: (WeatherCode.LIGHT_SNOW, "Snow fall"),
    75: (WeatherCode.HEAVY_SNOW, "Heavy snow fall"),
    77: (WeatherCode.LIGHT_SNOW, "Snow grains"),
    80: (WeatherCode.LIGHT_SHOWERS, "Slight rain showers"),
    81: (WeatherCode.HEAVY_SHOWERS, "Rain showers"),
    82: (WeatherCode.HEAVY_SHOWERS, "Violent rain showers"),
    85: (WeatherCode.LIGHT_SNOW, "Slight snow showers"),
    86: (WeatherCode.HEAVY_SNOW, "Heavy snow showers"),
    95: (WeatherCode.THUNDERY_SHOWERS, "Thunderstorm"),
    96: (WeatherCode.THUNDERY_SHOWERS, "Thunderstorm with slight hail"),
    99: (WeatherCode.THUNDERY_SHOWERS, "Thunderstorm with heavy hail"),
}

# World Weather Online codes, as used by wttr.in
_WWO_GROUPS: dict[WeatherCode, tuple[int, ...]] = {
    WeatherCode.SUNNY: (113,),
    WeatherCode.PARTLY_CLOUDY: (116,),
    WeatherCode.CLOUDY: (119,),
    WeatherCode.VERY_CLOUDY: (122,),
    WeatherCode.FOG: (143, 248, 260),
    WeatherCode.LIGHT_SHOWERS: (176, 263, 353),
    WeatherCode.HEAVY_SHOWERS: (299, 305, 356),
    WeatherCode.LIGHT_RAIN: (266, 293, 296),
    WeatherCode.HEAVY_RAIN: (302, 308, 359),
    WeatherCode.LIGHT_SLEET: (179, 182, 185, 281, 284, 311, 314, 317, 350, 362, 365, 374, 377),
    WeatherCode.LIGHT_SNOW: (227, 320, 323, 326, 368),
    WeatherCode.HEAVY_SNOW: (230, 329, 332, 335, 338, 371, 395),
    WeatherCode.THUNDERY_SHOWERS: (200, 386, 389, 392),
}
WWO_CODES: dict[int, WeatherCode] = {n: code for code, ns in _WWO_GROUPS.items() for n in ns}

def _num(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)

def _int(value: Any) -> int | None:
    n = _num(value)
    return None if n is None else int(round(n))

class _HttpBackend:
    name = ""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self.session: requests.Session | None = None

    def setup(self) -> None:
        if self.session is None:
            self.session = requests.Session()

    def _get_json(self, url: str, params: dict | None = None) -> Any:
        if self.session is None:
            self.setup()
        logger.debug("GET %s %s", url, params)
        r = self.session.get(url, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

class OpenMeteoBackend(_HttpBackend):
    name = "openmeteo"

    GEOCODE_URL = "https://geocoding-api.open-meteo.com/v1/search"
    FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

    def _geocode(self, location: str) -> tuple[float, float, str]:
        js = self._get_json(self.GEOCODE_URL, {"name": location, "count": 1, "format": "json"})
        results = js.get("results") or []
        if not results:
            raise LookupError(f"Location not found: {location}")
        place = results[0]
        label = ", ".join(p for p in (place.get("name"), place.get("country")) if p)
        return float(place["latitude"]), float(place["longitude"]), label

    def fetch(self, location: str, day_offset: int) -> WeatherData:
        lat, lon, label = self._geocode(location)

        params = {
            "latitude": lat,
            "longitude": lon,
            "current": "temperature_2m,apparent_temperature,relative_humidity_2m,precipitation,"
                       "weather_code,wind_speed_10m,wind_direction_10m,wind_gusts_10m,visibility",
            "daily": "weather_code,temperature_2m_max,temperature_2m_min,precipitation_probability_max",
            "forecast_days": day_offset + 1,
            "timezone": "auto",
        }
        js = self._get_json(self.FORECAST_URL, params)

        current = js.get("current", {})
        daily = js.get("daily", {})
        code, desc = WMO_CODES.get(_int(current.get("weather_code")), (WeatherCode.UNKNOWN, "Unknown"))
        pop = (daily.get("precipitation_probability_max") or [None])[0]
        obs = Observation(
            time=datetime.fromisoformat(current["time"]) if current.get("time") else None,
            code=code,
            description=desc,
            temp_c=_num(current.get("temperature_2m")),
            feels_like_c=_num(current.get("apparent_temperature")),
            humidity=_int(current.get("relative_humidity_2m")),
            chance_of_rain=_int(pop),
            precip_mm=_num(current.get("precipitation")),
            visible_dist_m=_num(current.get("visibility")),
            wind_kmph=_num(current.get("wind_speed_10m")),
            wind_gust_kmph=_num(current.get("wind_gusts_10m")),
            wind_dir_degree=_int(current.get("wind_direction_10m")),
        )

        forecast = []
        days = list(zip(
            daily.get("time") or [],
            daily.get("weather_code") or [],
            daily.get("temperature_2m_max") or [],
            daily.get("temperature_2m_min") or [],
            daily.get("precipitation_probability_max") or [],
        ))
        for day, wmo, tmax, tmin, dpop in days[:day_offset]:
            forecast.append(DailyForecast(
                date=date.fromisoformat(day),
                code=WMO_CODES.get(_int(wmo), (WeatherCode.UNKNOWN, ""))[0],
                max_temp_c=_num(tmax),
                min_temp_c=_num(tmin),
                chance_of_rain=_int(dpop),
            ))

        return WeatherData(location=label, current=obs, forecast=forecast)

class WttrBackend(_HttpBackend):
    name = "wttr"

    URL = "https://wttr.in/{location}"

    def fetch(self, location: str, day_offset: int) -> WeatherData:
        js = self._get_json(self.URL.format(location=location), {"format": "j1"})

        conditions = js.get("current_condition") or []
        if not conditions:
            raise ValueError(f"No current conditions for {location}")
        cur = conditions[0]

        desc = ""
        if cur.get("weatherDesc"):
            desc = str(cur["weatherDesc"][0].get("value", "")).strip()
        visibility_km = _num(cur.get("visibility"))

        days = js.get("weather") or []
        pop = None
        if days and days[0].get("hourly"):
            pop = max(int(h.get("chanceofrain", 0)) for h in days[0]["hourly"])

        obs = Observation(
            code=WWO_CODES.get(_int(cur.get("weatherCode")), WeatherCode.UNKNOWN),
            description=desc,
            temp_c=_num(cur.get("temp_C")),
            feels_like_c=_num(cur.get("FeelsLikeC")),
            humidity=_int(cur.get("humidity")),
            chance_of_rain=pop,
            precip_mm=_num(cur.get("precipMM")),
            visible_dist_m=None if visibility_km is None else visibility_km * 1000,
            wind_kmph=_num(cur.get("windspeedKmph")),
            wind_gust_kmph=_num(cur.get("WindGustKmph")),
            wind_dir_degree=_int(cur.get("winddirDegree")),
        )

        forecast = []
        for d in days[:day_offset]:
            hourly = d.get("hourly") or [{}]
            midday = hourly[len(hourly) // 2]
            forecast.append(DailyForecast(
                date=date.fromisoformat(d["date"]),
                code=WWO_CODES.get(_int(midday.get("weatherCode")), WeatherCode.UNKNOWN),
                max_temp_c=_num(d.get("maxtempC")),
                min_temp_c=_num(d.get("mintempC")),
                chance_of_rain=_int(midday.get("chanceofrain")),
            ))

        area = (js.get("nearest_area") or [{}])[0]
        name = (area.get("areaName") or [{}])[0].get("value") or location
        country = (area.get("country") or [{}])[0].get("value")
        label = ", ".join(p for p in (name, country) if p)

        return WeatherData(location=label, current=obs, forecast=forecast)
