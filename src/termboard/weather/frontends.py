from __future__ import annotations

import json
from dataclasses import asdict

from .base import Observation, WeatherCode, WeatherUnit

RESET = "\033[0m"

TEMP_COLORS = (21, 27, 33, 39, 45, 51, 50, 49, 48, 47, 46, 82, 118, 154, 190, 226, 220, 214, 208, 202, 196)
WIND_COLORS = (46, 82, 118, 154, 190, 226, 220, 214, 208, 202, 196)
WIND_ARROWS = ("↓", "↙", "←", "↖", "↑", "↗", "→", "↘")

def _c(color: int | str, text: str) -> str:
    return f"\033[38;5;{color}m{text}{RESET}"

_BLANK = "             "

ICONS: dict[WeatherCode, list[str]] = {
    WeatherCode.UNKNOWN: [
        "    .-.      ",
        "     __)     ",
        "    (        ",
        "     `-'     ",
        "      •      ",
    ],
    WeatherCode.SUNNY: [
        _c(226, "    \\   /    "),
        _c(226, "     .-.     "),
        _c(226, "  ― (   ) ―  "),
        _c(226, "     `-'     "),
        _c(226, "    /   \\    "),
    ],
    WeatherCode.PARTLY_CLOUDY: [
        _c(226, "   \\  /") + "      ",
        _c(226, ' _ /""') + _c(250, ".-.    "),
        _c(226, "   \\_") + _c(250, "(   ).  "),
        _c(226, "   /") + _c(250, "(___(__) "),
        _BLANK,
    ],
    WeatherCode.CLOUDY: [
        _BLANK,
        _c(250, "     .--.    "),
        _c(250, "  .-(    ).  "),
        _c(250, " (___.__)__) "),
        _BLANK,
    ],
    WeatherCode.VERY_CLOUDY: [
        _BLANK,
        _c("240;1", "     .--.    "),
        _c("240;1", "  .-(    ).  "),
        _c("240;1", " (___.__)__) "),
        _BLANK,
    ],
    WeatherCode.FOG: [
        _BLANK,
        _c(251, " _ - _ - _ - "),
        _c(251, "  _ - _ - _  "),
        _c(251, " _ - _ - _ - "),
        _BLANK,
    ],
    WeatherCode.LIGHT_SHOWERS: [
        _c(226, ' _`/""') + _c(250, ".-.    "),
        _c(226, "  ,\\_") + _c(250, "(   ).  "),
        _c(226, "   /") + _c(250, "(___(__) "),
        _c(111, "     ‘ ‘ ‘ ‘ "),
        _c(111, "    ‘ ‘ ‘ ‘  "),
    ],
    WeatherCode.HEAVY_SHOWERS: [
        _c(226, ' _`/""') + _c("240;1", ".-.    "),
        _c(226, "  ,\\_") + _c("240;1", "(   ).  "),
        _c(226, "   /") + _c("240;1", "(___(__) "),
        _c("21;1", "    ‚‘‚‘‚‘‚‘ "),
        _c("21;1", "   ‚’‚’‚’‚’  "),
    ],
    WeatherCode.LIGHT_RAIN: [
        _c(250, "     .-.     "),
        _c(250, "    (   ).   "),
        _c(250, "   (___(__)  "),
        _c(111, "    ‘ ‘ ‘ ‘  "),
        _c(111, "   ‘ ‘ ‘ ‘   "),
    ],
    WeatherCode.HEAVY_RAIN: [
        _c("240;1", "     .-.     "),
        _c("240;1", "    (   ).   "),
        _c("240;1", "   (___(__)  "),
        _c("21;1", "   ‚‘‚‘‚‘‚‘  "),
        _c("21;1", "  ‚’‚’‚’‚’   "),
    ],
    WeatherCode.LIGHT_SNOW: [
        _c(250, "     .-.     "),
        _c(250, "    (   ).   "),
        _c(250, "   (___(__)  "),
        _c(255, "    *  *  *  "),
        _c(255, "   *  *  *   "),
    ],
    WeatherCode.HEAVY_SNOW: [
        _c("240;1", "     .-.     "),
        _c("240;1", "    (   ).   "),
        _c("240;1", "   (___(__)  "),
        _c("255;1", "   * * * *   "),
        _c("255;1", "  * * * *    "),
    ],
    WeatherCode.LIGHT_SLEET: [
        _c(250, "     .-.     "),
        _c(250, "    (   ).   "),
        _c(250, "   (___(__)  "),
        _c(111, "    ‘ ") + _c(255, "*") + _c(111, " ‘ ") + _c(255, "*") + "  ",
        _c(255, "   * ") + _c(111, "‘") + _c(255, " * ") + _c(111, "‘") + "   ",
    ],
    WeatherCode.THUNDERY_SHOWERS: [
        _c("240;1", "     .-.     "),
        _c("240;1", "    (   ).   "),
        _c("240;1", "   (___(__)  "),
        _c("228;1", "    /_ /_    "),
        _c(111, "     /  /    "),
    ],
}

def _pick(colors: tuple[int, ...], index: int) -> int:
    return colors[max(0, min(index, len(colors) - 1))]

def temp_color(celsius: float) -> int:
    return _pick(TEMP_COLORS, int((celsius + 15) // 3))

def wind_color(kmph: float) -> int:
    return _pick(WIND_COLORS, int(kmph // 3))

def wind_arrow(degree: int) -> str:
    return WIND_ARROWS[int(((degree + 22.5) % 360) // 45)]

class AsciiArtFrontend:

    name = "aat"

    def setup(self) -> None:
        pass

    def format_temp(self, obs: Observation, unit: WeatherUnit) -> str:
        if obs.temp_c is None:
            return ""
        t, sym = unit.temperature(obs.temp_c)
        out = _c(temp_color(obs.temp_c), f"{round(t)}")
        if obs.feels_like_c is not None:
            f, _ = unit.temperature(obs.feels_like_c)
            if round(f) != round(t):
                out += "(" + _c(temp_color(obs.feels_like_c), f"{round(f)}") + ")"
        return f"{out} {sym}"

    def format_wind(self, obs: Observation, unit: WeatherUnit) -> str:
        if obs.wind_kmph is None:
            return ""
        s, sym = unit.speed(obs.wind_kmph)
        out = _c(wind_color(obs.wind_kmph), f"{round(s)}")
        if obs.wind_gust_kmph is not None and obs.wind_gust_kmph > obs.wind_kmph:
            g, _ = unit.speed(obs.wind_gust_kmph)
            out += "-" + _c(wind_color(obs.wind_gust_kmph), f"{round(g)}")
        if obs.wind_dir_degree is not None:
            out = f"\033[1m{wind_arrow(obs.wind_dir_degree)}{RESET} {out}"
        return f"{out} {sym}"

    def format_visibility(self, obs: Observation, unit: WeatherUnit) -> str:
        if obs.visible_dist_m is None:
            return ""
        d, sym = unit.distance(obs.visible_dist_m)
        return f"{round(d)} {sym}"

    def format_precip(self, obs: Observation, unit: WeatherUnit) -> str:
        parts = []
        if obs.precip_mm is not None:
            p, sym = unit.precipitation(obs.precip_mm)
            parts.append(f"{p:.2f} {sym}" if sym == "in" else f"{p:.1f} {sym}")
        if obs.chance_of_rain is not None:
            parts.append(f"{obs.chance_of_rain}%")
        return " | ".join(parts)

    def format(self, observation: Observation, unit: WeatherUnit) -> list[str]:
        icon = ICONS.get(observation.code, ICONS[WeatherCode.UNKNOWN])
        desc = observation.description or observation.code.value.capitalize()
        fields = [
            desc,
            self.format_temp(observation, unit),
            self.format_wind(observation, unit),
            self.format_visibility(observation, unit),
            self.format_precip(observation, unit),
        ]
        return [f"{art} {text}".rstrip() for art, text in zip(icon, fields)]

class JsonFrontend:

    name = "json"

    def setup(self) -> None:
        pass

    def format(self, observation: Observation, unit: WeatherUnit) -> list[str]:
        d = asdict(observation)
        d["code"] = observation.code.value
        d["time"] = observation.time.isoformat() if observation.time else None
        return json.dumps(d, indent=2, ensure_ascii=False).splitlines()
