from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import yaml

from .errors import ConfigurationError, convert, section
from .layout import GridSpec

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))

@dataclass(frozen=True)
class Config:
    raw: dict

    @property
    def grid(self) -> GridSpec:
        return GridSpec.from_config(self.raw)

    @property
    def widgets(self) -> dict[str, dict]:
        mods = section(self.raw, "widgets")
        return {str(name): section(mods, name) for name in mods}

    @property
    def enabled_widgets(self) -> dict[str, dict]:
        return {name: cfg for name, cfg in self.widgets.items() if cfg.get("enabled", True)}

    @property
    def renderer_kind(self) -> str:
        return str(section(self.raw, "renderer").get("kind", "terminal"))

    @property
    def log_level(self) -> str:
        level = str(section(self.raw, "logging").get("level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"Unsupported logging.level {level!r}. Supported: {list(LOG_LEVELS)}")
        return level

    @property
    def http_timeout(self) -> float | None:
        timeout = section(self.raw, "http").get("timeout")
        return None if timeout is None else convert(timeout, float, "http.timeout")

def load_config(path: str | Path) -> Config:
    p = Path(_expand(str(path)))
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError("config.yaml must contain a YAML mapping at top level.")
    return Config(raw=raw)
