from __future__ import annotations

from typing import Any, Callable

class ConfigurationError(Exception):
    pass

class UnknownPluginError(ConfigurationError):
    def __init__(self, kind: str, name: str, available: list[str]):
        self.kind = kind
        self.name = name
        self.available = available
        super().__init__(f"Could not find selected {kind} {name!r}. Available: {available}")

def section(raw: dict, key: str) -> dict:
    # An empty YAML section parses to None
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{key} must be a mapping, got {value!r}")
    return value

def convert(value: Any, cast: Callable[[Any], Any], key: str) -> Any:
    try:
        return cast(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid value for {key}: {value!r}") from e
