from __future__ import annotations

from . import prettyweather

REGISTRY = {
    prettyweather.name: prettyweather,
}
