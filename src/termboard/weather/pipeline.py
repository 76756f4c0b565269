from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.markup import escape

from ..colors import ascii_to_markup
from .base import unit_from_token
from .registry import PluginRegistry

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PipelineResult:
    text: str = ""
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display_text(self) -> str:
        if self.error is None:
            return self.text
        return escape(str(self.error).strip() or type(self.error).__name__)

def finish_text(raw: str) -> str:
    return ascii_to_markup(raw.strip()).strip()

class FetchFormatPipeline:
    """Fetch an observation from a backend and format it through a frontend.

    Unknown backend or frontend names raise ``UnknownPluginError``. Anything
    that fails while fetching or formatting is captured in the returned
    ``PipelineResult`` instead of being raised.
    """

    def __init__(self, registry: PluginRegistry):
        self.registry = registry

    def validate(self, backend_name: str, frontend_name: str) -> None:
        self.registry.backend(backend_name)
        self.registry.frontend(frontend_name)

    def run(
        self,
        location: str,
        unit_token: str | None,
        backend_name: str,
        frontend_name: str,
        day_offset: int = 0,
    ) -> PipelineResult:
        be = self.registry.backend(backend_name)
        be.setup()

        unit = unit_from_token(unit_token)

        try:
            logger.debug("Fetching %r from %s (day offset %d)", location, backend_name, day_offset)
            data = be.fetch(location, day_offset)
        except Exception as e:
            logger.warning("Weather fetch from %s failed: %s", backend_name, e)
            return PipelineResult(error=e)

        fe = self.registry.frontend(frontend_name)
        fe.setup()

        try:
            lines = fe.format(data.current, unit)
            return PipelineResult(text=finish_text("\n".join(lines)))
        except Exception as e:
            logger.warning("Weather formatting with %s failed: %s", frontend_name, e)
            return PipelineResult(error=e)
