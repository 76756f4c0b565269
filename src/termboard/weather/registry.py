from __future__ import annotations

from ..errors import UnknownPluginError
from .base import Backend, Frontend

class PluginRegistry:
    def __init__(self) -> None:
        self._backends: dict[str, Backend] = {}
        self._frontends: dict[str, Frontend] = {}

    def register_backend(self, backend: Backend) -> None:
        self._backends[backend.name] = backend

    def register_frontend(self, frontend: Frontend) -> None:
        self._frontends[frontend.name] = frontend

    def backend(self, name: str) -> Backend:
        be = self._backends.get(name)
        if be is None:
            raise UnknownPluginError("backend", name, self.backend_names)
        return be

    def frontend(self, name: str) -> Frontend:
        fe = self._frontends.get(name)
        if fe is None:
            raise UnknownPluginError("frontend", name, self.frontend_names)
        return fe

    @property
    def backend_names(self) -> list[str]:
        return sorted(self._backends)

    @property
    def frontend_names(self) -> list[str]:
        return sorted(self._frontends)

def default_registry(timeout: float | None = None) -> PluginRegistry:
    from .backends import OpenMeteoBackend, WttrBackend
    from .frontends import AsciiArtFrontend, JsonFrontend

    registry = PluginRegistry()
    registry.register_backend(OpenMeteoBackend(timeout=timeout))
    registry.register_backend(WttrBackend(timeout=timeout))
    registry.register_frontend(AsciiArtFrontend())
    registry.register_frontend(JsonFrontend())
    return registry
