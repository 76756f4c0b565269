from __future__ import annotations

import pytest
import requests

from termboard.weather.registry import PluginRegistry

from _support import FailingBackend, StubBackend, StubFrontend


@pytest.fixture
def stub_backend():
    return StubBackend()


@pytest.fixture
def failing_backend():
    return FailingBackend(requests.ConnectionError("connection refused"))


@pytest.fixture
def stub_frontend():
    return StubFrontend()


@pytest.fixture
def registry(stub_backend, failing_backend, stub_frontend):
    reg = PluginRegistry()
    reg.register_backend(stub_backend)
    reg.register_backend(failing_backend)
    reg.register_frontend(stub_frontend)
    return reg
