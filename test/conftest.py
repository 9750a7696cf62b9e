"""Shared fixtures: a recording stand-in for the HERE platform and an API client wired to it."""
import httpx
import pytest
from fastapi.testclient import TestClient

from routeproxy.config import Settings
from routeproxy.main import app, get_map_service
from routeproxy.services.map import HereMapService

API_KEY = "test-here-key"


class UpstreamRecorder:
    """Answers every request with a canned response and keeps what it received."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = {"routes": [{"id": "r1", "sections": []}]}
        self.text = None
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("simulated upstream failure", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def upstream():
    return UpstreamRecorder()


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, here_api_key=API_KEY, upstream_timeout_seconds=1.5)


@pytest.fixture
def map_service(test_settings, upstream):
    return HereMapService(test_settings, transport=httpx.MockTransport(upstream))


@pytest.fixture
def client(map_service):
    app.dependency_overrides[get_map_service] = lambda: map_service
    yield TestClient(app)
    app.dependency_overrides.clear()
