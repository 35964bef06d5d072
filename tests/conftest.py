"""Shared fixtures: app wiring with injected settings and a fake upstream."""

from typing import Callable, Iterator, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_rail_client, get_suggestion_client
from app.clients.realtime_trains_client import RealtimeTrainsClient
from app.config import Settings, get_settings
from main import app

RTT_BASE = "https://rtt.test/api/v1"

Handler = Callable[[httpx.Request], httpx.Response]


def live_settings(**overrides) -> Settings:
    values = {
        "rtt_username": "test-username",
        "rtt_password": "test-password",
        "rtt_base_url": RTT_BASE,
        "suggestions_url": "postgresql://stations.test/postgres",
        "suggestions_key": "anon-key",
    }
    values.update(overrides)
    return Settings(**values)


def offline_settings(**overrides) -> Settings:
    return Settings(**overrides)


def rail_client_for(handler: Handler) -> RealtimeTrainsClient:
    return RealtimeTrainsClient(
        "test-username",
        "test-password",
        base_url=RTT_BASE,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def make_client() -> Iterator[Callable[..., TestClient]]:
    """Build a TestClient with the given settings, upstream handler and suggestion client."""

    def _make(
        settings: Settings,
        upstream: Optional[Handler] = None,
        suggestions: Optional[object] = None,
    ) -> TestClient:
        app.dependency_overrides[get_settings] = lambda: settings
        if settings.has_rail_credentials:
            if upstream is None:
                raise AssertionError("live settings need an upstream handler")
            client = rail_client_for(upstream)
            app.dependency_overrides[get_rail_client] = lambda: client
        else:
            app.dependency_overrides[get_rail_client] = lambda: None
        if suggestions is not None:
            app.dependency_overrides[get_suggestion_client] = lambda: suggestions
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def unexpected_request(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"No upstream request expected, got {request.url}")
