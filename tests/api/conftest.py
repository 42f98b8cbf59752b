"""Shared fixtures for API tests."""

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from lad_registry.api.app import app
from lad_registry.api.deps import get_app_settings
from lad_registry.config import Settings
from lad_registry.services.elevation import ElevationResolver
from lad_registry.services.geodesy.declination import LocalDeclinationProvider
from lad_registry.services.sessions import SessionStore

TEST_ELEVATION_M = 42.0


def _elevation_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"results": [{"elevation": TEST_ELEVATION_M}]})


@pytest.fixture
def settings():
    return Settings(
        debounce_seconds=0.01,
        google_elevation_api_key=None,
        session_wait_timeout_seconds=2.0,
    )


@pytest.fixture
async def test_app(settings):
    """FastAPI app with a session store backed by a mocked elevation service."""
    app.dependency_overrides[get_app_settings] = lambda: settings

    async with httpx.AsyncClient(transport=httpx.MockTransport(_elevation_handler)) as http:
        store = SessionStore(
            ElevationResolver(http, settings=settings),
            LocalDeclinationProvider(clock=lambda: datetime(2026, 10, 19, tzinfo=timezone.utc)),
            settings=settings,
        )
        app.state.session_store = store
        yield app
        await store.close_all()

    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
