"""
tests.test_app

Smoke tests for the FastAPI composition root.

Responsibilities:
- Test mode boots without migrating and still serves health/readiness.
- Non-test mode migrates during startup and refuses to start on failure.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from booking_platform.api.app import create_app
from booking_platform.settings import Settings
from booking_platform.startup import MigrationFailed
from conftest import sqlite_template


async def _get(app, path: str, **headers: str) -> httpx.Response:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path, headers=headers)


@pytest.mark.asyncio
async def test_health_endpoints_in_test_mode(tmp_path: Path) -> None:
    app = create_app(settings=Settings(env="test", database_url=sqlite_template(tmp_path)))

    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        r = await _get(app, "/healthz")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

        r = await _get(app, "/readyz", **{"x-request-id": "req-1"})
        assert r.status_code == 200
        assert r.json() == {
            "status": "ready",
            "modules": {"identity": "ok", "flight": "ok", "passenger": "ok", "booking": "ok"},
        }
        assert r.headers["x-request-id"] == "req-1"

        # Test mode never migrates.
        assert await app.state.modules["flight"].current_revision() is None


@pytest.mark.asyncio
async def test_startup_migrates_before_serving(settings: Settings) -> None:
    app = create_app(settings=settings)

    async with app.router.lifespan_context(app):
        assert await app.state.modules["flight"].current_revision() == "flight_0001"
        r = await _get(app, "/readyz")
        assert r.status_code == 200


@pytest.mark.asyncio
async def test_startup_failure_prevents_serving(tmp_path: Path) -> None:
    settings = Settings(env="prod", database_url=sqlite_template(tmp_path / "missing"))
    app = create_app(settings=settings)

    with pytest.raises(MigrationFailed):
        async with app.router.lifespan_context(app):
            pass

    assert not hasattr(app.state, "modules")
