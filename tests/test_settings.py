"""
tests.test_settings

Environment-driven settings and per-module database URLs.
"""

from __future__ import annotations

import pytest

from booking_platform.settings import Settings


def test_module_database_url_renders_template() -> None:
    s = Settings(database_url="postgresql+asyncpg://u:p@db/{module}")
    assert s.module_database_url("flight") == "postgresql+asyncpg://u:p@db/flight"


def test_template_without_placeholder_is_shared() -> None:
    s = Settings(database_url="sqlite+aiosqlite:///./platform.db")
    assert s.module_database_url("identity") == s.module_database_url("booking")


def test_env_is_read_from_prefixed_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOOKING_ENV", "Test")
    s = Settings()
    assert s.env == "test"


def test_unknown_env_is_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(env="staging")


# --- Module Notes -----------------------------------------------------------
# `Settings()` reads BOOKING_* variables; tests pass values explicitly unless they
# exercise the environment itself.
