"""
tests.conftest

Shared fixtures.

Responsibilities:
- Point every module database at a fresh SQLite file under `tmp_path`.
- Provide in-memory fakes that record collaborator calls for orchestrator tests.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from pathlib import Path

import pytest

from booking_platform.settings import Settings
from booking_platform.startup.contracts import DataSeeder, ModuleDescriptor


def sqlite_template(directory: Path) -> str:
    return f"sqlite+aiosqlite:///{directory}/{{module}}.db"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        env="prod",
        database_url=sqlite_template(tmp_path),
        log_level="WARNING",
        startup_step_timeout_seconds=30.0,
    )


class FakeSession:
    def __init__(self, module: str, calls: list[str]) -> None:
        self._module = module
        self._calls = calls

    async def commit(self) -> None:
        self._calls.append(f"{self._module}:commit")


class FakeContext:
    def __init__(self, module: str, calls: list[str], migrate_error: BaseException | None) -> None:
        self._module = module
        self._calls = calls
        self._migrate_error = migrate_error

    async def migrate(self) -> None:
        self._calls.append(f"{self._module}:migrate")
        if self._migrate_error is not None:
            raise self._migrate_error

    @asynccontextmanager
    async def session(self) -> AsyncIterator[FakeSession]:
        self._calls.append(f"{self._module}:session")
        yield FakeSession(self._module, self._calls)


class RecordingSeeder(DataSeeder):
    def __init__(self, label: str, calls: list[str], error: BaseException | None = None) -> None:
        self._label = label
        self._calls = calls
        self._error = error

    @property
    def name(self) -> str:
        return self._label

    async def seed_all(self, session) -> None:
        self._calls.append(f"seed:{self._label}")
        if self._error is not None:
            raise self._error


def fake_module(
    name: str,
    calls: list[str],
    *,
    seeders: Sequence[DataSeeder] = (),
    migrate_error: BaseException | None = None,
) -> ModuleDescriptor:
    @asynccontextmanager
    async def open_context() -> AsyncIterator[FakeContext]:
        calls.append(f"{name}:open")
        try:
            yield FakeContext(name, calls, migrate_error)
        finally:
            calls.append(f"{name}:close")

    return ModuleDescriptor(name=name, open_context=open_context, seeders=tuple(seeders))
