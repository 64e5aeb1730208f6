"""
tests.test_module_startup

End-to-end startup against real per-module SQLite databases.

Responsibilities:
- Alembic migrations reach head for every module.
- Seed data lands once and stays single across repeated runs.
- Registry selection and failure surfacing with real collaborators.
- Modules sharing one database leave each other's tables alone.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from sqlalchemy import MetaData, func, select

from booking_platform.db.migrations import (
    CONNECTION_ATTRIBUTE,
    build_alembic_config,
    own_tables_only,
)
from booking_platform.db.session import create_engine
from booking_platform.modules.flight.models import Aircraft, Airport, Flight, Seat
from booking_platform.modules.identity.models import IdentityBase, Role, User
from booking_platform.modules.registry import (
    MODULES,
    build_module_registry,
    create_runtime_contexts,
    module_names,
    select_modules,
)
from booking_platform.settings import Settings
from booking_platform.startup import MigrationFailed, run_startup_sequence
from conftest import sqlite_template

EXPECTED_REVISIONS = {
    "identity": "identity_0001",
    "flight": "flight_0001",
    "passenger": "passenger_0001",
    "booking": "booking_0001",
}


async def _count(ctx, model) -> int:
    async with ctx.session() as session:
        return await session.scalar(select(func.count()).select_from(model))


async def _run(settings: Settings):
    return await run_startup_sequence(
        env=settings.env,
        modules=build_module_registry(settings),
        step_timeout=settings.startup_step_timeout_seconds,
    )


@pytest.mark.asyncio
async def test_startup_migrates_every_module_to_head(settings: Settings) -> None:
    report = await _run(settings)

    assert [m.module for m in report.modules] == ["identity", "flight", "passenger", "booking"]
    assert all(m.migrated for m in report.modules)

    contexts = create_runtime_contexts(settings)
    try:
        for name, ctx in contexts.items():
            assert await ctx.current_revision() == EXPECTED_REVISIONS[name]
    finally:
        for ctx in contexts.values():
            await ctx.dispose()


@pytest.mark.asyncio
async def test_startup_seeds_reference_data(settings: Settings) -> None:
    report = await _run(settings)

    seeded = {m.module: m.seeders for m in report.modules}
    assert seeded["identity"] == ["IdentityDataSeeder"]
    assert seeded["flight"] == ["FlightReferenceDataSeeder", "FlightScheduleSeeder"]
    assert seeded["passenger"] == [] and seeded["booking"] == []

    contexts = create_runtime_contexts(settings)
    try:
        identity, flight = contexts["identity"], contexts["flight"]
        assert await _count(identity, Role) == 2
        async with identity.session() as session:
            stmt = select(User).where(User.username == "admin")
            admin = (await session.execute(stmt)).scalar_one()
            assert [r.normalized_name for r in admin.roles] == ["ADMIN"]
            # Seeders run as the system: stamped, but without a user id.
            assert admin.created_at is not None
            assert admin.created_by is None

        assert await _count(flight, Airport) == 2
        assert await _count(flight, Aircraft) == 3
        assert await _count(flight, Flight) == 1
        assert await _count(flight, Seat) == 6
    finally:
        for ctx in contexts.values():
            await ctx.dispose()


@pytest.mark.asyncio
async def test_second_startup_adds_nothing(settings: Settings) -> None:
    await _run(settings)
    await _run(settings)

    contexts = create_runtime_contexts(settings)
    try:
        assert await _count(contexts["identity"], Role) == 2
        assert await _count(contexts["identity"], User) == 1
        assert await _count(contexts["flight"], Airport) == 2
        assert await _count(contexts["flight"], Flight) == 1
        assert await _count(contexts["flight"], Seat) == 6
        assert await contexts["booking"].current_revision() == "booking_0001"
    finally:
        for ctx in contexts.values():
            await ctx.dispose()


@pytest.mark.asyncio
async def test_test_environment_creates_no_databases(tmp_path: Path) -> None:
    settings = Settings(env="test", database_url=sqlite_template(tmp_path))

    report = await _run(settings)

    assert report.skipped is True
    assert list(tmp_path.glob("*.db")) == []


@pytest.mark.asyncio
async def test_unreachable_database_fails_first_module(tmp_path: Path) -> None:
    # SQLite cannot create a file inside a directory that does not exist.
    settings = Settings(env="prod", database_url=sqlite_template(tmp_path / "missing"))

    with pytest.raises(MigrationFailed) as exc_info:
        await _run(settings)

    assert exc_info.value.module == "identity"


@pytest.mark.asyncio
async def test_only_selected_modules_are_migrated(settings: Settings, tmp_path: Path) -> None:
    report = await run_startup_sequence(
        env="prod", modules=build_module_registry(settings, only=["booking", "flight"])
    )

    assert [m.module for m in report.modules] == ["flight", "booking"]
    assert sorted(p.name for p in tmp_path.glob("*.db")) == ["booking.db", "flight.db"]


def test_registry_order_and_validation() -> None:
    assert module_names() == ["identity", "flight", "passenger", "booking"]
    with pytest.raises(ValueError, match="payments"):
        select_modules(["flight", "payments"])


@pytest.mark.asyncio
async def test_modules_sharing_one_database_report_no_schema_drift(tmp_path: Path) -> None:
    url = f"sqlite+aiosqlite:///{tmp_path}/platform.db"
    settings = Settings(env="prod", database_url=url, log_level="WARNING")
    await _run(settings)

    engine = create_engine(url)
    try:
        for definition in MODULES:

            def check(connection, definition=definition) -> None:
                cfg = build_alembic_config(
                    script_location=definition.script_location, database_url=url
                )
                cfg.attributes[CONNECTION_ATTRIBUTE] = connection
                # Raises AutogenerateDiffsDetected if any operation would be planned.
                command.check(cfg)

            async with engine.connect() as conn:
                await conn.run_sync(check)
    finally:
        await engine.dispose()


def test_autogenerate_filter_keeps_only_own_tables() -> None:
    include_name = own_tables_only(IdentityBase.metadata)

    assert include_name("users", "table", {}) is True
    assert include_name("flights", "table", {}) is False
    assert include_name("alembic_version_flight", "table", {}) is False
    assert include_name(None, "schema", {}) is True
    assert own_tables_only(MetaData())("users", "table", {}) is False
