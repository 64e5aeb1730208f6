"""
booking_platform.startup.orchestrator

Startup migration-and-seed sequence.

Responsibilities:
- Skip everything under the test environment.
- For each module in declared order: migrate, then run its seeders in order.
- Stop at the first failure and surface it as a `StartupError`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field

from booking_platform.observability.logging import get_logger
from booking_platform.settings import TEST_ENVIRONMENT
from booking_platform.startup.contracts import DataSeeder, ModuleDescriptor
from booking_platform.startup.errors import DuplicateModule, MigrationFailed, SeedingFailed

log = get_logger(__name__)


@dataclass(slots=True)
class ModuleOutcome:
    module: str
    migrated: bool = False
    seeders: list[str] = field(default_factory=list)


@dataclass(slots=True)
class StartupReport:
    env: str
    skipped: bool
    modules: list[ModuleOutcome] = field(default_factory=list)


async def run_startup_sequence(
    *,
    env: str,
    modules: Sequence[ModuleDescriptor],
    step_timeout: float | None = None,
) -> StartupReport:
    """
    Migrate and seed every module, or nothing at all under the test environment.

    `step_timeout` bounds each single migrate/seed call; an expired step fails the
    sequence like any other error. Raises `DuplicateModule`, `MigrationFailed` or
    `SeedingFailed`; task cancellation propagates unchanged.
    """

    if env.lower() == TEST_ENVIRONMENT:
        log.info("startup_skipped", env=env)
        return StartupReport(env=env, skipped=True)

    _check_unique_names(modules)

    report = StartupReport(env=env, skipped=False)
    for module in modules:
        outcome = ModuleOutcome(module=module.name)
        await _migrate(module, step_timeout)
        outcome.migrated = True
        outcome.seeders = await _seed(module, step_timeout)
        report.modules.append(outcome)

    log.info("startup_completed", env=env, modules=[m.module for m in report.modules])
    return report


async def _migrate(module: ModuleDescriptor, step_timeout: float | None) -> None:
    mlog = log.bind(module=module.name)
    mlog.info("module_migrating")
    try:
        async with module.open_context() as ctx:
            async with asyncio.timeout(step_timeout):
                await ctx.migrate()
    except Exception as e:
        mlog.exception("startup_failed", operation="migrate")
        raise MigrationFailed(module.name, e) from e
    mlog.info("module_migrated")


async def _seed(module: ModuleDescriptor, step_timeout: float | None) -> list[str]:
    if not module.seeders:
        return []

    mlog = log.bind(module=module.name)
    mlog.info("module_seeding", seeders=[s.name for s in module.seeders])

    completed: list[str] = []
    current: DataSeeder | None = None
    try:
        # Fresh context: nothing from the migration step is reused here.
        async with module.open_context() as ctx:
            async with ctx.session() as session:
                for seeder in module.seeders:
                    current = seeder
                    async with asyncio.timeout(step_timeout):
                        await seeder.seed_all(session)
                        await session.commit()
                    completed.append(seeder.name)
                    mlog.info("seeder_completed", seeder=seeder.name)
                current = None
    except Exception as e:
        seeder_name = current.name if current is not None else None
        mlog.exception("startup_failed", operation="seed", seeder=seeder_name)
        raise SeedingFailed(module.name, seeder_name, e) from e
    return completed


def _check_unique_names(modules: Sequence[ModuleDescriptor]) -> None:
    seen: set[str] = set()
    for module in modules:
        if module.name in seen:
            raise DuplicateModule(module.name)
        seen.add(module.name)


# --- Module Notes -----------------------------------------------------------
# Modules run strictly one after another in the order given; a failure stops the
# whole sequence, so later modules are neither migrated nor seeded.
