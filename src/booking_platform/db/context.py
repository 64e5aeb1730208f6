"""
booking_platform.db.context

Per-module persistence context.

Responsibilities:
- Own one module's async engine and session factory.
- Apply the module's pending Alembic migrations (`migrate`).
- Provide scoped acquisition so engines are always disposed.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from pathlib import Path

from alembic import command
from alembic.runtime.migration import MigrationContext
from sqlalchemy import Connection, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from booking_platform.db import auditing  # noqa: F401  # registers audit stamping on Session
from booking_platform.db.migrations import (
    CONNECTION_ATTRIBUTE,
    build_alembic_config,
    version_table_for,
)
from booking_platform.db.session import create_engine, create_sessionmaker, session_scope


class ModuleDbContext:
    def __init__(
        self,
        *,
        module: str,
        database_url: str,
        script_location: Path,
        engine: AsyncEngine | None = None,
    ) -> None:
        self.module = module
        self.database_url = database_url
        self.script_location = script_location
        self.version_table = version_table_for(module)
        self._engine = engine if engine is not None else create_engine(database_url)
        self._sessionmaker = create_sessionmaker(self._engine)

    async def migrate(self) -> None:
        """Upgrade the module database to the head revision; a no-op when already current."""

        # One transaction per module: a failing revision leaves the schema untouched
        # on backends with transactional DDL.
        async with self._engine.begin() as conn:
            await conn.run_sync(self._upgrade)

    async def current_revision(self) -> str | None:
        async with self._engine.connect() as conn:
            return await conn.run_sync(self._read_revision)

    async def ping(self) -> None:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    def session(self) -> AbstractAsyncContextManager[AsyncSession]:
        return session_scope(self._sessionmaker)

    async def dispose(self) -> None:
        await self._engine.dispose()

    def _upgrade(self, connection: Connection) -> None:
        cfg = build_alembic_config(
            script_location=self.script_location, database_url=self.database_url
        )
        cfg.attributes[CONNECTION_ATTRIBUTE] = connection
        command.upgrade(cfg, "head")

    def _read_revision(self, connection: Connection) -> str | None:
        migration_context = MigrationContext.configure(
            connection, opts={"version_table": self.version_table}
        )
        return migration_context.get_current_revision()

    def __repr__(self) -> str:
        return f"ModuleDbContext(module={self.module!r})"


@asynccontextmanager
async def open_module_context(
    *, module: str, database_url: str, script_location: Path
) -> AsyncIterator[ModuleDbContext]:
    ctx = ModuleDbContext(module=module, database_url=database_url, script_location=script_location)
    try:
        yield ctx
    finally:
        # Released on success and failure alike.
        await ctx.dispose()


# --- Module Notes -----------------------------------------------------------
# `open_module_context` backs the startup sequence (one short-lived context per step);
# the API keeps one long-lived ModuleDbContext per module on `app.state.modules`.
