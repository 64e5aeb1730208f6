"""
booking_platform.db.migrations

Shared Alembic environment for module migrations.

Responsibilities:
- Build an Alembic `Config` for a module's script directory.
- Run a module's migrations from its `env.py` (online or offline).

Notes:
- `run_module_migrations` executes inside Alembic's `env.py` context; it is not a
  runtime API. The runtime entry point is `ModuleDbContext.migrate`.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig
from pathlib import Path

import sqlalchemy as sa
from alembic import context
from alembic.config import Config
from sqlalchemy import Connection, MetaData, pool
from sqlalchemy.ext.asyncio import create_async_engine

# Key under which a live connection is handed to env.py via `Config.attributes`.
CONNECTION_ATTRIBUTE = "connection"


def version_table_for(module: str) -> str:
    return f"alembic_version_{module}"


def audit_columns() -> list[sa.Column]:
    """Columns of `AuditableMixin`, for use inside revision `create_table` calls."""

    return [
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("created_by", sa.BigInteger(), nullable=True),
        sa.Column("last_modified", sa.DateTime(), nullable=True),
        sa.Column("last_modified_by", sa.BigInteger(), nullable=True),
    ]


def build_alembic_config(*, script_location: Path, database_url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(script_location))
    # ConfigParser interpolation treats "%" specially (URL-encoded passwords).
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def run_module_migrations(metadata: MetaData, *, version_table: str) -> None:
    """Body of every module `env.py`."""

    if context.config.config_file_name is not None:
        # alembic CLI run with alembic.ini: use its logging sections.
        fileConfig(context.config.config_file_name, disable_existing_loggers=False)

    if context.is_offline_mode():
        _run_offline(metadata, version_table)
        return

    connection = context.config.attributes.get(CONNECTION_ATTRIBUTE)
    if connection is not None:
        _run_on_connection(connection, metadata, version_table)
    else:
        # Invoked from the alembic CLI: no caller-provided connection.
        asyncio.run(_run_online(metadata, version_table))


def own_tables_only(metadata: MetaData):
    """
    `include_name` hook limiting autogenerate to tables declared in `metadata`.

    Modules may share one database; without this, comparing one module's metadata
    against it would plan drops for every other module's tables, including their
    `alembic_version_<module>` tables.
    """

    def include_name(name: str | None, type_: str, _parent_names: dict) -> bool:
        if type_ == "table":
            return name in metadata.tables
        return True

    return include_name


def _run_offline(metadata: MetaData, version_table: str) -> None:
    # Offline: emit SQL scripts without a DB connection.
    context.configure(
        url=context.config.get_main_option("sqlalchemy.url"),
        target_metadata=metadata,
        version_table=version_table,
        include_name=own_tables_only(metadata),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_on_connection(connection: Connection, metadata: MetaData, version_table: str) -> None:
    context.configure(
        connection=connection,
        target_metadata=metadata,
        version_table=version_table,
        include_name=own_tables_only(metadata),
        # SQLite needs batch mode for ALTER TABLE; other backends ignore it.
        render_as_batch=True,
    )
    with context.begin_transaction():
        context.run_migrations()


async def _run_online(metadata: MetaData, version_table: str) -> None:
    url = context.config.get_main_option("sqlalchemy.url")
    engine = create_async_engine(url, poolclass=pool.NullPool)
    try:
        async with engine.begin() as connection:
            await connection.run_sync(_run_on_connection, metadata, version_table)
    finally:
        await engine.dispose()


# --- Module Notes -----------------------------------------------------------
# Keep this file aligned with each module's `migrations/env.py`, which only selects
# the module metadata and version table before delegating here.
