"""Alembic environment for the properties database (async SQLAlchemy).

The database URL always comes from Settings (DATABASE_URL), never from
alembic.ini, so migrations target the same database as the application.
SQLite runs in batch mode so ALTER TABLE operations render as table copies.

Seeders (roles, admin user) run after `alembic upgrade`. Force or suppress
them with `-x seed=true` / `-x seed=false`.
"""

import asyncio
import os
import sys
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_engine_from_config,
    async_sessionmaker,
)

from alembic import context
from src.core.config import settings
from src.infrastructure.persistence import BaseModel

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)

# Registers every table on BaseModel.metadata for autogenerate
from src.infrastructure.persistence.models import (  # noqa: E402, F401
    Owner,
    Property,
    PropertyImage,
    PropertyTrace,
    RefreshToken,
    Role,
    User,
)

target_metadata = BaseModel.metadata

_TRUTHY = {"1", "true", "yes", "y"}


def _is_sqlite() -> bool:
    return settings.database_url.startswith("sqlite")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        render_as_batch=_is_sqlite(),
        compare_type=True,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit migration SQL to the script output without a live connection."""
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    _configure(connection=connection)

    with context.begin_transaction():
        context.run_migrations()


def _seeding_requested() -> bool:
    """Decide whether seeders run after this invocation.

    An explicit `-x seed=...` wins. Otherwise seeders run only for an
    online `upgrade` (never for `revision --autogenerate` or `--sql`).
    """
    flag = context.get_x_argument(as_dictionary=True).get("seed")
    if flag is not None:
        return flag.strip().lower() in _TRUTHY

    cmd_opts = getattr(config, "cmd_opts", None)
    if cmd_opts is None or getattr(cmd_opts, "sql", False):
        return False
    # CLI stores (command_fn, positional, kwargs)
    cmd = getattr(cmd_opts, "cmd", None)
    if isinstance(cmd, tuple):
        return cmd[0].__name__ == "upgrade"
    return "upgrade" in sys.argv


async def _run_seeders(engine: AsyncEngine) -> None:
    """Run the idempotent bootstrap seeders in one committed session."""
    alembic_dir = os.path.dirname(__file__)
    if alembic_dir not in sys.path:
        sys.path.insert(0, alembic_dir)

    from seeds import run_all_seeders  # noqa: E402

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await run_all_seeders(session)
        await session.commit()


async def run_async_migrations() -> None:
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        async with connectable.connect() as connection:
            await connection.run_sync(do_run_migrations)

        if _seeding_requested():
            await _run_seeders(connectable)
    finally:
        await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
