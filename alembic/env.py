"""Alembic migration environment for the youth league schema.

Supports three modes:

- offline (``alembic upgrade head --sql``): renders SQL against the URL only;
- online with a connection handed in through
  ``config.attributes["connection"]`` (tests, embedding applications);
- online on its own async engine built from the settings.
"""

import asyncio
import importlib

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel

from alembic import context
from youth_league.core.config import settings
from youth_league.core.database.utils import normalize_url
from youth_league.core.logging_config import get_logger, setup_logging

config = context.config

# Only the CLI (which reads alembic.ini) configures logging; programmatic
# callers keep their own setup.
if config.config_file_name is not None:
    setup_logging(enable_file=False)

logger = get_logger("youth_league.core.database.migrations")

schema_module = config.get_main_option("schema_module") or settings.migration.schema_module
importlib.import_module(schema_module)
target_metadata = SQLModel.metadata


def _database_url():
    return config.get_main_option("sqlalchemy.url") or settings.resolve_database_url()


def run_migrations_offline() -> None:
    """Emit the migration SQL without connecting to a database."""
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Create an async engine from the settings and run migrations on it."""
    connectable = create_async_engine(normalize_url(_database_url()), poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    connection = config.attributes.get("connection", None)
    if connection is None:
        asyncio.run(run_async_migrations())
    else:
        do_run_migrations(connection)


if context.is_offline_mode():
    logger.info(f"Rendering migrations for schema module {schema_module}")
    run_migrations_offline()
else:
    logger.info(f"Running migrations for schema module {schema_module}")
    run_migrations_online()
