"""
Global database session and engine management.

The process-wide AsyncEngine and async_sessionmaker are built on first use
from the application settings, so importing the package never needs database
credentials.
"""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from youth_league.core.config import settings
from youth_league.core.logging_config import get_logger

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Return the global engine, creating it from settings on first call.

    Raises:
        DatabaseConfigurationError: if neither DATABASE_URL nor the POSTGRES_* values are set.
    """
    engine = create_engine(settings.resolve_database_url())
    logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return engine


@lru_cache(maxsize=1)
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Return the global session factory bound to ``get_engine()``."""
    return create_sessionmaker(get_engine())


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLModel session.
    """
    async with get_sessionmaker()() as session:
        yield session


async def init_db() -> None:
    """
    Initialize the database from ORM metadata.

    NOTE: Deployed databases are managed by Alembic migrations. This is for
    local development and throwaway databases only.
    """
    await create_all(get_engine())
