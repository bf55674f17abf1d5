"""
Database utility functions for engine and session management.

This module provides the core utility functions for creating database engines
and session factories. Built with async SQLAlchemy; sessions are SQLModel
``AsyncSession`` instances so repositories can use ``session.exec``.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- drop_all: Drops all tables from ORM metadata (for tests/dev)
"""

from __future__ import annotations

import re
from typing import Union

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .base import Base

_POSTGRES_SCHEME = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: Union[str, URL]) -> Union[str, URL]:
    """Rewrite Postgres URLs to use the asyncpg driver.

    ``postgresql://``, ``postgres://`` and other driver variants become
    ``postgresql+asyncpg://``. Non-Postgres URLs are returned unchanged.
    """
    if isinstance(db_url, URL):
        if db_url.get_backend_name() in ("postgresql", "postgres"):
            return db_url.set(drivername="postgresql+asyncpg")
        return db_url
    return _POSTGRES_SCHEME.sub("postgresql+asyncpg://", db_url, count=1)


def create_engine(db_url: Union[str, URL]) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL

    Returns:
        Configured AsyncEngine instance
    """
    return create_async_engine(normalize_url(db_url), pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    from . import entities  # noqa: F401  registers every table

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables for the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    from . import entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
