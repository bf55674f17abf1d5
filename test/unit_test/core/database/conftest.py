"""Test configuration for database unit tests.

This module provides common fixtures for testing the database layer with an
in-memory SQLite database and sample payloads for every table.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from youth_league.core.database.repositories import RepositoryBundle, build_repositories
from youth_league.core.database.utils import create_all, create_engine, create_sessionmaker


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create in-memory SQLite engine with every league table."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(in_memory_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the in-memory engine."""
    return create_sessionmaker(in_memory_engine)


@pytest.fixture(scope="function")
async def in_memory_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def repos(in_memory_session: AsyncSession) -> RepositoryBundle:
    """Repositories sharing the test session."""
    return build_repositories(in_memory_session)


@pytest.fixture(scope="function")
async def read_repos(session_factory) -> AsyncGenerator[RepositoryBundle, None]:
    """Repositories on a second session, so reads never hit the writer's identity map."""
    async with session_factory() as session:
        yield build_repositories(session)


@pytest.fixture(scope="function")
def sample_registrant_data() -> dict:
    """Sample registrant data for testing."""
    return {
        "guardian_id": "guardian_001",
        "first_name": "Maya",
        "last_name": "Okafor",
        "birth_date": datetime(2014, 5, 17),
        "sex": "F",
        "nick_name": "Mo",
    }


@pytest.fixture(scope="function")
def sample_program_data() -> dict:
    """Sample program data for testing."""
    return {"name": "Spring Recreational 2026", "description": "Eight-week spring season"}


@pytest.fixture(scope="function")
def sample_division_data() -> dict:
    """Sample division data for testing (program reference filled in by tests)."""
    return {
        "name": "U10 Girls",
        "description": "Under ten",
        "program_id": "1",
        "age_min": "8",
        "age_max": "9",
    }


@pytest.fixture(scope="function")
def sample_location_data() -> dict:
    """Sample location data for testing."""
    return {
        "name": "Riverside Park Field 3",
        "latitude": Decimal("40.7128"),
        "longitude": Decimal("-74.0060"),
    }


@pytest.fixture(scope="function")
def sample_event_data() -> dict:
    """Sample event data for testing (location reference filled in by tests)."""
    return {
        "name": "Opening Day Jamboree",
        "type": "jamboree",
        "description": "Round robin for every U10 team",
        "start_date": datetime(2026, 4, 11, 9, 0),
        "end_date": datetime(2026, 4, 11, 15, 30),
        "location_id": "1",
    }
