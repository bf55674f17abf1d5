"""Fixtures for end-to-end tests against real databases.

PostgreSQL runs in a throwaway container started through testcontainers and
only when ``ENABLE_POSTGRES_TESTS`` is set; SQLite tests always run.
"""

from __future__ import annotations

from typing import Generator

import pytest
from testcontainers.postgres import PostgresContainer

from youth_league.core.logging_config import get_logger

logger = get_logger(__name__)


@pytest.fixture(scope="session")
def postgres_container(test_config) -> Generator[PostgresContainer, None, None]:
    """Start a PostgreSQL container for the test session."""
    if not test_config.enable_postgres_tests:
        pytest.skip("PostgreSQL tests disabled (set ENABLE_POSTGRES_TESTS=true)")

    container = PostgresContainer(test_config.postgres_image, driver="asyncpg")
    container.start()
    logger.info(f"Started PostgreSQL container from {test_config.postgres_image}")
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture(scope="session")
def postgres_url(postgres_container: PostgresContainer) -> str:
    """asyncpg connection URL of the running container."""
    return postgres_container.get_connection_url()
