from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load dotenv files early so test fixtures can read secrets via os.getenv
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)


class TestSettings(BaseSettings):
    """Test environment settings bound from environment variables and test/.env."""

    __test__ = False

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enable_postgres_tests: bool = Field(
        default=False,
        alias="ENABLE_POSTGRES_TESTS",
        description="Enable PostgreSQL-based tests (requires Docker for testcontainers)",
    )
    postgres_image: str = Field(default="postgres:16-alpine", alias="POSTGRES_TEST_IMAGE")


test_settings = TestSettings()


@pytest.fixture(scope="session")
def test_config() -> TestSettings:
    """Fixture providing test configuration from the Pydantic settings model."""
    return test_settings
