"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It loads configuration from environment variables and the local ``.env.local``
file, and groups the database and migration values into small config models.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from youth_league.core.errors import DatabaseConfigurationError

POSTGRES_PORT = 5432

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class PostgreSQLConfig(BaseModel):
    """PostgreSQL connection configuration.

    The port is fixed and SSL is always required; only the host, credentials
    and database name come from the environment.
    """

    host: Optional[str] = Field(default=None, alias="POSTGRES_HOST", description="PostgreSQL host address")
    user: str = Field(default="postgres", alias="POSTGRES_USER", description="PostgreSQL user")
    password: Optional[str] = Field(default=None, alias="POSTGRES_PASSWORD", description="PostgreSQL password")
    database: Optional[str] = Field(default=None, alias="POSTGRES_DATABASE", description="PostgreSQL database name")
    port: int = Field(default=POSTGRES_PORT, description="PostgreSQL port number")
    ssl: bool = Field(default=True, description="Require SSL for every connection")

    model_config = {"populate_by_name": True}

    @property
    def url(self) -> URL:
        """Build the asyncpg connection URL.

        Raises:
            DatabaseConfigurationError: if host, password or database is unset.
        """
        required = {
            "POSTGRES_HOST": self.host,
            "POSTGRES_PASSWORD": self.password,
            "POSTGRES_DATABASE": self.database,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise DatabaseConfigurationError(missing)
        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
            query={"ssl": "require"} if self.ssl else {},
        )


class MigrationConfig(BaseModel):
    """Locations consumed by the migration tooling."""

    schema_module: str = Field(
        default="youth_league.core.database.entities",
        alias="YOUTH_LEAGUE_SCHEMA_MODULE",
        description="Importable module declaring every table model",
    )
    migrations_dir: str = Field(
        default="alembic/versions",
        alias="YOUTH_LEAGUE_MIGRATIONS_DIR",
        description="Directory holding generated migration scripts",
    )
    script_location: str = Field(
        default="alembic",
        alias="YOUTH_LEAGUE_MIGRATIONS_SCRIPT_LOCATION",
        description="Alembic script directory (env.py and templates)",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are bound from environment variables and the ``.env.local``
    file. Grouped views are exposed as properties.
    """

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    postgres_host: Optional[str] = Field(default=None, alias="POSTGRES_HOST")
    postgres_user: str = Field(default="postgres", alias="POSTGRES_USER")
    postgres_password: Optional[str] = Field(default=None, alias="POSTGRES_PASSWORD")
    postgres_database: Optional[str] = Field(default=None, alias="POSTGRES_DATABASE")
    database_url: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full connection URL overriding the POSTGRES_* values (tests, local dev)",
    )

    # =====================================================================
    # Migration Configuration
    # =====================================================================
    schema_module: str = Field(default="youth_league.core.database.entities", alias="YOUTH_LEAGUE_SCHEMA_MODULE")
    migrations_dir: str = Field(default="alembic/versions", alias="YOUTH_LEAGUE_MIGRATIONS_DIR")
    script_location: str = Field(default="alembic", alias="YOUTH_LEAGUE_MIGRATIONS_SCRIPT_LOCATION")

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        alias="YOUTH_LEAGUE_LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(default="detailed", alias="YOUTH_LEAGUE_LOG_FORMAT", description="simple, detailed or json")
    log_file_dir: str = Field(default="logs", alias="YOUTH_LEAGUE_LOG_DIR")
    enable_file_logging: bool = Field(default=False, alias="YOUTH_LEAGUE_ENABLE_FILE_LOGGING")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def migration(self) -> MigrationConfig:
        """Get migration locations from environment variables."""
        return MigrationConfig.model_validate(self.model_dump(by_alias=True))

    def resolve_database_url(self) -> Union[str, URL]:
        """Return ``DATABASE_URL`` when set, otherwise the PostgreSQL URL.

        A PostgreSQL override without an ``ssl`` or ``sslmode`` query parameter
        gets ``ssl=require``; opt out explicitly with ``?ssl=disable``.
        """
        if not self.database_url:
            return self.postgres.url
        url = make_url(self.database_url)
        if url.get_backend_name() in ("postgresql", "postgres") and not {"ssl", "sslmode"} & set(url.query):
            return url.update_query_dict({"ssl": "require"})
        return self.database_url


settings = Settings()
