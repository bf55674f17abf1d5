"""
Migration configuration and command helpers.

Builds the Alembic ``Config`` from the application settings: the script
directory, the directory generated revisions are written to, the module that
declares the schema, and the database URL. The helpers wrap the Alembic
commands used to generate and apply migrations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from alembic import command
from alembic.config import Config

from youth_league.core.config import Settings, settings
from youth_league.core.logging_config import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Revision files are named YYYYMMDD_HHMMSS_slug.py
FILE_TEMPLATE = "%%(year)d%%(month).2d%%(day).2d_%%(hour).2d%%(minute).2d%%(second).2d_%%(slug)s"


def _resolve(location: str) -> str:
    path = Path(location)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return str(path)


def build_alembic_config(
    app_settings: Optional[Settings] = None,
    *,
    database_url: Optional[str] = None,
    output_buffer: Optional[TextIO] = None,
) -> Config:
    """Create the Alembic configuration for this project.

    Args:
        app_settings: Settings to read locations and credentials from (defaults to the global settings)
        database_url: Explicit URL overriding the one derived from settings
        output_buffer: Stream receiving the SQL of offline (``sql=True``) runs

    Returns:
        Alembic Config ready for ``alembic.command`` functions

    Raises:
        DatabaseConfigurationError: if no URL is given and the settings cannot produce one
    """
    app_settings = app_settings or settings
    migration = app_settings.migration

    config = Config(output_buffer=output_buffer)
    config.set_main_option("script_location", _resolve(migration.script_location))
    config.set_main_option("version_locations", _resolve(migration.migrations_dir))
    config.set_main_option("schema_module", migration.schema_module)
    config.set_main_option("file_template", FILE_TEMPLATE)
    config.set_main_option("path_separator", "os")

    url = database_url or app_settings.resolve_database_url()
    if not isinstance(url, str):
        url = url.render_as_string(hide_password=False)
    # ConfigParser interpolation treats '%' as special
    config.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return config


def upgrade(revision: str = "head", *, sql: bool = False, config: Optional[Config] = None) -> None:
    """Apply migrations up to ``revision``; with ``sql=True`` print the SQL instead."""
    config = config or build_alembic_config()
    logger.info(f"Upgrading database to {revision} (offline={sql})")
    command.upgrade(config, revision, sql=sql)


def downgrade(revision: str, *, sql: bool = False, config: Optional[Config] = None) -> None:
    """Revert migrations down to ``revision``."""
    config = config or build_alembic_config()
    logger.info(f"Downgrading database to {revision} (offline={sql})")
    command.downgrade(config, revision, sql=sql)


def generate_revision(message: str, *, autogenerate: bool = True, config: Optional[Config] = None):
    """Write a new revision script into the migrations directory.

    With ``autogenerate`` the script is diffed from the schema module against
    the live database.

    Returns:
        The generated Alembic ``Script`` (or list of scripts)
    """
    config = config or build_alembic_config()
    logger.info(f"Generating revision '{message}' (autogenerate={autogenerate})")
    return command.revision(config, message=message, autogenerate=autogenerate)
