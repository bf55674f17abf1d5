"""Unit tests for the Alembic configuration builder."""

from pathlib import Path

import pytest

from youth_league.core.config import Settings
from youth_league.core.database.migrations import PROJECT_ROOT, build_alembic_config, generate_revision
from youth_league.core.errors import DatabaseConfigurationError


@pytest.fixture
def league_settings(monkeypatch):
    for name in ("DATABASE_URL", "POSTGRES_HOST", "POSTGRES_PASSWORD", "POSTGRES_DATABASE", "POSTGRES_USER"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("POSTGRES_HOST", "db.league.example")
    monkeypatch.setenv("POSTGRES_PASSWORD", "p%ss")
    monkeypatch.setenv("POSTGRES_DATABASE", "league")
    return Settings(_env_file=None)


def test_project_root_holds_alembic_scripts():
    assert (PROJECT_ROOT / "alembic" / "env.py").is_file()
    assert (PROJECT_ROOT / "alembic.ini").is_file()


def test_locations_resolved_against_project_root(league_settings):
    config = build_alembic_config(league_settings)

    assert config.get_main_option("script_location") == str(PROJECT_ROOT / "alembic")
    assert config.get_main_option("version_locations") == str(PROJECT_ROOT / "alembic" / "versions")
    assert config.get_main_option("schema_module") == "youth_league.core.database.entities"


def test_absolute_migrations_dir_kept(monkeypatch, league_settings, tmp_path: Path):
    monkeypatch.setenv("YOUTH_LEAGUE_MIGRATIONS_DIR", str(tmp_path))

    config = build_alembic_config(Settings(_env_file=None))

    assert config.get_main_option("version_locations") == str(tmp_path)


def test_url_built_from_settings(league_settings):
    config = build_alembic_config(league_settings)

    url = config.get_main_option("sqlalchemy.url")
    assert url.startswith("postgresql+asyncpg://postgres:")
    # Percent signs in the password survive config interpolation
    assert ":p%25ss@" in url
    assert url.endswith("@db.league.example:5432/league?ssl=require")


def test_explicit_url_wins(league_settings):
    config = build_alembic_config(league_settings, database_url="sqlite:///league.db")

    assert config.get_main_option("sqlalchemy.url") == "sqlite:///league.db"


def test_missing_database_settings(monkeypatch):
    for name in ("DATABASE_URL", "POSTGRES_HOST", "POSTGRES_PASSWORD", "POSTGRES_DATABASE"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(DatabaseConfigurationError):
        build_alembic_config(Settings(_env_file=None))


def test_revision_file_template(league_settings):
    config = build_alembic_config(league_settings)

    assert config.get_main_option("file_template").startswith("%(year)d%(month).2d%(day).2d_")


def test_generate_revision_writes_into_migrations_dir(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("YOUTH_LEAGUE_MIGRATIONS_DIR", str(tmp_path))
    monkeypatch.setenv("DATABASE_URL", "sqlite:///unused.db")
    config = build_alembic_config(Settings(_env_file=None))

    script = generate_revision("add field notes", autogenerate=False, config=config)

    written = list(tmp_path.glob("*_add_field_notes.py"))
    assert len(written) == 1
    assert script.down_revision is None
    assert script.doc == "add field notes"


def test_path_separator_set(league_settings, tmp_path: Path, monkeypatch, recwarn):
    monkeypatch.setenv("YOUTH_LEAGUE_MIGRATIONS_DIR", str(tmp_path))
    config = build_alembic_config(Settings(_env_file=None))

    generate_revision("check separator", autogenerate=False, config=config)

    assert config.get_main_option("path_separator") == "os"
    assert not [warning for warning in recwarn if "path_separator" in str(warning.message)]


def test_ini_file_sets_path_separator():
    ini = (PROJECT_ROOT / "alembic.ini").read_text()

    assert "\npath_separator = os\n" in ini
    assert "version_path_separator" not in ini
