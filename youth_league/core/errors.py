"""Error types for the youth league data layer.

Database driver errors propagate unchanged; these cover the cases the
package itself detects.
"""

from __future__ import annotations


class YouthLeagueError(Exception):
    """Base error for all youth league exceptions."""


class DatabaseConfigurationError(YouthLeagueError):
    """Raised when a database URL cannot be built from the current settings."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing database settings: {', '.join(missing)}")


class EntityNotFoundError(YouthLeagueError):
    """Raised when an operation targets a row that does not exist."""

    def __init__(self, table: str, entity_id: object) -> None:
        self.table = table
        self.entity_id = entity_id
        super().__init__(f"No row in '{table}' with identity {entity_id!r}")
