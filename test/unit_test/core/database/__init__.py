"""Unit tests for the league database layer.

Covers youth_league/core/database: table declarations and relationships,
repositories, engine helpers and the Alembic configuration builder. Tests run
against in-memory SQLite and need no external database service.
"""
