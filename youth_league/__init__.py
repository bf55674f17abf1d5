"""Youth League data layer.

This package holds the relational model of a youth sports league together
with the tooling needed to migrate and query it.

Core subpackages
----------------

- ``youth_league.core.database.entities``: SQLModel table declarations for
  registrants, enrollments, players, coaches, teams, divisions, programs,
  events, games and locations.
- ``youth_league.core.database.repositories``: async data access with
  relationship-aware eager loading.
- ``youth_league.core.database.migrations``: Alembic configuration built from
  the application settings.

Reference columns are stored as text and point at serial primary keys. The
ORM relationships compare them with the key rendered as text and never write
those columns, so rows whose references dangle or hold non-numeric text can
still be inserted and simply resolve to ``None``.
"""
