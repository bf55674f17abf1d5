"""Initial league schema

Revision ID: 20260101_000000
Revises: None
Create Date: 2026-01-01 00:00:00.000000

Creates the ten league tables:
- REGISTRANT, ENROLLEE, PLAYER, COACH (people and their assignments)
- PROGRAM, DIVISION, TEAM (league structure)
- EVENT, GAME, LOCATION (scheduling)

Reference columns are TEXT and carry no foreign key constraints.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260101_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLES = (
    "REGISTRANT",
    "ENROLLEE",
    "PLAYER",
    "COACH",
    "TEAM",
    "PROGRAM",
    "DIVISION",
    "EVENT",
    "GAME",
    "LOCATION",
)


def upgrade() -> None:
    """Create all league tables."""

    op.create_table(
        "REGISTRANT",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("GUARDIAN_ID", sa.Text(), nullable=False),
        sa.Column("FIRST_NAME", sa.Text(), nullable=False),
        sa.Column("LAST_NAME", sa.Text(), nullable=False),
        sa.Column("BIRTH_DATE", sa.DateTime(), nullable=False),
        sa.Column("SEX", sa.Text(), nullable=False),
        sa.Column("NICK_NAME", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "ENROLLEE",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("REGISTRANT_ID", sa.Text(), nullable=False),
        sa.Column("PROGRAM_ID", sa.Text(), nullable=False),
        sa.Column("ENROLLMENT_DATE", sa.DateTime(), nullable=False),
        sa.Column("PREFERENCE", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "PLAYER",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("REGISTRANT_ID", sa.Text(), nullable=False),
        sa.Column("DIVISION_ID", sa.Text(), nullable=False),
        sa.Column("TEAM_ID", sa.Text(), nullable=False),
        sa.Column("JERSEY_NUMBER", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("ID"),
    )

    # One staff position per registrant and team
    op.create_table(
        "COACH",
        sa.Column("REGISTRANT_ID", sa.Text(), nullable=False),
        sa.Column("TEAM_ID", sa.Text(), nullable=False),
        sa.Column("POSITION", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("REGISTRANT_ID", "TEAM_ID"),
    )

    op.create_table(
        "TEAM",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("NAME", sa.Text(), nullable=False),
        sa.Column("MANAGER_ID", sa.Text(), nullable=False),
        sa.Column("DIVISION_ID", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "PROGRAM",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("NAME", sa.Text(), nullable=False),
        sa.Column("DESCRIPTION", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "DIVISION",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("NAME", sa.Text(), nullable=False),
        sa.Column("DESCRIPTION", sa.Text(), nullable=True),
        sa.Column("PROGRAM_ID", sa.Text(), nullable=False),
        sa.Column("AGE_MIN", sa.Text(), nullable=False),
        sa.Column("AGE_MAX", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "EVENT",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("NAME", sa.Text(), nullable=False),
        sa.Column("TYPE", sa.Text(), nullable=True),
        sa.Column("DESCRIPTION", sa.Text(), nullable=True),
        sa.Column("START_DATE", sa.DateTime(), nullable=False),
        sa.Column("END_DATE", sa.DateTime(), nullable=False),
        sa.Column("LOCATION_ID", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "GAME",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("EVENT_ID", sa.Text(), nullable=False),
        sa.Column("HOME_TEAM_ID", sa.Text(), nullable=False),
        sa.Column("AWAY_TEAM_ID", sa.Text(), nullable=False),
        sa.Column("HOME_TEAM_SCORE", sa.Numeric(), nullable=True),
        sa.Column("AWAY_TEAM_SCORE", sa.Numeric(), nullable=True),
        sa.PrimaryKeyConstraint("ID"),
    )

    op.create_table(
        "LOCATION",
        sa.Column("ID", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("NAME", sa.Text(), nullable=False),
        sa.Column("PLAYABLE", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("LATITUDE", sa.Numeric(), nullable=False),
        sa.Column("LONGITUDE", sa.Numeric(), nullable=False),
        sa.PrimaryKeyConstraint("ID"),
    )


def downgrade() -> None:
    """Drop all league tables."""
    for table in reversed(TABLES):
        op.drop_table(table)
