"""
Coach entity models.

A coach row assigns a registrant to a team's staff. The table has no serial
key: the (REGISTRANT_ID, TEAM_ID) pair is the primary key, so a registrant
holds at most one staff position per team.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, Text
from sqlmodel import Field

from ..base import Base, reference, text_field

if TYPE_CHECKING:
    from .registrants import Registrant
    from .teams import Team


class CoachBase(Base):
    """Base fields for coach entity."""

    registrant_id: str = Field(sa_column=Column("REGISTRANT_ID", Text, primary_key=True))
    team_id: str = Field(sa_column=Column("TEAM_ID", Text, primary_key=True))
    position: Optional[str] = text_field("POSITION", nullable=True, description="Staff role, e.g. head or assistant")


class Coach(CoachBase, table=True):
    """Entity for a registrant on a team's staff.

    Table: COACH
    """

    __tablename__ = "COACH"

    # Relationships
    registrant: Optional["Registrant"] = reference("Registrant.id", "Coach.registrant_id")
    team: Optional["Team"] = reference("Team.id", "Coach.team_id")

    @property
    def identity(self) -> tuple[str, str]:
        """Composite key in primary key column order."""
        return (self.registrant_id, self.team_id)

    def __repr__(self) -> str:
        return f"Coach(registrant_id={self.registrant_id}, team_id={self.team_id}, position={self.position})"
