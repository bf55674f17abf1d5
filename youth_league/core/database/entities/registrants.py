"""
Registrant entity models.

A registrant is the person record every assignment hangs off: enrollments in
programs, player assignments, coaching assignments and managed teams.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .coaches import Coach
    from .enrollees import Enrollee
    from .players import Player
    from .teams import Team


class RegistrantBase(Base):
    """Base fields for registrant entity."""

    guardian_id: str = text_field("GUARDIAN_ID", description="Identifier of the responsible guardian")
    first_name: str = text_field("FIRST_NAME")
    last_name: str = text_field("LAST_NAME")
    birth_date: datetime = Field(sa_column=Column("BIRTH_DATE", DateTime, nullable=False))
    sex: str = text_field("SEX")
    nick_name: Optional[str] = text_field("NICK_NAME", nullable=True)


class Registrant(RegistrantBase, table=True):
    """Entity for a person known to the league.

    Table: REGISTRANT
    """

    __tablename__ = "REGISTRANT"

    id: Optional[int] = serial_key()

    # Relationships
    enrollments: List["Enrollee"] = reference("Registrant.id", "Enrollee.registrant_id")
    player_assignments: List["Player"] = reference("Registrant.id", "Player.registrant_id")
    coaching_assignments: List["Coach"] = reference("Registrant.id", "Coach.registrant_id")
    managed_teams: List["Team"] = reference("Registrant.id", "Team.manager_id")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"Registrant(id={self.id}, first_name={self.first_name}, last_name={self.last_name})"
