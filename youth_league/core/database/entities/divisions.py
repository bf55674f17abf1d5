"""
Division entity models.

A division is an age or skill bracket within a program. The age bounds are
stored as text exactly as entered.
"""

from typing import TYPE_CHECKING, List, Optional

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .players import Player
    from .programs import Program
    from .teams import Team


class DivisionBase(Base):
    """Base fields for division entity."""

    name: str = text_field("NAME")
    description: Optional[str] = text_field("DESCRIPTION", nullable=True)
    program_id: str = text_field("PROGRAM_ID")
    age_min: str = text_field("AGE_MIN")
    age_max: str = text_field("AGE_MAX")


class Division(DivisionBase, table=True):
    """Entity for a bracket of teams inside a program.

    Table: DIVISION
    """

    __tablename__ = "DIVISION"

    id: Optional[int] = serial_key()

    # Relationships
    program: Optional["Program"] = reference("Program.id", "Division.program_id")
    teams: List["Team"] = reference("Division.id", "Team.division_id")
    players: List["Player"] = reference("Division.id", "Player.division_id")

    def __repr__(self) -> str:
        return f"Division(id={self.id}, name={self.name}, program_id={self.program_id})"
