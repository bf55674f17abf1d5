"""
Program entity models.

A program is the top-level offering (a season or league). Divisions point at
it directly; events are reached through the games its teams play, see
``ProgramRepository.list_events``.
"""

from typing import TYPE_CHECKING, List, Optional

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .divisions import Division
    from .enrollees import Enrollee


class ProgramBase(Base):
    """Base fields for program entity."""

    name: str = text_field("NAME")
    description: Optional[str] = text_field("DESCRIPTION", nullable=True)


class Program(ProgramBase, table=True):
    """Entity for a league offering.

    Table: PROGRAM
    """

    __tablename__ = "PROGRAM"

    id: Optional[int] = serial_key()

    # Relationships
    divisions: List["Division"] = reference("Program.id", "Division.program_id")
    enrollees: List["Enrollee"] = reference("Program.id", "Enrollee.program_id")

    def __repr__(self) -> str:
        return f"Program(id={self.id}, name={self.name})"
