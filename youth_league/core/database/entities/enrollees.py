"""
Enrollee entity models.

An enrollee row records that a registrant enrolled in a program on a given
date, with an optional free-text preference (team, friend, time slot).
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .programs import Program
    from .registrants import Registrant


class EnrolleeBase(Base):
    """Base fields for enrollee entity."""

    registrant_id: str = text_field("REGISTRANT_ID")
    program_id: str = text_field("PROGRAM_ID")
    enrollment_date: datetime = Field(sa_column=Column("ENROLLMENT_DATE", DateTime, nullable=False))
    preference: Optional[str] = text_field("PREFERENCE", nullable=True)


class Enrollee(EnrolleeBase, table=True):
    """Entity for a registrant's enrollment in a program.

    Table: ENROLLEE
    """

    __tablename__ = "ENROLLEE"

    id: Optional[int] = serial_key()

    # Relationships
    registrant: Optional["Registrant"] = reference("Registrant.id", "Enrollee.registrant_id")
    program: Optional["Program"] = reference("Program.id", "Enrollee.program_id")

    def __repr__(self) -> str:
        return f"Enrollee(id={self.id}, registrant_id={self.registrant_id}, program_id={self.program_id})"
