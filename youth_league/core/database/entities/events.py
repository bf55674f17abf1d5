"""
Event entity models.

An event is a scheduled occurrence (tournament, jamboree, practice day) held
at a location and made up of games.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .games import Game
    from .locations import Location


class EventBase(Base):
    """Base fields for event entity."""

    name: str = text_field("NAME")
    type: Optional[str] = text_field("TYPE", nullable=True)
    description: Optional[str] = text_field("DESCRIPTION", nullable=True)
    start_date: datetime = Field(sa_column=Column("START_DATE", DateTime, nullable=False))
    end_date: datetime = Field(sa_column=Column("END_DATE", DateTime, nullable=False))
    location_id: str = text_field("LOCATION_ID")


class Event(EventBase, table=True):
    """Entity for a scheduled occurrence at a location.

    Table: EVENT
    """

    __tablename__ = "EVENT"

    id: Optional[int] = serial_key()

    # Relationships
    location: Optional["Location"] = reference("Location.id", "Event.location_id")
    games: List["Game"] = reference("Event.id", "Game.event_id")

    def __repr__(self) -> str:
        return f"Event(id={self.id}, name={self.name}, start_date={self.start_date})"
