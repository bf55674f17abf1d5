"""
Location entity models.

A location is a venue with coordinates. ``PLAYABLE`` marks whether games can
currently be held there and defaults to true both in Python and in the
database.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, Column, Numeric, true
from sqlmodel import Field

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .events import Event


class LocationBase(Base):
    """Base fields for location entity."""

    name: str = text_field("NAME")
    playable: bool = Field(
        default=True,
        sa_column=Column("PLAYABLE", Boolean, nullable=False, default=True, server_default=true()),
    )
    latitude: Decimal = Field(sa_column=Column("LATITUDE", Numeric, nullable=False))
    longitude: Decimal = Field(sa_column=Column("LONGITUDE", Numeric, nullable=False))


class Location(LocationBase, table=True):
    """Entity for a venue.

    Table: LOCATION
    """

    __tablename__ = "LOCATION"

    id: Optional[int] = serial_key()

    # Relationships
    events: List["Event"] = reference("Location.id", "Event.location_id")

    def __repr__(self) -> str:
        return f"Location(id={self.id}, name={self.name}, playable={self.playable})"
