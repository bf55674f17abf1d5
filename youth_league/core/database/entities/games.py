"""
Game entity models.

A game is a single match between a home and an away team within an event.
Scores stay empty until the game is played.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import model_validator
from sqlalchemy import Column, Numeric
from sqlmodel import Field

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .events import Event
    from .teams import Team


class GameBase(Base):
    """Base fields for game entity."""

    event_id: str = text_field("EVENT_ID")
    home_team_id: str = text_field("HOME_TEAM_ID")
    away_team_id: str = text_field("AWAY_TEAM_ID")
    home_team_score: Optional[Decimal] = Field(default=None, sa_column=Column("HOME_TEAM_SCORE", Numeric))
    away_team_score: Optional[Decimal] = Field(default=None, sa_column=Column("AWAY_TEAM_SCORE", Numeric))

    @model_validator(mode="after")
    def _check_distinct_sides(self) -> "GameBase":
        if self.home_team_id == self.away_team_id:
            raise ValueError(f"home and away team must differ, got {self.home_team_id!r} for both")
        return self


class Game(GameBase, table=True):
    """Entity for a match between two teams.

    Table: GAME
    """

    __tablename__ = "GAME"

    id: Optional[int] = serial_key()

    # Relationships
    event: Optional["Event"] = reference("Event.id", "Game.event_id")
    home_team: Optional["Team"] = reference("Team.id", "Game.home_team_id")
    away_team: Optional["Team"] = reference("Team.id", "Game.away_team_id")

    @property
    def is_scored(self) -> bool:
        return self.home_team_score is not None and self.away_team_score is not None

    def __repr__(self) -> str:
        return f"Game(id={self.id}, home_team_id={self.home_team_id}, away_team_id={self.away_team_id})"
