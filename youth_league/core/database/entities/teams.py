"""
Team entity models.

A team belongs to a division, is managed by a registrant, carries players and
coaches, and appears in games either as the home or the away side.
"""

from typing import TYPE_CHECKING, List, Optional

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .coaches import Coach
    from .divisions import Division
    from .games import Game
    from .players import Player
    from .registrants import Registrant


class TeamBase(Base):
    """Base fields for team entity."""

    name: str = text_field("NAME")
    manager_id: str = text_field("MANAGER_ID", description="Registrant managing the team")
    division_id: str = text_field("DIVISION_ID")


class Team(TeamBase, table=True):
    """Entity for a team within a division.

    Table: TEAM
    """

    __tablename__ = "TEAM"

    id: Optional[int] = serial_key()

    # Relationships
    players: List["Player"] = reference("Team.id", "Player.team_id")
    coaches: List["Coach"] = reference("Team.id", "Coach.team_id")
    home_games: List["Game"] = reference("Team.id", "Game.home_team_id")
    away_games: List["Game"] = reference("Team.id", "Game.away_team_id")
    division: Optional["Division"] = reference("Division.id", "Team.division_id")
    manager: Optional["Registrant"] = reference("Registrant.id", "Team.manager_id")

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name}, division_id={self.division_id})"
