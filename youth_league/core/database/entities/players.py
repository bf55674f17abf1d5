"""
Player entity models.

A player row assigns a registrant to a division and a team. The jersey number
is text so that values like ``"00"`` survive.
"""

from typing import TYPE_CHECKING, Optional

from ..base import Base, reference, serial_key, text_field

if TYPE_CHECKING:
    from .divisions import Division
    from .registrants import Registrant
    from .teams import Team


class PlayerBase(Base):
    """Base fields for player entity."""

    registrant_id: str = text_field("REGISTRANT_ID")
    division_id: str = text_field("DIVISION_ID")
    team_id: str = text_field("TEAM_ID")
    jersey_number: Optional[str] = text_field("JERSEY_NUMBER", nullable=True)


class Player(PlayerBase, table=True):
    """Entity for a registrant playing on a team.

    Table: PLAYER
    """

    __tablename__ = "PLAYER"

    id: Optional[int] = serial_key()

    # Relationships
    registrant: Optional["Registrant"] = reference("Registrant.id", "Player.registrant_id")
    team: Optional["Team"] = reference("Team.id", "Player.team_id")
    division: Optional["Division"] = reference("Division.id", "Player.division_id")

    def __repr__(self) -> str:
        return f"Player(id={self.id}, registrant_id={self.registrant_id}, team_id={self.team_id})"
