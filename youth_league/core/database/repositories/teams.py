"""
Team repository.

Data access for teams, their rosters and the games they play on either side.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.coaches import Coach
from ..entities.games import Game
from ..entities.players import Player
from ..entities.teams import Team
from .base import AsyncBaseRepository, Identity


class TeamRepository(AsyncBaseRepository[Team]):
    """Repository for team data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Team)

    async def get_with_roster(self, team_id: Identity) -> Optional[Team]:
        """Get a team with players, coaches (each with registrant), manager and division loaded.

        Args:
            team_id: Team ID

        Returns:
            Team instance or None
        """
        stmt = (
            select(Team)
            .where(Team.id == self._coerce_identity(team_id))
            .options(
                selectinload(Team.players).selectinload(Player.registrant),  # type: ignore[arg-type]
                selectinload(Team.coaches).selectinload(Coach.registrant),  # type: ignore[arg-type]
                selectinload(Team.manager),  # type: ignore[arg-type]
                selectinload(Team.division),  # type: ignore[arg-type]
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_division(self, division_id: int | str) -> List[Team]:
        """Get all teams in a division, ordered by name."""
        stmt = select(Team).where(Team.division_id == as_reference(division_id)).order_by(Team.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_games(self, team_id: int | str) -> List[Game]:
        """Get every game a team plays, home or away, with event and both sides loaded."""
        key = as_reference(team_id)
        stmt = (
            select(Game)
            .where(or_(Game.home_team_id == key, Game.away_team_id == key))
            .options(
                selectinload(Game.event),  # type: ignore[arg-type]
                selectinload(Game.home_team),  # type: ignore[arg-type]
                selectinload(Game.away_team),  # type: ignore[arg-type]
            )
            .order_by(Game.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
