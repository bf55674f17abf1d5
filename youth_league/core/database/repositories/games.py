"""
Game repository.

Data access for matches between teams.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.games import Game
from .base import AsyncBaseRepository, Identity


class GameRepository(AsyncBaseRepository[Game]):
    """Repository for game data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Game)

    async def get_with_teams(self, game_id: Identity) -> Optional[Game]:
        """Get a game with its event and both teams loaded."""
        stmt = (
            select(Game)
            .where(Game.id == self._coerce_identity(game_id))
            .options(
                selectinload(Game.event),  # type: ignore[arg-type]
                selectinload(Game.home_team),  # type: ignore[arg-type]
                selectinload(Game.away_team),  # type: ignore[arg-type]
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_event(self, event_id: int | str) -> List[Game]:
        """Get an event's games in creation order."""
        stmt = select(Game).where(Game.event_id == as_reference(event_id)).order_by(Game.id)
        result = await self.session.exec(stmt)
        return list(result.all())
