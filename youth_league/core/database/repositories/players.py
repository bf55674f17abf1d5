"""
Player repository.

Data access for player assignments.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.players import Player
from .base import AsyncBaseRepository, Identity


class PlayerRepository(AsyncBaseRepository[Player]):
    """Repository for player data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Player)

    async def get_with_relations(self, player_id: Identity) -> Optional[Player]:
        """Get a player with registrant, team and division loaded.

        Relations whose referenced row is missing are ``None``.
        """
        stmt = (
            select(Player)
            .where(Player.id == self._coerce_identity(player_id))
            .options(
                selectinload(Player.registrant),  # type: ignore[arg-type]
                selectinload(Player.team),  # type: ignore[arg-type]
                selectinload(Player.division),  # type: ignore[arg-type]
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_team(self, team_id: int | str) -> List[Player]:
        """Get a team's players with their registrants loaded."""
        stmt = (
            select(Player)
            .where(Player.team_id == as_reference(team_id))
            .options(selectinload(Player.registrant))  # type: ignore[arg-type]
            .order_by(Player.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
