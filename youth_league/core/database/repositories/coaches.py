"""
Coach repository.

Coach rows are keyed by (registrant_id, team_id) instead of a serial ID.
"""

from __future__ import annotations

from typing import Any, List

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.coaches import Coach
from .base import AsyncBaseRepository, Identity


class CoachRepository(AsyncBaseRepository[Coach]):
    """Repository for coach data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Coach)

    def _coerce_identity(self, entity_id: Identity) -> Any:
        if isinstance(entity_id, (str, int)):
            raise TypeError("Coach identity is a (registrant_id, team_id) pair")
        registrant_id, team_id = entity_id
        return (as_reference(registrant_id), as_reference(team_id))

    async def list_for_team(self, team_id: int | str) -> List[Coach]:
        """Get a team's staff with their registrants loaded."""
        stmt = (
            select(Coach)
            .where(Coach.team_id == as_reference(team_id))
            .options(selectinload(Coach.registrant))  # type: ignore[arg-type]
            .order_by(Coach.registrant_id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_registrant(self, registrant_id: int | str) -> List[Coach]:
        """Get every team a registrant coaches, with the teams loaded."""
        stmt = (
            select(Coach)
            .where(Coach.registrant_id == as_reference(registrant_id))
            .options(selectinload(Coach.team))  # type: ignore[arg-type]
            .order_by(Coach.team_id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
