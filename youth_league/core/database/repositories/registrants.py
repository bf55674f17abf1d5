"""
Registrant repository.

Data access for person records, including one-shot loading of every
assignment a registrant holds.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.registrants import Registrant
from .base import AsyncBaseRepository, Identity


class RegistrantRepository(AsyncBaseRepository[Registrant]):
    """Repository for registrant data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Registrant)

    async def get_with_assignments(self, registrant_id: Identity) -> Optional[Registrant]:
        """Get a registrant with enrollments, player, coaching and manager assignments loaded.

        Args:
            registrant_id: Registrant ID

        Returns:
            Registrant instance or None
        """
        stmt = (
            select(Registrant)
            .where(Registrant.id == self._coerce_identity(registrant_id))
            .options(
                selectinload(Registrant.enrollments),  # type: ignore[arg-type]
                selectinload(Registrant.player_assignments),  # type: ignore[arg-type]
                selectinload(Registrant.coaching_assignments),  # type: ignore[arg-type]
                selectinload(Registrant.managed_teams),  # type: ignore[arg-type]
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_guardian(self, guardian_id: str) -> List[Registrant]:
        """Get all registrants under one guardian, ordered by birth date."""
        stmt = select(Registrant).where(Registrant.guardian_id == guardian_id).order_by(Registrant.birth_date)
        result = await self.session.exec(stmt)
        return list(result.all())
