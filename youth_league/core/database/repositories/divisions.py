"""
Division repository.

Data access for divisions within programs.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.divisions import Division
from .base import AsyncBaseRepository, Identity


class DivisionRepository(AsyncBaseRepository[Division]):
    """Repository for division data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Division)

    async def get_with_teams(self, division_id: Identity) -> Optional[Division]:
        """Get a division with its program, teams and players loaded."""
        stmt = (
            select(Division)
            .where(Division.id == self._coerce_identity(division_id))
            .options(
                selectinload(Division.program),  # type: ignore[arg-type]
                selectinload(Division.teams),  # type: ignore[arg-type]
                selectinload(Division.players),  # type: ignore[arg-type]
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_program(self, program_id: int | str) -> List[Division]:
        """Get a program's divisions, ordered by name."""
        stmt = select(Division).where(Division.program_id == as_reference(program_id)).order_by(Division.name)
        result = await self.session.exec(stmt)
        return list(result.all())
