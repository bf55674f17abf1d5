"""
Enrollee repository.

Data access for program enrollments.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.enrollees import Enrollee
from .base import AsyncBaseRepository


class EnrolleeRepository(AsyncBaseRepository[Enrollee]):
    """Repository for enrollee data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Enrollee)

    async def list_for_registrant(self, registrant_id: int | str) -> List[Enrollee]:
        """Get a registrant's enrollments, oldest first, with their programs loaded."""
        stmt = (
            select(Enrollee)
            .where(Enrollee.registrant_id == as_reference(registrant_id))
            .options(selectinload(Enrollee.program))  # type: ignore[arg-type]
            .order_by(Enrollee.enrollment_date)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_program(self, program_id: int | str) -> List[Enrollee]:
        """Get a program's enrollments, oldest first, with their registrants loaded."""
        stmt = (
            select(Enrollee)
            .where(Enrollee.program_id == as_reference(program_id))
            .options(selectinload(Enrollee.registrant))  # type: ignore[arg-type]
            .order_by(Enrollee.enrollment_date)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
