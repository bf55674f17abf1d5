"""
Location repository.
"""

from __future__ import annotations

from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.locations import Location
from .base import AsyncBaseRepository


class LocationRepository(AsyncBaseRepository[Location]):
    """Repository for location data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Location)

    async def list_playable(self) -> List[Location]:
        """Get locations currently marked playable, ordered by name."""
        stmt = select(Location).where(Location.playable == True).order_by(Location.name)  # noqa: E712
        result = await self.session.exec(stmt)
        return list(result.all())
