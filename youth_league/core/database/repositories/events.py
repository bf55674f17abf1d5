"""
Event repository.

Data access for scheduled events and the games they contain.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.events import Event
from ..entities.games import Game
from .base import AsyncBaseRepository, Identity


class EventRepository(AsyncBaseRepository[Event]):
    """Repository for event data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Event)

    async def get_with_games(self, event_id: Identity) -> Optional[Event]:
        """Get an event with its location and games (with both teams) loaded."""
        stmt = (
            select(Event)
            .where(Event.id == self._coerce_identity(event_id))
            .options(
                selectinload(Event.location),  # type: ignore[arg-type]
                selectinload(Event.games).selectinload(Game.home_team),  # type: ignore[arg-type]
                selectinload(Event.games).selectinload(Game.away_team),  # type: ignore[arg-type]
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_location(self, location_id: int | str) -> List[Event]:
        """Get events held at a location, ordered by start date."""
        stmt = select(Event).where(Event.location_id == as_reference(location_id)).order_by(Event.start_date)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_overlapping(self, start: datetime, end: datetime) -> List[Event]:
        """Get events whose [start_date, end_date] span intersects [start, end]."""
        stmt = (
            select(Event)
            .where(Event.start_date <= end, Event.end_date >= start)
            .order_by(Event.start_date)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
