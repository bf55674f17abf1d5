"""
Program repository.

Events carry no program reference. A program's events are the events hosting
at least one game played by a team from one of the program's divisions.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Text, cast, or_
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..base import as_reference
from ..entities.divisions import Division
from ..entities.events import Event
from ..entities.games import Game
from ..entities.programs import Program
from ..entities.teams import Team
from .base import AsyncBaseRepository, Identity


class ProgramRepository(AsyncBaseRepository[Program]):
    """Repository for program data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Program)

    async def get_with_divisions(self, program_id: Identity) -> Optional[Program]:
        """Get a program with its divisions and their teams loaded."""
        stmt = (
            select(Program)
            .where(Program.id == self._coerce_identity(program_id))
            .options(selectinload(Program.divisions).selectinload(Division.teams))  # type: ignore[arg-type]
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_events(self, program_id: int | str) -> List[Event]:
        """Get the events in which the program's teams play, ordered by start date.

        Args:
            program_id: Program ID

        Returns:
            Distinct Event instances
        """
        event_ids = (
            select(Event.id)
            .join(Game, cast(Event.id, Text) == Game.event_id)
            .join(
                Team,
                or_(
                    cast(Team.id, Text) == Game.home_team_id,
                    cast(Team.id, Text) == Game.away_team_id,
                ),
            )
            .join(Division, cast(Division.id, Text) == Team.division_id)
            .where(Division.program_id == as_reference(program_id))
        )
        stmt = select(Event).where(Event.id.in_(event_ids)).order_by(Event.start_date, Event.id)  # type: ignore[union-attr]
        result = await self.session.exec(stmt)
        return list(result.all())
