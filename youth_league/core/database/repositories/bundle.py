"""
Repository bundle for dependency injection.

All repositories in a bundle share one session, so work across tables
happens in the same unit of work.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlmodel.ext.asyncio.session import AsyncSession

from .coaches import CoachRepository
from .divisions import DivisionRepository
from .enrollees import EnrolleeRepository
from .events import EventRepository
from .games import GameRepository
from .locations import LocationRepository
from .players import PlayerRepository
from .programs import ProgramRepository
from .registrants import RegistrantRepository
from .teams import TeamRepository


@dataclass(frozen=True)
class RepositoryBundle:
    """Convenience bundle of all league repositories."""

    registrants: RegistrantRepository
    enrollees: EnrolleeRepository
    players: PlayerRepository
    coaches: CoachRepository
    teams: TeamRepository
    programs: ProgramRepository
    divisions: DivisionRepository
    events: EventRepository
    games: GameRepository
    locations: LocationRepository


def build_repositories(session: AsyncSession) -> RepositoryBundle:
    """Build a ``RepositoryBundle`` bound to one session.

    Args:
        session: Async SQLModel session shared by every repository

    Returns:
        Bundle containing all repository instances
    """
    return RepositoryBundle(
        registrants=RegistrantRepository(session),
        enrollees=EnrolleeRepository(session),
        players=PlayerRepository(session),
        coaches=CoachRepository(session),
        teams=TeamRepository(session),
        programs=ProgramRepository(session),
        divisions=DivisionRepository(session),
        events=EventRepository(session),
        games=GameRepository(session),
        locations=LocationRepository(session),
    )
