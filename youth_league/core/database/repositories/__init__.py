"""
Database repository layer using SQLModel.

Each module provides async data access for one table. ``AsyncBaseRepository``
supplies create/get/update/delete/list; table repositories add reads that
eagerly load relationships, since lazy loading is unavailable on async
sessions.
"""

from .base import AsyncBaseRepository, QueryBuilder
from .bundle import RepositoryBundle, build_repositories
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

__all__ = [
    "AsyncBaseRepository",
    "CoachRepository",
    "DivisionRepository",
    "EnrolleeRepository",
    "EventRepository",
    "GameRepository",
    "LocationRepository",
    "PlayerRepository",
    "ProgramRepository",
    "QueryBuilder",
    "RegistrantRepository",
    "RepositoryBundle",
    "TeamRepository",
    "build_repositories",
]
