"""
Database entity models.

One module per table. Importing this package registers every table on
``SQLModel.metadata`` and makes all relationship targets resolvable, so it is
the module the migration environment imports.

Modules:
- registrants: REGISTRANT, the person record
- enrollees: ENROLLEE, program enrollments
- players: PLAYER, team/division assignments
- coaches: COACH, team staff keyed by registrant and team
- teams: TEAM
- programs: PROGRAM
- divisions: DIVISION
- events: EVENT
- games: GAME
- locations: LOCATION
"""

from .coaches import Coach, CoachBase
from .divisions import Division, DivisionBase
from .enrollees import Enrollee, EnrolleeBase
from .events import Event, EventBase
from .games import Game, GameBase
from .locations import Location, LocationBase
from .players import Player, PlayerBase
from .programs import Program, ProgramBase
from .registrants import Registrant, RegistrantBase
from .teams import Team, TeamBase

__all__ = [
    "Coach",
    "CoachBase",
    "Division",
    "DivisionBase",
    "Enrollee",
    "EnrolleeBase",
    "Event",
    "EventBase",
    "Game",
    "GameBase",
    "Location",
    "LocationBase",
    "Player",
    "PlayerBase",
    "Program",
    "ProgramBase",
    "Registrant",
    "RegistrantBase",
    "Team",
    "TeamBase",
]
