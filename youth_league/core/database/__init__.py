"""
Centralized database layer for the youth league.

Structure:
- entities/: SQLModel table declarations, one module per table
- repositories/: async data access with relationship-aware loading
- migrations.py: Alembic configuration and command helpers
- session.py: Global engine and session factory management
- utils.py: Engine, session and DDL helpers
"""

from .base import Base
from .session import get_engine, get_session, get_sessionmaker, init_db
from .utils import create_all, create_engine, create_sessionmaker, drop_all

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "get_engine",
    "get_session",
    "get_sessionmaker",
    "init_db",
]
