"""Persistence layer: database plumbing, ORM models and repositories."""

from stationops.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    get_db_manager,
    get_db_session,
    init_database,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "get_db_session",
    "init_database",
]
