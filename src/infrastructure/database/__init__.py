"""Database configurations and models."""

from .connection import Base, DatabaseManager, db_manager, init_database

__all__ = [
    "Base",
    "DatabaseManager",
    "db_manager",
    "init_database",
]
