"""
Database module for the movie list service.

This module provides database models, connection management, and CRUD
operations for the SQLite database using SQLAlchemy ORM.
"""

from movielist.database.models import Base, User, MovieListEntry
from movielist.database.connection import DatabaseManager, get_db_manager
from movielist.database.init_db import init_database, verify_schema, ensure_admin
from movielist.database import crud

__all__ = [
    # Models
    'Base',
    'User',
    'MovieListEntry',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Initialization
    'init_database',
    'verify_schema',
    'ensure_admin',
    # CRUD module
    'crud',
]
