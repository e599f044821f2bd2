"""
Database connection management using SQLAlchemy.

Owns the engine and session factory for the movie list database and hands
out one session per request through session_scope().
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from movielist.database.models import Base

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/movielist.db"
MEMORY_DB_PATH = ":memory:"


def get_database_url(db_path: str = DEFAULT_DB_PATH) -> str:
    """
    Build a SQLite database URL for a file path.

    The special path ":memory:" yields an in-memory database; any other
    path has its parent directory created.

    Args:
        db_path: Path to SQLite database file, or ":memory:"

    Returns:
        SQLAlchemy database URL
    """
    if db_path == MEMORY_DB_PATH:
        return "sqlite://"

    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)

    return f"sqlite:///{os.path.abspath(db_path)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key enforcement (off by default in SQLite)."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Database connection manager.

    Handles engine creation, session management, and table creation for the
    users and movie_list tables.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Args:
            db_path: Path to SQLite database file, or ":memory:"
            echo: If True, log all SQL statements
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)

        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if db_path == MEMORY_DB_PATH:
            # One shared connection, or every session sees its own empty database.
            engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(self.database_url, echo=echo, **engine_kwargs)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        logger.debug("Database engine created for %s", self.database_url)

    def create_tables(self):
        """Create all tables that don't exist yet."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data in the database!
        """
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        """Drop and recreate all tables."""
        self.drop_tables()
        self.create_tables()

    def get_session(self) -> Session:
        """Get a new database session. The caller is responsible for closing it."""
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Commits on success and rolls back on failure.

        Usage:
            with db_manager.session_scope() as session:
                crud.add_to_list(session, "alice", "Inception", "42")

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the database engine and all connections."""
        self.engine.dispose()


_db_manager: Optional[DatabaseManager] = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Get or create the process-wide database manager.

    Tables are created the first time the manager is built.

    Args:
        db_path: Path to SQLite database file
        echo: If True, log all SQL statements

    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
        _db_manager.create_tables()
    return _db_manager
