"""
FastAPI dependency injection for the database session.
"""

import logging
from typing import Generator
from sqlalchemy.orm import Session

from movielist.database.connection import get_db_manager
from movielist.config import get_database_path

logger = logging.getLogger(__name__)


def get_db() -> Generator[Session, None, None]:
    """Yield database session for FastAPI Depends()."""
    db_path = get_database_path()
    if db_path.startswith("sqlite"):
        db_path = db_path.replace("sqlite:///", "")
    if not db_path.strip():
        db_path = None  # use connection default
    db_manager = get_db_manager(db_path=db_path) if db_path else get_db_manager()
    with db_manager.session_scope() as session:
        yield session
