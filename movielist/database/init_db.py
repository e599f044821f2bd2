"""
Database initialization and schema creation.

This module provides functions to create the schema and bootstrap the first
admin account, which is needed because only admins may create users.
"""

import logging

from sqlalchemy import inspect

from movielist.database.connection import DatabaseManager, get_db_manager, DEFAULT_DB_PATH
from movielist.database import crud
from movielist.database.models import User

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'users', 'movie_list'}


def init_database(db_path: str = DEFAULT_DB_PATH, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.database_url)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", missing_tables)
        return False
    return True


def ensure_admin(
    db_manager: DatabaseManager,
    username: str,
    password: str,
    email: str,
    first_name: str = "Admin",
    last_name: str = "User",
) -> bool:
    """
    Create an admin account unless the username already exists.

    Returns:
        True if a new admin was created, False if the username was taken
    """
    with db_manager.session_scope() as session:
        if session.get(User, username) is not None:
            logger.info("User %s already exists; not creating admin", username)
            return False
        crud.register_user(
            session,
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=True,
        )
    return True
