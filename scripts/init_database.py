#!/usr/bin/env python
"""
Database initialization script for the movie list service.

Creates the schema and, optionally, the first admin account. Only admins
may create users through POST /users, so a fresh database needs one.

Usage:
    # Create tables
    python scripts/init_database.py

    # Drop everything and bootstrap an admin
    python scripts/init_database.py --reset --admin-username admin \
        --admin-password secret --admin-email admin@example.com
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movielist.config import get_database_path
from movielist.database import init_database, verify_schema, ensure_admin
from movielist.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the movie list database")
    parser.add_argument("--db-path", default=get_database_path(), help="SQLite database file")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables first")
    parser.add_argument("--admin-username", help="Create an admin account with this username")
    parser.add_argument("--admin-password", help="Password for the admin account")
    parser.add_argument("--admin-email", default="admin@example.com", help="Email for the admin account")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "INFO")

    if args.admin_username and not args.admin_password:
        logger.error("--admin-password is required with --admin-username")
        return 2

    db_manager = init_database(db_path=args.db_path, reset=args.reset)
    if not verify_schema(db_manager):
        return 1

    if args.admin_username:
        created = ensure_admin(
            db_manager,
            username=args.admin_username,
            password=args.admin_password,
            email=args.admin_email,
        )
        if created:
            logger.info("Created admin %s", args.admin_username)

    logger.info("Database initialization complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
