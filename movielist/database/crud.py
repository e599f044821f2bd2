"""
CRUD operations for User and MovieListEntry models.

This is the user directory: it owns persistence and uniqueness, and fails
with NotFoundError / ConflictError / UnauthorizedError rather than returning
None, so callers can let errors propagate unchanged.
"""

import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from movielist.database.models import User, MovieListEntry
from movielist.errors import ConflictError, NotFoundError, UnauthorizedError
from movielist.security.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)

# Columns a partial update may touch. username and is_admin are not among them.
UPDATABLE_FIELDS = ('first_name', 'last_name', 'email', 'password')


# ==================== USER CRUD OPERATIONS ====================

def register_user(
    session: Session,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False,
) -> User:
    """
    Create a new user with a hashed password.

    Args:
        session: Database session
        username: Unique, immutable username
        password: Plain text password (stored hashed)
        first_name: User's first name
        last_name: User's last name
        email: User's email address
        is_admin: Grant admin privileges

    Returns:
        Created User object

    Raises:
        ConflictError: If the username is already taken
    """
    if session.get(User, username) is not None:
        raise ConflictError(f"Duplicate username: {username}")

    user = User(
        username=username,
        password=hash_password(password),
        first_name=first_name,
        last_name=last_name,
        email=email,
        is_admin=is_admin,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # Lost a race with another registration of the same username.
        session.rollback()
        raise ConflictError(f"Duplicate username: {username}")
    session.refresh(user)
    logger.info("Registered user %s (admin=%s)", username, is_admin)
    return user


def authenticate_user(session: Session, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Returns:
        The matching User

    Raises:
        UnauthorizedError: If the user doesn't exist or the password is wrong
    """
    user = session.get(User, username)
    if user is not None and verify_password(password, user.password):
        return user
    raise UnauthorizedError("Invalid username/password")


def get_user(session: Session, username: str) -> User:
    """
    Get a user by username.

    Raises:
        NotFoundError: If there is no such user
    """
    user = session.get(User, username)
    if user is None:
        raise NotFoundError(f"No user: {username}")
    return user


def get_users(session: Session) -> List[User]:
    """Get all users ordered by username."""
    return session.query(User).order_by(User.username).all()


def get_user_count(session: Session) -> int:
    return session.query(func.count(User.username)).scalar()


def update_user(session: Session, username: str, /, **kwargs) -> User:
    """
    Partially update a user. Only the fields passed are changed.

    Args:
        session: Database session
        username: Username of the user to update
        **kwargs: Any of first_name, last_name, email, password

    Returns:
        Updated User object

    Raises:
        NotFoundError: If there is no such user
        ValueError: If a field outside UPDATABLE_FIELDS is passed
    """
    unknown = set(kwargs) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Cannot update fields: {sorted(unknown)}")

    user = get_user(session, username)
    if not kwargs:
        return user

    for key, value in kwargs.items():
        if key == 'password':
            value = hash_password(value)
        setattr(user, key, value)
    session.commit()
    session.refresh(user)
    logger.info("Updated user %s: %s", username, sorted(kwargs))
    return user


# ==================== MOVIE LIST OPERATIONS ====================

def get_movie_list(session: Session, username: str) -> List[MovieListEntry]:
    """Get a user's movie list in the order entries were added."""
    get_user(session, username)
    return (
        session.query(MovieListEntry)
        .filter(MovieListEntry.username == username)
        .order_by(MovieListEntry.entry_id)
        .all()
    )


def get_list_entry(session: Session, username: str, movie_id: str) -> Optional[MovieListEntry]:
    return (
        session.query(MovieListEntry)
        .filter(MovieListEntry.username == username, MovieListEntry.movie_id == movie_id)
        .first()
    )


def add_to_list(session: Session, username: str, movie_name: str, movie_id: str) -> MovieListEntry:
    """
    Add a movie to a user's list.

    Adding an id that is already on the list keeps a single entry and
    replaces its stored name.

    Raises:
        NotFoundError: If there is no such user
    """
    get_user(session, username)

    entry = get_list_entry(session, username, movie_id)
    if entry is None:
        entry = MovieListEntry(username=username, movie_id=movie_id, movie_name=movie_name)
        session.add(entry)
    else:
        entry.movie_name = movie_name
    session.commit()
    session.refresh(entry)
    logger.info("Added movie %s to list of %s", movie_id, username)
    return entry


def remove_from_list(session: Session, username: str, movie_id: str) -> None:
    """
    Remove a movie from a user's list.

    Raises:
        NotFoundError: If there is no such user or the movie isn't on the list
    """
    get_user(session, username)

    entry = get_list_entry(session, username, movie_id)
    if entry is None:
        raise NotFoundError(f"No movie {movie_id} on list of {username}")
    session.delete(entry)
    session.commit()
    logger.info("Removed movie %s from list of %s", movie_id, username)
