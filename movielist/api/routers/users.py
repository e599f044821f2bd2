"""
User management API endpoints.

Every route runs its authorization guard first. Errors from validation, the
guards and the directory propagate to the handlers registered in main.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from movielist.api.auth import ensure_admin, ensure_correct_user_or_admin
from movielist.api.dependencies import get_db
from movielist.api.models.movie import MovieAdded, MovieListItem, MovieRemoved, RemovedMovie
from movielist.api.models.user import (
    UserNew,
    UserUpdate,
    UserResponse,
    UserDetailResponse,
    UserWithToken,
    UserEnvelope,
    UserDetailEnvelope,
    UserList,
)
from movielist.api.validation import validate_body
from movielist.database import crud
from movielist.security.tokens import create_token

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserWithToken, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Any = Body(None),
    _admin: dict = Depends(ensure_admin),
    db: Session = Depends(get_db),
):
    """
    Add a new user. Not the registration endpoint: only admins may call it,
    and the new user may itself be an admin.

    Returns the new user and a token for them.
    """
    user_in = validate_body(UserNew, payload)
    user = crud.register_user(
        db,
        username=user_in.username,
        password=user_in.password,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email,
        is_admin=user_in.is_admin,
    )
    token = create_token(user)
    return UserWithToken(user=UserResponse.model_validate(user), token=token)


@router.get("", response_model=UserList)
def list_users(_admin: dict = Depends(ensure_admin), db: Session = Depends(get_db)):
    """List all users (admin only)."""
    users = crud.get_users(db)
    return UserList(users=[UserResponse.model_validate(u) for u in users])


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(
    username: str,
    _user: dict = Depends(ensure_correct_user_or_admin),
    db: Session = Depends(get_db),
):
    """Get a user's profile and movie list."""
    user = crud.get_user(db, username)
    return UserDetailEnvelope(user=UserDetailResponse.model_validate(user))


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    payload: Any = Body(None),
    _user: dict = Depends(ensure_correct_user_or_admin),
    db: Session = Depends(get_db),
):
    """
    Update any of firstName, lastName, password, email.

    Fields left out of the body are unchanged; null is not a valid value.
    """
    user_in = validate_body(UserUpdate, {} if payload is None else payload)
    fields = user_in.model_dump(exclude_unset=True)
    user = crud.update_user(db, username, **fields)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post("/{username}/{movie_name}/{movie_id}/add", response_model=MovieAdded)
def add_to_list(
    username: str,
    movie_name: str,
    movie_id: str,
    _user: dict = Depends(ensure_correct_user_or_admin),
    db: Session = Depends(get_db),
):
    """Add a movie to the user's list."""
    crud.add_to_list(db, username, movie_name, movie_id)
    return MovieAdded(added=MovieListItem(movie_id=movie_id, movie_name=movie_name))


@router.post("/{username}/{movie_name}/{movie_id}/remove", response_model=MovieRemoved)
def remove_from_list(
    username: str,
    movie_name: str,
    movie_id: str,
    _user: dict = Depends(ensure_correct_user_or_admin),
    db: Session = Depends(get_db),
):
    """
    Remove a movie from the user's list.

    The movie name segment is accepted for symmetry with /add but only the
    id identifies the entry.
    """
    crud.remove_from_list(db, username, movie_id)
    return MovieRemoved(removed=RemovedMovie(movie_id=movie_id))
