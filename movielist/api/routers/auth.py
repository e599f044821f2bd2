"""
Authentication API endpoints: log in and self-register.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from movielist.api.dependencies import get_db
from movielist.api.models.user import UserAuth, UserRegister, TokenResponse
from movielist.api.validation import validate_body
from movielist.database import crud
from movielist.security.tokens import create_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
def get_token(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Exchange username and password for a token."""
    creds = validate_body(UserAuth, payload)
    user = crud.authenticate_user(db, creds.username, creds.password)
    return TokenResponse(token=create_token(user))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Register a new non-admin user and return a token for them."""
    user_in = validate_body(UserRegister, payload)
    user = crud.register_user(
        db,
        username=user_in.username,
        password=user_in.password,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email,
        is_admin=False,
    )
    return TokenResponse(token=create_token(user))
