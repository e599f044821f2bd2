"""
Pydantic schemas for API request/response validation.
"""

from movielist.api.models.user import (
    UserNew,
    UserRegister,
    UserUpdate,
    UserAuth,
    UserResponse,
    UserDetailResponse,
    UserWithToken,
    UserEnvelope,
    UserDetailEnvelope,
    UserList,
    TokenResponse,
)
from movielist.api.models.movie import MovieListItem, MovieAdded, MovieRemoved, RemovedMovie

__all__ = [
    "UserNew",
    "UserRegister",
    "UserUpdate",
    "UserAuth",
    "UserResponse",
    "UserDetailResponse",
    "UserWithToken",
    "UserEnvelope",
    "UserDetailEnvelope",
    "UserList",
    "TokenResponse",
    "MovieListItem",
    "MovieAdded",
    "MovieRemoved",
    "RemovedMovie",
]
