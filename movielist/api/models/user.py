"""
Pydantic schemas for User API.

Request schemas run in strict mode and reject unknown fields, so a value
must already have the declared JSON type. Field names are snake_case in
Python and camelCase on the wire.
"""

from typing import Annotated

import email_validator
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from movielist.api.models.movie import MovieListItem


def validate_email(user_email: str) -> str:
    """Check length and syntax; display-name forms like "Bob <bob@x.com>" are rejected."""
    if not 6 <= len(user_email) <= 60:
        raise ValueError("email must be between 6 and 60 characters")
    try:
        email_info = email_validator.validate_email(user_email, check_deliverability=False)
    except email_validator.EmailNotValidError as error:
        raise ValueError(str(error))
    return email_info.normalized


Email = Annotated[str, AfterValidator(validate_email)]


class UserNew(BaseModel):
    """Request body for creating a user (admin only)."""

    model_config = ConfigDict(extra="forbid", strict=True)

    username: str = Field(..., min_length=1, max_length=30)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: Email
    is_admin: bool = Field(False, alias="isAdmin")


class UserRegister(BaseModel):
    """Request body for self-registration. Registered users are never admins."""

    model_config = ConfigDict(extra="forbid", strict=True)

    username: str = Field(..., min_length=1, max_length=30)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=30)
    email: Email


class UserUpdate(BaseModel):
    """
    Request body for updating a user.

    Every field is optional, but one that is present must be a valid
    string; an explicit null is rejected. Defaults are not validated, so
    absent fields stay None and are dropped by exclude_unset.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    first_name: str = Field(None, alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(None, alias="lastName", min_length=1, max_length=30)
    password: str = Field(None, min_length=5, max_length=20)
    email: Email = None


class UserAuth(BaseModel):
    """Request body for exchanging credentials for a token."""

    model_config = ConfigDict(extra="forbid", strict=True)

    username: str = Field(..., min_length=1, max_length=30)
    password: str = Field(..., min_length=1, max_length=20)


class UserResponse(BaseModel):
    """Public user profile. The password is never part of it."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    is_admin: bool = Field(..., alias="isAdmin")


class UserDetailResponse(UserResponse):
    """Public user profile plus the user's movie list."""

    movie_list: list[MovieListItem] = Field(default_factory=list, alias="movieList")


class UserWithToken(BaseModel):
    user: UserResponse
    token: str


class UserEnvelope(BaseModel):
    user: UserResponse


class UserDetailEnvelope(BaseModel):
    user: UserDetailResponse


class UserList(BaseModel):
    users: list[UserResponse]


class TokenResponse(BaseModel):
    token: str
