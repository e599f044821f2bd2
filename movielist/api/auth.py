"""
Authentication and authorization guards.

get_current_user decodes the bearer token, if any, into its claims. The
check_* functions return an AuthVerdict; the ensure_* dependencies run them
before the route handler and raise UnauthorizedError on denial.
"""

import logging
from typing import NamedTuple, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from movielist.errors import UnauthorizedError
from movielist.security.tokens import decode_token

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


class AuthVerdict(NamedTuple):
    allowed: bool
    reason: str = ""


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Optional[dict]:
    """
    Return the token claims ({"username", "isAdmin", ...}) or None.

    A missing or invalid token is not an error here; the caller is treated
    as anonymous and the guards decide.
    """
    if credentials is None:
        return None
    try:
        return decode_token(credentials.credentials)
    except UnauthorizedError:
        return None


def check_admin(user: Optional[dict]) -> AuthVerdict:
    if not user:
        return AuthVerdict(False, "not logged in")
    if not user.get("isAdmin"):
        return AuthVerdict(False, f"{user.get('username')} is not an admin")
    return AuthVerdict(True)


def check_correct_user_or_admin(user: Optional[dict], username: str) -> AuthVerdict:
    if not user:
        return AuthVerdict(False, "not logged in")
    if user.get("isAdmin") or user.get("username") == username:
        return AuthVerdict(True)
    return AuthVerdict(False, f"{user.get('username')} may not act as {username}")


def ensure_admin(user: Optional[dict] = Depends(get_current_user)) -> dict:
    """Dependency: allow only admins."""
    verdict = check_admin(user)
    if not verdict.allowed:
        logger.warning("Admin check denied: %s", verdict.reason)
        raise UnauthorizedError()
    return user


def ensure_correct_user_or_admin(
    username: str,
    user: Optional[dict] = Depends(get_current_user),
) -> dict:
    """Dependency: allow admins and the user named by the username path parameter."""
    verdict = check_correct_user_or_admin(user, username)
    if not verdict.allowed:
        logger.warning("User check denied: %s", verdict.reason)
        raise UnauthorizedError()
    return user
