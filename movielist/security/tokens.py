"""
JWT creation and decoding.

Tokens assert a user's identity and privilege level:
    {"username": ..., "isAdmin": ..., "iat": ..., "exp": ...}
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError

from movielist.config import get_secret_key, get_jwt_algorithm, get_token_expire_minutes
from movielist.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def create_token(user, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed token for a user.

    Args:
        user: Object with username and is_admin attributes (ORM User)
        expires_delta: Lifetime override; defaults to TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    expires_delta = expires_delta or timedelta(minutes=get_token_expire_minutes())
    payload = {
        "username": user.username,
        "isAdmin": bool(user.is_admin),
        "iat": now,
        "exp": now + expires_delta,
    }
    token = jwt.encode(payload, get_secret_key(), algorithm=get_jwt_algorithm())
    logger.debug("Created token for user %s", user.username)
    return token


def decode_token(token: str) -> dict:
    """
    Decode and verify a token.

    Raises:
        UnauthorizedError: If the token is expired, badly signed or malformed
    """
    try:
        return jwt.decode(token, get_secret_key(), algorithms=[get_jwt_algorithm()])
    except ExpiredSignatureError:
        logger.warning("Token expired")
        raise UnauthorizedError("Token has expired")
    except JWTError as e:
        logger.warning("Invalid token: %s", e)
        raise UnauthorizedError("Invalid token")
