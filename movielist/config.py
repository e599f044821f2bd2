"""
Service configuration loaded from environment or defaults.

Shared by the API, the security helpers and the scripts.
"""

import os
from pathlib import Path


def get_database_path() -> str:
    """Get database file path from env or default. ":memory:" is allowed."""
    return os.getenv("DATABASE_URL", "sqlite:///").replace("sqlite:///", "") or str(
        Path(__file__).resolve().parents[1] / "data" / "movielist.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))


def get_secret_key() -> str:
    """Get the token signing key. The default is only suitable for development."""
    return os.getenv("SECRET_KEY", "secret-dev")


def get_jwt_algorithm() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")


def get_token_expire_minutes() -> int:
    """Get token lifetime in minutes."""
    return int(os.getenv("TOKEN_EXPIRE_MINUTES", "60"))
