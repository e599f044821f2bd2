"""
API route handlers.
"""

from movielist.api.routers import auth, users, system

__all__ = ["auth", "users", "system"]
