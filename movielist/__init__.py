"""
Movie List API Application Package.

This package contains the user account and movie list service, including
the HTTP routes, authorization guards, database operations, token handling,
and utilities.
"""

__version__ = "1.0.0"
