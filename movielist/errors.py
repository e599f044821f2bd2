"""
Application error hierarchy.

Every error raised by the directory, the guards, or the request validation
derives from AppError and carries the HTTP status it translates to. The
handlers registered in movielist.api.main render them as JSON.
"""

from typing import List, Union


class AppError(Exception):
    """Base error carrying a message (or list of messages) and an HTTP status."""

    status_code: int = 500

    def __init__(self, message: Union[str, List[str]] = "Internal server error", status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(AppError):
    """Request body failed validation. Message is usually a list of strings."""

    status_code = 400

    def __init__(self, message: Union[str, List[str]] = "Bad Request"):
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class ConflictError(AppError):
    """Raised when a record with the same key already exists."""

    status_code = 409

    def __init__(self, message: str = "Conflict"):
        super().__init__(message)
