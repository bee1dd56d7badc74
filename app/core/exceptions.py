"""Domain errors raised by repositories and the authorization layer.

Every error carries the HTTP status it maps to; the handlers registered in
``app.main`` render them as ``{"status": ..., "message": ...}``.
"""

from fastapi import status


class AppError(Exception):
    """Base class for errors that are safe to show to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An error occurred"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInputError(AppError):
    """Missing or malformed fields, or bound violations (e.g. min > max)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class ConflictError(AppError):
    """A uniqueness constraint was violated."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid username/password"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"
