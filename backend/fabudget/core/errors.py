"""
Application error types mapped to HTTP status codes by the handlers in main.
"""
from fastapi import status


class AppError(Exception):
    """Base error carrying a client-safe message and an HTTP status."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailed(AppError):
    """Schema violation or duplicate unique key."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ConflictError(AppError):
    """Concurrent modification detected on a versioned row."""
    status_code = status.HTTP_409_CONFLICT
