# app/core/exceptions.py
"""Application errors and their HTTP translation."""

from fastapi import Request
from fastapi.responses import JSONResponse


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a ticket id does not resolve."""

    def __init__(self, message: str = "Ticket not found"):
        super().__init__(message, status_code=404)


class ValidationError(AppError):
    """Raised when a required field is missing or blank."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=422)


class PersistenceError(AppError):
    """Raised when the underlying database operation fails."""

    def __init__(self, message: str = "Ticket store unavailable"):
        super().__init__(message, status_code=503)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


__all__ = [
    "AppError",
    "NotFoundError",
    "ValidationError",
    "PersistenceError",
    "app_error_handler",
]
