"""Application layer exceptions."""

from smartbill.application.exceptions.exceptions import (
    AccessDeniedError,
    ApplicationError,
    UnauthorizedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "ApplicationError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "UnauthorizedError",
    "AccessDeniedError",
]
