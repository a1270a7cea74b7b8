"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UserNotFoundError(ApplicationError):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")


class UserAlreadyExistsError(ApplicationError):
    """Raised when an email or id is already taken by another user."""

    def __init__(self, message: str = "User already exists"):
        super().__init__(message, error_code="USER_ALREADY_EXISTS")


class UnauthorizedError(ApplicationError):
    """Raised when no principal is present in the security context."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, error_code="UNAUTHORIZED")


class AccessDeniedError(ApplicationError):
    """Raised when the current principal lacks the required role."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, error_code="INSUFFICIENT_PERMISSIONS")
