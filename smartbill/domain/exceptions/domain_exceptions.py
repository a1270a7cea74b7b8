"""Domain layer exceptions for invariant and business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised synchronously by value objects and entities
    when one of their invariants would be broken. They are never retried by
    the domain itself; callers decide what to do with them.

    Examples:
        - A malformed email or password
        - An illegal status or gender transition
        - A required value that is missing
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class MissingValueException(DomainException):
    """Raised when a required value is None."""

    def __init__(self, message: str):
        super().__init__(message, error_code="MISSING_VALUE")


class InvalidIdException(DomainException):
    """Raised when an identifier is not a signed 64-bit integer."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ID")


class InvalidEmailException(DomainException):
    """Raised when an email is malformed or cannot be changed."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_EMAIL")


class InvalidPasswordException(DomainException):
    """Raised when a password is too weak or reused."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_PASSWORD")


class InvalidFullNameException(DomainException):
    """Raised when a full name is malformed or cannot be changed."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_FULL_NAME")


class InvalidGenderException(DomainException):
    """Raised when a gender transition is not allowed."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_GENDER")


class InvalidStatusException(DomainException):
    """Raised when a status transition is not allowed."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_STATUS")
