"""Domain exceptions - invariant and business rule violations."""

from smartbill.domain.exceptions.domain_exceptions import (
    DomainException,
    InvalidEmailException,
    InvalidFullNameException,
    InvalidGenderException,
    InvalidIdException,
    InvalidPasswordException,
    InvalidStatusException,
    MissingValueException,
)

__all__ = [
    "DomainException",
    "MissingValueException",
    "InvalidIdException",
    "InvalidEmailException",
    "InvalidPasswordException",
    "InvalidFullNameException",
    "InvalidGenderException",
    "InvalidStatusException",
]
