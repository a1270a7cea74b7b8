"""Full name value object."""

import logging
import re
from dataclasses import dataclass

from smartbill.domain.exceptions import InvalidFullNameException, MissingValueException

logger = logging.getLogger(__name__)

# Letters, spaces and hyphens, starting with a letter, 2..50 characters
NAME_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z\s-]{1,49}", re.ASCII)
MINIMUM_LENGTH = 3
MAXIMUM_LENGTH = 50


@dataclass(frozen=True)
class FullName:
    """
    Value object for a person's first and last name.

    Both parts must match ``NAME_PATTERN``. Only the first name carries
    explicit length bounds; the last name is bounded by the pattern alone.
    """

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        if self.first_name is None:
            raise MissingValueException("First name cannot be None")
        if self.last_name is None:
            raise MissingValueException("Last name cannot be None")

        if not self.first_name.strip() and not self.last_name.strip():
            logger.error("First name must contain at least %d characters", MINIMUM_LENGTH)
            raise InvalidFullNameException(
                f"First name must contain at least {MINIMUM_LENGTH} characters"
            )

        if not NAME_PATTERN.fullmatch(self.first_name):
            logger.error("First name must contain only letters, spaces, and hyphens")
            raise InvalidFullNameException(
                "First name must contain only letters, spaces, and hyphens"
            )

        if not NAME_PATTERN.fullmatch(self.last_name):
            logger.error("Last name must contain only letters, spaces, and hyphens")
            raise InvalidFullNameException(
                "Last name must contain only letters, spaces, and hyphens"
            )

        if not MINIMUM_LENGTH <= len(self.first_name) <= MAXIMUM_LENGTH:
            logger.error(
                "First name must be between %d and %d characters long",
                MINIMUM_LENGTH,
                MAXIMUM_LENGTH,
            )
            raise InvalidFullNameException(
                f"First name must be between {MINIMUM_LENGTH} and {MAXIMUM_LENGTH} characters long"
            )

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"
