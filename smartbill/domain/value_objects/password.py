"""Password value object.

Holds the plaintext form as entered by the user. Hashing belongs to whoever
persists it; this object only enforces the strength policy.
"""

import logging
import re
from dataclasses import dataclass, field

from smartbill.domain.exceptions import InvalidPasswordException, MissingValueException

logger = logging.getLogger(__name__)

MINIMUM_LENGTH = 8
SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/"
PASSWORD_PATTERN = re.compile(
    r"(?=.*\d)(?=.*[a-zA-Z])(?=.*[" + re.escape(SYMBOLS) + r"]).{8,}",
    re.ASCII,
)
MASK = "********"


@dataclass(frozen=True)
class Password:
    """Value object for a plaintext password that satisfies the strength policy.

    Rules:
        - at least 8 characters
        - at least one digit, one letter and one symbol from ``SYMBOLS``
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if self.value is None:
            raise MissingValueException("Password value cannot be None")

        if not isinstance(self.value, str) or len(self.value) < MINIMUM_LENGTH:
            logger.error("Password must be at least %d characters long", MINIMUM_LENGTH)
            raise InvalidPasswordException(
                f"Password must be at least {MINIMUM_LENGTH} characters long"
            )

        if not PASSWORD_PATTERN.fullmatch(self.value):
            logger.error(
                "Password must contain at least one digit, one letter, and one special character"
            )
            raise InvalidPasswordException(
                "Password must contain at least one digit, one letter, and one special character"
            )

    def matches(self, plaintext: str) -> bool:
        return self.value == plaintext

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"Password('{MASK}')"
