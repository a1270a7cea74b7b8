"""Email value object."""

import logging
import re
from dataclasses import dataclass

from smartbill.domain.exceptions import InvalidEmailException, MissingValueException

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+")


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address.

    The address is kept exactly as given; no case folding or trimming.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise MissingValueException("Email value cannot be None")

        if not isinstance(self.value, str) or not EMAIL_PATTERN.fullmatch(self.value):
            logger.error("Invalid email format")
            raise InvalidEmailException("Invalid email format")

    def __str__(self) -> str:
        return self.value
