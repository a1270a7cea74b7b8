"""Identifier value object and the generators that issue identifiers."""

import re
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from smartbill.domain.exceptions import InvalidIdException, MissingValueException

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Id:
    """
    Value object wrapping a signed 64-bit identifier.

    Ids are normally assigned by the persistence layer. ``Id.generate()`` is
    the fallback used when nothing upstream assigns one (tests, tools).
    """

    value: int

    def __post_init__(self) -> None:
        if self.value is None:
            raise MissingValueException("Id value cannot be None")

        # bool is an int subclass, but True is not an identifier
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidIdException(
                f"Id value must be an integer, got {type(self.value).__name__}"
            )

        if not INT64_MIN <= self.value <= INT64_MAX:
            raise InvalidIdException(
                f"Id value {self.value} is outside the signed 64-bit range"
            )

    @classmethod
    def of(cls, value: Union[int, str]) -> "Id":
        """
        Create an Id from an integer or its decimal string form.

        Raises:
            MissingValueException: If value is None
            InvalidIdException: If a string is not a plain ASCII decimal
        """
        if value is None:
            raise MissingValueException("Id value cannot be None")

        if isinstance(value, str):
            if not DECIMAL_PATTERN.fullmatch(value):
                raise InvalidIdException(f"'{value}' is not a valid Id")
            return cls(int(value))

        return cls(value)

    @classmethod
    def generate(cls, generator: Optional["IdGenerator"] = None) -> "Id":
        """Issue the next Id from ``generator`` or the process-wide default."""
        return (generator or _default_generator).next_id()

    def __str__(self) -> str:
        return str(self.value)


class IdGenerator(ABC):
    """
    Source of unique, monotonically increasing identifiers.

    Implementations must be safe to call from several threads at once.
    """

    @abstractmethod
    def next_value(self) -> int:
        """Return the next raw identifier value."""
        pass

    def next_id(self) -> Id:
        return Id(self.next_value())


class SequentialIdGenerator(IdGenerator):
    """
    Lock-guarded counter starting after ``start``.

    Values are unique and increasing; a generator that is discarded and
    recreated with a lower ``start`` can of course hand out duplicates.
    """

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError("start must be >= 0")
        self._last = start
        self._lock = threading.Lock()

    def next_value(self) -> int:
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last_value(self) -> int:
        """The most recently issued value (``start`` if none issued yet)."""
        with self._lock:
            return self._last


_default_generator = SequentialIdGenerator()
