"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Standard collection-style access to an aggregate type.

    Storage is out of scope for the domain; implementations live outside it
    (an in-memory fake backs the test suite).

    Type Parameters:
        T: The aggregate type this repository manages
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Return the aggregate with this raw id, or None."""
        pass

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        """Return a page of aggregates in insertion order."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Store a new aggregate.

        The aggregate must already carry its Id.
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Store the current state of an existing aggregate."""
        pass

    @abstractmethod
    async def exists(self, id: int) -> bool:
        pass
