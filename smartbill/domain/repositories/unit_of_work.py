"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartbill.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Transaction boundary around one use case.

    The surrounding application serializes access to a given user through
    this boundary; entities themselves take no locks.
    """

    users: "IUserRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Commit if the block succeeded, otherwise roll back."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
