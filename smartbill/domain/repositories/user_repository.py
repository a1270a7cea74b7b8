"""User repository interface."""

from abc import abstractmethod

from smartbill.domain.entities.user import User
from smartbill.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """User-specific queries on top of the base repository."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """
        Find a user by the exact email string.

        Args:
            email: The email address as stored

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        pass
