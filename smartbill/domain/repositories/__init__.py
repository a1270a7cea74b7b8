"""Repository interfaces - define contracts for data access."""

from smartbill.domain.repositories.base import IRepository
from smartbill.domain.repositories.unit_of_work import IUnitOfWork
from smartbill.domain.repositories.user_repository import IUserRepository

__all__ = ["IRepository", "IUserRepository", "IUnitOfWork"]
