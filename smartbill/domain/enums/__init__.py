"""Closed enumerations of the user domain."""

from smartbill.domain.enums.gender import Gender
from smartbill.domain.enums.role import Role
from smartbill.domain.enums.user_status import UserStatus

__all__ = ["Gender", "Role", "UserStatus"]
