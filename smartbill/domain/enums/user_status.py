"""User lifecycle status."""

from enum import Enum


class UserStatus(str, Enum):
    """
    Status of a user account.

    - PENDING: registered but not yet activated
    - ACTIVE: normal user who can use the system
    - SUSPENDED: access temporarily restricted
    - DELETED: logically removed; terminal
    """

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"
