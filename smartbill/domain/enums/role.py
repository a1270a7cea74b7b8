"""Access level held by a user."""

from enum import Enum


class Role(str, Enum):
    """Single access level per user, named after the authority it grants."""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"
