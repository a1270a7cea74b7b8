"""User DTOs for application layer using Pydantic.

DTOs check shape and presence only. Format and policy rules (email pattern,
password strength, name pattern) are enforced by the domain value objects so
there is exactly one place that decides them.
"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, SecretStr

from smartbill.domain.entities.user import User
from smartbill.domain.enums import Gender, Role, UserStatus


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


StrippedStr = Annotated[str, BeforeValidator(strip_whitespace)]


class RegisterUserDTO(BaseModel):
    """
    DTO for registering a user.

    - id: optional; assigned by the id generator when omitted
    - email: surrounding whitespace is trimmed
    - password: kept as SecretStr so it never shows up in logs or reprs
    """

    id: Optional[int] = None
    email: StrippedStr
    first_name: str
    last_name: str
    password: SecretStr
    gender: Gender
    role: Role = Role.USER

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane.doe@example.com",
                "first_name": "Jane",
                "last_name": "Doe",
                "password": "P4ssword!",
                "gender": "FEMALE",
                "role": "ROLE_USER",
            }
        }
    )


class ChangeEmailDTO(BaseModel):
    email: StrippedStr


class ChangeNameDTO(BaseModel):
    first_name: str
    last_name: str


class ChangePasswordDTO(BaseModel):
    new_password: SecretStr


class ChangeGenderDTO(BaseModel):
    gender: Gender


class ChangeStatusDTO(BaseModel):
    status: UserStatus


class UserDTO(BaseModel):
    """DTO for returning user data. The password is never included."""

    id: int
    email: str
    first_name: str
    last_name: str
    gender: Optional[Gender]
    role: Optional[Role]
    status: UserStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """
        Convert a domain entity to DTO.

        Args:
            user: User aggregate

        Returns:
            UserDTO instance
        """
        return cls(
            id=user.id.value,
            email=user.email.value,
            first_name=user.full_name.first_name,
            last_name=user.full_name.last_name,
            gender=user.gender,
            role=user.role,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
