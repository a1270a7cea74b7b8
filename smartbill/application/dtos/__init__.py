"""Data Transfer Objects for the application layer."""

from smartbill.application.dtos.user_dto import (
    ChangeEmailDTO,
    ChangeGenderDTO,
    ChangeNameDTO,
    ChangePasswordDTO,
    ChangeStatusDTO,
    RegisterUserDTO,
    UserDTO,
)

__all__ = [
    "ChangeEmailDTO",
    "ChangeGenderDTO",
    "ChangeNameDTO",
    "ChangePasswordDTO",
    "ChangeStatusDTO",
    "RegisterUserDTO",
    "UserDTO",
]
