"""Self-validating value objects of the user domain."""

from smartbill.domain.value_objects.email import Email
from smartbill.domain.value_objects.full_name import FullName
from smartbill.domain.value_objects.id import Id, IdGenerator, SequentialIdGenerator
from smartbill.domain.value_objects.password import Password

__all__ = [
    "Email",
    "FullName",
    "Id",
    "IdGenerator",
    "Password",
    "SequentialIdGenerator",
]
