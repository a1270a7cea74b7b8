"""User aggregate root - pure business logic, no infrastructure."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from smartbill.domain.enums import Gender, Role, UserStatus
from smartbill.domain.exceptions import (
    InvalidEmailException,
    InvalidFullNameException,
    InvalidGenderException,
    InvalidPasswordException,
    InvalidStatusException,
    MissingValueException,
)
from smartbill.domain.services.audit_logger import AuditEvent, AuditLogger, LoggingAuditLogger
from smartbill.domain.services.transitions import (
    GENDER_TRANSITIONS,
    STATUS_TRANSITIONS,
    allowed_transitions,
    describe_allowed,
    is_transition_allowed,
)
from smartbill.domain.value_objects import Email, FullName, Id, Password
from smartbill.domain.value_objects.password import MASK

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User:
    """
    User aggregate root.

    Owns the identity, contact and credential value objects of a user plus
    its gender, role and lifecycle status. Fields are exposed read-only; the
    only way to change them is through the ``change_*`` operations, which
    check every rule before touching any field.

    Every real change refreshes ``updated_at`` and emits one audit event.
    Requests that leave a field as it was are no-ops and emit nothing.
    """

    def __init__(  # noqa: PLR0913
        self,
        id: Id,
        email: Email,
        full_name: FullName,
        password: Password,
        gender: Optional[Gender],
        role: Optional[Role],
        status: UserStatus = UserStatus.PENDING,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        for name, value in (
            ("id", id),
            ("email", email),
            ("full_name", full_name),
            ("password", password),
        ):
            if value is None:
                raise MissingValueException(f"User {name} cannot be None")

        self._id = id
        self._email = email
        self._full_name = full_name
        self._password = password
        self._gender = gender
        self._role = role
        self._status = status
        now = _utc_now()
        self._created_at = created_at or now
        self._updated_at = updated_at or now
        self._audit_logger = audit_logger or LoggingAuditLogger()

    # --- factories ---

    @classmethod
    def of(  # noqa: PLR0913
        cls,
        id: Id,
        email: Email,
        full_name: FullName,
        password: Password,
        gender: Optional[Gender],
        role: Optional[Role],
        **kwargs: Any,
    ) -> "User":
        """
        Create a user from already validated value objects.

        Meant for internal callers that hold domain objects. Extra keyword
        arguments (status, timestamps, audit_logger) are passed through for
        rehydrating stored users.
        """
        return cls(id, email, full_name, password, gender, role, **kwargs)

    @classmethod
    def from_primitives(  # noqa: PLR0913
        cls,
        id: int,
        email: str,
        first_name: str,
        last_name: str,
        password: str,
        gender: Optional[Gender],
        role: Optional[Role],
        **kwargs: Any,
    ) -> "User":
        """
        Create a user from raw input, validating each field on the way.

        Meant for boundary callers. Any invalid field raises the matching
        value-object error and no user is created.
        """
        return cls(
            Id.of(id),
            Email(email),
            FullName(first_name, last_name),
            Password(password),
            gender,
            role,
            **kwargs,
        )

    # --- read-only state ---

    @property
    def id(self) -> Id:
        return self._id

    @property
    def email(self) -> Email:
        return self._email

    @property
    def full_name(self) -> FullName:
        return self._full_name

    @property
    def password(self) -> Password:
        return self._password

    @property
    def gender(self) -> Optional[Gender]:
        return self._gender

    @property
    def role(self) -> Optional[Role]:
        return self._role

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_active(self) -> bool:
        return self._status == UserStatus.ACTIVE

    @property
    def is_deleted(self) -> bool:
        return self._status == UserStatus.DELETED

    # --- status ---

    def change_status(self, current_status: UserStatus, new_status: Optional[UserStatus]) -> None:
        """
        Move the user to ``new_status`` if the status table allows it.

        Args:
            current_status: The status the caller believes the user is in
            new_status: The requested status

        Raises:
            InvalidStatusException: If new_status is None, current_status is
                not the user's status, or new_status is not reachable
        """
        if new_status is None:
            raise InvalidStatusException("User status cannot be set to None")

        if current_status != self._status:
            raise InvalidStatusException(
                _stale_message("status", _name(current_status), _name(self._status))
            )

        if new_status == current_status:
            return

        if not is_transition_allowed(STATUS_TRANSITIONS, current_status, new_status):
            allowed = allowed_transitions(STATUS_TRANSITIONS, current_status)
            raise InvalidStatusException(
                f"Cannot change user status from '{_name(current_status)}' to "
                f"'{_name(new_status)}'. Allowed transitions: {describe_allowed(allowed)}"
            )

        self._status = new_status
        self._touch("status", _name(current_status), _name(new_status))

    def activate(self) -> None:
        self.change_status(self._status, UserStatus.ACTIVE)

    def suspend(self) -> None:
        self.change_status(self._status, UserStatus.SUSPENDED)

    def mark_as_deleted(self) -> None:
        """
        Logically delete the user. DELETED is terminal.

        Raises:
            InvalidStatusException: If the user is already deleted
        """
        if self._status == UserStatus.DELETED:
            raise InvalidStatusException("User is already deleted")

        self.change_status(self._status, UserStatus.DELETED)

    # --- gender ---

    def change_gender(self, current_gender: Optional[Gender], new_gender: Optional[Gender]) -> None:
        """
        Change the user's gender following the gender table.

        Raises:
            InvalidGenderException: If new_gender is None, current_gender is
                not the user's gender, or new_gender is not reachable
        """
        if new_gender is None:
            raise InvalidGenderException("User must have a valid gender")

        if current_gender != self._gender:
            raise InvalidGenderException(
                _stale_message("gender", _name(current_gender), _name(self._gender))
            )

        if new_gender == current_gender:
            return

        if not is_transition_allowed(GENDER_TRANSITIONS, current_gender, new_gender):
            allowed = allowed_transitions(GENDER_TRANSITIONS, current_gender)
            raise InvalidGenderException(
                f"Cannot change user gender from '{_name(current_gender)}' to "
                f"'{_name(new_gender)}'. Allowed transitions: {describe_allowed(allowed)}"
            )

        self._gender = new_gender
        self._touch("gender", _name(current_gender), _name(new_gender))

    # --- email / name ---

    def change_email(self, current_email: Email, new_email: Optional[Email]) -> None:
        """
        Change the user's email.

        Business rules, checked in order:
        1. Deleted users are frozen
        2. The new email is required
        3. current_email must be the user's email
        4. The new email must differ from the current one
        5. Only ACTIVE users may change their email

        Raises:
            InvalidEmailException: If a business rule is violated
            MissingValueException: If new_email is None
        """
        if self._status == UserStatus.DELETED:
            raise InvalidEmailException("Deleted user cannot change email")

        if new_email is None:
            raise MissingValueException("New email cannot be None")

        if current_email != self._email:
            raise InvalidEmailException(_stale_message("email", current_email, self._email))

        if new_email == current_email:
            raise InvalidEmailException("New email must be different from the current email")

        if self._status != UserStatus.ACTIVE:
            raise InvalidEmailException("User must be in ACTIVE status to change email")

        # TODO: decide whether PENDING users may fix a mistyped email before activation
        self._email = new_email
        self._touch("email", current_email, new_email)

    def change_name(self, current_name: FullName, new_name: Optional[FullName]) -> None:
        """
        Change the user's full name. Same rules as ``change_email``.

        Raises:
            InvalidFullNameException: If a business rule is violated
            MissingValueException: If new_name is None
        """
        if self._status == UserStatus.DELETED:
            raise InvalidFullNameException("Deleted user cannot change their name")

        if new_name is None:
            raise MissingValueException("New name cannot be None")

        if current_name != self._full_name:
            raise InvalidFullNameException(_stale_message("name", current_name, self._full_name))

        if new_name == current_name:
            raise InvalidFullNameException("New name must be different from the current name")

        if self._status != UserStatus.ACTIVE:
            raise InvalidFullNameException("User must be in ACTIVE status to change name")

        self._full_name = new_name
        self._touch("full_name", current_name, new_name)

    # --- password ---

    def change_password(self, new_password: str) -> None:
        """
        Replace the password with a new plaintext value.

        Not gated by status, unlike email and name changes.

        Raises:
            InvalidPasswordException: If the password is reused or too weak
            MissingValueException: If new_password is None
        """
        if self._password.matches(new_password):
            raise InvalidPasswordException(
                "The new password cannot be the same as the current password"
            )

        self._password = Password(new_password)
        self._touch("password", MASK, MASK)

    # --- internals ---

    def _touch(self, field: str, old_value: Any, new_value: Any) -> None:
        self._updated_at = _utc_now()
        event = AuditEvent(
            entity_id=self._id,
            field=field,
            old_value=old_value,
            new_value=new_value,
            occurred_at=self._updated_at,
        )
        try:
            self._audit_logger.record(event)
        except Exception:
            logger.warning(
                "Failed to record audit event for user %s field %s",
                self._id,
                field,
                exc_info=True,
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email}, status={_name(self._status)})"


def _name(state: Any) -> str:
    return state.name if state is not None else "None"


def _stale_message(field: str, given: Any, actual: Any) -> str:
    return f"Stale user {field}: caller expected '{given}' but user has '{actual}'"
