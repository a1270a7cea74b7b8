"""User service - application layer use cases."""

from collections.abc import Callable

from smartbill.application.aspects import log_calls, require_role, timed
from smartbill.application.dtos.user_dto import (
    ChangeEmailDTO,
    ChangeGenderDTO,
    ChangeNameDTO,
    ChangePasswordDTO,
    ChangeStatusDTO,
    RegisterUserDTO,
    UserDTO,
)
from smartbill.application.exceptions import UserAlreadyExistsError, UserNotFoundError
from smartbill.domain.entities.user import User
from smartbill.domain.enums import Role
from smartbill.domain.repositories.unit_of_work import IUnitOfWork
from smartbill.domain.services.audit_logger import AuditLogger
from smartbill.domain.value_objects import Email, FullName, Id, IdGenerator


class UserService:
    """
    User service encapsulating user-related use cases.

    Each use case opens one unit of work, loads the user, calls a single
    domain operation and commits. Domain errors propagate unchanged; the
    unit of work rolls back on any exception.

    Status changes (activate, suspend, delete) are reserved for admins.
    Self-service changes (email, name, password, gender) are open to any
    caller and rely on the entity's own rules.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        id_generator: IdGenerator,
        audit_logger: AuditLogger | None = None,
    ):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            id_generator: Issues ids for users registered without one
            audit_logger: Receives field-change events of users created here
        """
        self._uow_factory = uow_factory
        self._id_generator = id_generator
        self._audit_logger = audit_logger

    @log_calls
    @timed
    async def register_user(self, dto: RegisterUserDTO) -> UserDTO:
        """
        Register a new user in PENDING status.

        Business rules:
        1. Email must be unique
        2. An explicit id must not be taken

        Raises:
            UserAlreadyExistsError: If the email or id is already used
            DomainException: If any field fails value-object validation
        """
        async with self._uow_factory() as uow:
            if await uow.users.email_exists(dto.email):
                raise UserAlreadyExistsError(f"Email {dto.email} already registered")

            if dto.id is not None:
                user_id = Id.of(dto.id)
                if await uow.users.exists(user_id.value):
                    raise UserAlreadyExistsError(f"User with ID {user_id} already exists")
            else:
                user_id = self._id_generator.next_id()

            user = User.from_primitives(
                id=user_id.value,
                email=dto.email,
                first_name=dto.first_name,
                last_name=dto.last_name,
                password=dto.password.get_secret_value(),
                gender=dto.gender,
                role=dto.role,
                audit_logger=self._audit_logger,
            )

            created_user = await uow.users.add(user)
            await uow.commit()
            return UserDTO.from_entity(created_user)

    @log_calls
    @timed
    async def get_user(self, user_id: int) -> UserDTO:
        """
        Retrieve user by ID.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            return UserDTO.from_entity(user)

    @log_calls
    @timed
    @require_role(Role.ADMIN)
    async def list_users(self, skip: int = 0, limit: int = 100) -> list[UserDTO]:
        async with self._uow_factory() as uow:
            users = await uow.users.get_all(skip=skip, limit=limit)
            return [UserDTO.from_entity(user) for user in users]

    # --- status (admin) ---

    @log_calls
    @timed
    @require_role(Role.ADMIN)
    async def change_user_status(self, user_id: int, dto: ChangeStatusDTO) -> UserDTO:
        """
        Move a user to any status the transition table allows.

        Raises:
            UserNotFoundError: If user doesn't exist
            InvalidStatusException: If the transition is not allowed
        """
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.change_status(user.status, dto.status)
            return await self._save(uow, user)

    @log_calls
    @timed
    @require_role(Role.ADMIN)
    async def activate_user(self, user_id: int) -> UserDTO:
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.activate()
            return await self._save(uow, user)

    @log_calls
    @timed
    @require_role(Role.ADMIN)
    async def suspend_user(self, user_id: int) -> UserDTO:
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.suspend()
            return await self._save(uow, user)

    @log_calls
    @timed
    @require_role(Role.ADMIN)
    async def delete_user(self, user_id: int) -> UserDTO:
        """
        Logically delete a user. The record is kept in DELETED status.

        Raises:
            UserNotFoundError: If user doesn't exist
            InvalidStatusException: If the user is already deleted
        """
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.mark_as_deleted()
            return await self._save(uow, user)

    # --- self-service ---

    @log_calls
    @timed
    async def change_email(self, user_id: int, dto: ChangeEmailDTO) -> UserDTO:
        """
        Change a user's email.

        Raises:
            UserNotFoundError: If user doesn't exist
            UserAlreadyExistsError: If another user already has the email
            InvalidEmailException: If the email or user status is invalid
        """
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            new_email = Email(dto.email)

            existing = await uow.users.get_by_email(new_email.value)
            if existing is not None and existing.id != user.id:
                raise UserAlreadyExistsError(f"Email {new_email} already in use")

            user.change_email(user.email, new_email)
            return await self._save(uow, user)

    @log_calls
    @timed
    async def change_name(self, user_id: int, dto: ChangeNameDTO) -> UserDTO:
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.change_name(user.full_name, FullName(dto.first_name, dto.last_name))
            return await self._save(uow, user)

    @log_calls
    @timed
    async def change_password(self, user_id: int, dto: ChangePasswordDTO) -> UserDTO:
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.change_password(dto.new_password.get_secret_value())
            return await self._save(uow, user)

    @log_calls
    @timed
    async def change_gender(self, user_id: int, dto: ChangeGenderDTO) -> UserDTO:
        async with self._uow_factory() as uow:
            user = await self._load(uow, user_id)
            user.change_gender(user.gender, dto.gender)
            return await self._save(uow, user)

    # --- helpers ---

    async def _load(self, uow: IUnitOfWork, user_id: int) -> User:
        user = await uow.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User with ID {user_id} not found")
        return user

    async def _save(self, uow: IUnitOfWork, user: User) -> UserDTO:
        updated_user = await uow.users.update(user)
        await uow.commit()
        return UserDTO.from_entity(updated_user)
