"""Pytest configuration and fixtures.

Shared fixtures for all tests. Collaborators are replaced by fakes:
- FakeUnitOfWork / FakeUserRepository instead of a database
- FakeAuditLogger to observe audit events
- FakeIdGenerator for predictable ids
"""

import pytest

from smartbill.application.services.user_service import UserService
from smartbill.domain.entities.user import User
from smartbill.domain.enums import Gender, UserStatus
from tests.fakes import FakeAuditLogger, FakeIdGenerator, FakeUnitOfWork, make_user


@pytest.fixture
def audit_logger() -> FakeAuditLogger:
    return FakeAuditLogger()


@pytest.fixture
def id_generator() -> FakeIdGenerator:
    return FakeIdGenerator([1001, 1002, 1003])


@pytest.fixture
def pending_user(audit_logger) -> User:
    """A freshly registered user."""
    return make_user(audit_logger)


@pytest.fixture
def active_user(audit_logger) -> User:
    """An ACTIVE user wired to the shared FakeAuditLogger."""
    return make_user(audit_logger, status=UserStatus.ACTIVE)


@pytest.fixture
def another_user(audit_logger) -> User:
    return make_user(
        audit_logger,
        id=2,
        email="john.smith@example.com",
        first_name="John",
        last_name="Smith",
        gender=Gender.MALE,
        status=UserStatus.ACTIVE,
    )


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """A fresh, empty FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_users(pending_user, another_user) -> FakeUnitOfWork:
    """A FakeUnitOfWork pre-populated with a PENDING and an ACTIVE user."""
    return FakeUnitOfWork(initial_users=[pending_user, another_user])


@pytest.fixture
def user_service(fake_uow, id_generator, audit_logger) -> UserService:
    """UserService over an empty store."""
    return UserService(
        uow_factory=lambda: fake_uow,
        id_generator=id_generator,
        audit_logger=audit_logger,
    )


@pytest.fixture
def user_service_with_data(fake_uow_with_users, id_generator, audit_logger) -> UserService:
    """UserService over a store holding ``pending_user`` and ``another_user``."""
    return UserService(
        uow_factory=lambda: fake_uow_with_users,
        id_generator=id_generator,
        audit_logger=audit_logger,
    )
