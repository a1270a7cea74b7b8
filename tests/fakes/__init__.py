"""Fake implementations for testing."""

from tests.fakes.audit_logger_fake import FailingAuditLogger, FakeAuditLogger
from tests.fakes.id_generator_fake import FakeIdGenerator
from tests.fakes.unit_of_work_fake import FakeUnitOfWork
from tests.fakes.user_factory import VALID_PASSWORD, make_user
from tests.fakes.user_repository_fake import FakeUserRepository

__all__ = [
    "FailingAuditLogger",
    "FakeAuditLogger",
    "FakeIdGenerator",
    "FakeUnitOfWork",
    "FakeUserRepository",
    "VALID_PASSWORD",
    "make_user",
]
