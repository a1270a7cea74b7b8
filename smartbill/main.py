"""Composition root.

The only place that picks concrete implementations for the domain's
collaborators. Persistence is supplied by the caller as a unit-of-work
factory; everything else is built here from settings.
"""

from collections.abc import Callable

from smartbill.application.services.user_service import UserService
from smartbill.domain.repositories.unit_of_work import IUnitOfWork
from smartbill.domain.services.audit_logger import LoggingAuditLogger
from smartbill.domain.value_objects import SequentialIdGenerator
from smartbill.infrastructure.config.settings import Settings, get_settings
from smartbill.infrastructure.observability.logging_config import configure_logging


def create_user_service(
    uow_factory: Callable[[], IUnitOfWork],
    settings: Settings | None = None,
) -> UserService:
    """
    Build a ready-to-use UserService.

    Args:
        uow_factory: Factory returning a fresh unit of work per use case
        settings: Settings to use; defaults to the cached environment settings

    Example:
        service = create_user_service(lambda: MyUnitOfWork(session))
    """
    settings = settings or get_settings()
    configure_logging(settings)

    return UserService(
        uow_factory=uow_factory,
        id_generator=SequentialIdGenerator(start=settings.id_sequence_start),
        audit_logger=LoggingAuditLogger(settings.audit_logger_name),
    )
