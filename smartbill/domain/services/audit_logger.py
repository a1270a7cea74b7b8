"""Audit logging collaborator.

Entities report every field change as an ``AuditEvent``. Where the event
ends up is decided by the ``AuditLogger`` implementation handed to the
entity; the default writes to the standard ``logging`` module.

Recording an event is a side effect. An implementation may fail, but the
entity treats that failure as non-fatal: the mutation has already happened
and is not rolled back because of it.
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

DEFAULT_AUDIT_LOGGER_NAME = "smartbill.audit"


@dataclasses.dataclass(frozen=True)
class AuditEvent:
    """A single field change on an entity."""

    entity_id: Any
    field: str
    old_value: Any
    new_value: Any
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(timezone.utc))


class AuditLogger(ABC):
    """Interface for receiving audit events."""

    @abstractmethod
    def record(self, event: AuditEvent) -> None:
        """
        Record an audit event.

        Args:
            event: The field change to record
        """
        pass


class LoggingAuditLogger(AuditLogger):
    """Audit logger that writes one INFO line per event."""

    def __init__(self, logger_name: str = DEFAULT_AUDIT_LOGGER_NAME):
        self._logger = logging.getLogger(logger_name)

    def record(self, event: AuditEvent) -> None:
        self._logger.info(
            "User %s %s changed from %s to %s",
            event.entity_id,
            event.field,
            event.old_value,
            event.new_value,
        )
