"""Fake audit loggers for testing."""

from smartbill.domain.services.audit_logger import AuditEvent, AuditLogger


class FakeAuditLogger(AuditLogger):
    """Keeps every recorded event in a list."""

    def __init__(self) -> None:
        self.events: list[AuditEvent] = []

    def record(self, event: AuditEvent) -> None:
        self.events.append(event)

    def fields(self) -> list[str]:
        """Names of the changed fields, in order (useful for assertions)."""
        return [event.field for event in self.events]


class FailingAuditLogger(AuditLogger):
    """Raises on every event, to check that auditing failures are non-fatal."""

    def __init__(self) -> None:
        self.calls = 0

    def record(self, event: AuditEvent) -> None:
        self.calls += 1
        raise RuntimeError("audit sink unavailable")
