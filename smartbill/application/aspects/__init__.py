"""Cross-cutting decorators applied explicitly to use cases."""

from smartbill.application.aspects.auth_aspect import require_role
from smartbill.application.aspects.logging_aspect import log_calls
from smartbill.application.aspects.timing_aspect import timed

__all__ = ["log_calls", "require_role", "timed"]
