"""Per-request security context.

The role of the current principal travels in a ``ContextVar`` so it follows
the caller through threads started with ``contextvars.copy_context`` and
through asyncio tasks, without being passed to every use case.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from smartbill.domain.enums import Role

_current_role: ContextVar[Optional[Role]] = ContextVar("smartbill_current_role", default=None)


def get_current_role() -> Optional[Role]:
    """Role of the current principal, or None when nobody is authenticated."""
    return _current_role.get()


@contextmanager
def security_context(role: Optional[Role]) -> Iterator[None]:
    """
    Run a block as a principal holding ``role``.

    Usage:
        with security_context(Role.ADMIN):
            await user_service.suspend_user(42)
    """
    token = _current_role.set(role)
    try:
        yield
    finally:
        _current_role.reset(token)
