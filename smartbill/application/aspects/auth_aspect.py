"""Role checks for use cases."""

import functools
import inspect
from typing import Any, Callable, TypeVar

from smartbill.application.exceptions import AccessDeniedError, UnauthorizedError
from smartbill.application.security.security_context import get_current_role
from smartbill.domain.enums import Role

F = TypeVar("F", bound=Callable[..., Any])


def require_role(*roles: Role) -> Callable[[F], F]:
    """
    Only let principals holding one of ``roles`` call the decorated function.

    The role is read from the security context at call time.

    Raises:
        UnauthorizedError: If no principal is set
        AccessDeniedError: If the principal's role is not in ``roles``
    """
    if not roles:
        raise ValueError("require_role needs at least one role")

    def check() -> None:
        current = get_current_role()
        if current is None:
            raise UnauthorizedError()
        if current not in roles:
            needed = " or ".join(r.value for r in roles)
            raise AccessDeniedError(
                f"Access denied: requires role {needed} but was {current.value}"
            )

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                check()
                return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check()
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
