"""Entry/exit/exception logging for use cases."""

import functools
import inspect
import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def log_calls(func: F) -> F:
    """
    Log every call to ``func``: arguments on entry, the return value on exit,
    and the error message when it raises. Exceptions are re-raised untouched.

    Works on plain functions and coroutine functions. For methods the
    ``self`` argument is left out of the log line.
    """
    name = func.__qualname__
    skip = 1 if next(iter(inspect.signature(func).parameters), None) == "self" else 0

    def describe(args: tuple, kwargs: dict) -> str:
        parts = [repr(a) for a in args[skip:]]
        parts.extend(f"{k}={v!r}" for k, v in kwargs.items())
        return "[" + ", ".join(parts) + "]"

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.info("[ENTER] %s() with args = %s", name, describe(args, kwargs))
            try:
                result = await func(*args, **kwargs)
            except Exception as exc:
                logger.error("[EXCEPTION] %s() throws = %s", name, exc)
                raise
            logger.info("[EXIT] %s() returned = %r", name, result)
            return result

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger.info("[ENTER] %s() with args = %s", name, describe(args, kwargs))
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            logger.error("[EXCEPTION] %s() throws = %s", name, exc)
            raise
        logger.info("[EXIT] %s() returned = %r", name, result)
        return result

    return wrapper  # type: ignore[return-value]
