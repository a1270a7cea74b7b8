"""Execution time logging for use cases."""

import functools
import inspect
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Log how long each call to ``func`` took, whether it returned or raised."""
    name = func.__qualname__

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter()
            try:
                return await func(*args, **kwargs)
            finally:
                _report(name, start)

        return async_wrapper  # type: ignore[return-value]

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _report(name, start)

    return wrapper  # type: ignore[return-value]


def _report(name: str, start: float) -> None:
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("[%s] executed in %.2f ms", name, elapsed_ms)
