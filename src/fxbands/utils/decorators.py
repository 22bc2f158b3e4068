"""Utility decorators for provider resilience and timing."""
import asyncio
import functools
import time
from typing import Callable, Tuple, Type

from fxbands.utils.logging import get_logger

logger = get_logger(__name__)


def retry(
    max_attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = (Exception,)
):
    """
    Retry decorator with exponential backoff.

    Args:
        max_attempts: Maximum number of attempts, including the first call
        delay: Initial delay between attempts in seconds
        backoff: Multiplier applied to the delay after each failure
        exceptions: Exception types that trigger another attempt

    Example:
        @retry(max_attempts=3, delay=1.0, exceptions=(httpx.HTTPError,))
        async def fetch_timeseries():
            ...
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            current_delay = delay
            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_attempts:
                        logger.error(
                            f"{func.__name__} failed after {max_attempts} attempts",
                            extra={"error": str(e), "attempts": attempt}
                        )
                        raise
                    logger.warning(
                        f"{func.__name__} failed (attempt {attempt}/{max_attempts}), retrying in {current_delay}s",
                        extra={"error": str(e), "attempts": attempt}
                    )
                    await asyncio.sleep(current_delay)
                    current_delay *= backoff

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            current_delay = delay
            for attempt in range(1, max_attempts + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_attempts:
                        logger.error(
                            f"{func.__name__} failed after {max_attempts} attempts",
                            extra={"error": str(e), "attempts": attempt}
                        )
                        raise
                    logger.warning(
                        f"{func.__name__} failed (attempt {attempt}/{max_attempts}), retrying in {current_delay}s",
                        extra={"error": str(e), "attempts": attempt}
                    )
                    time.sleep(current_delay)
                    current_delay *= backoff

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def log_execution(log_args: bool = False):
    """
    Log start, completion and failure of a call with its duration.

    Args:
        log_args: Whether to include (truncated) call arguments
    """
    def decorator(func: Callable):
        def _start_extra(args, kwargs):
            extra = {"function": func.__name__}
            if log_args:
                extra["function_args"] = str(args)[:100]
                extra["function_kwargs"] = str(kwargs)[:100]
            return extra

        def _elapsed_ms(start: float) -> float:
            return round((time.perf_counter() - start) * 1000, 2)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            logger.debug(f"Starting {func.__name__}", extra=_start_extra(args, kwargs))
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Failed {func.__name__}",
                    extra={"function": func.__name__, "execution_time_ms": _elapsed_ms(start), "error": str(e)}
                )
                raise
            logger.debug(
                f"Completed {func.__name__}",
                extra={"function": func.__name__, "execution_time_ms": _elapsed_ms(start)}
            )
            return result

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            logger.debug(f"Starting {func.__name__}", extra=_start_extra(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Failed {func.__name__}",
                    extra={"function": func.__name__, "execution_time_ms": _elapsed_ms(start), "error": str(e)}
                )
                raise
            logger.debug(
                f"Completed {func.__name__}",
                extra={"function": func.__name__, "execution_time_ms": _elapsed_ms(start)}
            )
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
