"""Retry decorator for GitHub API rate limits.

Only rate limit responses are retried. Every other failure propagates to the
caller unchanged, which keeps the changelog run free of hidden retries on
network or permission errors.
"""

import asyncio
import functools
import time
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _is_rate_limit_response(exc: RequestFailed) -> bool:
    """Check whether a failed request was rejected because of a rate limit."""
    status_code = exc.response.status_code
    if status_code == 429:
        return True
    if status_code != 403:
        return False
    return exc.response.headers.get("x-ratelimit-remaining") == "0" or "rate limit" in str(exc).lower()


def _wait_time_from_headers(exc: RequestFailed, default: float) -> float:
    """Determine how long to wait from the retry-after or x-ratelimit-reset headers."""
    retry_after = exc.response.headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)

    rate_limit_reset = exc.response.headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
        else:
            current_timestamp = int(time.time())
            if reset_timestamp > current_timestamp:
                return float(reset_timestamp - current_timestamp + 1)

    return default


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub calls that hit a rate limit.

    Args:
        max_retries: Maximum number of retry attempts (default: 5)
        initial_delay: Initial delay in seconds between retries (default: 10.0)
        max_delay: Maximum delay in seconds between retries (default: 300.0)
        exponential_base: Base for exponential backoff calculation (default: 2.0)

    Returns:
        Decorated function with retry logic

    Raises:
        RuntimeError: If the decorated function is not a coroutine function.
    """

    def decorator(func: F) -> F:
        if not asyncio.iscoroutinefunction(func):
            raise RuntimeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as e:
                    if attempt == max_retries:
                        logger.error("Max retries reached for GitHub rate limit error", function=func.__name__, attempt=attempt + 1)
                        raise
                    if e.retry_after:
                        wait_time = min(e.retry_after.total_seconds(), max_delay)
                    else:
                        wait_time = min(delay, max_delay)
                except RequestFailed as e:
                    if not _is_rate_limit_response(e):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=e.response.status_code,
                        )
                        raise
                    wait_time = min(_wait_time_from_headers(e, delay), max_delay)

                logger.warning(
                    f"GitHub rate limit exceeded, waiting {wait_time} seconds",
                    function=func.__name__,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return async_wrapper  # type: ignore

    return decorator
