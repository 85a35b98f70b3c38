"""Protected execution of helper I/O.

Every external call made by a helper goes through one of these functions so
that failures surface uniformly as `HelperError(service, operation)` and every
call is bracketed by debug logs. Nothing here retries, times out or swallows
errors: the orchestration layer (Temporal retry policies) owns that.

Example:
    posts = run_value('reddit', 'fetch_top_posts', lambda: client.get(url))

    await arun_void('email', 'send_text_email', lambda: aiosmtplib.send(message, ...))
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from cafeflow.core.exceptions import HelperError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _fail(service_name: str, operation: str, exc: Exception) -> HelperError:
    logger.error('Failed to execute %s.%s: %s', service_name, operation, exc)
    return HelperError(service_name, operation, cause=exc)


def run_value(service_name: str, operation: str, work: Callable[[], T]) -> T:
    """Run `work` and return its result, wrapping any failure in `HelperError`."""
    logger.debug('Executing %s.%s', service_name, operation)
    try:
        result = work()
    except Exception as e:
        raise _fail(service_name, operation, e) from e
    logger.debug('Successfully executed %s.%s', service_name, operation)
    return result


def run_void(service_name: str, operation: str, work: Callable[[], object]) -> None:
    """Same as `run_value` for work whose result is not needed."""
    run_value(service_name, operation, work)


async def arun_value(service_name: str, operation: str, work: Callable[[], Awaitable[T]]) -> T:
    """Async variant of `run_value`: `work` is a coroutine function (or returns an awaitable)."""
    logger.debug('Executing %s.%s', service_name, operation)
    try:
        result = await work()
    except Exception as e:
        raise _fail(service_name, operation, e) from e
    logger.debug('Successfully executed %s.%s', service_name, operation)
    return result


async def arun_void(service_name: str, operation: str, work: Callable[[], Awaitable[object]]) -> None:
    """Async variant of `run_void`."""
    await arun_value(service_name, operation, work)
