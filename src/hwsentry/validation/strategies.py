"""
Retry helper.

hwsentry only retries in one place, the start-up reachability probe, so a
single bounded retry with a fixed delay is all that is provided here.
"""

import logging
import time
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def simple_retry(
    func: Callable[[], T],
    max_attempts: int = 3,
    delay: float = 1.0,
    context: str = "operation"
) -> T:
    """
    Call ``func`` until it returns, at most ``max_attempts`` times.

    Args:
        func: Zero-argument callable to attempt
        max_attempts: Total number of calls allowed, at least one
        delay: Fixed pause between attempts in seconds
        context: What is being attempted, for log messages

    Returns:
        The value returned by the first successful call

    Raises:
        Exception: The exception of the last attempt when every attempt fails
    """
    failure: Optional[Exception] = None

    for attempt in range(1, max(1, max_attempts) + 1):
        if failure is not None:
            time.sleep(delay)
        try:
            value = func()
        except Exception as e:
            failure = e
            logger.warning(f"{context}: attempt {attempt}/{max_attempts} failed: {e}")
            continue
        if attempt > 1:
            logger.info(f"{context}: succeeded on attempt {attempt}")
        return value

    logger.error(f"{context}: giving up after {max_attempts} attempt(s)")
    raise failure
