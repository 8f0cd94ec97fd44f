r"""Delay scheduling between attempts.

Delays are expressed in milliseconds, matching the backoff strategies.
"""

from __future__ import annotations

__all__ = ["sleep_ms", "sleep_ms_async"]

import asyncio
import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def _check_delay(delay_ms: int) -> None:
    if delay_ms < 0:
        msg = f"delay_ms must be >= 0, got {delay_ms}"
        raise ValueError(msg)


async def sleep_ms_async(delay_ms: int) -> None:
    """Suspend the current task without blocking the event loop.

    A zero delay still yields control to the event loop once.

    Args:
        delay_ms: The delay in milliseconds. Must be >= 0.

    Raises:
        ValueError: If delay_ms is negative.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretrier.utils import sleep_ms_async
        >>> asyncio.run(sleep_ms_async(0))

        ```
    """
    _check_delay(delay_ms)
    logger.debug(f"Waiting {delay_ms}ms before retry")
    await asyncio.sleep(delay_ms / 1000)


def sleep_ms(delay_ms: int) -> None:
    """Block the current thread.

    Args:
        delay_ms: The delay in milliseconds. Must be >= 0.

    Raises:
        ValueError: If delay_ms is negative.
    """
    _check_delay(delay_ms)
    logger.debug(f"Waiting {delay_ms}ms before retry")
    time.sleep(delay_ms / 1000)
