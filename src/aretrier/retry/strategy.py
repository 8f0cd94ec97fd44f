r"""Retry strategy for calculating backoff delays."""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from aretrier.backoff.full_jitter import FullJitterBackoff
from aretrier.core.config import DEFAULT_BASE_BACKOFF_MS

if TYPE_CHECKING:
    from aretrier.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating retry delays.

    Args:
        base_backoff_ms: Base of the default full jitter backoff.
        backoff_strategy: Backoff strategy instance. Defaults to
            ``FullJitterBackoff(base_backoff_ms)``.

    Attributes:
        backoff_strategy: Backoff strategy instance.
    """

    def __init__(
        self,
        base_backoff_ms: int = DEFAULT_BASE_BACKOFF_MS,
        backoff_strategy: BaseBackoffStrategy | None = None,
    ) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy
            if backoff_strategy is not None
            else FullJitterBackoff(base_delay_ms=base_backoff_ms)
        )

    def calculate_delay(self, attempt: int) -> int:
        """Calculate delay before the next attempt.

        Args:
            attempt: The attempt that just failed (1-indexed).

        Returns:
            Delay in milliseconds.
        """
        delay = self.backoff_strategy.calculate(attempt)
        logger.debug(f"Backoff after attempt {attempt}: {delay}ms ({self.backoff_strategy})")
        return delay
