r"""Synchronous retry executor.

This module provides the RetryExecutor class, the blocking counterpart of
AsyncRetryExecutor. Each call runs on the calling thread.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING

from aretrier.retry.decider import RetryDecider
from aretrier.retry.executor_core import raise_if_terminal, raise_invariant_violation
from aretrier.retry.outcome import Success
from aretrier.retry.strategy import RetryStrategy
from aretrier.transport.outcome import HttpError
from aretrier.utils.response import read_body
from aretrier.utils.sleep import sleep_ms

if TYPE_CHECKING:
    import httpx

    from aretrier.core.config import RequestConfig
    from aretrier.transport.base import Transport

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes GET requests with automatic retry logic.

    The per-attempt timeout is passed to the transport, which must
    enforce it. With ``HttpxTransport`` it applies to each network
    operation (connect, read, write, pool acquisition).

    Args:
        config: The request configuration.

    Attributes:
        config: The request configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
    """

    def __init__(self, config: RequestConfig) -> None:
        self.config = config
        self.strategy: RetryStrategy = RetryStrategy(
            base_backoff_ms=config.base_backoff_ms,
            backoff_strategy=config.backoff_strategy,
        )
        self.decider: RetryDecider = RetryDecider(config.retry_if)

    def execute(self, url: str, transport: Transport) -> httpx.Response:
        """Execute a GET request with automatic retry logic.

        See ``AsyncRetryExecutor.execute`` for the retry policy.

        Args:
            url: The URL to request.
            transport: The transport used for each attempt.

        Returns:
            The first 2xx response.

        Raises:
            NonRetriableHttpError: If the retry predicate rejects a response.
            ExhaustedRetriesError: If the last attempt returned a retriable
                error response.
            TimeoutExhaustedError: If the last attempt timed out.
            NetworkErrorExhaustedError: If the last attempt failed with a
                network error.
        """
        for attempt in range(1, self.config.max_attempts + 1):
            outcome = transport(url, headers=self.config.headers, timeout_ms=self.config.timeout_ms)
            if isinstance(outcome, HttpError):
                result = self.decider.classify(outcome, read_body(outcome.response))
            else:
                result = self.decider.classify(outcome)

            if isinstance(result, Success):
                logger.debug(f"GET request to {url} succeeded on attempt {attempt}")
                return result.response

            raise_if_terminal(result, url, attempt, self.config)
            sleep_ms(self.strategy.calculate_delay(attempt))

        raise_invariant_violation(url)
