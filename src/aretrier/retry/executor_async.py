r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that executes async
GET requests with per-attempt timeouts, retries and full jitter backoff.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
from typing import TYPE_CHECKING

from aretrier.retry.decider import RetryDecider
from aretrier.retry.executor_core import raise_if_terminal, raise_invariant_violation
from aretrier.retry.outcome import Success
from aretrier.retry.strategy import RetryStrategy
from aretrier.transport.outcome import Cancelled, HttpError
from aretrier.utils.response import read_body_async
from aretrier.utils.sleep import sleep_ms_async

if TYPE_CHECKING:
    import httpx

    from aretrier.core.config import RequestConfig
    from aretrier.transport.base import AsyncTransport
    from aretrier.transport.outcome import TransportOutcome

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Executes async GET requests with automatic retry logic.

    The executor holds no state that changes during a call, so one
    instance may serve concurrent calls.

    Args:
        config: The request configuration.

    Attributes:
        config: The request configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aretrier.core import RequestConfig
        >>> from aretrier.retry import AsyncRetryExecutor
        >>> from aretrier.transport import AsyncHttpxTransport
        >>> async def main():
        ...     executor = AsyncRetryExecutor(RequestConfig(max_attempts=3, timeout_ms=5000))
        ...     async with httpx.AsyncClient() as client:
        ...         return await executor.execute(
        ...             "https://api.example.com/data", AsyncHttpxTransport(client)
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, config: RequestConfig) -> None:
        self.config = config
        self.strategy: RetryStrategy = RetryStrategy(
            base_backoff_ms=config.base_backoff_ms,
            backoff_strategy=config.backoff_strategy,
        )
        self.decider: RetryDecider = RetryDecider(config.retry_if)

    async def execute(self, url: str, transport: AsyncTransport) -> httpx.Response:
        """Execute a GET request with automatic retry logic.

        Attempts the request up to ``config.max_attempts`` times:

        - 2xx response: returned immediately, unchanged
        - other response: the body is buffered and passed to the retry
          predicate; retried if accepted, raised immediately otherwise
        - timeout or network error: retried
        - any other error: raised immediately, unchanged

        Between attempts, the task sleeps for a full jitter delay.

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
            outcome = await self._send(url, transport)
            if isinstance(outcome, HttpError):
                body = await read_body_async(outcome.response)
                result = self.decider.classify(outcome, body)
            else:
                result = self.decider.classify(outcome)

            if isinstance(result, Success):
                logger.debug(f"GET request to {url} succeeded on attempt {attempt}")
                return result.response

            raise_if_terminal(result, url, attempt, self.config)
            await sleep_ms_async(self.strategy.calculate_delay(attempt))

        raise_invariant_violation(url)

    async def _send(self, url: str, transport: AsyncTransport) -> TransportOutcome:
        """Perform one attempt bounded by the per-attempt timeout.

        Leaving the timeout scope disarms it, so a late deadline never
        cancels anything outside the attempt.
        """
        deadline = asyncio.timeout(self.config.timeout_ms / 1000)
        try:
            async with deadline:
                return await transport(
                    url, headers=self.config.headers, timeout_ms=self.config.timeout_ms
                )
        except TimeoutError as exc:
            if not deadline.expired():
                raise
            return Cancelled(exc)
