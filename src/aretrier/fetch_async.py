r"""Contains the asynchronous HTTP GET request with automatic retry
logic."""

from __future__ import annotations

__all__ = ["fetch_async"]

from typing import TYPE_CHECKING

import httpx

from aretrier.core.config import RequestConfig
from aretrier.retry.executor_async import AsyncRetryExecutor
from aretrier.transport.httpx_transport import AsyncHttpxTransport

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from aretrier.backoff import BaseBackoffStrategy
    from aretrier.transport.base import AsyncTransport


async def fetch_async(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: RequestConfig | None = None,
    transport: AsyncTransport | None = None,
    headers: Mapping[str, str] | None = None,
    max_attempts: int | None = None,
    timeout_ms: int | None = None,
    base_backoff_ms: int | None = None,
    retry_if: Callable[[httpx.Response, str], bool] | None = None,
    backoff_strategy: BaseBackoffStrategy | None = None,
) -> httpx.Response:
    r"""Send an HTTP GET request asynchronously with timeouts, retries
    and full jitter backoff.

    Each attempt is bounded by ``timeout_ms``. Responses with a 2xx status
    are returned unchanged. Other responses are passed, with their body
    text, to the retry predicate (by default: retry 429, 500, 502, 503 and
    504). Timeouts and network errors are retried. Any other error is
    raised immediately. Between attempts, the task sleeps for a random
    delay in ``[0, base_backoff_ms * 2 ** attempt)`` milliseconds.

    Args:
        url: The URL to send the GET request to.
        client: An optional httpx.AsyncClient object to use for making
            requests. If None, a new client is created and closed after
            use. Ignored if transport is provided.
        config: An optional RequestConfig. Individual parameters override
            its values when specified.
        transport: An optional transport. Defaults to an
            ``AsyncHttpxTransport`` around the client.
        headers: Headers forwarded verbatim on every attempt.
        max_attempts: Total number of attempts, including the first one.
            Must be >= 1.
        timeout_ms: Per-attempt timeout in milliseconds. Must be > 0.
        base_backoff_ms: Base of the full jitter backoff in milliseconds.
            Must be >= 0.
        retry_if: Optional predicate called with a failed response and its
            body text. Returns ``True`` to retry.
        backoff_strategy: Optional custom backoff strategy.

    Returns:
        The first 2xx response.

    Raises:
        NonRetriableHttpError: If the retry predicate rejects a response.
        ExhaustedRetriesError: If the last attempt returned a retriable
            error response.
        TimeoutExhaustedError: If the last attempt timed out.
        NetworkErrorExhaustedError: If the last attempt failed with a
            network error.
        ValueError: If a parameter is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretrier import fetch_async
        >>> async def example():
        ...     response = await fetch_async(
        ...         "https://api.example.com/data",
        ...         headers={"Authorization": "Bearer token"},
        ...         max_attempts=5,
        ...         timeout_ms=2000,
        ...     )
        ...     return response.json()
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    effective_config = (config if config is not None else RequestConfig()).merge(
        headers=headers,
        max_attempts=max_attempts,
        timeout_ms=timeout_ms,
        base_backoff_ms=base_backoff_ms,
        retry_if=retry_if,
        backoff_strategy=backoff_strategy,
    )
    executor = AsyncRetryExecutor(effective_config)
    if transport is not None:
        return await executor.execute(url, transport)

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient()
    try:
        return await executor.execute(url, AsyncHttpxTransport(client))
    finally:
        if owns_client:
            await client.aclose()
