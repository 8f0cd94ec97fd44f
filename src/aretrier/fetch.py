r"""Contains the synchronous HTTP GET request with automatic retry
logic."""

from __future__ import annotations

__all__ = ["fetch"]

from typing import TYPE_CHECKING

import httpx

from aretrier.core.config import RequestConfig
from aretrier.retry.executor import RetryExecutor
from aretrier.transport.httpx_transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from aretrier.backoff import BaseBackoffStrategy
    from aretrier.transport.base import Transport


def fetch(
    url: str,
    *,
    client: httpx.Client | None = None,
    config: RequestConfig | None = None,
    transport: Transport | None = None,
    headers: Mapping[str, str] | None = None,
    max_attempts: int | None = None,
    timeout_ms: int | None = None,
    base_backoff_ms: int | None = None,
    retry_if: Callable[[httpx.Response, str], bool] | None = None,
    backoff_strategy: BaseBackoffStrategy | None = None,
) -> httpx.Response:
    r"""Send an HTTP GET request with timeouts, retries and full jitter
    backoff.

    This is the blocking counterpart of ``fetch_async`` and accepts the
    same parameters. The timeout is enforced by httpx for each network
    operation of an attempt.

    Args:
        url: The URL to send the GET request to.
        client: An optional httpx.Client object to use for making
            requests. If None, a new client is created and closed after
            use. Ignored if transport is provided.
        config: An optional RequestConfig. Individual parameters override
            its values when specified.
        transport: An optional transport. Defaults to an ``HttpxTransport``
            around the client.
        headers: Headers forwarded verbatim on every attempt.
        max_attempts: Total number of attempts. Must be >= 1.
        timeout_ms: Per-attempt timeout in milliseconds. Must be > 0.
        base_backoff_ms: Base of the full jitter backoff in milliseconds.
            Must be >= 0.
        retry_if: Optional predicate called with a failed response and its
            body text. Returns ``True`` to retry.
        backoff_strategy: Optional custom backoff strategy.

    Returns:
        The first 2xx response.

    Raises:
        HttpRequestError: If the request fails. See ``fetch_async``.
        ValueError: If a parameter is invalid.

    Example:
        ```pycon
        >>> from aretrier import fetch
        >>> response = fetch("https://api.example.com/data", max_attempts=5)  # doctest: +SKIP

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
    executor = RetryExecutor(effective_config)
    if transport is not None:
        return executor.execute(url, transport)

    owns_client = client is None
    if owns_client:
        client = httpx.Client()
    try:
        return executor.execute(url, HttpxTransport(client))
    finally:
        if owns_client:
            client.close()
