r"""aretrier - Resilient HTTP GET requests with timeouts, retries and
full jitter backoff.

Built on top of httpx, this package issues one logical request on behalf
of the caller and transparently handles rate limiting and transient
failures.

Key Features:
    - Per-attempt timeout
    - Automatic retry of 429, 500, 502, 503 and 504 responses, timeouts
      and network errors
    - Custom retry predicate receiving the failed response and its body
    - Full jitter exponential backoff
    - Async and sync APIs
    - Distinct exception for every terminal failure

Example:
    ```pycon
    >>> from aretrier import fetch
    >>> response = fetch("https://api.example.com/data")  # doctest: +SKIP
    >>> import asyncio
    >>> from aretrier import fetch_async
    >>> response = asyncio.run(
    ...     fetch_async("https://api.example.com/data", max_attempts=5, timeout_ms=2000)
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ExhaustedRetriesError",
    "HttpRequestError",
    "InvariantViolationError",
    "NetworkErrorExhaustedError",
    "NonRetriableHttpError",
    "RequestConfig",
    "TimeoutExhaustedError",
    "__version__",
    "fetch",
    "fetch_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretrier.core.config import RequestConfig
from aretrier.exceptions import (
    ExhaustedRetriesError,
    HttpRequestError,
    InvariantViolationError,
    NetworkErrorExhaustedError,
    NonRetriableHttpError,
    TimeoutExhaustedError,
)
from aretrier.fetch import fetch
from aretrier.fetch_async import fetch_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
