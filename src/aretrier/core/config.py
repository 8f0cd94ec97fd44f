r"""Configuration dataclass and defaults for resilient requests.

This module provides configuration constants and a dataclass-based
configuration object shared by ``fetch``, ``fetch_async`` and the retry
executors.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_BACKOFF_MS",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT_MS",
    "RETRY_STATUS_CODES",
    "RequestConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretrier.core.validation import validate_request_params

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx

    from aretrier.backoff import BaseBackoffStrategy


# Default per-attempt timeout in milliseconds
DEFAULT_TIMEOUT_MS = 10_000

# Default number of attempts, including the first one
DEFAULT_MAX_ATTEMPTS = 3

# Default base for full jitter backoff in milliseconds
# Upper bound of the wait after attempt n = base * (2 ** n)
# With 300: waits are drawn from [0, 600), [0, 1200), [0, 2400), ...
DEFAULT_BASE_BACKOFF_MS = 300

# HTTP status codes that the default predicate retries
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class RequestConfig:
    """Configuration for one resilient request.

    The configuration is immutable: the headers mapping is copied at
    construction, so later changes to the caller's dict do not leak
    into an in-flight call.

    Args:
        headers: Optional headers forwarded verbatim on every attempt.
        max_attempts: Total number of attempts, including the first one.
            Must be >= 1.
        timeout_ms: Per-attempt wall-clock budget in milliseconds.
            It does not cover the backoff delay between attempts.
            Must be > 0.
        base_backoff_ms: Base of the full jitter backoff in milliseconds.
            Must be >= 0. Ignored if backoff_strategy is provided.
        retry_if: Optional predicate called with the failed response and
            its buffered body text. Returns ``True`` to retry. ``None``
            uses ``default_retry_if`` (429, 500, 502, 503, 504).
        backoff_strategy: Optional backoff strategy. ``None`` uses
            ``FullJitterBackoff(base_backoff_ms)``.

    Raises:
        ValueError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from aretrier.core.config import RequestConfig
        >>> config = RequestConfig()
        >>> config.max_attempts
        3
        >>> config = RequestConfig(max_attempts=5, headers={"Accept": "application/json"})
        >>> merged = config.merge(max_attempts=10)
        >>> merged.max_attempts
        10
        >>> config.max_attempts
        5

        ```
    """

    headers: Mapping[str, str] | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    base_backoff_ms: int = DEFAULT_BASE_BACKOFF_MS
    retry_if: Callable[[httpx.Response, str], bool] | None = None
    backoff_strategy: BaseBackoffStrategy | None = None

    def __post_init__(self) -> None:
        validate_request_params(
            max_attempts=self.max_attempts,
            timeout_ms=self.timeout_ms,
            base_backoff_ms=self.base_backoff_ms,
        )
        if self.headers is not None:
            object.__setattr__(self, "headers", dict(self.headers))

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RequestConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from aretrier.core.config import RequestConfig
            >>> config = RequestConfig(timeout_ms=2000)
            >>> config.merge(timeout_ms=None, max_attempts=5).timeout_ms
            2000

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.

        Example:
            ```pycon
            >>> from aretrier.core.config import RequestConfig
            >>> RequestConfig(max_attempts=5).to_dict()["max_attempts"]
            5

            ```
        """
        return {
            "headers": self.headers,
            "max_attempts": self.max_attempts,
            "timeout_ms": self.timeout_ms,
            "base_backoff_ms": self.base_backoff_ms,
            "retry_if": self.retry_if,
            "backoff_strategy": self.backoff_strategy,
        }
