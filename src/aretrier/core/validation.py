r"""Parameter validation utilities for HTTP request retry logic.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used in the retry loop.
"""

from __future__ import annotations

__all__ = ["validate_request_params", "validate_timeout_ms"]


def validate_timeout_ms(timeout_ms: int) -> None:
    """Validate the per-attempt timeout.

    Args:
        timeout_ms: Maximum milliseconds a single attempt may take.
            Must be > 0.

    Raises:
        ValueError: If timeout_ms is <= 0.

    Example:
        ```pycon
        >>> from aretrier.core.validation import validate_timeout_ms
        >>> validate_timeout_ms(5000)
        >>> validate_timeout_ms(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout_ms must be > 0, got 0

        ```
    """
    if timeout_ms <= 0:
        msg = f"timeout_ms must be > 0, got {timeout_ms}"
        raise ValueError(msg)


def validate_request_params(
    max_attempts: int,
    timeout_ms: int,
    base_backoff_ms: int = 0,
) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Total number of attempts, including the first one.
            Must be >= 1. A value of 1 means no retries.
        timeout_ms: Per-attempt timeout in milliseconds. Must be > 0.
        base_backoff_ms: Base of the exponential backoff in milliseconds.
            Must be >= 0. A value of 0 retries without waiting.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from aretrier.core import validate_request_params
        >>> validate_request_params(max_attempts=3, timeout_ms=5000)
        >>> validate_request_params(max_attempts=3, timeout_ms=5000, base_backoff_ms=100)
        >>> validate_request_params(max_attempts=0, timeout_ms=5000)  # doctest: +SKIP

        ```
    """
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    validate_timeout_ms(timeout_ms)
    if base_backoff_ms < 0:
        msg = f"base_backoff_ms must be >= 0, got {base_backoff_ms}"
        raise ValueError(msg)
