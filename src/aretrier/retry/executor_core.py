r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
asynchronous retry executors to turn a classified attempt into either a
retry or a terminal error.
"""

from __future__ import annotations

__all__ = ["describe_outcome", "raise_if_terminal", "raise_invariant_violation"]

import logging
from typing import TYPE_CHECKING, NoReturn

from aretrier.exceptions import (
    ExhaustedRetriesError,
    InvariantViolationError,
    NetworkErrorExhaustedError,
    NonRetriableHttpError,
    TimeoutExhaustedError,
)
from aretrier.retry.outcome import (
    FatalFailure,
    RetriableFailure,
    Success,
    TerminalFailure,
    TimeoutFailure,
    TransientTransportFailure,
)

if TYPE_CHECKING:
    from aretrier.core.config import RequestConfig
    from aretrier.retry.outcome import AttemptOutcome

logger: logging.Logger = logging.getLogger(__name__)


def describe_outcome(result: AttemptOutcome) -> str:
    """Return a short description of an attempt outcome for log
    messages.

    Args:
        result: The classified attempt outcome.

    Returns:
        The description.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretrier.retry.executor_core import describe_outcome
        >>> from aretrier.retry.outcome import RetriableFailure, TimeoutFailure
        >>> describe_outcome(RetriableFailure(httpx.Response(503), ""))
        'status 503'
        >>> describe_outcome(TimeoutFailure(TimeoutError()))
        'TimeoutError'

        ```
    """
    if isinstance(result, (Success, RetriableFailure, TerminalFailure)):
        return f"status {result.response.status_code}"
    if str(result.error):
        return f"{type(result.error).__name__}: {result.error}"
    return type(result.error).__name__


def raise_if_terminal(
    result: AttemptOutcome,
    url: str,
    attempt: int,
    config: RequestConfig,
) -> None:
    """Raise the terminal error for a failed attempt, if any.

    Returns normally only when the failure is transient and attempts
    remain, in which case the caller waits and tries again.

    Args:
        result: The classified outcome of a failed attempt.
        url: The URL being requested.
        attempt: The attempt that just failed (1-indexed).
        config: The request configuration.

    Raises:
        NonRetriableHttpError: If the retry predicate rejected the response.
        ExhaustedRetriesError: If the last attempt returned a retriable
            error response.
        TimeoutExhaustedError: If the last attempt timed out.
        NetworkErrorExhaustedError: If the last attempt failed with a
            network error.
        BaseException: The original error of a fatal failure, unchanged.
    """
    max_attempts = config.max_attempts
    description = describe_outcome(result)
    if isinstance(result, TerminalFailure):
        logger.debug(f"GET request to {url} failed with non-retriable {description}")
        raise NonRetriableHttpError(url=url, response=result.response)
    if isinstance(result, FatalFailure):
        logger.debug(f"GET request to {url} failed with unexpected {description}")
        raise result.error

    logger.debug(f"GET request to {url} failed on attempt {attempt}/{max_attempts} ({description})")
    if attempt < max_attempts:
        return

    if isinstance(result, RetriableFailure):
        raise ExhaustedRetriesError(url=url, response=result.response, attempts=attempt)
    if isinstance(result, TimeoutFailure):
        raise TimeoutExhaustedError(
            url=url, cause=result.error, timeout_ms=config.timeout_ms
        ) from result.error
    if isinstance(result, TransientTransportFailure):
        raise NetworkErrorExhaustedError(url=url, cause=result.error) from result.error
    raise_invariant_violation(url)


def raise_invariant_violation(url: str) -> NoReturn:
    """Raise the error for an attempt loop that ended without an
    outcome.

    Args:
        url: The URL being requested.

    Raises:
        InvariantViolationError: Always.
    """
    msg = f"GET request to {url} ended without a terminal outcome"
    raise InvariantViolationError(msg)
