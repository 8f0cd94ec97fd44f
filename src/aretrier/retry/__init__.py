r"""Retry package implementing the attempt loop.

Public API:
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
    - RetryDecider: Maps transport outcomes to attempt outcomes
    - RetryStrategy: Calculates backoff delays
    - Attempt outcomes: Success, RetriableFailure, TerminalFailure,
      TimeoutFailure, TransientTransportFailure, FatalFailure
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptOutcome",
    "FatalFailure",
    "RetriableFailure",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
    "Success",
    "TerminalFailure",
    "TimeoutFailure",
    "TransientTransportFailure",
]

from aretrier.retry.decider import RetryDecider
from aretrier.retry.executor import RetryExecutor
from aretrier.retry.executor_async import AsyncRetryExecutor
from aretrier.retry.outcome import (
    AttemptOutcome,
    FatalFailure,
    RetriableFailure,
    Success,
    TerminalFailure,
    TimeoutFailure,
    TransientTransportFailure,
)
from aretrier.retry.strategy import RetryStrategy
