r"""Retry decision logic.

This module provides the RetryDecider class that maps the outcome of a
transport call to an ``AttemptOutcome``.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from aretrier.core.retry_logic import default_retry_if
from aretrier.retry.outcome import (
    FatalFailure,
    RetriableFailure,
    Success,
    TerminalFailure,
    TimeoutFailure,
    TransientTransportFailure,
)
from aretrier.transport.outcome import Cancelled, HttpError, NetworkError, Ok, OtherError

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from aretrier.retry.outcome import AttemptOutcome
    from aretrier.transport.outcome import TransportOutcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether an attempt should be retried.

    Args:
        retry_if: Optional predicate called with a failed response and its
            body. Defaults to ``default_retry_if``.
    """

    def __init__(self, retry_if: Callable[[httpx.Response, str], bool] | None = None) -> None:
        self.retry_if = retry_if if retry_if is not None else default_retry_if

    def classify(self, outcome: TransportOutcome, body: str | None = None) -> AttemptOutcome:
        """Classify a transport outcome.

        Args:
            outcome: The outcome reported by the transport.
            body: The buffered body of the response. Required when
                outcome is an ``HttpError``, ignored otherwise.

        Returns:
            The classified attempt outcome.

        Raises:
            ValueError: If outcome is an ``HttpError`` and body is missing.
            TypeError: If outcome is not a transport outcome.
        """
        if isinstance(outcome, Ok):
            return Success(outcome.response)
        if isinstance(outcome, HttpError):
            if body is None:
                msg = "body is required to classify an error response"
                raise ValueError(msg)
            return self.classify_response(outcome.response, body)
        if isinstance(outcome, Cancelled):
            return TimeoutFailure(outcome.error)
        if isinstance(outcome, NetworkError):
            return TransientTransportFailure(outcome.error)
        if isinstance(outcome, OtherError):
            return FatalFailure(outcome.error)
        msg = f"Unexpected transport outcome: {outcome!r}"
        raise TypeError(msg)

    def classify_response(
        self, response: httpx.Response, body: str
    ) -> RetriableFailure | TerminalFailure:
        """Apply the retry predicate to a response that is not ok.

        Args:
            response: The failed HTTP response.
            body: The buffered body text.

        Returns:
            ``RetriableFailure`` if the predicate returns ``True``,
            otherwise ``TerminalFailure``.
        """
        if self.retry_if(response, body):
            return RetriableFailure(response, body)
        logger.debug(f"Status {response.status_code} rejected by the retry predicate")
        return TerminalFailure(response, body)
