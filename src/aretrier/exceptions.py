r"""Exceptions raised when a resilient request cannot produce a usable
response."""

from __future__ import annotations

__all__ = [
    "ExhaustedRetriesError",
    "HttpRequestError",
    "InvariantViolationError",
    "NetworkErrorExhaustedError",
    "NonRetriableHttpError",
    "TimeoutExhaustedError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class HttpRequestError(RuntimeError):
    """Base class for terminal failures of a resilient request.

    Args:
        url: The URL that was requested.
        message: Human-readable description of the failure.
        status_code: The last HTTP status code, if a response was received.
        response: The last HTTP response, if one was received.
        cause: The exception that triggered the failure, if any.

    Example:
        ```pycon
        >>> from aretrier.exceptions import HttpRequestError
        >>> error = HttpRequestError(
        ...     url="https://api.example.com", message="boom", status_code=500
        ... )
        >>> error.status_code
        500
        >>> str(error)
        'boom'

        ```
    """

    def __init__(
        self,
        url: str,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.message = message
        self.status_code = status_code
        self.response = response
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(url={self.url!r}, message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class NonRetriableHttpError(HttpRequestError):
    """Raised when a response is not ok and the retry predicate rejects
    it.

    Raised after the first such response, regardless of the remaining
    attempt budget.
    """

    def __init__(self, url: str, response: httpx.Response) -> None:
        super().__init__(
            url=url,
            message=f"Non-retriable HTTP error: {response.status_code}",
            status_code=response.status_code,
            response=response,
        )


class ExhaustedRetriesError(HttpRequestError):
    """Raised when the last attempt returned a retriable error
    response."""

    def __init__(self, url: str, response: httpx.Response, attempts: int) -> None:
        super().__init__(
            url=url,
            message=f"HTTP {response.status_code} (request to {url} failed after {attempts} attempts)",
            status_code=response.status_code,
            response=response,
        )
        self.attempts = attempts


class TimeoutExhaustedError(HttpRequestError):
    """Raised when the last attempt timed out.

    The message is the one of the original cancellation error, which is
    also available as ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, url: str, cause: BaseException, timeout_ms: int) -> None:
        super().__init__(
            url=url,
            message=str(cause) or f"request to {url} timed out after {timeout_ms}ms",
            cause=cause,
        )
        self.timeout_ms = timeout_ms


class NetworkErrorExhaustedError(HttpRequestError):
    """Raised when the last attempt failed with a network-layer error.

    The message is the one of the original error, which is also
    available as ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(
            url=url,
            message=str(cause) or f"request to {url} failed with {type(cause).__name__}",
            cause=cause,
        )


class InvariantViolationError(RuntimeError):
    """Raised if the attempt loop ends without a terminal outcome.

    This indicates a bug in the retry executor.
    """
