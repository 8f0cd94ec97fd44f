r"""Stateless response classification shared by the sync and async
executors."""

from __future__ import annotations

__all__ = ["default_retry_if", "is_ok"]

from typing import TYPE_CHECKING

from aretrier.core.config import RETRY_STATUS_CODES

if TYPE_CHECKING:
    import httpx


def is_ok(response: httpx.Response) -> bool:
    """Indicate whether a response counts as a successful attempt.

    Args:
        response: The HTTP response to evaluate.

    Returns:
        ``True`` if the status code is in the 2xx range.
    """
    return 200 <= response.status_code <= 299


def default_retry_if(response: httpx.Response, body: str) -> bool:  # noqa: ARG001
    """Default retry predicate.

    Retries rate limiting (429) and transient server errors
    (500, 502, 503, 504). The body is ignored.

    Args:
        response: The failed HTTP response.
        body: The buffered response body.

    Returns:
        ``True`` if the request should be attempted again.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretrier.core import default_retry_if
        >>> default_retry_if(httpx.Response(503), "")
        True
        >>> default_retry_if(httpx.Response(404), "")
        False

        ```
    """
    return response.status_code in RETRY_STATUS_CODES
