r"""Tagged outcomes returned by a transport for one attempt.

A transport reports what happened as a value instead of raising, so the
retry executor never has to inspect exception types to decide whether a
failure is transient.
"""

from __future__ import annotations

__all__ = [
    "Cancelled",
    "HttpError",
    "NetworkError",
    "Ok",
    "OtherError",
    "TransportOutcome",
    "from_response",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from aretrier.core.retry_logic import is_ok

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class Ok:
    """A response with a 2xx status code."""

    response: httpx.Response


@dataclass(frozen=True)
class HttpError:
    """A response with a status code outside the 2xx range."""

    response: httpx.Response


@dataclass(frozen=True)
class Cancelled:
    """The attempt was cancelled because it exceeded its timeout."""

    error: BaseException


@dataclass(frozen=True)
class NetworkError:
    """The attempt failed with a connection-level error."""

    error: BaseException


@dataclass(frozen=True)
class OtherError:
    """The attempt failed with an error that is not considered
    transient."""

    error: BaseException


TransportOutcome = Union[Ok, HttpError, Cancelled, NetworkError, OtherError]


def from_response(response: httpx.Response) -> Ok | HttpError:
    """Wrap a received response in the matching outcome.

    Args:
        response: The HTTP response.

    Returns:
        ``Ok`` for a 2xx response, otherwise ``HttpError``.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretrier.transport import from_response
        >>> from_response(httpx.Response(200))
        Ok(response=<Response [200 OK]>)
        >>> from_response(httpx.Response(404))
        HttpError(response=<Response [404 Not Found]>)

        ```
    """
    if is_ok(response):
        return Ok(response)
    return HttpError(response)
