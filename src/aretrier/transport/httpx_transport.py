r"""Transports backed by httpx clients.

httpx exceptions are mapped to transport outcomes as follows:

- ``httpx.TimeoutException`` (connect, read, write, pool): ``Cancelled``
- ``httpx.UnsupportedProtocol``: ``OtherError`` (the URL is wrong, retrying
  cannot help)
- any other ``httpx.TransportError``: ``NetworkError``
- any other exception: ``OtherError``
"""

from __future__ import annotations

__all__ = ["AsyncHttpxTransport", "HttpxTransport", "classify_exception"]

import logging
from typing import TYPE_CHECKING

import httpx

from aretrier.transport.outcome import (
    Cancelled,
    NetworkError,
    OtherError,
    from_response,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from aretrier.transport.outcome import TransportOutcome

logger: logging.Logger = logging.getLogger(__name__)


def classify_exception(exc: Exception) -> Cancelled | NetworkError | OtherError:
    """Map an exception raised by httpx to a transport outcome.

    Args:
        exc: The exception raised while sending the request.

    Returns:
        The matching transport outcome.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretrier.transport import classify_exception
        >>> classify_exception(httpx.ReadTimeout("slow"))
        Cancelled(error=ReadTimeout('slow'))
        >>> classify_exception(httpx.ConnectError("refused"))
        NetworkError(error=ConnectError('refused'))
        >>> classify_exception(ValueError("bad"))
        OtherError(error=ValueError('bad'))

        ```
    """
    if isinstance(exc, httpx.TimeoutException):
        return Cancelled(exc)
    if isinstance(exc, httpx.UnsupportedProtocol):
        return OtherError(exc)
    if isinstance(exc, httpx.TransportError):
        return NetworkError(exc)
    return OtherError(exc)


class HttpxTransport:
    """Send GET requests with an ``httpx.Client``.

    Args:
        client: The client used to send requests. The transport never
            closes it.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretrier.transport import HttpxTransport
        >>> with httpx.Client() as client:  # doctest: +SKIP
        ...     outcome = HttpxTransport(client)(
        ...         "https://api.example.com/data", headers=None, timeout_ms=5000
        ...     )
        ...

        ```
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def __call__(
        self, url: str, *, headers: Mapping[str, str] | None, timeout_ms: int
    ) -> TransportOutcome:
        try:
            response = self._client.get(url, headers=headers, timeout=timeout_ms / 1000)
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"GET request to {url} raised {type(exc).__name__}: {exc}")
            return classify_exception(exc)
        return from_response(response)


class AsyncHttpxTransport:
    """Send GET requests with an ``httpx.AsyncClient``.

    Args:
        client: The client used to send requests. The transport never
            closes it.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aretrier.transport import AsyncHttpxTransport
        >>> async def example():
        ...     async with httpx.AsyncClient() as client:
        ...         transport = AsyncHttpxTransport(client)
        ...         return await transport(
        ...             "https://api.example.com/data", headers=None, timeout_ms=5000
        ...         )
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def __call__(
        self, url: str, *, headers: Mapping[str, str] | None, timeout_ms: int
    ) -> TransportOutcome:
        try:
            response = await self._client.get(url, headers=headers, timeout=timeout_ms / 1000)
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"GET request to {url} raised {type(exc).__name__}: {exc}")
            return classify_exception(exc)
        return from_response(response)
