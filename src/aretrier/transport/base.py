r"""Transport protocols consumed by the retry executors."""

from __future__ import annotations

__all__ = ["AsyncTransport", "Transport"]

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from aretrier.transport.outcome import TransportOutcome


class Transport(Protocol):
    """Perform one blocking HTTP GET request.

    The transport must enforce ``timeout_ms`` itself and report the
    result as a ``TransportOutcome``.
    """

    def __call__(
        self, url: str, *, headers: Mapping[str, str] | None, timeout_ms: int
    ) -> TransportOutcome: ...


class AsyncTransport(Protocol):
    """Perform one HTTP GET request asynchronously.

    The executor bounds each call with its own deadline, so the transport
    may be cancelled at any suspension point.
    """

    async def __call__(
        self, url: str, *, headers: Mapping[str, str] | None, timeout_ms: int
    ) -> TransportOutcome: ...
