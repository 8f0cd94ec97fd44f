r"""Transports perform one HTTP request per attempt and report the
result as a tagged outcome."""

from __future__ import annotations

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "Cancelled",
    "HttpError",
    "HttpxTransport",
    "NetworkError",
    "Ok",
    "OtherError",
    "Transport",
    "TransportOutcome",
    "classify_exception",
    "from_response",
]

from aretrier.transport.base import AsyncTransport, Transport
from aretrier.transport.httpx_transport import (
    AsyncHttpxTransport,
    HttpxTransport,
    classify_exception,
)
from aretrier.transport.outcome import (
    Cancelled,
    HttpError,
    NetworkError,
    Ok,
    OtherError,
    TransportOutcome,
    from_response,
)
