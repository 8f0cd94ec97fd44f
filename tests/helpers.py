r"""Shared test helpers for transports."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock

import httpx

from aretrier.transport import from_response

if TYPE_CHECKING:
    from aretrier.transport import TransportOutcome

TEST_URL = "https://api.example.com/data"


def to_outcomes(*items: httpx.Response | TransportOutcome) -> list[TransportOutcome]:
    """Wrap responses in transport outcomes, keeping other outcomes
    unchanged."""
    return [from_response(item) if isinstance(item, httpx.Response) else item for item in items]


def make_transport(*items: httpx.Response | TransportOutcome) -> Mock:
    """Create a synchronous transport returning the given outcomes in
    order."""
    return Mock(side_effect=to_outcomes(*items))


def make_async_transport(*items: httpx.Response | TransportOutcome) -> AsyncMock:
    """Create an asynchronous transport returning the given outcomes in
    order."""
    return AsyncMock(side_effect=to_outcomes(*items))
