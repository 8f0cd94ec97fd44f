from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def ok_response() -> httpx.Response:
    """Create a successful httpx.Response for testing."""
    return httpx.Response(200, text="ok")


@pytest.fixture
def unavailable_response() -> httpx.Response:
    """Create a retriable httpx.Response for testing."""
    return httpx.Response(503, text="unavailable")
