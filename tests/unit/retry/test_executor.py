r"""Unit tests for synchronous retry executor."""

from __future__ import annotations

from unittest.mock import Mock, call

import httpx
import pytest

from aretrier.backoff import BaseBackoffStrategy
from aretrier.core import RequestConfig
from aretrier.exceptions import (
    ExhaustedRetriesError,
    NetworkErrorExhaustedError,
    NonRetriableHttpError,
    TimeoutExhaustedError,
)
from aretrier.retry import RetryExecutor
from aretrier.transport import Cancelled, NetworkError, OtherError
from tests.helpers import TEST_URL, make_transport


class StepBackoff(BaseBackoffStrategy):
    def calculate(self, attempt: int) -> int:
        return 100 * attempt


def test_retry_executor_returns_ok_response(
    mock_sleep: Mock, ok_response: httpx.Response
) -> None:
    """Test successful request without retries."""
    transport = make_transport(ok_response)
    executor = RetryExecutor(RequestConfig(headers={"Accept": "text/plain"}, timeout_ms=2000))

    assert executor.execute(TEST_URL, transport) is ok_response
    transport.assert_called_once_with(TEST_URL, headers={"Accept": "text/plain"}, timeout_ms=2000)
    mock_sleep.assert_not_called()


def test_retry_executor_retry_then_success(mock_sleep: Mock, ok_response: httpx.Response) -> None:
    """Test [retriable, retriable, ok] with exactly two delays."""
    transport = make_transport(httpx.Response(503), httpx.Response(504), ok_response)
    executor = RetryExecutor(RequestConfig(max_attempts=3, backoff_strategy=StepBackoff()))

    assert executor.execute(TEST_URL, transport) is ok_response
    assert transport.call_count == 3
    assert mock_sleep.call_args_list == [call(0.1), call(0.2)]


def test_retry_executor_exhausted_retries(mock_sleep: Mock) -> None:
    """Test that the last retriable status is reported."""
    transport = make_transport(httpx.Response(429), httpx.Response(503))
    executor = RetryExecutor(RequestConfig(max_attempts=2))

    with pytest.raises(ExhaustedRetriesError, match=r"HTTP 503") as exc_info:
        executor.execute(TEST_URL, transport)

    assert exc_info.value.status_code == 503
    assert transport.call_count == 2


def test_retry_executor_non_retriable_status(mock_sleep: Mock) -> None:
    """Test failure on non-retriable status code."""
    transport = make_transport(httpx.Response(404, text="not found"))
    executor = RetryExecutor(RequestConfig(max_attempts=5))

    with pytest.raises(NonRetriableHttpError, match=r"Non-retriable HTTP error: 404"):
        executor.execute(TEST_URL, transport)

    transport.assert_called_once()
    mock_sleep.assert_not_called()


def test_retry_executor_custom_retry_if(mock_sleep: Mock, ok_response: httpx.Response) -> None:
    """Test that the custom predicate receives the response and its
    body."""
    teapot = httpx.Response(418, text="teapot")
    retry_if = Mock(return_value=True)
    executor = RetryExecutor(RequestConfig(max_attempts=2, retry_if=retry_if))

    assert executor.execute(TEST_URL, make_transport(teapot, ok_response)) is ok_response
    retry_if.assert_called_once_with(teapot, "teapot")


def test_retry_executor_timeout_exhausted(mock_sleep: Mock) -> None:
    """Test that persistent timeouts preserve the original error."""
    error = httpx.ReadTimeout("The operation was aborted")
    transport = make_transport(Cancelled(error), Cancelled(error))
    executor = RetryExecutor(RequestConfig(max_attempts=2))

    with pytest.raises(TimeoutExhaustedError, match=r"aborted") as exc_info:
        executor.execute(TEST_URL, transport)

    assert exc_info.value.cause is error
    assert transport.call_count == 2


def test_retry_executor_network_error_exhausted(mock_sleep: Mock) -> None:
    """Test that persistent network errors preserve the original
    error."""
    error = httpx.ConnectError("fetch failed")
    transport = make_transport(NetworkError(error), NetworkError(error), NetworkError(error))
    executor = RetryExecutor(RequestConfig(max_attempts=3))

    with pytest.raises(NetworkErrorExhaustedError, match=r"fetch failed") as exc_info:
        executor.execute(TEST_URL, transport)

    assert exc_info.value.__cause__ is error
    assert transport.call_count == 3
    assert mock_sleep.call_count == 2


def test_retry_executor_other_error_not_retried(mock_sleep: Mock) -> None:
    """Test that any other error is raised unchanged after one
    attempt."""
    error = KeyError("missing")
    transport = make_transport(OtherError(error))
    executor = RetryExecutor(RequestConfig(max_attempts=3))

    with pytest.raises(KeyError) as exc_info:
        executor.execute(TEST_URL, transport)

    assert exc_info.value is error
    transport.assert_called_once()
    mock_sleep.assert_not_called()
