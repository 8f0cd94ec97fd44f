r"""Core shared logic for sync and async requests.

This module contains configuration, parameter validation and the
stateless response classification used by both retry executors.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_BACKOFF_MS",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT_MS",
    "RETRY_STATUS_CODES",
    "RequestConfig",
    "default_retry_if",
    "is_ok",
    "validate_request_params",
    "validate_timeout_ms",
]

from aretrier.core.config import (
    DEFAULT_BASE_BACKOFF_MS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT_MS,
    RETRY_STATUS_CODES,
    RequestConfig,
)
from aretrier.core.retry_logic import default_retry_if, is_ok
from aretrier.core.validation import validate_request_params, validate_timeout_ms
