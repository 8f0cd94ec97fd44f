r"""Utility functions for delays and response handling."""

from __future__ import annotations

__all__ = ["read_body", "read_body_async", "sleep_ms", "sleep_ms_async"]

from aretrier.utils.response import read_body, read_body_async
from aretrier.utils.sleep import sleep_ms, sleep_ms_async
