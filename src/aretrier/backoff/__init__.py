r"""Backoff strategies for retry delays.

All delays are integers expressed in milliseconds.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "FullJitterBackoff", "full_jitter"]

from aretrier.backoff.base import BaseBackoffStrategy
from aretrier.backoff.full_jitter import FullJitterBackoff, full_jitter
