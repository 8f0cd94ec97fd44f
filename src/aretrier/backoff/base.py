r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before the next
    attempt, given the number of the attempt that just failed.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> int:
        """Calculate the backoff delay after a failed attempt.

        Args:
            attempt: The attempt that just failed (1-indexed). For example,
                attempt=1 is the initial request, attempt=2 the first retry.

        Returns:
            The delay in milliseconds before the next attempt.
        """
