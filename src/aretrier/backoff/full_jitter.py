r"""Full jitter backoff strategy.

Implements the "full jitter" policy: the wait is drawn uniformly from
``[0, base * 2 ** attempt)``. Spreading retries over the whole window
keeps many clients that failed at the same time from retrying in lockstep.
"""

from __future__ import annotations

__all__ = ["FullJitterBackoff", "full_jitter"]

import random

from aretrier.backoff.base import BaseBackoffStrategy


def full_jitter(
    base: int,
    attempt: int,
    cap: int | None = None,
    rng: random.Random | None = None,
) -> int:
    """Draw a randomized backoff delay.

    Args:
        base: The base delay in milliseconds. Must be >= 0.
        attempt: The attempt that just failed (1-indexed). Must be >= 1.
        cap: Optional maximum for the upper bound of the window.
        rng: Optional random generator. The module-level generator is
            used if not provided.

    Returns:
        An integer in ``[0, base * 2 ** attempt)``, or 0 if the window
        is empty.

    Raises:
        ValueError: If base is negative or attempt is lower than 1.

    Example:
        ```pycon
        >>> import random
        >>> from aretrier.backoff import full_jitter
        >>> 0 <= full_jitter(100, 1) < 200
        True
        >>> full_jitter(0, 5)
        0
        >>> full_jitter(100, 3, rng=random.Random(0)) < 800
        True

        ```
    """
    if base < 0:
        msg = f"base must be >= 0, got {base}"
        raise ValueError(msg)
    if attempt < 1:
        msg = f"attempt must be >= 1, got {attempt}"
        raise ValueError(msg)
    upper = base * (2**attempt)
    if cap is not None:
        upper = min(upper, cap)
    if upper <= 0:
        return 0
    return (rng or random).randrange(upper)


class FullJitterBackoff(BaseBackoffStrategy):
    """Full jitter backoff strategy.

    Draws the delay uniformly from ``[0, base_delay_ms * (2 ** attempt))``,
    with an optional cap on the window.

    Args:
        base_delay_ms: The base delay in milliseconds (default: 300).
        max_delay_ms: Optional cap on the window in milliseconds. If
            specified, delays stay strictly below this value.
        rng: Optional random generator, mostly useful for reproducible
            tests. The module-level generator is used if not provided.

    Example:
        ```pycon
        >>> from aretrier.backoff import FullJitterBackoff
        >>> backoff = FullJitterBackoff(base_delay_ms=100)
        >>> 0 <= backoff.calculate(1) < 200
        True
        >>> backoff = FullJitterBackoff(base_delay_ms=100, max_delay_ms=500)
        >>> backoff.calculate(10) < 500
        True

        ```
    """

    def __init__(
        self,
        base_delay_ms: int = 300,
        max_delay_ms: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if base_delay_ms < 0:
            msg = f"base_delay_ms must be non-negative, got {base_delay_ms}"
            raise ValueError(msg)
        if max_delay_ms is not None and max_delay_ms <= 0:
            msg = f"max_delay_ms must be positive if specified, got {max_delay_ms}"
            raise ValueError(msg)

        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self._rng = rng

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay_ms={self.base_delay_ms}, "
            f"max_delay_ms={self.max_delay_ms})"
        )

    def calculate(self, attempt: int) -> int:
        return full_jitter(self.base_delay_ms, attempt, cap=self.max_delay_ms, rng=self._rng)
