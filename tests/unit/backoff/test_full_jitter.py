r"""Unit tests for full jitter backoff."""

from __future__ import annotations

import random
from unittest.mock import Mock

import pytest

from aretrier.backoff import FullJitterBackoff, full_jitter

#################################
#     Tests for full_jitter     #
#################################


@pytest.mark.parametrize("base", [1, 10, 300])
@pytest.mark.parametrize("attempt", [1, 2, 3, 5])
def test_full_jitter_in_range(base: int, attempt: int) -> None:
    """Test that the delay stays in [0, base * 2 ** attempt)."""
    cap = base * 2**attempt
    assert all(0 <= full_jitter(base, attempt) < cap for _ in range(500))


def test_full_jitter_returns_int() -> None:
    assert isinstance(full_jitter(100, 2), int)


def test_full_jitter_is_not_constant() -> None:
    """Test that repeated draws are spread over the window."""
    samples = {full_jitter(1000, 3) for _ in range(200)}
    assert len(samples) > 10


def test_full_jitter_window_grows_with_attempt() -> None:
    """Test that later attempts can draw larger delays."""
    assert max(full_jitter(10, 1) for _ in range(200)) < 20
    assert max(full_jitter(10, 6) for _ in range(200)) >= 20


@pytest.mark.parametrize("attempt", [1, 4, 30])
def test_full_jitter_zero_base(attempt: int) -> None:
    assert full_jitter(0, attempt) == 0


def test_full_jitter_cap() -> None:
    assert all(full_jitter(100, 10, cap=50) < 50 for _ in range(200))


def test_full_jitter_uses_rng() -> None:
    rng = Mock(spec=random.Random)
    rng.randrange.return_value = 7
    assert full_jitter(100, 2, rng=rng) == 7
    rng.randrange.assert_called_once_with(400)


def test_full_jitter_seeded_rng_is_reproducible() -> None:
    first = [full_jitter(100, a, rng=random.Random(3)) for a in range(1, 6)]
    second = [full_jitter(100, a, rng=random.Random(3)) for a in range(1, 6)]
    assert first == second


def test_full_jitter_negative_base() -> None:
    with pytest.raises(ValueError, match=r"base must be >= 0, got -1"):
        full_jitter(-1, 1)


@pytest.mark.parametrize("attempt", [0, -1])
def test_full_jitter_invalid_attempt(attempt: int) -> None:
    with pytest.raises(ValueError, match=r"attempt must be >= 1"):
        full_jitter(100, attempt)


#######################################
#     Tests for FullJitterBackoff     #
#######################################


def test_full_jitter_backoff_default_values() -> None:
    backoff = FullJitterBackoff()
    assert backoff.base_delay_ms == 300
    assert backoff.max_delay_ms is None


def test_full_jitter_backoff_repr() -> None:
    assert repr(FullJitterBackoff(100, 500)) == (
        "FullJitterBackoff(base_delay_ms=100, max_delay_ms=500)"
    )


@pytest.mark.parametrize("attempt", [1, 2, 3])
def test_full_jitter_backoff_calculate(attempt: int) -> None:
    backoff = FullJitterBackoff(base_delay_ms=50)
    assert all(0 <= backoff.calculate(attempt) < 50 * 2**attempt for _ in range(200))


def test_full_jitter_backoff_with_max_delay() -> None:
    backoff = FullJitterBackoff(base_delay_ms=1000, max_delay_ms=250)
    assert all(backoff.calculate(10) < 250 for _ in range(200))


def test_full_jitter_backoff_rng() -> None:
    rng = Mock(spec=random.Random)
    rng.randrange.return_value = 3
    assert FullJitterBackoff(base_delay_ms=10, rng=rng).calculate(1) == 3
    rng.randrange.assert_called_once_with(20)


def test_full_jitter_backoff_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay_ms must be non-negative"):
        FullJitterBackoff(base_delay_ms=-1)


@pytest.mark.parametrize("max_delay_ms", [0, -5])
def test_full_jitter_backoff_invalid_max_delay(max_delay_ms: int) -> None:
    with pytest.raises(ValueError, match=r"max_delay_ms must be positive"):
        FullJitterBackoff(base_delay_ms=10, max_delay_ms=max_delay_ms)
