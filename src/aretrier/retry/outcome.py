r"""Classified outcome of a single attempt.

Exactly one of these values is produced per attempt. The executors only
branch on these classes.
"""

from __future__ import annotations

__all__ = [
    "AttemptOutcome",
    "FatalFailure",
    "RetriableFailure",
    "Success",
    "TerminalFailure",
    "TimeoutFailure",
    "TransientTransportFailure",
]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class Success:
    """The response is ok and is returned to the caller."""

    response: httpx.Response


@dataclass(frozen=True)
class RetriableFailure:
    """The response is not ok and the retry predicate accepted it."""

    response: httpx.Response
    body: str


@dataclass(frozen=True)
class TerminalFailure:
    """The response is not ok and the retry predicate rejected it."""

    response: httpx.Response
    body: str


@dataclass(frozen=True)
class TimeoutFailure:
    """The attempt exceeded its timeout."""

    error: BaseException


@dataclass(frozen=True)
class TransientTransportFailure:
    """The attempt failed with a network-layer error."""

    error: BaseException


@dataclass(frozen=True)
class FatalFailure:
    """The attempt failed with an error that is never retried."""

    error: BaseException


AttemptOutcome = Union[
    Success,
    RetriableFailure,
    TerminalFailure,
    TimeoutFailure,
    TransientTransportFailure,
    FatalFailure,
]
