"""Blocking poll-until-truthy primitive backing the page wait helpers."""

from __future__ import annotations

import time
from typing import Callable, Protocol, TypeVar

from infra.errors import TimeoutExceededError
from infra.time_utils import monotonic_seconds

T = TypeVar("T")


class Sleeper(Protocol):
    def __call__(self, seconds: float) -> None: ...


class Clock(Protocol):
    def __call__(self) -> float: ...


def poll_until(
    predicate: Callable[[], T],
    *,
    timeout_s: float,
    interval_s: float,
    description: str,
    clock: Clock = monotonic_seconds,
    sleeper: Sleeper = time.sleep,
) -> T:
    """Call ``predicate`` until it returns a truthy value or the deadline passes.

    The predicate is checked at least once. Exceptions it raises propagate
    immediately; only a falsy result is retried.
    """
    deadline = clock() + timeout_s
    while True:
        result = predicate()
        if result:
            return result
        remaining = deadline - clock()
        if remaining <= 0:
            raise TimeoutExceededError(f"Timeout {timeout_s * 1000:.0f}ms exceeded: {description}")
        sleeper(min(interval_s, remaining))
