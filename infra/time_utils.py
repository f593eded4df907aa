"""Time helpers used by the polling primitives."""

from __future__ import annotations

import time


def monotonic_seconds() -> float:
    """Return monotonic time in seconds."""
    return time.monotonic()


def ms_to_seconds(timeout_ms: float) -> float:
    """Convert a Playwright-style millisecond timeout to seconds."""
    return max(0.0, float(timeout_ms)) / 1000
