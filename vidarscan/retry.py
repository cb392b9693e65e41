"""Retry helpers with a fixed delay between attempts."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def retry_until_true(times: int, delay: float, function: Callable[[], bool]) -> bool:
    """Call ``function`` up to ``times`` times until it returns a true value.

    ``delay`` seconds are slept between attempts, never after the last one.
    """
    for attempt in range(times):
        if function():
            return True
        if attempt < times - 1:
            time.sleep(delay)
    return False


def retry_call(times: int, delay: float, function: Callable[[], T]) -> T | None:
    """Call ``function`` up to ``times`` times until it stops raising.

    Returns the first successful result. If every attempt raises, the last
    exception is re-raised. With ``times`` of zero nothing is called and
    ``None`` is returned.
    """
    last_error: Exception | None = None
    for attempt in range(times):
        try:
            return function()
        except Exception as exc:  # noqa: BLE001 - any failure counts as a failed attempt
            last_error = exc
        if attempt < times - 1:
            time.sleep(delay)
    if last_error is not None:
        raise last_error
    return None