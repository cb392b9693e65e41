"""Request rate limiting that adapts to observed error rates and latency."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

MIN_RPS = 20.0
MAX_RPS = 1000.0
DEFAULT_RPS = 50.0
CONTROL_INTERVAL = 3.0

_GOOD_ERROR_RATE = 0.1
_GOOD_LATENCY = 1.5
_BAD_ERROR_RATE = 0.4
_BAD_LATENCY = 3.0
_SPEED_UP = 1.1
_SLOW_DOWN = 0.8


@dataclass
class WindowStats:
    """Counters collected over one control window; latency in seconds."""

    total: int = 0
    errors: int = 0
    latency_sum: float = 0.0

    @property
    def error_rate(self) -> float:
        return self.errors / self.total if self.total else 0.0

    @property
    def average_latency(self) -> float:
        return self.latency_sum / self.total if self.total else 0.0


class RateLimiter:
    """Token bucket with a burst of one: at most ``rps`` calls per second."""

    def __init__(self, rps: float) -> None:
        if rps <= 0:
            raise ValueError("rate must be positive")
        self.rps = float(rps)
        self._interval = 1.0 / self.rps
        self._next = time.monotonic()
        self._lock = threading.Lock()

    def wait(self) -> None:
        """Block until the caller may proceed."""
        with self._lock:
            now = time.monotonic()
            slot = max(now, self._next)
            self._next = slot + self._interval
        delay = slot - now
        if delay > 0:
            time.sleep(delay)


class AdaptiveLimiter:
    """Rate limiter whose rate is tuned every ``interval`` seconds."""

    def __init__(
        self,
        initial_rps: float = DEFAULT_RPS,
        min_rps: float = MIN_RPS,
        max_rps: float = MAX_RPS,
        interval: float = CONTROL_INTERVAL,
    ) -> None:
        if min_rps <= 0 or min_rps > max_rps:
            raise ValueError("rate bounds must satisfy 0 < min_rps <= max_rps")
        self.min_rps = float(min_rps)
        self.max_rps = float(max_rps)
        self.interval = interval
        self._rps = float(initial_rps)
        self._limiter = RateLimiter(self._rps)
        self._stats = WindowStats()
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def rps(self) -> float:
        with self._lock:
            return self._rps

    def wait(self) -> None:
        """Block until the current rate allows another request."""
        with self._lock:
            limiter = self._limiter
        limiter.wait()

    def record_result(self, error: BaseException | None, latency: float) -> None:
        """Count one finished request, failed when ``error`` is not None."""
        with self._lock:
            self._stats.total += 1
            self._stats.latency_sum += latency
            if error is not None:
                self._stats.errors += 1

    def adjust(self) -> float | None:
        """Close the current window and retune the rate.

        Returns the rate in force afterwards, or ``None`` if the window was empty.
        """
        with self._lock:
            stats, self._stats = self._stats, WindowStats()
            current = self._rps

        if stats.total == 0:
            print("[DEBUG] window empty, no stats")
            return None

        error_rate = stats.error_rate
        latency = stats.average_latency
        print(
            f"[DEBUG] window: total={stats.total} err={stats.errors} "
            f"errRate={error_rate:.2f} avgLatency={latency:.3f}s curRps={current:.1f}"
        )

        new_rps = current
        if error_rate < _GOOD_ERROR_RATE and latency < _GOOD_LATENCY:
            new_rps *= _SPEED_UP
        elif error_rate > _BAD_ERROR_RATE and latency > _BAD_LATENCY:
            new_rps *= _SLOW_DOWN
        new_rps = min(max(new_rps, self.min_rps), self.max_rps)

        if new_rps != current:
            with self._lock:
                self._rps = new_rps
                self._limiter = RateLimiter(new_rps)
            print(
                f"[auto] RPS change to {new_rps:.1f} "
                f"ErrRate={error_rate:.2f} AvgLatency={latency:.3f}s)"
            )
        return new_rps

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.adjust()

    def start(self) -> None:
        """Start retuning in a background thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread, if running."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> "AdaptiveLimiter":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()