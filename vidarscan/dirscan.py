"""Directory brute forcing of a web server from a dictionary file."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from .adaptive import AdaptiveLimiter
from .request import Classifier, send_message
from .retry import retry_call
from .wordlist import build_urls

CONCURRENCY = 4000
INITIAL_RPS = 30.0
RETRIES = 3
RETRY_DELAY = 1.0
POOL_SIZE = 500


def _session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(pool_maxsize=POOL_SIZE)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def dir_scan(url: str, filename: str, classifier: Optional[Classifier] = None) -> list[str]:
    """Probe ``url`` joined with every non-empty line of ``filename``.

    Requests are rate limited adaptively and each one is retried up to three
    times. Returns the URLs reported as found, in dictionary order.
    """
    candidates = build_urls(url, filename)
    found: list[tuple[int, str]] = []
    found_lock = threading.Lock()
    slots = threading.BoundedSemaphore(CONCURRENCY)
    limiter = AdaptiveLimiter(INITIAL_RPS)

    with _session() as session, limiter, ThreadPoolExecutor(max_workers=CONCURRENCY) as pool:

        def probe(index: int, candidate: str) -> None:
            try:
                limiter.wait()
                start = time.monotonic()
                error: Exception | None = None
                hit = False
                try:
                    hit = bool(
                        retry_call(
                            RETRIES,
                            RETRY_DELAY,
                            lambda: send_message(session, candidate, classifier),
                        )
                    )
                except Exception as exc:  # noqa: BLE001 - a failed probe is only counted
                    error = exc
                limiter.record_result(error, time.monotonic() - start)
                if hit:
                    with found_lock:
                        found.append((index, candidate))
            finally:
                slots.release()

        print("-----START-----")
        for index, candidate in enumerate(candidates):
            slots.acquire()
            try:
                pool.submit(probe, index, candidate)
            except RuntimeError as exc:
                slots.release()
                print(f"error: {exc}")

    print("-----OVER-----")
    return [candidate for _, candidate in sorted(found)]