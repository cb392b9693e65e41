"""Discovery of live hosts in an IPv4 address range."""

from __future__ import annotations

import ipaddress
import threading
from concurrent.futures import ThreadPoolExecutor

from .retry import retry_until_true
from .tcp import is_alive_tcp

CONCURRENCY = 2000
PROBE_TIMEOUT = 1.0
RETRIES = 3
RETRY_DELAY = 2.0


def ip_to_int(ip: str) -> int:
    """Return the 32-bit integer value of an IPv4 address string."""
    return int(ipaddress.IPv4Address(ip))


def int_to_ip(n: int) -> str:
    """Return the dotted IPv4 string for a 32-bit integer."""
    return str(ipaddress.IPv4Address(n))


def host_scan(start_ip: str, end_ip: str) -> list[str]:
    """Probe every address from ``start_ip`` to ``end_ip`` inclusive.

    Returns the addresses that answered, in ascending order.
    """
    first, last = ip_to_int(start_ip), ip_to_int(end_ip)
    alive: list[int] = []
    alive_lock = threading.Lock()
    slots = threading.BoundedSemaphore(CONCURRENCY)

    def scan(n: int) -> None:
        try:
            ip = int_to_ip(n)
            if retry_until_true(RETRIES, RETRY_DELAY, lambda: is_alive_tcp(ip, PROBE_TIMEOUT)):
                print(f"[Alive] {ip}")
                with alive_lock:
                    alive.append(n)
        finally:
            slots.release()

    print("-----START-----")
    with ThreadPoolExecutor(max_workers=CONCURRENCY) as pool:
        for n in range(first, last + 1):
            slots.acquire()
            try:
                pool.submit(scan, n)
            except RuntimeError as exc:
                slots.release()
                print(f"error: {exc}")
    print("-----OVER-----")
    return [int_to_ip(n) for n in sorted(alive)]