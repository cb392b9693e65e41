"""TCP connect scanning of a port range."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from .retry import retry_until_true
from .tcp import tcp_connect

CONCURRENCY = 1000
PACING = 0.003
CONNECT_TIMEOUT = 3.0
RETRIES = 3
RETRY_DELAY = 0.5


def port_scan(target_ip: str, begin_port: int, end_port: int) -> list[int]:
    """Return the open TCP ports of ``target_ip`` in the inclusive range, ascending."""
    open_ports: list[int] = []
    ports_lock = threading.Lock()
    slots = threading.BoundedSemaphore(CONCURRENCY)

    def scan(port: int) -> None:
        try:
            time.sleep(PACING)
            if retry_until_true(
                RETRIES, RETRY_DELAY, lambda: tcp_connect(target_ip, port, CONNECT_TIMEOUT)
            ):
                with ports_lock:
                    open_ports.append(port)
                print(f"[OPEN] {port}")
        finally:
            slots.release()

    print("-----START-----")
    with ThreadPoolExecutor(max_workers=CONCURRENCY) as pool:
        for port in range(begin_port, end_port + 1):
            slots.acquire()
            try:
                pool.submit(scan, port)
            except RuntimeError as exc:
                slots.release()
                print(f"error: {exc}")
    print("-----OVER-----")
    return sorted(open_ports)