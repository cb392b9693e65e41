"""TCP reachability probes."""

from __future__ import annotations

import socket
import threading

ALIVE_PORTS = (80, 443, 8080)
_GRACE = 0.1


def tcp_connect(ip: str, port: int, timeout: float) -> bool:
    """Return whether a TCP connection to ``ip:port`` succeeds within ``timeout`` seconds."""
    try:
        with socket.create_connection((ip, port), timeout=timeout):
            return True
    except (OSError, OverflowError, ValueError):
        return False


def is_alive_tcp(ip: str, timeout: float) -> bool:
    """Return whether ``ip`` answers on any of the common web ports.

    A host counts as alive when a connection succeeds or is actively refused.
    The ports are probed concurrently; the answer is given within ``timeout``
    seconds plus a small grace period.
    """
    alive = threading.Event()

    def probe(port: int) -> None:
        try:
            with socket.create_connection((ip, port), timeout=timeout):
                pass
        except ConnectionRefusedError:
            pass
        except (OSError, OverflowError, ValueError):
            return
        alive.set()

    for port in ALIVE_PORTS:
        threading.Thread(target=probe, args=(port,), daemon=True).start()

    return alive.wait(timeout + _GRACE)