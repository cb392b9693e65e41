"""Parsing of port ranges and IPv4 CIDR blocks given on the command line."""

from __future__ import annotations

import ipaddress
import re

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PREFIX = re.compile(r"[0-9]+")

_INVALID_PORT = "Parse error: invalid port number"
_INVALID_START = "Parse error: invalid start port"
_INVALID_END = "Parse error: invalid end port"

MAX_PORT = 65535


def _atoi(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def parse_port(s: str) -> tuple[int, int]:
    """Parse ``"N"`` or ``"A-B"`` into an inclusive ``(start, end)`` pair.

    Raises ``ValueError`` when the text is not a valid port or range.
    """
    parts = s.split("-")

    if len(parts) == 1:
        try:
            port = _atoi(parts[0])
        except ValueError:
            raise ValueError(_INVALID_PORT) from None
        return port, port

    if len(parts) != 2:
        raise ValueError(_INVALID_PORT)

    try:
        start = _atoi(parts[0])
    except ValueError:
        raise ValueError(_INVALID_START) from None

    try:
        end = _atoi(parts[1])
    except ValueError:
        raise ValueError(_INVALID_END) from None

    if start < 0 or start > end or end > MAX_PORT:
        raise ValueError(_INVALID_PORT)
    return start, end


def parse_cidr(cidr: str) -> tuple[str, str]:
    """Return the first and last address of an IPv4 CIDR block as strings.

    Raises ``ValueError`` for malformed input or non-IPv4 networks.
    """
    _, separator, prefix = cidr.partition("/")
    if not separator or not _PREFIX.fullmatch(prefix):
        raise ValueError(f"invalid CIDR: invalid CIDR address: {cidr}")

    try:
        network = ipaddress.ip_network(cidr, strict=False)
    except ValueError as exc:
        raise ValueError(f"invalid CIDR: {exc}") from None

    if network.version != 4:
        raise ValueError(f"invalid CIDR: not an IPv4 network: {cidr}")

    return str(network.network_address), str(network.broadcast_address)