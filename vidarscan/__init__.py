"""Concurrent web path, IPv4 host and TCP port scanner with adaptive request pacing."""

__version__ = "0.1.0"