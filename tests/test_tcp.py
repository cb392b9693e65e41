import socket
import time

import pytest

from vidarscan.tcp import is_alive_tcp, tcp_connect


@pytest.fixture
def listening_port():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(8)
    yield server.getsockname()[1]
    server.close()


@pytest.fixture
def closed_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_connect_to_listener(listening_port):
    assert tcp_connect("127.0.0.1", listening_port, 1.0) is True


def test_connect_to_closed_port(closed_port):
    assert tcp_connect("127.0.0.1", closed_port, 1.0) is False


def test_connect_to_invalid_port():
    assert tcp_connect("127.0.0.1", 70000, 1.0) is False


def test_localhost_is_alive():
    assert is_alive_tcp("127.0.0.1", 1.0) is True


def test_unreachable_host_is_not_alive_and_bounded():
    start = time.monotonic()
    result = is_alive_tcp("192.0.2.1", 0.2)
    elapsed = time.monotonic() - start
    assert result is False
    assert elapsed < 1.5