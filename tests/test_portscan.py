import socket

import pytest

from vidarscan.portscan import port_scan


@pytest.fixture
def listening_port():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(16)
    try:
        yield server.getsockname()[1]
    finally:
        server.close()


@pytest.fixture
def closed_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


def test_finds_open_port(listening_port, capsys):
    assert port_scan("127.0.0.1", listening_port, listening_port) == [listening_port]
    out = capsys.readouterr().out
    assert f"[OPEN] {listening_port}" in out
    assert out.index("-----START-----") < out.index("-----OVER-----")


def test_closed_port_is_not_reported(closed_port):
    assert port_scan("127.0.0.1", closed_port, closed_port) == []


def test_range_result_is_sorted_and_within_bounds(listening_port):
    begin, end = max(listening_port - 2, 1), listening_port + 2
    result = port_scan("127.0.0.1", begin, end)
    assert listening_port in result
    assert result == sorted(result)
    assert all(begin <= port <= end for port in result)


def test_empty_range():
    assert port_scan("127.0.0.1", 10, 9) == []