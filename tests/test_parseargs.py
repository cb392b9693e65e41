import ipaddress

import pytest

from vidarscan.parseargs import parse_cidr, parse_port


def test_single_port():
    assert parse_port("80") == (80, 80)


def test_port_range():
    assert parse_port("1-1024") == (1, 1024)


def test_full_range():
    assert parse_port("0-65535") == (0, 65535)


def test_single_port_is_not_range_checked():
    assert parse_port("70000") == (70000, 70000)


@pytest.mark.parametrize("text", ["abc", "", " 80", "1-2-3", "100-10", "0-70000"])
def test_invalid_port_number(text):
    with pytest.raises(ValueError, match="invalid port number"):
        parse_port(text)


def test_invalid_start_port():
    with pytest.raises(ValueError, match="invalid start port"):
        parse_port("x-10")


def test_leading_dash_is_bad_start():
    with pytest.raises(ValueError, match="invalid start port"):
        parse_port("-5")


def test_invalid_end_port():
    with pytest.raises(ValueError, match="invalid end port"):
        parse_port("5-x")


def test_cidr_24():
    assert parse_cidr("192.168.1.0/24") == ("192.168.1.0", "192.168.1.255")


def test_cidr_single_host():
    assert parse_cidr("10.1.2.3/32") == ("10.1.2.3", "10.1.2.3")


def test_cidr_host_bits_are_masked():
    start, end = parse_cidr("10.0.0.5/30")
    first = ipaddress.IPv4Address(start)
    last = ipaddress.IPv4Address(end)
    assert first <= ipaddress.IPv4Address("10.0.0.5") <= last
    assert int(last) - int(first) + 1 == 4


@pytest.mark.parametrize(
    "text", ["bad", "10.0.0.1", "10.0.0.0/33", "10.0.0.0/255.0.0.0", "2001:db8::/64"]
)
def test_invalid_cidr(text):
    with pytest.raises(ValueError, match="invalid CIDR"):
        parse_cidr(text)