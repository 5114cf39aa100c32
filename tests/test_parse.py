import ipaddress

import pytest

from ipcalculator.parse import (
    InvalidArgumentError,
    cidr_to_subnet,
    is_cidr,
    parse_ipv4,
    valid_subnet,
    validate_args,
)


@pytest.mark.parametrize("text", ["/1", "/8", "/24", "/32"])
def test_is_cidr_accepts_valid_prefixes(text):
    assert is_cidr(text) is True


@pytest.mark.parametrize("text", ["/0", "/33", "/", "24", "/2a", "255.255.255.0", "/-1"])
def test_is_cidr_rejects_others(text):
    assert is_cidr(text) is False


def test_cidr_to_subnet_24():
    assert cidr_to_subnet("/24") == "255.255.255.0"


@pytest.mark.parametrize("prefix", range(0, 33))
def test_cidr_to_subnet_matches_stdlib(prefix):
    expected = str(ipaddress.IPv4Network(f"0.0.0.0/{prefix}").netmask)
    assert cidr_to_subnet(f"/{prefix}") == expected


def test_cidr_to_subnet_out_of_range():
    with pytest.raises(InvalidArgumentError):
        cidr_to_subnet("/40")


@pytest.mark.parametrize("text", ["192.168.1.1", "255.255.255.0", "0.0.0.0"])
def test_parse_ipv4_round_trip(text):
    assert str(ipaddress.IPv4Address(parse_ipv4(text))) == text


@pytest.mark.parametrize("text", ["256.1.1.1", "1.2.3", "1.2.3.4.5", "01.2.3.4", "a.b.c.d", ""])
def test_parse_ipv4_rejects(text):
    with pytest.raises(InvalidArgumentError):
        parse_ipv4(text)


def test_valid_subnet():
    assert valid_subnet("/24") is True
    assert valid_subnet("255.255.255.0") is True
    assert valid_subnet("/33") is False
    assert valid_subnet("garbage") is False


def test_validate_args_ok():
    assert validate_args("192.168.1.1", "/24") is None
    assert validate_args("192.168.1.1", "255.255.255.0") is None


def test_validate_args_missing():
    with pytest.raises(InvalidArgumentError, match="Missing arguments"):
        validate_args(None, "/24")


def test_validate_args_bad_ip():
    with pytest.raises(InvalidArgumentError, match="Invalid IP"):
        validate_args("300.1.1.1", "/24")


def test_validate_args_bad_subnet():
    with pytest.raises(InvalidArgumentError, match="Invalid Subnet"):
        validate_args("192.168.1.1", "/0")