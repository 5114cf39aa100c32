"""Validation and parsing of IPv4 addresses, masks and CIDR prefixes."""

from __future__ import annotations

import ipaddress
import re

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
BOLD = "\033[1m"

_DIGITS = frozenset("0123456789")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class InvalidArgumentError(ValueError):
    """Raised when an IP address or subnet argument is not acceptable."""


def is_cidr(subnet: str) -> bool:
    """Return True if ``subnet`` has the form ``/N`` with N between 1 and 32."""
    if not subnet.startswith("/"):
        return False
    digits = subnet[1:]
    if not all(char in _DIGITS for char in digits):
        return False
    prefix = int(digits) if digits else 0
    return 1 <= prefix <= 32


def cidr_to_subnet(cidr: str) -> str:
    """Turn a ``/N`` prefix into a dotted-quad subnet mask."""
    match = _LEADING_INT.match(cidr[1:])
    prefix = int(match.group(1)) if match else 0
    if not 0 <= prefix <= 32:
        raise InvalidArgumentError(f"prefix out of range: {prefix}")
    mask = 0 if prefix == 0 else (0xFFFFFFFF << (32 - prefix)) & 0xFFFFFFFF
    return str(ipaddress.IPv4Address(mask))


def parse_ipv4(text: str) -> int:
    """Parse a strict dotted-quad IPv4 address into its 32-bit value."""
    try:
        return int(ipaddress.IPv4Address(text))
    except ipaddress.AddressValueError as exc:
        raise InvalidArgumentError(f"not an IPv4 address: {text!r}") from exc


def valid_subnet(subnet: str) -> bool:
    """Return True if ``subnet`` is a CIDR prefix or a dotted-quad address."""
    if is_cidr(subnet):
        return True
    try:
        parse_ipv4(subnet)
    except InvalidArgumentError:
        return False
    return True


def validate_args(ip: str | None, subnet: str | None) -> None:
    """Check the IP and subnet arguments, raising on the first problem."""
    if ip is None or subnet is None:
        raise InvalidArgumentError("Missing arguments")
    try:
        parse_ipv4(ip)
    except InvalidArgumentError:
        raise InvalidArgumentError("Invalid IP") from None
    if not valid_subnet(subnet):
        raise InvalidArgumentError("Invalid Subnet")