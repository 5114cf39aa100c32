"""Subnet calculation and its coloured report."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address

from .parse import BLUE, BOLD, CYAN, GREEN, MAGENTA, RESET, YELLOW, parse_ipv4

_MASK32 = 0xFFFFFFFF


def to_binary(value: int) -> str:
    """Render a 32-bit value as four dot-separated groups of eight bits."""
    bits = format(value & _MASK32, "032b")
    return ".".join(bits[start:start + 8] for start in range(0, 32, 8))


@dataclass(frozen=True)
class SubnetInfo:
    """Addresses derived from an IP address and a subnet mask."""

    ip: IPv4Address
    mask: IPv4Address
    network: IPv4Address
    broadcast: IPv4Address
    first_host: IPv4Address
    last_host: IPv4Address

    def report(self, color: bool = True) -> str:
        """Return the multi-line report describing this subnet."""

        def c(*codes: str) -> str:
            return "".join(codes) if color else ""

        reset = c(RESET)
        lines = [
            f"{c(BOLD, BLUE)}IP Address:{reset} {self.ip}",
            f"{c(BLUE)}IP en binario:{reset}",
            f" {to_binary(int(self.ip))}",
            f"{c(BOLD, MAGENTA)}Subnet Mask:{reset} {self.mask}",
            f"{c(MAGENTA)}Subnet en binario:{reset}",
            f" {to_binary(int(self.mask))}",
            f"{c(BOLD, CYAN)}Network Address:{reset} {self.network}",
            f"{c(BOLD, YELLOW)}Broadcast Address:{reset} {self.broadcast}",
            f"{c(BOLD, GREEN)}First Host:{reset} {self.first_host}",
            f"{c(BOLD, GREEN)}Last Host:{reset} {self.last_host}",
        ]
        return "\n".join(lines) + "\n"


def ipcalc(ip: str, subnet: str) -> SubnetInfo:
    """Compute network, broadcast and host range for ``ip`` under ``subnet``."""
    ip_value = parse_ipv4(ip)
    mask_value = parse_ipv4(subnet)
    network = ip_value & mask_value
    broadcast = (network | ~mask_value) & _MASK32
    return SubnetInfo(
        ip=IPv4Address(ip_value),
        mask=IPv4Address(mask_value),
        network=IPv4Address(network),
        broadcast=IPv4Address(broadcast),
        first_host=IPv4Address((network + 1) & _MASK32),
        last_host=IPv4Address((broadcast - 1) & _MASK32),
    )