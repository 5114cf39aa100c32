"""Command line entry point for the IPv4 subnet calculator."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .calc import ipcalc
from .parse import (
    GREEN,
    RED,
    RESET,
    YELLOW,
    InvalidArgumentError,
    cidr_to_subnet,
    is_cidr,
    validate_args,
)


def usage(color: bool = True) -> str:
    """Return the invalid-arguments message with usage examples."""
    red, yellow, green, reset = (RED, YELLOW, GREEN, RESET) if color else ("",) * 4
    return (
        f"{red}Invalid arguments{reset}\n"
        f"{yellow}Usage:{reset} ./IPcalculator [IP] [Subnet or CIDR] \n"
        f"{green}Example:{reset} ./IPcalculator 192.168.1.1 255.255.255.0\n"
        f"{green}Example:{reset} ./IPcalculator 192.168.1.1 /24\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on an IP and a subnet mask or CIDR prefix."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 2:
        ip, subnet = args
        try:
            validate_args(ip, subnet)
        except InvalidArgumentError as exc:
            print(f"{RED}Error:{RESET} {exc}")
        else:
            mask = cidr_to_subnet(subnet) if is_cidr(subnet) else subnet
            sys.stdout.write(ipcalc(ip, mask).report(color=True))
            return 0
    sys.stdout.write(usage(color=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())