# ipcalculator

A small IPv4 subnet calculator. Give it an address and a subnet mask, written
either in dotted form (`255.255.255.0`) or as a CIDR prefix (`/24`). It prints:

- the IP address, in dotted and binary form
- the subnet mask, in dotted and binary form
- the network address
- the broadcast address
- the first and last host addresses

## Installation

```
pip install .
```

## Command line

```
ipcalculator 192.168.1.1 255.255.255.0
ipcalculator 192.168.1.1 /24
```

Output for either command (shown here without its colour codes):

```
IP Address: 192.168.1.1
IP en binario:
 11000000.10101000.00000001.00000001
Subnet Mask: 255.255.255.0
Subnet en binario:
 11111111.11111111.11111111.00000000
Network Address: 192.168.1.0
Broadcast Address: 192.168.1.255
First Host: 192.168.1.1
Last Host: 192.168.1.254
```

The labels are always written with ANSI colour codes, whether or not the
output goes to a terminal.

Addresses must be strict dotted quads. A CIDR prefix must be between `/1` and
`/32`. A dotted mask is accepted as any valid IPv4 address; it is not checked
for contiguous bits.

If the number of arguments is not exactly two, the command prints a usage
message. If there are two arguments but one is invalid, it first prints
`Error: Invalid IP` or `Error: Invalid Subnet`, then the usage message. The
exit status is 0 in every case.

The first host is the network address plus one and the last host is the
broadcast address minus one, so for `/31` and `/32` these values fall outside
the usual host range.

## Library use

```python
from ipcalculator.parse import cidr_to_subnet, validate_args, InvalidArgumentError
from ipcalculator.calc import ipcalc, to_binary

cidr_to_subnet("/24")            # '255.255.255.0'
info = ipcalc("10.0.5.7", "255.255.0.0")
info.network                     # IPv4Address('10.0.0.0')
print(info.report(color=False))

to_binary(0xC0A80101)            # '11000000.10101000.00000001.00000001'

try:
    validate_args("300.1.1.1", "/24")
except InvalidArgumentError as exc:
    print(exc)                   # Invalid IP
```

`ipcalc` returns a frozen `SubnetInfo` with the fields `ip`, `mask`, `network`,
`broadcast`, `first_host` and `last_host`, each an `ipaddress.IPv4Address`.
Its `report(color=True)` method returns the text the command prints.

`is_cidr`, `valid_subnet` and `parse_ipv4` in `ipcalculator.parse` check and
convert the arguments on their own; `InvalidArgumentError` is a subclass of
`ValueError`. `ipcalculator.cli.usage(color=True)` returns the usage text, and
`ipcalculator.cli.main(argv=None)` runs the command.

## Limits

Only IPv4 is handled. There is no IPv6 support and no listing of the
individual hosts in a subnet.

## Tests

```
pip install .[test]
pytest
```