"""List the IPv4 and IPv6 addresses of the local network interfaces."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterator
from dataclasses import dataclass

import psutil

_FAMILY_NAMES = {socket.AF_INET: "IPv4", socket.AF_INET6: "IPv6"}


@dataclass(frozen=True)
class InterfaceAddress:
    """One address assigned to a network interface."""

    name: str
    family: str
    address: str


def _iter_addresses() -> Iterator[InterfaceAddress]:
    for name, entries in psutil.net_if_addrs().items():
        for entry in entries:
            family = _FAMILY_NAMES.get(entry.family)
            if family is not None:
                yield InterfaceAddress(name, family, entry.address)


def list_addresses() -> list[InterfaceAddress]:
    """Return the IPv4 and IPv6 addresses of every interface."""
    return list(_iter_addresses())


def format_address(entry: InterfaceAddress) -> str:
    """Format an address as a tab-separated line."""
    return f"{entry.name}\t{entry.family}\t\t{entry.address}"


def main(argv: list[str] | None = None) -> int:
    """Print every interface address, one per line."""
    argparse.ArgumentParser(
        prog="sockdemo-interfaces",
        description="List local IPv4 and IPv6 interface addresses.",
    ).parse_args(argv)
    try:
        addresses = list_addresses()
    except OSError:
        print("getifaddrs call failed!", file=sys.stderr)
        return 1
    for entry in addresses:
        print(format_address(entry))
    return 0


if __name__ == "__main__":
    sys.exit(main())