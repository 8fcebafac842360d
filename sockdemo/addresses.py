"""Address resolution helpers shared by the socket tools."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Any

AddrInfo = tuple[int, int, int, str, Any]


def resolve(
    host: str | None,
    port: int | str | None,
    family: int = socket.AF_UNSPEC,
    socktype: int = socket.SOCK_STREAM,
    passive: bool = False,
) -> list[AddrInfo]:
    """Resolve host and port into address records.

    With ``passive`` set and no host, the wildcard address suitable for
    binding is returned. Raises ``socket.gaierror`` when resolution fails.
    """
    service = None if port is None else str(port)
    flags = socket.AI_PASSIVE if passive else 0
    return socket.getaddrinfo(host, service, family, socktype, 0, flags)


def numeric_name(sockaddr: Any, numeric_service: bool = False) -> tuple[str, str]:
    """Return the numeric host and the service of a socket address."""
    flags = socket.NI_NUMERICHOST
    if numeric_service:
        flags |= socket.NI_NUMERICSERV
    return socket.getnameinfo(sockaddr, flags)


def main(argv: list[str] | None = None) -> int:
    """Check the socket API and optionally resolve HOST and PORT."""
    parser = argparse.ArgumentParser(
        prog="sockdemo-resolve",
        description="Resolve a host name and service to a numeric address.",
    )
    parser.add_argument("host", nargs="?", help="host name or address")
    parser.add_argument("port", nargs="?", help="port number or service name")
    args = parser.parse_args(argv)

    print("Ready to use socket API.")
    if args.host is None:
        return 0

    try:
        records = resolve(args.host, args.port, socket.AF_INET, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        print(f"Something went wrong with getaddrinfo ({exc.errno})", file=sys.stderr)
        print("Name or service not known", file=sys.stderr)
        return 1

    try:
        address, service = numeric_name(records[0][4])
    except (socket.gaierror, OSError) as exc:
        print(f"Something went wrong with getnameinfo(): {exc}", file=sys.stderr)
        return 1

    print(f"The address is {address}\n The port/service is {service}")
    return 0


if __name__ == "__main__":
    sys.exit(main())