"""Send and receive single UDP datagrams."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

from sockdemo.addresses import numeric_name, resolve


def open_listener(host: str | None = None, port: int | str = 8080) -> socket.socket:
    """Create an IPv4 UDP socket bound to the given address."""
    family, socktype, proto, _canon, sockaddr = resolve(
        host, port, socket.AF_INET, socket.SOCK_DGRAM, passive=True
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.bind(sockaddr)
    except OSError:
        sock.close()
        raise
    return sock


def receive_one(
    sock: socket.socket, out: TextIO | None = None
) -> tuple[bytes, tuple[str, str]]:
    """Receive one datagram and return it with the sender's numeric address."""
    out = out if out is not None else sys.stdout
    data, client_address = sock.recvfrom(1024)
    print(f"Received ({len(data)} bytes): {data.decode('latin-1')}", file=out)
    sender = numeric_name(client_address, numeric_service=True)
    print(f"Remote address is: {sender[0]} {sender[1]}", file=out)
    return data, sender


def send_message(
    host: str = "127.0.0.1",
    port: int | str = 8080,
    message: str | bytes = "Hello World!",
    out: TextIO | None = None,
) -> int:
    """Send one datagram to host and port and return the number of bytes sent."""
    out = out if out is not None else sys.stdout
    family, socktype, proto, _canon, sockaddr = resolve(
        host, port, socktype=socket.SOCK_DGRAM
    )[0]
    remote_host, remote_service = numeric_name(sockaddr, numeric_service=True)
    print(f"Remote address is: {remote_host} {remote_service}", file=out)

    payload = message.encode("utf-8") if isinstance(message, str) else message
    print("Creating socket...", file=out)
    with socket.socket(family, socktype, proto) as sock:
        print(f"Sending: {payload.decode('utf-8', errors='replace')}", file=out)
        sent = sock.sendto(payload, sockaddr)
        print(f"Sent {sent} bytes.", file=out)
    return sent


def recvfrom_main(argv: list[str] | None = None) -> int:
    """Wait for a single datagram and report it."""
    parser = argparse.ArgumentParser(
        prog="sockdemo-udp-recvfrom", description="Receive one UDP datagram."
    )
    parser.add_argument("--host", default=None, help="address to bind (default: all)")
    parser.add_argument("--port", default="8080", help="port to listen on")
    args = parser.parse_args(argv)

    print("Configuring local address...")
    print("Creating socket...")
    print("Binding socket to local address...")
    try:
        sock = open_listener(args.host, args.port)
    except OSError as exc:
        print(f"bind() failed. ({exc.errno})", file=sys.stderr)
        return 1
    with sock:
        try:
            receive_one(sock)
        except OSError as exc:
            print(f"recvfrom() failed. ({exc.errno})", file=sys.stderr)
            return 1
    print("Finished.")
    return 0


def sendto_main(argv: list[str] | None = None) -> int:
    """Send a single datagram."""
    parser = argparse.ArgumentParser(
        prog="sockdemo-udp-sendto", description="Send one UDP datagram."
    )
    parser.add_argument("--host", default="127.0.0.1", help="destination host")
    parser.add_argument("--port", default="8080", help="destination port")
    parser.add_argument("--message", default="Hello World!", help="text to send")
    args = parser.parse_args(argv)

    print("Configuring remote address...")
    try:
        send_message(args.host, args.port, args.message)
    except socket.gaierror as exc:
        print(f"getaddrinfo() failed. ({exc.errno})", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"sendto() failed. ({exc.errno})", file=sys.stderr)
        return 1
    print("Fin")
    return 0


if __name__ == "__main__":
    sys.exit(recvfrom_main())