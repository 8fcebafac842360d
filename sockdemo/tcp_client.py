"""An interactive TCP client that relays standard input to a server."""

from __future__ import annotations

import argparse
import io
import select
import socket
import sys
from typing import TextIO

from sockdemo.addresses import numeric_name, resolve

_POLL_INTERVAL = 0.1
_RECV_SIZE = 4096
_LINE_LIMIT = 1023


def _stdin_fd(stdin: TextIO) -> int | None:
    """Return a selectable descriptor for stdin, or None if it has none."""
    try:
        return stdin.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return None


def run_client(
    host: str,
    port: int | str,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> bytes:
    """Connect to host and port, send stdin line by line and echo replies.

    Returns every byte received from the peer. Streams without a file
    descriptor are treated as always ready to read. Raises
    ``socket.gaierror`` if the address cannot be resolved and ``OSError``
    if the connection fails.
    """
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout

    print("Configuring remote address...", file=out)
    family, socktype, proto, _canon, sockaddr = resolve(
        host, port, socktype=socket.SOCK_STREAM
    )[0]
    address, service = numeric_name(sockaddr)
    print(f"Remote address is: {address} {service}", file=out)

    print("Creating socket...", file=out)
    received = bytearray()
    with socket.socket(family, socktype, proto) as peer:
        print("Connecting ...", file=out)
        peer.connect(sockaddr)
        print("Connected!", file=out)
        print("To send data, enter text followed by enter.", file=out)

        stdin_fd = _stdin_fd(stdin)
        if stdin_fd is not None:
            print(f"File descriptor for stdin is:{stdin_fd}", file=out)
        watched: list = [peer] if stdin_fd is None else [peer, stdin_fd]

        while True:
            readable, _, _ = select.select(watched, [], [], _POLL_INTERVAL)

            if peer in readable:
                data = peer.recv(_RECV_SIZE)
                if not data:
                    print("Connection closed by peer.", file=out)
                    break
                received += data
                print(
                    f"Received ({len(data)} bytes): {data.decode('latin-1')}",
                    end="",
                    file=out,
                )

            if stdin_fd is None or stdin_fd in readable:
                line = stdin.readline(_LINE_LIMIT)
                if not line:
                    break
                print(f"Sending: {line}", end="", file=out)
                payload = line.encode("utf-8") if isinstance(line, str) else line
                sent = peer.send(payload)
                print(f"Sent {sent} bytes.", file=out)

        print("Closing socket...", file=out)
    return bytes(received)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive client against HOSTNAME and PORT."""
    parser = argparse.ArgumentParser(
        prog="sockdemo-tcp-client",
        description="Send lines from standard input to a TCP server.",
    )
    parser.add_argument("hostname", nargs="?", help="server host name or address")
    parser.add_argument("port", nargs="?", help="server port or service name")
    args = parser.parse_args(argv)

    if args.hostname is None or args.port is None:
        print("Usage: tcp_client hostname port", file=sys.stderr)
        return 1

    try:
        run_client(args.hostname, args.port)
    except socket.gaierror as exc:
        print(f"getaddrinfo() failed. ({exc.errno})", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Connect failed, ({exc.errno})", file=sys.stderr)
        return 1
    print("Fin")
    return 0


if __name__ == "__main__":
    sys.exit(main())