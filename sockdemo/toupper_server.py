"""Servers that echo back what they receive in upper case."""

from __future__ import annotations

import argparse
import select
import socket
import sys
from typing import TextIO

from sockdemo.addresses import numeric_name, resolve

_POLL_INTERVAL = 0.2
_RECV_SIZE = 1024


def to_upper(data: bytes) -> bytes:
    """Upper-case ASCII letters and leave every other byte alone."""
    return data.upper()


def _bound_socket(host: str | None, port: int | str, socktype: int) -> socket.socket:
    family, socktype, proto, _canon, sockaddr = resolve(
        host, port, socket.AF_INET, socktype, passive=True
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.bind(sockaddr)
    except OSError:
        sock.close()
        raise
    return sock


def open_tcp_listener(host: str | None = None, port: int | str = 8080) -> socket.socket:
    """Create, bind and start listening on an IPv4 TCP socket."""
    listener = _bound_socket(host, port, socket.SOCK_STREAM)
    try:
        listener.listen(10)
    except OSError:
        listener.close()
        raise
    return listener


def open_udp_listener(host: str | None = None, port: int | str = 8080) -> socket.socket:
    """Create an IPv4 UDP socket bound to the given address."""
    return _bound_socket(host, port, socket.SOCK_DGRAM)


def _closed(sock: socket.socket) -> bool:
    return sock.fileno() == -1


def serve_tcp(listener: socket.socket, out: TextIO | None = None) -> int:
    """Serve many TCP clients at once until the listener is closed.

    Returns the number of connections accepted.
    """
    out = out if out is not None else sys.stdout
    print("Waiting for connections...", file=out)
    clients: list[socket.socket] = []
    accepted = 0
    try:
        while not _closed(listener):
            try:
                readable, _, _ = select.select(
                    [listener, *clients], [], [], _POLL_INTERVAL
                )
            except (OSError, ValueError):
                if _closed(listener):
                    return accepted
                raise

            for sock in readable:
                if sock is listener:
                    try:
                        client, address = listener.accept()
                    except OSError:
                        if _closed(listener):
                            return accepted
                        raise
                    clients.append(client)
                    accepted += 1
                    host, _service = numeric_name(address)
                    print(f"new connection from {host}", file=out)
                    continue

                try:
                    data = sock.recv(_RECV_SIZE)
                except OSError:
                    data = b""
                if not data:
                    clients.remove(sock)
                    sock.close()
                    continue
                try:
                    sock.sendall(to_upper(data))
                except OSError:
                    clients.remove(sock)
                    sock.close()
        return accepted
    finally:
        for client in clients:
            client.close()


def serve_udp(sock: socket.socket, out: TextIO | None = None) -> int:
    """Answer every datagram with its upper-cased copy until the socket closes.

    Returns the number of datagrams answered.
    """
    out = out if out is not None else sys.stdout
    print("Waiting for connections...", file=out)
    answered = 0
    while not _closed(sock):
        try:
            readable, _, _ = select.select([sock], [], [], _POLL_INTERVAL)
        except (OSError, ValueError):
            if _closed(sock):
                break
            raise
        if not readable:
            continue
        try:
            data, address = sock.recvfrom(_RECV_SIZE)
        except ConnectionResetError:
            continue
        except OSError:
            if _closed(sock):
                break
            raise
        host, service = numeric_name(address, numeric_service=True)
        print(f"Received ({len(data)} bytes) from {host} {service}", file=out)
        sock.sendto(to_upper(data), address)
        answered += 1
    return answered


def main(argv: list[str] | None = None) -> int:
    """Run the upper-casing echo server over TCP or UDP."""
    parser = argparse.ArgumentParser(
        prog="sockdemo-toupper",
        description="Echo received data back in upper case.",
    )
    parser.add_argument("--udp", action="store_true", help="serve UDP instead of TCP")
    parser.add_argument("--host", default=None, help="address to bind (default: all)")
    parser.add_argument("--port", default="8080", help="port to listen on")
    args = parser.parse_args(argv)

    print("Configuring local address...")
    print("Creating socket...")
    print("Binding socket to local address...")
    try:
        if args.udp:
            sock = open_udp_listener(args.host, args.port)
        else:
            print("Listenting...")
            sock = open_tcp_listener(args.host, args.port)
    except OSError as exc:
        print(f"bind() failed. ({exc.errno})", file=sys.stderr)
        return 1

    with sock:
        try:
            if args.udp:
                serve_udp(sock)
            else:
                serve_tcp(sock)
        except KeyboardInterrupt:
            pass
        except OSError as exc:
            print(f"select() failed. ({exc.errno})", file=sys.stderr)
            return 1
        print("Closing listening socket...")
    print("Fin")
    return 0


if __name__ == "__main__":
    sys.exit(main())