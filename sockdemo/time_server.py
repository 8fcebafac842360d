"""A one-shot HTTP server that replies with the local time."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

from sockdemo.addresses import numeric_name, resolve
from sockdemo.timeinfo import local_time_string

RESPONSE_HEAD = (
    "HTTP/1.1 200 OK\r\n"
    "Connection: close\r\n"
    "Content-Type: text/plain\r\n\r\n"
    "Local time is: "
).encode("ascii")


def build_response(timestamp: float | None = None) -> bytes:
    """Return the full HTTP response carrying the local time."""
    return RESPONSE_HEAD + local_time_string(timestamp).encode("ascii")


def open_listener(host: str | None = None, port: int | str = 8080) -> socket.socket:
    """Create, bind and start listening on an IPv4 TCP socket."""
    family, socktype, proto, _canon, sockaddr = resolve(
        host, port, socket.AF_INET, socket.SOCK_STREAM, passive=True
    )[0]
    listener = socket.socket(family, socktype, proto)
    try:
        listener.bind(sockaddr)
        listener.listen(10)
    except OSError:
        listener.close()
        raise
    return listener


def serve_once(listener: socket.socket, out: TextIO | None = None) -> bytes:
    """Accept one client, answer it with the time and return its request."""
    out = out if out is not None else sys.stdout
    print("Waiting for connection...", file=out)
    client, client_address = listener.accept()
    with client:
        host, _service = numeric_name(client_address)
        print(f"Client is connected!!!{host}", file=out)

        print("Reading request...", file=out)
        request = client.recv(1024)
        print(f"Received {len(request)} bytes. ", file=out)
        print(request.decode("latin-1"), end="", file=out)

        print("Sending response...", file=out)
        client.sendall(RESPONSE_HEAD)
        print(f"Sent {len(RESPONSE_HEAD)} of {len(RESPONSE_HEAD)} bytes.", file=out)

        timer_msg = local_time_string().encode("ascii")
        client.sendall(timer_msg)
        print(f"Sent {len(timer_msg)} of {len(timer_msg)} bytes. ", file=out)

        print("Closing connection...", file=out)
    return request


def main(argv: list[str] | None = None) -> int:
    """Serve the local time to a single HTTP client."""
    parser = argparse.ArgumentParser(
        prog="sockdemo-time-server",
        description="Answer one HTTP request with the local time.",
    )
    parser.add_argument("--host", default=None, help="address to bind (default: all)")
    parser.add_argument("--port", default="8080", help="port to listen on")
    args = parser.parse_args(argv)

    print("Configuring local address...")
    print(
        "Codes are the following:\n"
        f"ai_fam:{int(socket.AF_INET)}\n"
        f"ai_socktype:{int(socket.SOCK_STREAM)}\n"
        f"ai_flags:{int(socket.AI_PASSIVE)}"
    )
    print("Creating socket...")
    print("Binding socket to local addresses...")
    try:
        listener = open_listener(args.host, args.port)
    except OSError as exc:
        print(f"bind() failed. ({exc.errno})", file=sys.stderr)
        return 1

    print("Listening..")
    with listener:
        try:
            serve_once(listener)
        except OSError as exc:
            print(f"accept() failed. ({exc.errno})", file=sys.stderr)
            return 1
        print("Closing listening socket...")
    print("Finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())