import io
import socket
import threading

from sockdemo.toupper_server import (
    open_tcp_listener,
    open_udp_listener,
    serve_tcp,
    serve_udp,
    to_upper,
)


def _recv_exactly(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def test_to_upper_ascii_letters():
    assert to_upper(b"Hello, World 123") == b"HELLO, WORLD 123"


def test_to_upper_leaves_non_ascii_bytes():
    high = bytes(range(128, 256))
    assert to_upper(high) == high


def test_to_upper_preserves_length_and_is_idempotent():
    data = bytes(range(256))
    once = to_upper(data)
    assert len(once) == len(data)
    assert to_upper(once) == once


def test_tcp_listener_is_bound_to_requested_address():
    with open_tcp_listener("127.0.0.1", 0) as listener:
        assert listener.family == socket.AF_INET
        assert listener.type == socket.SOCK_STREAM
        assert listener.getsockname()[0] == "127.0.0.1"


def test_udp_listener_is_datagram_socket():
    with open_udp_listener("127.0.0.1", 0) as sock:
        assert sock.type == socket.SOCK_DGRAM
        assert sock.getsockname()[0] == "127.0.0.1"


def test_serve_tcp_handles_several_clients():
    listener = open_tcp_listener("127.0.0.1", 0)
    port = listener.getsockname()[1]
    out = io.StringIO()
    result = {}
    thread = threading.Thread(
        target=lambda: result.setdefault("count", serve_tcp(listener, out)),
        daemon=True,
    )
    thread.start()

    first = socket.create_connection(("127.0.0.1", port), timeout=5)
    second = socket.create_connection(("127.0.0.1", port), timeout=5)
    try:
        first.sendall(b"abc")
        second.sendall(b"Mixed Case")
        assert _recv_exactly(first, 3) == b"ABC"
        assert _recv_exactly(second, 10) == b"MIXED CASE"
        first.sendall(b"again")
        assert _recv_exactly(first, 5) == b"AGAIN"
    finally:
        first.close()
        second.close()
        listener.close()
    thread.join(5)

    assert not thread.is_alive()
    assert result["count"] == 2
    assert out.getvalue().count("new connection from 127.0.0.1") == 2


def test_serve_udp_replies_in_upper_case():
    sock = open_udp_listener("127.0.0.1", 0)
    port = sock.getsockname()[1]
    out = io.StringIO()
    result = {}
    thread = threading.Thread(
        target=lambda: result.setdefault("count", serve_udp(sock, out)),
        daemon=True,
    )
    thread.start()

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as client:
        client.settimeout(5)
        client.sendto(b"hello udp", ("127.0.0.1", port))
        reply, sender = client.recvfrom(1024)
    sock.close()
    thread.join(5)

    assert reply == b"HELLO UDP"
    assert sender[1] == port
    assert not thread.is_alive()
    assert result["count"] == 1
    assert "Received (9 bytes) from 127.0.0.1" in out.getvalue()