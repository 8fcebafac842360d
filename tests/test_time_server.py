import io
import re
import socket
import threading

from sockdemo.time_server import RESPONSE_HEAD, build_response, open_listener, serve_once


def test_build_response_starts_with_status_line():
    assert build_response(1_000_000_000).startswith(b"HTTP/1.1 200 OK\r\n")


def test_build_response_contains_headers_and_time():
    response = build_response(1_000_000_000)
    assert b"Connection: close\r\n" in response
    assert b"Content-Type: text/plain\r\n\r\n" in response
    head, _, body = response.partition(b"\r\n\r\n")
    assert body.startswith(b"Local time is: ")
    assert body.endswith(b" 2001\n")


def test_response_head_is_prefix():
    assert build_response().startswith(RESPONSE_HEAD)


def test_open_listener_binds_requested_address():
    with open_listener("127.0.0.1", 0) as listener:
        host, port = listener.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
        assert listener.type == socket.SOCK_STREAM


def test_serve_once_round_trip():
    out = io.StringIO()
    request = b"GET / HTTP/1.1\r\nHost: localhost\r\n\r\n"
    with open_listener("127.0.0.1", 0) as listener:
        port = listener.getsockname()[1]
        result = {}
        worker = threading.Thread(
            target=lambda: result.setdefault("request", serve_once(listener, out))
        )
        worker.start()
        with socket.create_connection(("127.0.0.1", port), timeout=5) as client:
            client.sendall(request)
            chunks = []
            while chunk := client.recv(4096):
                chunks.append(chunk)
        worker.join(timeout=5)

    reply = b"".join(chunks)
    assert reply.startswith(RESPONSE_HEAD)
    assert re.search(rb"Local time is: .+ \d{4}\n$", reply)
    assert result["request"] == request
    log = out.getvalue()
    assert "Client is connected!!!127.0.0.1" in log
    assert f"Received {len(request)} bytes." in log