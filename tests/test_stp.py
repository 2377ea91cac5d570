import io
import socket
import threading

import pytest

from smarthome.stp import (
    BadEncodingError,
    BadHandshakeError,
    ConnectError,
    RecvError,
    RequestError,
    SendError,
    StpClient,
    StpServer,
    recv_string,
    send_string,
)


def test_send_recv():
    buf = io.BytesIO()
    send_string("hello", buf)
    assert recv_string(io.BytesIO(buf.getvalue())) == "hello"


def test_send():
    buf = io.BytesIO()
    send_string("hello", buf)
    raw = buf.getvalue()
    assert int.from_bytes(raw[:4], "big") == 5
    assert raw[4:].decode("utf-8") == "hello"


def test_recv():
    raw = (5).to_bytes(4, "big") + b"hello"
    assert recv_string(io.BytesIO(raw)) == "hello"


def test_send_recv_unicode_length_in_bytes():
    buf = io.BytesIO()
    send_string("привет", buf)
    raw = buf.getvalue()
    assert int.from_bytes(raw[:4], "big") == 12
    assert recv_string(io.BytesIO(raw)) == "привет"


def test_recv_empty_string():
    assert recv_string(io.BytesIO(b"\x00\x00\x00\x00")) == ""


def test_recv_bad_encoding():
    raw = (2).to_bytes(4, "big") + b"\xff\xfe"
    with pytest.raises(BadEncodingError):
        recv_string(io.BytesIO(raw))


def test_recv_truncated_payload():
    raw = (10).to_bytes(4, "big") + b"abc"
    with pytest.raises(RecvError):
        recv_string(io.BytesIO(raw))


def test_recv_truncated_length():
    with pytest.raises(RecvError):
        recv_string(io.BytesIO(b"\x00\x01"))


class _BrokenWriter:
    def write(self, data):
        raise OSError("broken pipe")

    def flush(self):
        pass


def test_send_io_error():
    with pytest.raises(SendError) as info:
        send_string("hello", _BrokenWriter())
    assert isinstance(info.value, RequestError)


def test_client_server_round_trip():
    received = []

    def handler(request):
        received.append(request)
        return "Hello, client"

    with StpServer.bind("127.0.0.1:0") as server:
        host, port = server.address[:2]
        peers = []

        def serve():
            with server.accept() as conn:
                peers.append(conn.peer_addr()[0])
                conn.process_request(handler)

        thread = threading.Thread(target=serve)
        thread.start()
        with StpClient.connect((host, port)) as client:
            response = client.send_request("Hello, server")
        thread.join(timeout=5)

    assert response == "Hello, client"
    assert received == ["Hello, server"]
    assert peers == ["127.0.0.1"]


def test_server_rejects_bad_handshake():
    with StpServer.bind(("127.0.0.1", 0)) as server:
        raw = socket.create_connection(server.address[:2])
        try:
            raw.sendall(b"xxxx")
            with pytest.raises(BadHandshakeError):
                server.accept()
        finally:
            raw.close()


def test_client_rejects_bad_handshake():
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]

    def fake_server():
        conn, _ = listener.accept()
        with conn:
            conn.recv(4)
            conn.sendall(b"nope")

    thread = threading.Thread(target=fake_server)
    thread.start()
    try:
        with pytest.raises(BadHandshakeError) as info:
            StpClient.connect(f"127.0.0.1:{port}")
        assert isinstance(info.value, ConnectError)
    finally:
        thread.join(timeout=5)
        listener.close()


def test_connect_refused():
    probe = socket.create_server(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(ConnectError):
        StpClient.connect(("127.0.0.1", port))


def test_invalid_address():
    with pytest.raises(ValueError):
        StpServer.bind("no-port-here")