"""A small length-prefixed string protocol over TCP with a handshake."""

from __future__ import annotations

import socket
import struct
from typing import BinaryIO, Callable, Tuple, Union

__all__ = [
    "StpError",
    "ConnectError",
    "BadHandshakeError",
    "SendError",
    "RecvError",
    "BadEncodingError",
    "RequestError",
    "send_string",
    "recv_string",
    "StpClient",
    "StpServer",
    "StpConnection",
]

Address = Union[str, Tuple[str, int]]

_CLIENT_HELLO = b"clnt"
_SERVER_HELLO = b"serv"
_LENGTH = struct.Struct(">I")


class StpError(Exception):
    """Base error of the protocol."""


class ConnectError(StpError):
    """Establishing a connection failed."""


class BadHandshakeError(ConnectError):
    """The other side did not answer with the expected handshake bytes."""

    def __init__(self, message: str = "bad handshake") -> None:
        super().__init__(message)


class RequestError(StpError):
    """Exchanging a message with the other side failed."""


class SendError(RequestError):
    """Sending a message failed."""


class RecvError(RequestError):
    """Receiving a message failed."""


class BadEncodingError(RecvError):
    """The received bytes are not valid UTF-8."""

    def __init__(self, message: str = "bad encoding") -> None:
        super().__init__(message)


def _parse_addr(addr: Address) -> Tuple[str, int]:
    if isinstance(addr, str):
        host, sep, port = addr.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"invalid socket address: {addr!r}")
        return host.strip("[]"), int(port)
    host, port = addr[0], addr[1]
    return host, int(port)


def _read_exact(reader: BinaryIO, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = reader.read(size - len(data))
        if not chunk:
            raise EOFError("failed to fill whole buffer")
        data += chunk
    return bytes(data)


def send_string(data: str, writer: BinaryIO) -> None:
    """Write the four-byte big-endian length of ``data``, then its UTF-8 bytes."""
    payload = data.encode("utf-8")
    if len(payload) > 0xFFFFFFFF:
        raise SendError("message too long")
    try:
        writer.write(_LENGTH.pack(len(payload)))
        writer.write(payload)
        writer.flush()
    except OSError as err:
        raise SendError(f"IO error: {err}") from err


def recv_string(reader: BinaryIO) -> str:
    """Read a four-byte big-endian length, then that many UTF-8 bytes."""
    try:
        (length,) = _LENGTH.unpack(_read_exact(reader, _LENGTH.size))
        payload = _read_exact(reader, length)
    except (OSError, EOFError) as err:
        raise RecvError(f"IO error: {err}") from err
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as err:
        raise BadEncodingError() from err


class _Stream:
    """A connected socket with a buffered binary file over it."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._file = sock.makefile("rwb")

    def close(self) -> None:
        try:
            self._file.close()
        finally:
            self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class StpClient(_Stream):
    """Client side of a connection."""

    @classmethod
    def connect(cls, addr: Address) -> "StpClient":
        """Connect to a server and check that it speaks the protocol."""
        try:
            sock = socket.create_connection(_parse_addr(addr))
        except OSError as err:
            raise ConnectError(f"IO error: {err}") from err
        client = cls(sock)
        try:
            client._handshake()
        except BaseException:
            client.close()
            raise
        return client

    def _handshake(self) -> None:
        try:
            self._file.write(_CLIENT_HELLO)
            self._file.flush()
            answer = _read_exact(self._file, len(_SERVER_HELLO))
        except (OSError, EOFError) as err:
            raise ConnectError(f"IO error: {err}") from err
        if answer != _SERVER_HELLO:
            raise BadHandshakeError()

    def send_request(self, request: str) -> str:
        """Send a request and wait for the response."""
        send_string(request, self._file)
        return recv_string(self._file)

    def close(self) -> None:
        super().close()


class StpConnection(_Stream):
    """Server side of a connection with one client."""

    def process_request(self, handler: Callable[[str], str]) -> None:
        """Receive a request, answer it with what ``handler`` returns."""
        request = recv_string(self._file)
        response = handler(request)
        send_string(response, self._file)

    def peer_addr(self):
        """Address of the connected client."""
        return self._sock.getpeername()

    def close(self) -> None:
        super().close()


class StpServer:
    """Listening side of the protocol."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock

    @classmethod
    def bind(cls, addr: Address) -> "StpServer":
        """Listen on the given address."""
        return cls(socket.create_server(_parse_addr(addr)))

    @property
    def address(self):
        """Address the server listens on."""
        return self._sock.getsockname()

    def accept(self) -> StpConnection:
        """Accept a client and perform the handshake."""
        try:
            sock, _ = self._sock.accept()
        except OSError as err:
            raise ConnectError(f"IO error: {err}") from err
        connection = StpConnection(sock)
        try:
            try:
                hello = _read_exact(connection._file, len(_CLIENT_HELLO))
            except (OSError, EOFError) as err:
                raise ConnectError(f"IO error: {err}") from err
            if hello != _CLIENT_HELLO:
                raise BadHandshakeError()
            try:
                connection._file.write(_SERVER_HELLO)
                connection._file.flush()
            except OSError as err:
                raise ConnectError(f"IO error: {err}") from err
        except BaseException:
            connection.close()
            raise
        return connection

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> "StpServer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()