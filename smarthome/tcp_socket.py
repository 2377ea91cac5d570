"""A smart socket controlled over the string protocol, with its client."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

from smarthome.device import SmartSocket
from smarthome.stp import Address, ConnectError, StpClient, StpError, StpServer

__all__ = [
    "Command",
    "Request",
    "Response",
    "encode_request",
    "decode_request",
    "encode_response",
    "decode_response",
    "TcpSmartSocket",
    "TcpSmartSocketClient",
    "main",
    "cli_main",
]

ADDR = "127.0.0.1:55331"


class Command(Enum):
    SMART_SOCKET_ON = "on"
    SMART_SOCKET_OFF = "off"
    SMART_SOCKET_INFO = "info"


@dataclass(frozen=True)
class Request:
    command: Command


@dataclass(frozen=True)
class Response:
    text: str


def encode_request(request: Request) -> str:
    return request.command.value


def decode_request(request: str) -> Request | None:
    """Parse a request; None if the command is unknown."""
    try:
        return Request(Command(request))
    except ValueError:
        return None


def encode_response(response: Response) -> str:
    return response.text


def decode_response(response: str) -> Response:
    return Response(response)


class TcpSmartSocket:
    """A smart socket that answers commands received over TCP."""

    def __init__(
        self, name: str, description: str, is_on: bool, current_power: float
    ) -> None:
        self.socket = SmartSocket(name, description, is_on, current_power)

    def handle(self, request: Request) -> Response:
        """Apply a command and describe the socket's resulting state."""
        if request.command is Command.SMART_SOCKET_ON:
            self.socket.turn_on()
        elif request.command is Command.SMART_SOCKET_OFF:
            self.socket.turn_off()
        return Response(str(self.socket))

    def _answer(self, raw: str) -> str:
        request = decode_request(raw)
        if request is None:
            return "unknown command"
        return encode_response(self.handle(request))

    def serve(self, addr: Address) -> None:
        """Serve one request per connection, forever."""
        server = StpServer.bind(addr)
        try:
            print(f'Tcp smart socket "{self.socket.name}" works at {addr}')
            while True:
                try:
                    connection = server.accept()
                except ConnectError:
                    continue
                with connection:
                    connection.process_request(self._answer)
        finally:
            server.close()


class TcpSmartSocketClient:
    """Client that sends commands to a TcpSmartSocket."""

    def __init__(self, addr: Address) -> None:
        self._stp = StpClient.connect(addr)

    def get_info(self) -> str:
        return self._stp.send_request(
            encode_request(Request(Command.SMART_SOCKET_INFO))
        )

    def turn_on(self) -> str:
        return self._stp.send_request(encode_request(Request(Command.SMART_SOCKET_ON)))

    def turn_off(self) -> str:
        return self._stp.send_request(
            encode_request(Request(Command.SMART_SOCKET_OFF))
        )

    def close(self) -> None:
        self._stp.close()

    def __enter__(self) -> "TcpSmartSocketClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Run a smart socket server on the default address."""
    tcp_smart_socket = TcpSmartSocket(
        "Smarty electric",
        "this is smart socket works by tcp protocol",
        False,
        220.0,
    )
    try:
        tcp_smart_socket.serve(ADDR)
    except KeyboardInterrupt:
        return 0
    except (OSError, StpError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


def cli_main(argv: list[str] | None = None) -> int:
    """Send 'on', 'off' or 'info' to the smart socket server."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            "Error: No action provided, use 'on' or 'off' or 'info'", file=sys.stderr
        )
        return 1
    action = args[0]
    print(f"Performing action: '{action}'...")

    actions = {
        "on": TcpSmartSocketClient.turn_on,
        "off": TcpSmartSocketClient.turn_off,
        "info": TcpSmartSocketClient.get_info,
    }
    try:
        with TcpSmartSocketClient(ADDR) as client:
            perform = actions.get(action)
            if perform is None:
                print("Unknown action, use 'on' or 'off' or 'info'")
            else:
                print(perform(client))
    except StpError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())