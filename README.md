# smarthome

A small smart-home toolkit with no third-party dependencies:

- **Devices** (`smarthome.device`): `SmartSocket`, which can be switched
  on and off and reports its power, and `SmartThermometer`, which reports its
  temperature.
- **Houses** (`smarthome.house`): `SmartHouse` keeps rooms and the names of
  the devices in each room, and builds a text report with a
  `DeviceInfoProvider` from `smarthome.info`.
- **STP** (`smarthome.stp`): a tiny framed protocol over TCP. A four-byte
  handshake (`clnt` from the client, `serv` from the server) is followed by
  strings sent as a 4-byte big-endian length and then the UTF-8 bytes.
- **TCP smart socket** (`smarthome.tcp_socket`): serves a smart socket over
  STP and provides a client that switches it on or off or asks for its state.
- **Notifications** (`smarthome.notify`): e-mail and SMS senders, plus
  decorators that log every attempt or make every send fail.
- **FizzBuzz** (`smarthome.fizzbuzz`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Devices

```python
from smarthome.device import SmartSocket, SmartThermometer

socket = SmartSocket("room1_socket_1", "Wall plug", True, 225.5)
socket.turn_off()
print(socket)
# Name: room1_socket_1
# Description: Wall plug
# Current state: off, 225.5 Volts

thermo = SmartThermometer("room1_thermo_1", "Wall thermometer", 19.0)
print(f"{thermo:<2}")   # each line indented by two spaces
```

Both are dataclasses. Numbers are shown without a trailing `.0`
(`220.0` appears as `220`).

## Building a house report

```python
from smarthome.device import SmartSocket, SmartThermometer
from smarthome.house import SmartHouse, ReportError
from smarthome.info import BorrowingDeviceInfoProvider

socket = SmartSocket("room1_socket_1", "Wall plug", True, 225.5)
thermo = SmartThermometer("room1_thermo_1", "Wall thermometer", 19.2)

house = SmartHouse("my smart house", {"room1": ["room1_socket_1", "room1_thermo_1"]})

provider = BorrowingDeviceInfoProvider(socket, thermo)
try:
    print(house.create_report(provider))
except ReportError:
    print("some device in the house is unknown to the provider")
```

`create_report` raises `ReportError` (a `SmartHouseError`) as soon as the
provider returns `None` for one of the devices in the house.
`OwningDeviceInfoProvider` knows about a single socket only;
`BorrowingDeviceInfoProvider` knows about one socket and one thermometer.
Write your own provider by subclassing `DeviceInfoProvider` and implementing
`info(location_name, device_name)`.

Rooms and devices can be changed after the house is made:

- `add_room(room)` adds a room name if it is not known yet;
- `delete_room(room)` removes the room and its devices;
- `add_device(room, device)` appends a device to a room that was given a
  device list when the house was made, and is ignored otherwise (a room
  added later with `add_room` does not take devices);
- `delete_device(room, device)` removes every occurrence of that device;
- `rooms()` and `devices(room)` iterate over the current names.

To see a full example printed:

```
smarthome-report
```

From Python, `smarthome.report_demo.build_reports()` returns the same three
reports as a list; a report that fails shows up as `ReportError`.

## Controlling a socket over TCP

Start the socket server; it listens on `127.0.0.1:55331`:

```
smarthome-socket-server
```

Then, from another terminal, send it a command, `on`, `off` or `info`:

```
smarthome-socket on
smarthome-socket info
smarthome-socket off
```

Each command prints the socket's name, description and current state. Any
other word prints a usage hint.

From Python:

```python
from smarthome.tcp_socket import TcpSmartSocketClient

with TcpSmartSocketClient("127.0.0.1:55331") as client:
    print(client.turn_on())
    print(client.get_info())
```

`TcpSmartSocket(name, description, is_on, current_power).serve(addr)` runs a
server on any address, given as `"host:port"` or a `(host, port)` tuple. It
answers one request per connection; an unknown command gets the reply
`unknown command`. `handle(Request(...))` applies a `Command` directly and
returns a `Response`. `encode_request`, `decode_request`, `encode_response`
and `decode_response` convert between these objects and the strings on the
wire.

### STP

`StpClient.connect(addr)`, `StpServer.bind(addr)`, `StpServer.accept()` and
`StpConnection.process_request(handler)` carry any string request and reply.
`send_string(data, writer)` and `recv_string(reader)` frame strings on any
binary file-like object. Failures are raised as:

- `ConnectError`, with `BadHandshakeError` for a wrong handshake;
- `RequestError`, with `SendError` and `RecvError` beneath it, and
  `BadEncodingError` (a `RecvError`) for bytes that are not UTF-8.

All of them are subclasses of `StpError`.

## Notification senders

`EmailSender` and `SmsSender` take `EmailMessage(subject, body)` and
`SmsMessage(text)`. Wrap a sender in `LogDecorator` to print each attempt and
its outcome (it never raises `SendError` itself), or in `AlwaysFailDecorator`
to make every send raise `SendError`. A demonstration of the combinations:

```
smarthome-notify
```

## FizzBuzz

```
smarthome-fizzbuzz
```

prints the numbers 1 to 100, with `Fizz` for multiples of 3, `Buzz` for
multiples of 5 and `FizzBuzz` for multiples of both. `fizzbuzz(count)` returns
the words as a list.

## What this package does not do

- `EmailSender` and `SmsSender` deliver nothing: their `send` accepts the
  message and returns. There is no mail or SMS gateway behind them.
- Devices are in-memory objects only; nothing is stored between runs and no
  real hardware is controlled.
- The `smarthome-socket-server` and `smarthome-socket` commands always use
  `127.0.0.1:55331` and take no options for another address. The server
  handles one connection at a time, and an I/O error while answering a
  request stops it.