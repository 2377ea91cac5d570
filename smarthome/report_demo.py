"""Example: build reports for a couple of houses and print them."""

from __future__ import annotations

from smarthome.device import SmartSocket, SmartThermometer
from smarthome.house import SmartHouse, SmartHouseError
from smarthome.info import BorrowingDeviceInfoProvider, OwningDeviceInfoProvider

__all__ = ["build_reports", "main"]

_SOCKET_DESCRIPTION = (
    "Smart Plug WiFi Socket EU 16A/20A With Power Monitor Timing Function "
    "Tuya Smart Life APP Control Works With Alexa Google Home"
)
_THERMO_DESCRIPTION = (
    "Govee WiFi Hygrometer Thermometer Sensor 3 Pack, Indoor Wireless Smart "
    "Temperature Humidity Monitor with Remote App Notification Alert, "
    "2 Years Data Storage Export, for Home, Greenhouse"
)


def _report_or_error(house: SmartHouse, provider) -> str:
    try:
        return house.create_report(provider)
    except SmartHouseError as err:
        return type(err).__name__


def _quoted_list(items) -> str:
    return "[" + ", ".join(f'"{item}"' for item in items) + "]"


def _build() -> tuple[list[str], SmartHouse]:
    socket1 = SmartSocket("room1_socket_1", _SOCKET_DESCRIPTION, True, 225.5)
    socket2 = SmartSocket("room2_socket_2", _SOCKET_DESCRIPTION, False, 0.0)
    thermo = SmartThermometer("room1_thermo_1", _THERMO_DESCRIPTION, 19.2)

    house_1 = SmartHouse(
        "my smart house",
        {
            "room1": ["room1_socket_1", "room1_thermo_1"],
            "room2": ["room2_socket_2"],
        },
    )
    report_1 = _report_or_error(house_1, OwningDeviceInfoProvider(socket1))
    report_2 = _report_or_error(house_1, BorrowingDeviceInfoProvider(socket2, thermo))

    house_2 = SmartHouse(
        "my smart house", {"room1": ["room1_thermo_1", "room1_socket_3"]}
    )
    house_2.delete_device("room1", "room1_socket_3")
    house_2.add_room("room2")
    house_2.add_device("room2", "room2_socket_1")
    house_2.add_device("room2", "room2_socket_2")
    house_2.delete_device("room2", "room2_socket_1")
    report_3 = _report_or_error(house_2, BorrowingDeviceInfoProvider(socket2, thermo))

    return [report_1, report_2, report_3], house_2


def build_reports() -> list[str]:
    """Return the three example reports; a failed report is shown by its error name."""
    reports, _ = _build()
    return reports


def main(argv: list[str] | None = None) -> int:
    reports, house = _build()
    for number, report in enumerate(reports, start=1):
        print(f"\n=== Report #{number}: ===\n\n{report}\n")
    print("DEBUG")
    print(f"Rooms: {_quoted_list(house.rooms())}")
    print(f"Devices of room1: {_quoted_list(house.devices('room1'))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())