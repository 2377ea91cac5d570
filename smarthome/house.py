"""A house made of named rooms, each holding named devices."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from smarthome.info import DeviceInfoProvider

__all__ = ["SmartHouseError", "ReportError", "SmartHouse"]


class SmartHouseError(Exception):
    """Base error of smart house operations."""


class ReportError(SmartHouseError):
    """A device in the house is unknown to the info provider."""

    def __init__(self, message: str = "create report error") -> None:
        super().__init__(message)


class SmartHouse:
    """Rooms and the names of the devices placed in them."""

    def __init__(self, name: str, devices: Mapping[str, Iterable[str]]) -> None:
        self.name = name
        self._room_names = list(devices)
        self._devices = {room: list(names) for room, names in devices.items()}

    def rooms(self) -> Iterator[str]:
        """Iterate over a snapshot of the room names."""
        return iter(list(self._room_names))

    def add_room(self, room: str) -> None:
        """Add a room name if it is not known yet."""
        if room not in self._room_names:
            self._room_names.append(room)

    def delete_room(self, room: str) -> None:
        """Remove a room together with its devices."""
        self._room_names = [name for name in self._room_names if name != room]
        self._devices.pop(room, None)

    def devices(self, room: str) -> Iterator[str]:
        """Iterate over a snapshot of the devices of a room; empty if unknown."""
        return iter(list(self._devices.get(room, [])))

    def add_device(self, room: str, device: str) -> None:
        """Add a device to a room that already holds a device list; otherwise do nothing."""
        if room in self._devices:
            self._devices[room].append(device)

    def delete_device(self, room: str, device: str) -> None:
        """Remove every occurrence of a device from a room, if the room exists."""
        if room in self._devices:
            self._devices[room] = [d for d in self._devices[room] if d != device]

    def _room_report(
        self, room: str, devices: Iterable[str], info_provider: DeviceInfoProvider
    ) -> str:
        reports = []
        for device in devices:
            info = info_provider.info(room, device)
            if info is None:
                raise ReportError()
            reports.append(info)
        return "\n".join(reports)

    def create_report(self, info_provider: DeviceInfoProvider) -> str:
        """Describe every device of every room; raise ReportError on an unknown device."""
        return "\n".join(
            self._room_report(room, devices, info_provider)
            for room, devices in self._devices.items()
        )