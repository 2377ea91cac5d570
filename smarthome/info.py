"""Providers that describe the state of a device in a given location."""

from __future__ import annotations

from abc import ABC, abstractmethod

from smarthome.device import SmartSocket, SmartThermometer

__all__ = [
    "DeviceInfoProvider",
    "OwningDeviceInfoProvider",
    "BorrowingDeviceInfoProvider",
]


class DeviceInfoProvider(ABC):
    """Source of device state, looked up by room name and device name."""

    @abstractmethod
    def info(self, location_name: str, device_name: str) -> str | None:
        """Return a description of the device, or None if it is unknown."""


class OwningDeviceInfoProvider(DeviceInfoProvider):
    """Provider that holds a single socket of its own."""

    def __init__(self, socket: SmartSocket) -> None:
        self.socket = socket

    def info(self, location_name: str, device_name: str) -> str | None:
        if self.socket.name != device_name:
            return None
        return f"Location: {location_name}\nDevice/Socket: \n{self.socket:<2}"


class BorrowingDeviceInfoProvider(DeviceInfoProvider):
    """Provider that refers to a socket and a thermometer kept elsewhere."""

    def __init__(self, socket: SmartSocket, thermo: SmartThermometer) -> None:
        self.socket = socket
        self.thermo = thermo

    def info(self, location_name: str, device_name: str) -> str | None:
        if self.socket.name == device_name:
            return f"Location: {location_name}\nDevice/Socket: \n{self.socket:<2}"
        if self.thermo.name == device_name:
            return f"Location: {location_name}\nDevice/Thermometer: \n{self.thermo:<2}"
        return None