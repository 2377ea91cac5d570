"""Smart home devices: sockets and thermometers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

__all__ = ["SmartSocket", "SmartThermometer"]


def _format_float(value: float) -> str:
    """Render a float the way a plain decimal display would: no exponent, no '.0'."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _render(lines: Iterable[str], spec: str) -> str:
    """Join lines, putting the padding described by ``spec`` in front of each."""
    pad = format("", spec) if spec else ""
    return "\n".join(pad + line for line in lines)


@dataclass
class SmartSocket:
    """A switchable power socket that reports its current power."""

    name: str
    description: str
    is_on: bool
    current_power: float

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False

    def __format__(self, spec: str) -> str:
        state = "on" if self.is_on else "off"
        return _render(
            [
                f"Name: {self.name}",
                f"Description: {self.description}",
                f"Current state: {state}, {_format_float(self.current_power)} Volts",
            ],
            spec,
        )

    def __str__(self) -> str:
        return format(self, "")


@dataclass
class SmartThermometer:
    """A thermometer that reports the current temperature in Celsius."""

    name: str
    description: str
    current_temperature: float

    def __format__(self, spec: str) -> str:
        return _render(
            [
                f"Name: {self.name}",
                f"Description: {self.description}",
                f"Current temperature: {_format_float(self.current_temperature)} Celsus",
            ],
            spec,
        )

    def __str__(self) -> str:
        return format(self, "")