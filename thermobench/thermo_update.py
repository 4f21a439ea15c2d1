"""Temperature conversion and display encoding for the thermometer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .thermo_sim import Ports

SENSOR_MAX = 28800
_ERROR_BIT = 1 << 2
_FAHRENHEIT_BIT = 1 << 5

_DIGIT_MASKS = (
    0b1111011,
    0b1001000,
    0b0111101,
    0b1101101,
    0b1001110,
    0b1100111,
    0b1110111,
    0b1001001,
    0b1111111,
    0b1101111,
)
_NEGATIVE_MASK = 0b0000100
_BLANK_MASK = 0b0000000
_E_MASK = 0b0110111
_R_MASK = 0b1011111

ERR_DISPLAY = _E_MASK << 21 | _R_MASK << 14 | _R_MASK << 7 | _BLANK_MASK

_MODE_BITS = {1: 1 << 28, 2: 1 << 29}
_RANGES = {1: (-450, 450), 2: (-490, 1130)}


class TempMode(IntEnum):
    """Units a temperature is expressed in."""

    CELSIUS = 1
    FAHRENHEIT = 2
    ERROR = 3


@dataclass
class Temp:
    """A temperature in tenths of a degree together with its mode."""

    tenths_degrees: int = 0
    temp_mode: int = 0


class ThermoError(Exception):
    """Base class for thermometer failures."""


class SensorError(ThermoError):
    """The sensor reading or status port reports a fault."""

    def __init__(self, message: str, temp: Temp) -> None:
        super().__init__(message)
        self.temp = temp


class DisplayError(ThermoError):
    """A temperature cannot be shown; ``display`` holds the ERR pattern."""

    def __init__(self, message: str, display: int) -> None:
        super().__init__(message)
        self.display = display


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def set_temp_from_ports(ports: Ports) -> Temp:
    """Convert the sensor and status ports into a temperature.

    Raises :class:`SensorError` (carrying a ``Temp(0, ERROR)``) when the
    sensor is negative, above its maximum, or the status error bit is set.
    The ports are only read.
    """
    if ports.sensor < 0 or ports.sensor > SENSOR_MAX or ports.status & _ERROR_BIT:
        raise SensorError(
            f"sensor fault: sensor={ports.sensor} status={ports.status:#010b}",
            Temp(0, TempMode.ERROR),
        )
    tenths = ports.sensor >> 5
    if ports.sensor & 0b11111 >= 16:
        tenths += 1
    tenths -= 450
    if ports.status & _FAHRENHEIT_BIT:
        return Temp(_c_div(tenths * 9, 5) + 320, TempMode.FAHRENHEIT)
    return Temp(tenths, TempMode.CELSIUS)


def set_display_from_temp(temp: Temp) -> int:
    """Return the display register bits that show ``temp``.

    Raises :class:`DisplayError` carrying the ERR pattern when the mode is
    neither Celsius nor Fahrenheit or the value lies outside its range.
    """
    mode = temp.temp_mode
    if mode not in _RANGES:
        raise DisplayError(f"invalid temperature mode {mode}", ERR_DISPLAY)
    low, high = _RANGES[mode]
    if not low <= temp.tenths_degrees <= high:
        raise DisplayError(
            f"temperature {temp.tenths_degrees} out of range for mode {mode}",
            ERR_DISPLAY,
        )
    symbols = [_DIGIT_MASKS[int(d)] for d in f"{abs(temp.tenths_degrees):02d}"]
    if temp.tenths_degrees < 0:
        symbols.insert(0, _NEGATIVE_MASK)
    display = 0
    for mask in symbols:
        display = display << 7 | mask
    return display | _MODE_BITS[mode]


def thermo_update(ports: Ports) -> None:
    """Read the ports and write the display port.

    The display is always written, showing ERR on failure, after which the
    failure is raised as a :class:`ThermoError`.
    """
    sensor_error: SensorError | None = None
    try:
        temp = set_temp_from_ports(ports)
    except SensorError as err:
        temp = err.temp
        sensor_error = err
    try:
        ports.display = set_display_from_temp(temp)
    except DisplayError as err:
        ports.display = err.display
        raise err from sensor_error
    if sensor_error is not None:
        raise sensor_error