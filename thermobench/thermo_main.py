"""Command-line thermometer simulator: sets the ports from arguments and
shows each step of updating the display."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence

from .thermo_sim import DISPSPEC, STATSPEC, Ports, bitstr, bitstr_index, format_display
from .thermo_update import (
    DisplayError,
    SensorError,
    Temp,
    ThermoError,
    set_display_from_temp,
    set_temp_from_ports,
    thermo_update,
)

PROG = "thermo_main"
_BASE_STATUS = 0b10001000
_FAHRENHEIT_FLAG = 0b100000
_WARNING = "WARNING: Non-zero value returned\n"


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _status_for_mode(mode: str) -> int:
    first = mode[:1]
    if first in ("C", "c"):
        return _BASE_STATUS
    if first in ("F", "f"):
        return _BASE_STATUS | _FAHRENHEIT_FLAG
    raise ValueError(f"Unknown display mode: '{mode}'")


def _result_lines(result: int) -> Iterator[str]:
    yield f"result: {result}\n"
    if result:
        yield _WARNING


def _lines(sensor: int, mode: str) -> Iterator[str]:
    ports = Ports(sensor=sensor)
    yield f"THERMO_SENSOR_PORT set to: {ports.sensor}\n"
    ports.status = _status_for_mode(mode)
    yield f"THERMO_STAUS_PORT set to: {bitstr(ports.status, STATSPEC)}\n"
    yield f"index:                    {bitstr_index(STATSPEC)}\n"

    yield "result = set_temp_from_ports(&temp);\n"
    try:
        temp = set_temp_from_ports(ports)
        result = 0
    except SensorError as err:
        temp = err.temp
        result = 1
    yield from _result_lines(result)
    yield "temp = {\n"
    yield f"  .tenths_degrees = {temp.tenths_degrees}\n"
    yield f"  .temp_mode      = {temp.temp_mode}\n"
    yield "}\n"

    magnitude = abs(temp.tenths_degrees)
    quo = magnitude // 10 if temp.tenths_degrees >= 0 else -(magnitude // 10)
    rem = magnitude % 10
    sym = {1: "deg C", 2: "deg F"}.get(temp.temp_mode, "ERROR")
    yield f"Simulated temp is: {quo}.{rem} {sym}\n"

    yield "result = set_display_from_temp(temp, &display);\n"
    try:
        display = set_display_from_temp(temp)
        result = 0
    except DisplayError as err:
        display = err.display
        result = 1
    yield from _result_lines(result)
    yield "display is\n"
    yield f"bits:  {bitstr(display, DISPSPEC)}\n"
    yield f"index: {bitstr_index(DISPSPEC)}\n"
    yield "\n"

    yield "result = thermo_update();\n"
    try:
        thermo_update(ports)
        result = 0
    except ThermoError:
        result = 1
    yield from _result_lines(result)
    yield "THERMO_DISPLAY_PORT is\n"
    yield f"bits:  {bitstr(ports.display, DISPSPEC)}\n"
    yield f"index: {bitstr_index(DISPSPEC)}\n"
    yield "\n"
    yield "Thermometer Display:\n"
    yield format_display(ports.display)


def report(sensor: int, mode: str) -> str:
    """Return the simulator's full output for a sensor value and mode.

    Raises ValueError when ``mode`` does not start with C or F.
    """
    return "".join(_lines(sensor, mode))


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"usage: {PROG} {{sensor_val}} {{C | F}}")
        print("  sensor_val: integer")
        return 0
    try:
        for line in _lines(_atoi(args[0]), args[1]):
            sys.stdout.write(line)
    except ValueError:
        print(f"Unknown display mode: '{args[1]}'")
        print("Should be 'C' or 'F'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())