"""Thermometer simulator: hardware ports, bit-string formatting and the
ASCII rendering of the seven-segment display."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate

THERMO_MAX_BITS = 30
NROWS = 5
NCOLS = 23

# Columns where each of the four digits starts, from rightmost to leftmost.
_LFT, _LMD, _RMD, _RGT = 0, 5, 10, 15

# Characters lit by each of the seven bits of one digit, relative to the
# digit's top-left corner: (row, column offset, character).
_DIGIT_SEGMENTS: tuple[tuple[tuple[int, int, str], ...], ...] = (
    ((0, 1, "~"), (0, 2, "~")),  # top
    ((1, 0, "|"),),  # upper left
    ((2, 1, "~"), (2, 2, "~")),  # middle
    ((1, 3, "|"),),  # upper right
    ((3, 0, "|"),),  # lower left
    ((4, 1, "~"), (4, 2, "~")),  # bottom
    ((3, 3, "|"),),  # lower right
)

_INIT_ROWS = (
    "                     ",
    "                     ",
    "                     ",
    "                     ",
    "              o      ",
)


def _build_bit_table() -> tuple[tuple[tuple[int, int, str], ...], ...]:
    table: list[tuple[tuple[int, int, str], ...]] = []
    for base in (_RGT, _RMD, _LMD, _LFT):
        table.extend(
            tuple((row, base + col, ch) for row, col, ch in segment)
            for segment in _DIGIT_SEGMENTS
        )
    table.append(((1, 20, "o"), (2, 21, "C")))  # bit 28: Celsius
    table.append(((2, 20, "o"), (3, 21, "F")))  # bit 29: Fahrenheit
    return tuple(table)


_BITS_TO_CHARS = _build_bit_table()


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


@dataclass
class Ports:
    """The thermometer's hardware ports.

    ``sensor`` holds a signed 16-bit reading, ``status`` an unsigned 8-bit
    register and ``display`` a signed 32-bit register; values assigned are
    truncated to those widths as the hardware would.
    """

    sensor: int = 0
    status: int = 0
    display: int = 0

    def __setattr__(self, name: str, value: int) -> None:
        if name == "sensor":
            value = _wrap_signed(int(value), 16)
        elif name == "status":
            value = int(value) & 0xFF
        elif name == "display":
            value = _wrap_signed(int(value), 32)
        super().__setattr__(name, value)


@dataclass(frozen=True)
class BitSpec:
    """How the bits of a register are grouped when shown as a string."""

    nbits: int
    clusters: tuple[int, ...]


DISPSPEC = BitSpec(nbits=32, clusters=(2, 2, 7, 7, 7, 7))
STATSPEC = BitSpec(nbits=8, clusters=(4, 4))


def bitstr(x: int, spec: BitSpec) -> str:
    """Return the bits of ``x``, most significant first, grouped by ``spec``."""
    breaks = {b for b in accumulate(spec.clusters) if b < spec.nbits}
    top = spec.nbits - 1
    parts: list[str] = []
    for i in range(spec.nbits):
        if i in breaks:
            parts.append(" ")
        parts.append("1" if x & (1 << (top - i)) else "0")
    return "".join(parts)


def bitstr_index(spec: BitSpec) -> str:
    """Return a line of bit indices aligned with :func:`bitstr` output."""
    parts: list[str] = []
    idx = spec.nbits
    for width in spec.clusters:
        idx -= width
        parts.append(f"{idx:>{width}d} " if width > 1 else "  ")
    return "".join(parts)[:-1]


def render_display(display: int) -> list[str]:
    """Return the rows of text the display shows for register value ``display``."""
    grid = [list(row.ljust(NCOLS, "\0")) for row in _INIT_ROWS]
    for bit, chars in enumerate(_BITS_TO_CHARS):
        if display & (1 << bit):
            for row, col, ch in chars:
                grid[row][col] = ch
    return ["".join(row).split("\0", 1)[0] for row in grid]


def format_display(display: int) -> str:
    """Return the display as printable text, one line per row."""
    return "".join(f"{row}\n" for row in render_display(display))