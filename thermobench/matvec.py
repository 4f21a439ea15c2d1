"""Dense integer matrices and vectors with 32-bit wrap-around arithmetic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice
from typing import TextIO


def _int32(value: int) -> int:
    value = int(value) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass
class Matrix:
    """A ``rows`` x ``cols`` matrix of 32-bit ints stored row by row."""

    rows: int
    cols: int
    data: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Invalid rows or cols: {self.rows} {self.cols}")
        size = self.rows * self.cols
        if not self.data:
            self.data = [0] * size
        elif len(self.data) != size:
            raise ValueError(f"expected {size} values, got {len(self.data)}")
        else:
            self.data = [_int32(x) for x in self.data]

    def _check_row(self, i: int) -> None:
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} out of range for {self.rows} rows")

    def _offset(self, i: int, j: int) -> int:
        self._check_row(i)
        if not 0 <= j < self.cols:
            raise IndexError(f"column {j} out of range for {self.cols} columns")
        return i * self.cols + j

    def __getitem__(self, key: tuple[int, int] | int) -> int | list[int]:
        """``m[i, j]`` gives one element, ``m[i]`` a copy of row ``i``."""
        if isinstance(key, tuple):
            return self.data[self._offset(*key)]
        self._check_row(key)
        start = key * self.cols
        return self.data[start : start + self.cols]

    def __setitem__(self, key: tuple[int, int] | int, value) -> None:
        """``m[i, j] = x`` sets one element, ``m[i] = values`` a whole row."""
        if isinstance(key, tuple):
            self.data[self._offset(*key)] = _int32(value)
            return
        self._check_row(key)
        values = [_int32(v) for v in value]
        if len(values) != self.cols:
            raise ValueError(f"row needs {self.cols} values, got {len(values)}")
        start = key * self.cols
        self.data[start : start + self.cols] = values

    def fill_sequential(self) -> None:
        """Set the elements to 0, 1, 2, ... in row-major order."""
        self.data = list(range(self.rows * self.cols))

    def write(self, file: TextIO) -> None:
        """Write the dimensions, then one indexed line per row."""
        file.write(f"{self.rows} x {self.cols} matrix\n")
        for i in range(self.rows):
            cells = "".join(f"{x:6d} " for x in self[i])
            file.write(f"{i:4d}: {cells}\n")


@dataclass
class Vector:
    """A vector of ``length`` 32-bit ints."""

    length: int
    data: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"Invalid length: {self.length}")
        if not self.data:
            self.data = [0] * self.length
        elif len(self.data) != self.length:
            raise ValueError(f"expected {self.length} values, got {len(self.data)}")
        else:
            self.data = [_int32(x) for x in self.data]

    def _check(self, index: int) -> None:
        if not 0 <= index < self.length:
            raise IndexError(f"index {index} out of range for length {self.length}")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self.data[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self.data[index] = _int32(value)

    def __len__(self) -> int:
        return self.length

    def fill_sequential(self) -> None:
        """Set the elements to 0, 1, 2, ..."""
        self.data = list(range(self.length))

    def write(self, file: TextIO) -> None:
        """Write the dimensions, then one indexed line per element."""
        file.write(f"{self.length} x 1 vector\n")
        for i, x in enumerate(self.data):
            file.write(f"{i:4d}: {x:4d}\n")


def _tokens(path) -> Iterator[str]:
    with open(path) as file:
        return iter(file.read().split())


def _take(tokens: Iterable[str], count: int, path) -> list[int]:
    values = [int(token) for token in islice(tokens, count)]
    if len(values) < count:
        raise ValueError(f"{path}: expected {count} values, found {len(values)}")
    return values


def read_matrix(path) -> Matrix:
    """Read a matrix from a file of whitespace-separated numbers.

    The first two numbers are the rows and columns, the rest the data.
    """
    tokens = _tokens(path)
    rows, cols = _take(tokens, 2, path)
    mat = Matrix(rows, cols)
    mat.data = [_int32(x) for x in _take(tokens, rows * cols, path)]
    return mat


def read_vector(path) -> Vector:
    """Read a vector from a file: its length followed by the data."""
    tokens = _tokens(path)
    (length,) = _take(tokens, 1, path)
    vec = Vector(length)
    vec.data = [_int32(x) for x in _take(tokens, length, path)]
    return vec