"""Time the baseline and optimised A^T * A and score the speedup."""

from __future__ import annotations

import math
import socket
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

from .matata import matata_base, matata_optm
from .matvec import Matrix

SIZES = (171, 196, 256, 320, 801, 1024)
REPEATS = 1
MAX_SCORE = 35.0
EXPECT_HOST = "csel-atlas"


@dataclass(frozen=True)
class BenchmarkRow:
    """Timings and score for one matrix size.

    ``mismatch`` holds ``(i, j, base, optm)`` for the first differing
    element, or None when both results agree.
    """

    size: int
    base_time: float
    optm_time: float
    speedup: float
    log2_speedup: float
    factor: float
    points: float
    mismatch: tuple[int, int, int, int] | None = None


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    return math.inf if numerator > 0 else math.nan


def score_row(
    size: int, base_time: float, optm_time: float, smallest: int, matches: bool
) -> BenchmarkRow:
    """Score a size: log2 of the speedup, never negative, scaled by size.

    When the results do not match the speedup is -1 and no points are given.
    """
    speedup = _ratio(base_time, optm_time)
    factor = size / smallest
    log2_speedup = math.log2(speedup) if math.isnan(speedup) or speedup > 0 else 0.0
    if log2_speedup < 0:
        log2_speedup = 0.0
    points = log2_speedup * factor
    if not matches:
        speedup = -1.0
        points = 0.0
    return BenchmarkRow(size, base_time, optm_time, speedup, log2_speedup, factor, points)


def check_hostname(expected: str = EXPECT_HOST) -> list[str]:
    """Return warnings if this machine's name does not start with ``expected``."""
    try:
        actual = socket.gethostname()
    except OSError:
        return ["WARNING: Couldn't get machine hostname"]
    if actual[: len(expected)].lower() == expected.lower():
        return []
    return [
        f"WARNING: expected host '{expected}' but got host '{actual}'",
        "WARNING: timing results / scoring will not reflect actual scoring",
        f"WARNING: run on host '{expected}' for accurate results",
    ]


def _timed(func: Callable[[Matrix, Matrix], Matrix], mat: Matrix, ans: Matrix, repeats: int) -> float:
    start = time.process_time()
    for _ in range(repeats):
        func(mat, ans)
    return time.process_time() - start


def _sequential(size: int) -> Matrix:
    mat = Matrix(size, size)
    mat.fill_sequential()
    return mat


def run_benchmark(sizes: Iterable[int] = SIZES, repeats: int = REPEATS) -> Iterator[BenchmarkRow]:
    """Time both implementations for each size, yielding one row per size."""
    sizes = list(sizes)
    smallest = sizes[0]
    for size in sizes:
        base_mat, base_ans = _sequential(size), _sequential(size)
        optm_mat, optm_ans = _sequential(size), _sequential(size)
        base_time = _timed(matata_base, base_mat, base_ans, repeats)
        optm_time = _timed(matata_optm, optm_mat, optm_ans, repeats)
        mismatch = next(
            (
                (idx // size, idx % size, base, optm)
                for idx, (base, optm) in enumerate(zip(base_ans.data, optm_ans.data))
                if base != optm
            ),
            None,
        )
        row = score_row(size, base_time, optm_time, smallest, mismatch is None)
        yield replace(row, mismatch=mismatch) if mismatch else row


def _header() -> str:
    names = ("SIZE", "BASE", "OPTM", "SPDUP", "LOG2", "FACTOR", "POINTS")
    widths = (6, 10, 10, 6, 6, 6, 6)
    return "".join(f"{name:>{width}} " for name, width in zip(names, widths))


def _format_row(row: BenchmarkRow) -> str:
    return (
        f"{row.size:6d} {row.base_time:10.4e} {row.optm_time:10.4e} "
        f"{row.speedup:6.2f} {row.log2_speedup:6.2f} {row.factor:6.2f} {row.points:6.2f} "
    )


def _mismatch_lines(mismatch: tuple[int, int, int, int]) -> list[str]:
    i, j, base, optm = mismatch
    return [
        "ERROR: base and optm results differ",
        f"ERROR: base_ans[{i}][{j}] = {base}",
        f"ERROR: optm_ans[{i}][{j}] = {optm}",
        "ERROR: Skipping checks on remaining elements",
        "ERROR: Try running the 'matata_print <size>' program to see differences",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    for warning in check_hostname():
        print(warning)

    print("==== Matrix A^T*A Benchmark Version 1 ====")
    sizes = SIZES[:2] if args and args[0] == "-test" else SIZES
    print(_header())

    total_points = 0.0
    for row in run_benchmark(sizes, REPEATS):
        if row.mismatch:
            print("\n".join(_mismatch_lines(row.mismatch)))
        total_points += row.points
        print(_format_row(row))

    print(f"RAW POINTS: {total_points:.2f}")
    actual_score = MAX_SCORE if total_points > MAX_SCORE else total_points
    print(f"TOTAL POINTS: {actual_score:.0f} / {MAX_SCORE:.0f}")

    for warning in check_hostname():
        print(warning)
    return 0


if __name__ == "__main__":
    sys.exit(main())