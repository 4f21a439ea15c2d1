"""Time linear, linked-list, binary and tree searches over growing sizes."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from .search import (
    binary_array_search,
    binary_tree_search,
    linear_array_search,
    linkedlist_search,
    make_evens_array,
    make_evens_list,
    make_evens_tree,
)

PROG = "search_benchmark"
ALGORITHMS = ("la", "ll", "ba", "bt")
_TITLES = {"la": "array", "ll": "list", "ba": "binary", "bt": "tree"}
_SETUPS: dict[str, tuple[Callable[[int], Any], Callable[[Any, int], bool]]] = {
    "la": (make_evens_array, linear_array_search),
    "ll": (make_evens_list, linkedlist_search),
    "ba": (make_evens_array, binary_array_search),
    "bt": (make_evens_tree, binary_tree_search),
}


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_algorithms(names: Iterable[str]) -> tuple[str, ...]:
    """Return the chosen algorithms in display order.

    No names selects all of them; unknown names are ignored.
    """
    names = list(names)
    if not names:
        return ALGORITHMS
    chosen = set(names)
    return tuple(name for name in ALGORITHMS if name in chosen)


def _time_algorithm(name: str, length: int, reps: int) -> float:
    make, search = _SETUPS[name]
    data = make(length)
    start = time.process_time()
    for _ in range(reps):
        for query in range(2 * length - 1):
            search(data, query)
    return time.process_time() - start


def run_benchmark(
    min_pow: int, max_pow: int, reps: int, algorithms: Iterable[str] = ALGORITHMS
) -> Iterator[tuple[int, int, dict[str, float]]]:
    """Yield ``(length, searches, timings)`` for each power from min to max.

    Each step searches data of ``2**power`` elements; the reported length is
    the doubled one and ``searches`` is ``length * reps * 2``, as in the
    printed table. ``timings`` maps algorithm names to CPU seconds.
    """
    algorithms = tuple(algorithms)
    length = 2 ** max(min_pow, 0)
    for _ in range(min_pow, max_pow + 1):
        timings = {name: _time_algorithm(name, length, reps) for name in algorithms}
        length *= 2
        yield length, length * reps * 2, timings


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(f"usage: {PROG} <minpow> <maxpow> <repeats> [la ll ba bt]")
        return 1
    min_pow, max_pow, reps = (_atoi(arg) for arg in args[:3])
    algorithms = parse_algorithms(args[3:])

    header = "  LENGTH SEARCHES" + "".join(f"{_TITLES[name]:>11}" for name in algorithms)
    print(header)
    for length, searches, timings in run_benchmark(min_pow, max_pow, reps, algorithms):
        cells = "".join(f"{timings[name]:10.4e} " for name in algorithms)
        print(f"{length:8d} {searches:8d} {cells}")
    return 0


if __name__ == "__main__":
    sys.exit(main())