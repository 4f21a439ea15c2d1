# thermobench

Three small tools in one package:

- **A thermometer simulator.** A raw sensor reading and a status byte become a
  temperature in tenths of a degree, in Celsius or Fahrenheit. That
  temperature is then encoded as the bits of a four-digit seven-segment
  display, and the display can be drawn as ASCII art.
- **A matrix A^T*A benchmark.** A plain reference version is timed against a
  row-order version on square matrices of growing size, and the speedup is
  scored.
- **A search benchmark.** Four searches are timed over sorted lists of even
  numbers whose length doubles at each step: linear array search, linked-list
  search, binary array search and binary-search-tree search.

The package has no dependencies beyond the standard library.

## Commands

### `thermo-main`

```
thermo-main SENSOR_VAL {C|F}
```

This command sets the sensor port to `SENSOR_VAL` and the status port to
Celsius or Fahrenheit. It then shows each step in order:

1. the temperature that was read;
2. the display bits, with their index row;
3. the result of a full update of the display port;
4. the display as drawn on the screen.

Any step that fails is followed by `WARNING: Non-zero value returned`. With
fewer than two arguments the command prints its usage. A mode that does not
start with `C` or `F` (either case) is reported as unknown, and the command
exits with status 1.

The sensor counts in units of 0.1/32 °C above -45.0 °C. Readings are rounded
to the nearest tenth:

| sensor | temperature |
|-------:|------------:|
| 0      | -45.0 °C    |
| 14400  | 0.0 °C      |
| 24000  | 30.0 °C     |
| 28800  | 45.0 °C     |

The thermometer goes into its error state if the reading is negative, if it
is above 28800, or if bit 2 of the status port is set. The display then reads
`ERR`.

```
thermo-main 21856 C
thermo-main 14400 F
```

### `matata-print`

```
matata-print SIZE
```

This command fills a `SIZE` × `SIZE` matrix with 0, 1, 2, … in row order. It
computes A^T*A with both versions and prints the original matrix and both
results. It then compares the two results element by element, and marks any
line where they differ with `***`. Small sizes such as `3` or `7` are the
easiest to read. A size that is not positive is reported as an error, and the
command exits with status 1.

### `matata-benchmark`

```
matata-benchmark [-test]
```

This command times both versions on matrices of size 171, 196, 256, 320, 801
and 1024, measuring CPU time. Each row of its table shows:

- the base time and the optimised time;
- the speedup and its base-2 logarithm (never below zero);
- a size factor, which is the size divided by the smallest size;
- the points for that row, which are the logarithm times the factor.

If the two results differ anywhere, the first differing element is reported
and that row scores zero. The raw total is printed, and the total is then
capped at 35 points. With `-test`, only the first two sizes are run. Before
and after the run, the command warns when the host name does not start with
the name of the machine the scores were calibrated on.

Both versions are pure Python, so the larger sizes take a long time.

### `search-benchmark`

```
search-benchmark MIN MAX REPS [la] [ll] [ba] [bt]
```

This command runs one step for each power `p` from `MIN` to `MAX`. Each step
builds data of `2**p` even numbers. It searches that data for every value in
`0 .. 2*len-2`, and repeats the whole search `REPS` times. It then prints the
CPU time each algorithm took.

The `LENGTH` column shows twice the length that was searched. `SEARCHES` is
that printed length × `REPS` × 2.

The algorithms are:

- `la`: linear array search
- `ll`: linked-list search
- `ba`: binary array search
- `bt`: binary-search-tree search

If you name no algorithm, all four run. Unknown names are ignored. With fewer
than three arguments the command prints its usage and exits with status 1.

```
search-benchmark 5 12 10
search-benchmark 8 16 4 ba bt
```

## Library use

- `thermobench.thermo_sim`
  - `Ports` holds the sensor, status and display registers. Values are cut
    down to 16-bit signed, 8-bit unsigned and 32-bit signed widths.
  - `BitSpec`, with `DISPSPEC` and `STATSPEC`, describes how bits are
    grouped.
  - `bitstr` and `bitstr_index` print bits in groups, with an index row.
  - `render_display` returns the ASCII rows of the display, and
    `format_display` returns them as one string.
- `thermobench.thermo_update`
  - `set_temp_from_ports` returns a `Temp`, made of tenths of a degree and a
    `TempMode`.
  - `set_display_from_temp` returns the display bits.
  - `thermo_update` writes `ports.display`, showing `ERR` when it fails, and
    then raises the failure.
  - A failure is a `SensorError`, which carries `.temp`, or a `DisplayError`,
    which carries the `ERR` pattern in `.display`. Both are kinds of
    `ThermoError`.
- `thermobench.thermo_main.report(sensor, mode)` returns the full output of
  `thermo-main` as a string.
- `thermobench.matvec`
  - `Matrix` and `Vector` hold 32-bit integers, which wrap around on
    overflow.
  - Index a matrix with `m[i, j]` for one element, or `m[i]` for a whole row.
  - Both types have `fill_sequential()` and `write(file)`.
  - `read_matrix` and `read_vector` load files of whitespace-separated
    numbers. The dimensions come first in the file.
- `thermobench.matata`
  - `matata_base(mat, ans)` and `matata_optm(mat, ans)` fill `ans` with
    A^T*A and return it.
  - Both raise `DimensionError` unless the matrices are square and the same
    size.
- `thermobench.matata_print.format_report(size)` returns the output of
  `matata-print`.
- `thermobench.matata_benchmark`
  - `run_benchmark(sizes, repeats)` yields one `BenchmarkRow` per size.
  - `score_row` and `check_hostname` can also be used on their own.
- `thermobench.search`
  - The four searches return `True` or `False`.
  - `make_evens_array`, `make_evens_list` and `make_evens_tree` build the
    data. The list and tree builders raise `ValueError` for a length that is
    not positive.
  - `LinkedList` and `BinarySearchTree` can be iterated in order.
  - The linear-congruential generator used to shuffle nodes is available as
    `PbRandom`, or through `pb_rand` and `pb_srand`.
- `thermobench.search_benchmark`
  - `run_benchmark(min_pow, max_pow, reps, algorithms)` yields
    `(length, searches, timings)` for each step.
  - `parse_algorithms` picks the algorithms from a list of names.

```python
from thermobench.search import make_evens_array, binary_array_search

evens = make_evens_array(8)           # [0, 2, 4, ..., 14]
binary_array_search(evens, 6)         # True
binary_array_search(evens, 7)         # False
```

## What it does not do

The thermometer exists only in software. `Ports` is a plain object, and
nothing here reads a real sensor or drives a real display.