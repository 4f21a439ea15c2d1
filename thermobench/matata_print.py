"""Show A^T * A from both implementations side by side for one size."""

from __future__ import annotations

import io
import re
import sys
from collections.abc import Sequence

from .matata import matata_base, matata_optm
from .matvec import Matrix

PROG = "matata_print"
HEADER = "==== Matrix A^T*A Print ===="


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def format_report(size: int) -> str:
    """Return the printed comparison of both results for a ``size`` matrix.

    Raises ValueError when ``size`` is not positive.
    """
    mat = Matrix(size, size)
    mat.fill_sequential()
    base_ans = matata_base(mat, Matrix(size, size))
    optm_ans = matata_optm(mat, Matrix(size, size))

    out = io.StringIO()
    out.write(f"{HEADER}\n")
    for title, matrix in (
        ("Original Matrix:", mat),
        ("BASE Matrix A^T*A :", base_ans),
        ("OPTM Matrix A^T*A :", optm_ans),
    ):
        out.write(f"{title}\n")
        matrix.write(out)
        out.write("\n")

    out.write("BASE/OPTM Element Comparison:\n")
    out.write(f"[{'i':>3}][{'j':>3}]: {'BASE':>6} {'OPTM':>6}\n")
    for i in range(size):
        for j in range(size):
            base, optm = base_ans[i, j], optm_ans[i, j]
            diff = "***" if base != optm else ""
            out.write(f"[{i:3d}][{j:3d}]: {base:6d} {optm:6d} {diff}\n")
    return out.getvalue()


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"usage: {PROG} <size>")
        return 1
    try:
        report = format_report(_atoi(args[0]))
    except ValueError as err:
        print(HEADER)
        print(err)
        return 1
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())