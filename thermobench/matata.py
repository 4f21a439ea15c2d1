"""Computing A^T * A for a square matrix: a baseline and an optimised form."""

from __future__ import annotations

from operator import mul

from .matvec import Matrix


class DimensionError(ValueError):
    """The matrices do not have the shapes A^T * A needs."""


def _check(mat: Matrix, ans: Matrix, name: str) -> None:
    if mat.rows != mat.cols or mat.rows != ans.rows or mat.cols != ans.cols:
        raise DimensionError(f"{name}: dimension mismatch")


def matata_base(mat: Matrix, ans: Matrix) -> Matrix:
    """Store A^T * A in ``ans`` by forming the transpose explicitly.

    Raises :class:`DimensionError` unless ``mat`` is square and ``ans``
    has the same shape. Returns ``ans``.
    """
    _check(mat, ans, "matata_BASE")
    transpose = [[mat[k, j] for k in range(mat.rows)] for j in range(mat.cols)]
    for i, tra_row in enumerate(transpose):
        ans[i] = [sum(map(mul, tra_row, column)) for column in transpose]
    return ans


def matata_optm(mat: Matrix, ans: Matrix) -> Matrix:
    """Store A^T * A in ``ans`` by accumulating scaled rows of ``mat``.

    Gives the same result as :func:`matata_base` while walking memory in
    row order. Raises :class:`DimensionError` on a shape mismatch.
    """
    _check(mat, ans, "matata_OPTM")
    acc = [[0] * mat.cols for _ in range(mat.cols)]
    for row in (mat[i] for i in range(mat.rows)):
        for j, tik in enumerate(row):
            if tik:
                acc[j] = [a + tik * b for a, b in zip(acc[j], row)]
    for j, values in enumerate(acc):
        ans[j] = values
    return ans