import pytest

from thermobench.matata import DimensionError, matata_base, matata_optm
from thermobench.matvec import Matrix


def _sequential(size):
    mat = Matrix(size, size)
    mat.fill_sequential()
    return mat


def test_small_known_result():
    mat = _sequential(2)
    ans = matata_base(mat, Matrix(2, 2))
    assert ans.data == [4, 6, 6, 10]
    assert matata_optm(mat, Matrix(2, 2)) == ans


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 7, 9])
def test_base_and_optm_agree(size):
    mat = _sequential(size)
    assert matata_base(mat, Matrix(size, size)) == matata_optm(mat, Matrix(size, size))


@pytest.mark.parametrize("func", [matata_base, matata_optm])
def test_result_is_symmetric(func):
    size = 6
    ans = func(_sequential(size), Matrix(size, size))
    for i in range(size):
        for j in range(size):
            assert ans[i, j] == ans[j, i]


@pytest.mark.parametrize("func", [matata_base, matata_optm])
def test_identity_gives_identity(func):
    size = 4
    mat = Matrix(size, size)
    for i in range(size):
        mat[i, i] = 1
    assert func(mat, Matrix(size, size)) == mat


@pytest.mark.parametrize("func", [matata_base, matata_optm])
def test_input_unchanged(func):
    mat = _sequential(3)
    func(mat, Matrix(3, 3))
    assert mat.data == list(range(9))


@pytest.mark.parametrize("func", [matata_base, matata_optm])
def test_non_square_rejected(func):
    with pytest.raises(DimensionError, match="dimension mismatch"):
        func(Matrix(2, 3), Matrix(2, 3))


@pytest.mark.parametrize("func", [matata_base, matata_optm])
def test_answer_shape_mismatch(func):
    with pytest.raises(DimensionError):
        func(_sequential(3), Matrix(2, 2))


def test_overflow_wraps_identically():
    size = 100
    mat = _sequential(size)
    base = matata_base(mat, Matrix(size, size))
    optm = matata_optm(mat, Matrix(size, size))
    assert base == optm
    assert all(-(2**31) <= x < 2**31 for x in base.data)