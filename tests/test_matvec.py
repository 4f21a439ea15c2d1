import io

import pytest

from thermobench.matvec import Matrix, Vector, read_matrix, read_vector


def test_matrix_rejects_non_positive_dimensions():
    with pytest.raises(ValueError, match="Invalid rows or cols"):
        Matrix(0, 3)
    with pytest.raises(ValueError):
        Matrix(2, -1)


def test_vector_rejects_non_positive_length():
    with pytest.raises(ValueError, match="Invalid length"):
        Vector(0)


def test_fill_sequential_is_row_major():
    mat = Matrix(2, 3)
    mat.fill_sequential()
    assert mat.data == list(range(6))
    assert mat[1, 2] == 5
    assert mat[1] == [3, 4, 5]


def test_row_assignment_and_element_access():
    mat = Matrix(2, 3)
    mat[1] = [7, 8, 9]
    assert mat[1] == [7, 8, 9]
    assert mat[1, 2] == 9
    assert mat[0] == [0, 0, 0]


def test_row_assignment_with_wrong_length():
    mat = Matrix(2, 3)
    mat[0] = [4, 5, 6]
    with pytest.raises(ValueError):
        mat[0] = [1, 2]
    assert mat[0] == [4, 5, 6]
    assert mat.data == [4, 5, 6, 0, 0, 0]


def test_out_of_range_index():
    mat = Matrix(2, 2)
    mat.fill_sequential()
    with pytest.raises(IndexError):
        mat[2, 0]
    with pytest.raises(IndexError):
        mat[0, 2]
    assert mat[1, 1] == 3
    vec = Vector(3)
    vec.fill_sequential()
    with pytest.raises(IndexError):
        vec[3]
    assert vec[2] == 2


def test_values_wrap_to_32_bits():
    mat = Matrix(1, 1)
    mat[0, 0] = 2**31
    assert mat[0, 0] == -(2**31)
    vec = Vector(1)
    vec[0] = 2**32 + 5
    assert vec[0] == 5


def test_matrix_write_format():
    mat = Matrix(2, 2)
    mat.fill_sequential()
    out = io.StringIO()
    mat.write(out)
    assert out.getvalue() == "2 x 2 matrix\n   0:      0      1 \n   1:      2      3 \n"


def test_vector_write_format():
    vec = Vector(2)
    vec.fill_sequential()
    out = io.StringIO()
    vec.write(out)
    assert out.getvalue() == "2 x 1 vector\n   0:    0\n   1:    1\n"
    assert len(vec) == 2


def test_read_matrix(tmp_path):
    path = tmp_path / "mat.txt"
    path.write_text("2 3\n1 2 3\n4 5 6\n")
    mat = read_matrix(path)
    assert (mat.rows, mat.cols) == (2, 3)
    assert mat[1, 0] == 4
    assert mat.data == [1, 2, 3, 4, 5, 6]


def test_read_vector(tmp_path):
    path = tmp_path / "vec.txt"
    path.write_text("3\n10 -20 30\n")
    vec = read_vector(path)
    assert len(vec) == 3
    assert vec.data == [10, -20, 30]


def test_read_matrix_short_data(tmp_path):
    path = tmp_path / "mat.txt"
    path.write_text("2 2\n1 2 3\n")
    with pytest.raises(ValueError):
        read_matrix(path)


def test_read_matrix_bad_dimensions(tmp_path):
    path = tmp_path / "mat.txt"
    path.write_text("0 2\n")
    with pytest.raises(ValueError, match="Invalid rows or cols"):
        read_matrix(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_vector(tmp_path / "missing.txt")


def test_write_then_read_round_trip(tmp_path):
    mat = Matrix(3, 2)
    mat.fill_sequential()
    path = tmp_path / "round.txt"
    path.write_text(f"{mat.rows} {mat.cols}\n" + " ".join(map(str, mat.data)))
    assert read_matrix(path) == mat