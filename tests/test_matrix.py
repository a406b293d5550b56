import io
import math

import pytest

from densealg.matrix import Matrix
from densealg.vector import MAX_DIM, DimensionError, Vector


def as_lists(matrix):
    return [list(row) for row in matrix]


def identity(n):
    result = Matrix.zeros(n, n)
    for i in range(n):
        result[i, i] = 1
    return result


A = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
B = [[7.0, -1.0, 0.5], [2.0, 8.0, -3.0]]


def test_construct_shape_and_values():
    m = Matrix(A)
    assert m.shape == (2, 3)
    assert m.rows == 2
    assert m.cols == 3
    assert as_lists(m) == A


def test_ragged_rows_rejected():
    with pytest.raises(DimensionError):
        Matrix([[1, 2], [3]])


def test_empty_matrix():
    m = Matrix()
    assert m.shape == (0, 0)
    assert str(m) == "[]"


def test_zeros():
    m = Matrix.zeros(3, 2)
    assert m.shape == (3, 2)
    assert all(value == 0.0 for row in m for value in row)


def test_zeros_without_rows_keeps_columns():
    m = Matrix.zeros(0, 4)
    assert m.shape == (0, 4)


@pytest.mark.parametrize(
    "rows, cols",
    [(MAX_DIM, 1), (1, MAX_DIM), (1 << 10, 1 << 10), (-1, 2)],
)
def test_zeros_limits(rows, cols):
    with pytest.raises(DimensionError):
        Matrix.zeros(rows, cols)


def test_from_scalar():
    m = Matrix.from_scalar(2.5)
    assert m.shape == (1, 1)
    assert m[0, 0] == 2.5


def test_from_vector_is_column():
    v = Vector([1, 2, 3])
    m = Matrix.from_vector(v)
    assert m.shape == (3, 1)
    assert [row[0] for row in m] == list(v)


def test_from_empty_vector():
    assert Matrix.from_vector(Vector()).shape == (0, 1)


def test_copy_is_independent():
    m = Matrix(A)
    c = m.copy()
    c[0, 0] = 99
    assert m[0, 0] == A[0][0]
    assert c[0, 0] == 99.0
    assert as_lists(c)[1] == A[1]


def test_get_and_set_value():
    m = Matrix.zeros(2, 2)
    m[1, 0] = 3
    assert m[1, 0] == 3.0
    assert m[0, 1] == 0.0


def test_get_row_returns_vector():
    m = Matrix(A)
    assert list(m[1]) == A[1]


def test_set_row():
    m = Matrix(A)
    m[0] = [9, 9, 9]
    assert list(m[0]) == [9.0, 9.0, 9.0]


def test_set_row_wrong_length():
    m = Matrix(A)
    with pytest.raises(DimensionError):
        m[0] = [1, 2]
    assert list(m[0]) == A[0]
    assert m.shape == (2, 3)


def test_index_out_of_range():
    m = Matrix(A)
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, 3]
    assert m[1, 2] == 6.0
    assert as_lists(m) == A


def test_non_integer_index():
    m = Matrix(A)
    with pytest.raises(TypeError):
        m[0.5, 1]
    assert m[0, 1] == 2.0


def test_str_format():
    m = Matrix([[1, 2], [3, 4]])
    assert str(m) == "[[ 1.00000, 2.00000],\n [ 3.00000, 4.00000]]"


def test_write_matches_str():
    m = Matrix(A)
    stream = io.StringIO()
    m.write(stream)
    assert stream.getvalue() == str(m)


def test_repr_roundtrip_values():
    m = Matrix(A)
    assert repr(m) == f"Matrix({A!r})"


def test_add_sub_roundtrip():
    a, b = Matrix(A), Matrix(B)
    assert as_lists((a + b) - b) == A


def test_add_is_elementwise():
    a, b = Matrix(A), Matrix(B)
    total = a + b
    assert total[1, 2] == A[1][2] + B[1][2]
    assert total[0, 1] == A[0][1] + B[0][1]


def test_mul_div_roundtrip():
    a = Matrix(A)
    b = Matrix([[2, 4, 8], [0.5, 0.25, 16]])
    assert as_lists((a * b) / b) == A


def test_sub_self_is_zero():
    a = Matrix(A)
    assert as_lists(a - a) == as_lists(Matrix.zeros(2, 3))


def test_shape_mismatch():
    a = Matrix(A)
    with pytest.raises(DimensionError):
        a + Matrix.zeros(3, 2)
    with pytest.raises(DimensionError):
        a * Matrix.zeros(2, 2)


def test_zero_row_shape_mismatch():
    with pytest.raises(DimensionError):
        Matrix.zeros(0, 2) - Matrix.zeros(0, 3)


def test_division_by_zero_is_ieee():
    a = Matrix([[1, -1, 0]])
    q = a / Matrix.zeros(1, 3)
    assert q[0, 0] == math.inf
    assert q[0, 1] == -math.inf
    assert math.isnan(q[0, 2])


def test_vector_broadcasts_by_row():
    a = Matrix(A)
    v = Vector([10, 20])
    shifted = a + v
    assert list(shifted[0]) == [value + 10 for value in A[0]]
    assert list(shifted[1]) == [value + 20 for value in A[1]]
    assert as_lists(shifted - v) == A


def test_vector_mul_div_roundtrip():
    a = Matrix(A)
    v = Vector([4, 0.5])
    assert as_lists((a * v) / v) == A


def test_vector_length_mismatch():
    with pytest.raises(DimensionError):
        Matrix(A) + Vector([1, 2, 3])


def test_scalar_operations_roundtrip():
    a = Matrix(A)
    assert as_lists((a + 3) - 3) == A
    assert as_lists((a * 4) / 4) == A


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Matrix(A) + "x"


def test_dot_known_product():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    assert as_lists(a.dot(b)) == [[19.0, 22.0], [43.0, 50.0]]


def test_dot_identity():
    a = Matrix(A)
    assert as_lists(identity(2).dot(a)) == A
    assert as_lists(a @ identity(3)) == A


def test_dot_shape():
    a = Matrix(A)
    b = Matrix([[1, 2], [3, 4], [5, 6], ])
    assert (a @ b).shape == (2, 2)
    assert (b @ a).shape == (3, 3)


def test_dot_associative_on_integers():
    a = Matrix(A)
    b = Matrix([[1, 0], [2, -1], [0, 3]])
    c = Matrix([[2, 1, 1], [0, -2, 4]])
    assert as_lists((a @ b) @ c) == as_lists(a @ (b @ c))


def test_dot_empty_inner_dimension():
    result = Matrix.zeros(2, 0) @ Matrix.zeros(0, 3)
    assert result.shape == (2, 3)
    assert all(value == 0.0 for row in result for value in row)


def test_dot_inner_mismatch():
    with pytest.raises(DimensionError):
        Matrix(A) @ Matrix(A)


def test_dot_vector():
    a = Matrix(A)
    v = Vector([1, 0, 0])
    result = a.dot(v)
    assert list(result) == [A[0][0], A[1][0]]
    assert list(identity(3) @ Vector([7, 8, 9])) == [7.0, 8.0, 9.0]


def test_dot_vector_mismatch():
    with pytest.raises(DimensionError):
        Matrix(A).dot(Vector([1, 2]))


def test_matrix_not_hashable():
    with pytest.raises(TypeError):
        hash(Matrix(A))