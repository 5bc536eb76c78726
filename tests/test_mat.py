import pytest

from polymesher.mat import Mat3
from polymesher.vec import Vec3

M = Mat3.from_values([2.0, -1.0, 0.5, 1.0, 3.0, -2.0, 0.25, 4.0, 1.0])
N = Mat3(Vec3(1, 2, 0), Vec3(-1, 0.5, 3), (2, 1, 1))


def flat(m):
    return [value for row in m for value in row]


def test_identity_values():
    assert flat(Mat3.identity()) == [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_default_is_zero_matrix():
    assert flat(Mat3()) == [0.0] * 9


def test_from_values_row_major():
    values = [2.0, -1.0, 0.5, 1.0, 3.0, -2.0, 0.25, 4.0, 1.0]
    assert flat(M) == values
    assert M[1] == Vec3(1.0, 3.0, -2.0)
    assert len(list(M)) == 3


def test_from_values_wrong_length():
    with pytest.raises(ValueError):
        Mat3.from_values([1, 2, 3])


def test_tuple_rows_are_converted():
    assert N[2] == Vec3(2, 1, 1)


def test_transpose_swaps_entries_and_round_trips():
    t = M.transposed()
    assert all(t[i][j] == M[j][i] for i in range(3) for j in range(3))
    assert t.transposed() == M


def test_inverse_gives_identity():
    prod = M @ M.inversed()
    assert flat(prod) == pytest.approx(flat(Mat3.identity()), abs=1e-12)
    prod2 = N.inversed() @ N
    assert flat(prod2) == pytest.approx(flat(Mat3.identity()), abs=1e-12)


def test_inverse_of_singular_raises():
    singular = Mat3.from_values([1, 2, 3, 2, 4, 6, 0, 1, 1])
    with pytest.raises(ZeroDivisionError):
        singular.inversed()


def test_add_sub_neg():
    assert flat((M + N) - N) == pytest.approx(flat(M))
    assert flat(M + (-M)) == [0.0] * 9
    assert -(-M) == M


def test_scalar_ops():
    assert 3 * M == M * 3
    assert M * 2 == M + M
    assert flat((M * 5.0) / 5.0) == pytest.approx(flat(M))


def test_mul_by_matrix_is_type_error():
    assert M * 1 == M
    with pytest.raises(TypeError):
        M * N


def test_identity_is_neutral():
    assert Mat3.identity() @ M == M
    assert M @ Mat3.identity() == M
    v = Vec3(1.5, -2.0, 0.75)
    assert Mat3.identity() @ v == v


def test_matmul_vector_uses_rows():
    v = Vec3(0.5, 1.0, -1.5)
    result = M @ v
    assert list(result) == pytest.approx([row.dot(v) for row in M])


def test_product_transpose_rule():
    lhs = (M @ N).transposed()
    rhs = N.transposed() @ M.transposed()
    assert flat(lhs) == pytest.approx(flat(rhs))


def test_matmul_associative_with_vector():
    v = Vec3(1.0, -0.5, 2.0)
    assert list((M @ N) @ v) == pytest.approx(list(M @ (N @ v)))