import math

import pytest

from linalgkit.vector import DimensionError, Vector


def test_zeros_has_dimension_and_zero_entries():
    v = Vector.zeros(2)
    assert len(v) == 2
    assert list(v) == [0.0, 0.0]


@pytest.mark.parametrize("dimension", [0, -1])
def test_zeros_rejects_non_positive_dimension(dimension):
    with pytest.raises(DimensionError):
        Vector.zeros(dimension)


def test_empty_values_rejected():
    with pytest.raises(DimensionError):
        Vector([])


def test_compare_zero_vectors():
    assert (Vector.zeros(2) == Vector.zeros(2)) is True
    assert (Vector.zeros(2) == Vector([0.0, 0.0])) is True
    assert (Vector.zeros(2) == Vector([0.0, 1.0])) is False


def test_compare_different_dimensions_is_false():
    assert (Vector.zeros(2) == Vector.zeros(3)) is False


def test_from_values_matches_assigned():
    v = Vector([1.0, 2.0])
    d = Vector.zeros(2)
    d[0] = 1
    d[1] = 2
    assert v == d


def test_copy_is_equal_and_independent():
    d = Vector([1, 2])
    v = d.copy()
    assert v == d
    v[0] = 7
    assert d[0] == 1.0


def test_sum():
    assert Vector([3, 3]) + Vector([1, 2]) == Vector([4, 5])


def test_sum_in_place_modifies_left():
    a = Vector([3, 3])
    a += Vector([1, 2])
    assert a == Vector([4, 5])


def test_subtract():
    assert Vector([3, 3]) - Vector([1, 2]) == Vector([2, 1])


def test_subtract_preserves_operands():
    a = Vector([3, 3])
    b = Vector([1, 2])
    a - b
    assert a == Vector([3, 3])
    assert b == Vector([1, 2])


def test_mismatched_add_raises():
    with pytest.raises(DimensionError):
        Vector([1, 2]) + Vector([1, 2, 3])


def test_mismatched_subtract_raises():
    with pytest.raises(DimensionError):
        Vector([1, 2]) - Vector([1])


def test_multiply():
    d = Vector([1, 2])
    assert d * 2 == Vector([2, 4])
    assert 2 * d == Vector([2, 4])
    assert d == Vector([1, 2])


def test_multiply_in_place():
    d = Vector([1, 2])
    d *= 2
    assert d == Vector([2, 4])


def test_cross_product():
    a = Vector([1, 3, 2])
    b = Vector([1.5, 4, 13])
    assert a.cross(b) == Vector([31, 10, -0.5])


def test_cross_requires_three_dimensions():
    with pytest.raises(DimensionError):
        Vector([1, 2]).cross(Vector([3, 4]))


def test_length():
    v = Vector([31, 10, -0.5])
    assert v.norm() == math.sqrt(31 * 31 + 100 + 0.25)


def test_unit_vector_has_length_one():
    v = Vector([31, 10, -0.5])
    assert v.unit().norm() == pytest.approx(1.0)
    assert v == Vector([31, 10, -0.5])


def test_normalize_in_place():
    v = Vector([31, 10, -0.5])
    v.normalize()
    assert v.norm() == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector.zeros(3).normalize()


def test_dot_product():
    assert Vector([1, 3, 2]).dot(Vector([1.5, 4, 13])) == 39.5


def test_dot_mismatched_raises():
    with pytest.raises(DimensionError):
        Vector([1, 2]).dot(Vector([1, 2, 3]))


def test_projection_onto_axis():
    a = Vector([1.0, 1.0])
    b = Vector([2.0, 0.0])
    projection = a.project(b)
    assert projection[0] != 0.0
    assert projection[1] == 0.0


def test_projection_residual_is_orthogonal():
    a = Vector([3.0, -2.0, 5.0])
    base = Vector([1.0, 4.0, 2.0])
    residual = a - a.project(base)
    assert residual.dot(base) == pytest.approx(0.0, abs=1e-12)


def test_str_format():
    assert str(Vector([1, 2])) == "{1.000000, 2.000000}"


def test_repr_round_trip_values():
    v = Vector([1.5, -2])
    assert repr(v) == "Vector([1.5, -2.0])"


def test_iteration_and_indexing_agree():
    v = Vector([4, 5, 6])
    assert list(v) == [v[0], v[1], v[2]]