import pytest

from matugen.mathutil import (
    difference_degrees,
    lerp,
    matrix_multiply,
    rotation_direction,
    sanitize_degrees_double,
    sanitize_degrees_int,
)


def test_lerp_endpoints():
    assert lerp(3.0, 11.0, 0.0) == 3.0
    assert lerp(3.0, 11.0, 1.0) == 11.0


def test_lerp_is_between_endpoints():
    value = lerp(3.0, 11.0, 0.25)
    assert 3.0 < value < 11.0


def test_rotation_direction_increasing():
    assert rotation_direction(0.0, 90.0) == 1.0


def test_rotation_direction_decreasing():
    assert rotation_direction(0.0, 270.0) == -1.0


def test_rotation_direction_tie_is_positive():
    assert rotation_direction(10.0, 190.0) == 1.0


@pytest.mark.parametrize("a,b", [(10.0, 350.0), (0.0, 180.0), (45.0, 300.0), (-30.0, 720.0)])
def test_difference_degrees_symmetric_and_bounded(a, b):
    d = difference_degrees(a, b)
    assert d == pytest.approx(difference_degrees(b, a))
    assert 0.0 <= d <= 180.0


def test_difference_degrees_full_turn_is_zero():
    assert difference_degrees(37.0, 37.0 + 360.0) == pytest.approx(0.0)


def test_difference_degrees_opposite():
    assert difference_degrees(0.0, 180.0) == 180.0


@pytest.mark.parametrize("degrees", [-721, -360, -1, 0, 1, 359, 360, 725])
def test_sanitize_degrees_int_range_and_period(degrees):
    result = sanitize_degrees_int(degrees)
    assert 0 <= result < 360
    assert sanitize_degrees_int(degrees + 360) == result
    assert (result - degrees) % 360 == 0


@pytest.mark.parametrize("degrees", [-721.5, -360.0, -0.5, 0.0, 12.25, 359.5, 360.0, 725.0])
def test_sanitize_degrees_double_range_and_period(degrees):
    result = sanitize_degrees_double(degrees)
    assert 0.0 <= result < 360.0
    assert sanitize_degrees_double(degrees + 360.0) == pytest.approx(result)


def test_matrix_multiply_identity():
    identity = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    assert matrix_multiply([2.0, 3.0, 4.0], identity) == (2.0, 3.0, 4.0)


def test_matrix_multiply_permutation():
    swap = [[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]
    assert matrix_multiply([2.0, 3.0, 4.0], swap) == (3.0, 2.0, 4.0)