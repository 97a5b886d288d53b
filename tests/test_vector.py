import math

import pytest

from geokernel import (
    ArgumentNullError,
    CoordinateVector,
    PrecisionModel,
    cross_product_3d,
    dot_product_2d,
    dot_product_3d,
    perp_dot_product,
)


def test_null_and_invalid_vectors():
    assert CoordinateVector.NULL.is_null
    assert CoordinateVector(0.0, 0.0).is_null
    assert not CoordinateVector(math.nan, 0.0).is_valid
    assert str(CoordinateVector.NULL) == "NULL"
    assert str(CoordinateVector(math.nan, 1.0)) == "INVALID"
    assert str(CoordinateVector(1.0, 2.5, 0.0)) == "(1, 2.5, 0)"


def test_vector_arithmetic():
    first = CoordinateVector(1.0, 2.0, 3.0)
    second = CoordinateVector(4.0, -1.0, 0.5)

    assert first + second == CoordinateVector(5.0, 1.0, 3.5)
    assert first.add(second) == first + second
    assert first - second == CoordinateVector(-3.0, 3.0, 2.5)
    assert first.subtract(second) == first - second
    assert 2 * first == CoordinateVector(2.0, 4.0, 6.0)
    assert first * 2 == CoordinateVector(2.0, 4.0, 6.0)
    assert first.multiply(0.5) == CoordinateVector(0.5, 1.0, 1.5)
    assert -first == CoordinateVector(-1.0, -2.0, -3.0)


def test_dot_products():
    first = CoordinateVector(1.0, 2.0, 3.0)
    second = CoordinateVector(4.0, -5.0, 6.0)

    assert first.dot(second) == 12.0
    assert first * second == 12.0
    assert dot_product_3d(1.0, 2.0, 3.0, 4.0, -5.0, 6.0) == 12.0
    assert dot_product_2d(1.0, 2.0, 3.0, 4.0) == 11.0


def test_cross_and_perp_dot_products():
    x_axis = CoordinateVector(1.0, 0.0, 0.0)
    y_axis = CoordinateVector(0.0, 1.0, 0.0)

    assert x_axis.cross(y_axis) == CoordinateVector(0.0, 0.0, 1.0)
    assert y_axis.cross(x_axis) == CoordinateVector(0.0, 0.0, -1.0)
    assert x_axis.perp_dot(y_axis) == 1.0
    assert perp_dot_product(2.0, 1.0, 1.0, 3.0) == 5.0
    assert cross_product_3d(1.0, 0.0, 0.0, 0.0, 1.0, 0.0) == CoordinateVector(0.0, 0.0, 1.0)


def test_length_and_normalize():
    vector = CoordinateVector(3.0, 4.0, 0.0)

    assert vector.length == 5.0
    unit = vector.normalize()
    assert unit.length == pytest.approx(1.0)
    assert unit == CoordinateVector(0.6, 0.8, 0.0)


def test_normalizing_the_null_vector_yields_nan():
    result = CoordinateVector.NULL.normalize()

    assert not result.is_valid


def test_vector_distance():
    assert CoordinateVector(0.0, 0.0).distance(CoordinateVector(3.0, 4.0)) == pytest.approx(5.0)


def test_parallel_and_perpendicular():
    first = CoordinateVector(1.0, 2.0, 3.0)

    assert first.is_parallel(CoordinateVector(2.0, 4.0, 6.0))
    assert not first.is_parallel(CoordinateVector(2.0, 4.0, 7.0))
    assert CoordinateVector(1.0, 0.0).is_perpendicular(CoordinateVector(0.0, 5.0))
    assert not CoordinateVector(1.0, 1.0).is_perpendicular(CoordinateVector(1.0, 0.0))
    assert CoordinateVector(1.0, 1.0).is_perpendicular(CoordinateVector(1.0, -1.001), PrecisionModel(scale=10))


@pytest.mark.parametrize("method", ["add", "subtract", "dot", "cross", "perp_dot", "distance", "is_parallel"])
def test_vector_operations_reject_none(method):
    with pytest.raises(ArgumentNullError):
        getattr(CoordinateVector(1.0, 2.0), method)(None)


def test_vector_operators_reject_none():
    with pytest.raises(ArgumentNullError):
        CoordinateVector(1.0, 2.0) + None
    with pytest.raises(ArgumentNullError):
        CoordinateVector(1.0, 2.0) * None
