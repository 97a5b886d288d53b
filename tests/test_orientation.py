import math

import pytest

from geokernel import ArgumentNullError, Coordinate, Orientation, PrecisionModel, angle, orientation


@pytest.mark.parametrize(
    "points, expected",
    [
        (((0, 0), (1, 0), (0, 1)), Orientation.COUNTERCLOCKWISE),
        (((0, 0), (0, 1), (1, 0)), Orientation.CLOCKWISE),
        (((0, 0), (1, 1), (2, 2)), Orientation.COLLINEAR),
        (((0, 0), (1, 1), (-3, -3)), Orientation.COLLINEAR),
        (((0, 0), (0, 0), (0, 0)), Orientation.COLLINEAR),
    ],
)
def test_orientation_of_simple_turns(points, expected):
    origin, first, second = (Coordinate(*point) for point in points)

    assert orientation(origin, first, second) is expected


def test_orientation_with_nan_is_undefined():
    result = orientation(Coordinate(0, 0), Coordinate(math.nan, 1), Coordinate(1, 0))

    assert result is Orientation.UNDEFINED


def test_orientation_tolerance_follows_operand_magnitude():
    offset = 3e-8

    near_origin = orientation(Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2 + offset))
    far_away = orientation(
        Coordinate(1e8, 1e8), Coordinate(1e8 + 1, 1e8 + 1), Coordinate(1e8 + 2, 1e8 + 2 + offset)
    )

    assert near_origin is Orientation.COUNTERCLOCKWISE
    assert far_away is Orientation.COLLINEAR


def test_orientation_with_fixed_precision_model():
    model = PrecisionModel(scale=10)

    assert orientation(Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0.01), model) is Orientation.COLLINEAR
    assert orientation(Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0.2), model) is Orientation.COUNTERCLOCKWISE


def test_orientation_rejects_none():
    with pytest.raises(ArgumentNullError):
        orientation(Coordinate(0, 0), None, Coordinate(1, 1))


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((1, 0), (0, 1), math.pi / 2),
        ((1, 0), (2, 0), 0.0),
        ((1, 0), (-1, 0), math.pi),
        ((1, 0), (0.5, math.sqrt(3) / 2), math.pi / 3),
        ((3, 0), (0, -4), math.pi / 2),
    ],
)
def test_angle(first, second, expected):
    result = angle(Coordinate(0, 0), Coordinate(*first), Coordinate(*second))

    assert result == pytest.approx(expected, abs=1e-7)


def test_angle_with_zero_length_ray_is_nan():
    assert math.isnan(angle(Coordinate(1, 1), Coordinate(1, 1), Coordinate(2, 2)))


def test_angle_with_invalid_coordinate_is_nan():
    assert math.isnan(angle(Coordinate(0, 0), Coordinate.UNDEFINED, Coordinate(2, 2)))
