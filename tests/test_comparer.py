from dataclasses import dataclass, field
from typing import List

import pytest

from geokernel import ArgumentNullError, Coordinate, CoordinateComparer, GeometryComparer, GeometryKind, geometry_kind


@dataclass
class Point:
    coordinate: Coordinate
    geometry_kind: GeometryKind = GeometryKind.POINT


@dataclass
class LineString:
    coordinates: List[Coordinate]
    geometry_kind: GeometryKind = GeometryKind.LINE_STRING


@dataclass
class LinearRing:
    coordinates: List[Coordinate]
    geometry_kind: str = "linear_ring"


@dataclass
class Polygon:
    shell: LinearRing
    holes: List[LinearRing] = field(default_factory=list)
    geometry_kind: GeometryKind = GeometryKind.POLYGON


class MultiPoint(list):
    geometry_kind = GeometryKind.MULTI_POINT


def ring(*points):
    return LinearRing([Coordinate(*point) for point in points])


def line(*points):
    return LineString([Coordinate(*point) for point in points])


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((0, 0), (1, 0), -1),
        ((1, 0), (0, 5), 1),
        ((1, 1), (1, 2), -1),
        ((1, 2), (1, 1), 1),
        ((1, 1), (1, 1), 0),
        ((1, 1, 5), (1, 1, 0), 0),
    ],
)
def test_coordinate_comparer_orders_by_x_then_y(first, second, expected):
    comparer = CoordinateComparer()

    assert comparer.compare(Coordinate(*first), Coordinate(*second)) == expected
    assert comparer(Coordinate(*first), Coordinate(*second)) == expected


def test_invalid_coordinates_compare_equal():
    comparer = CoordinateComparer()

    assert comparer.compare(Coordinate.UNDEFINED, Coordinate(1, 2)) == 0
    assert comparer.compare(Coordinate(1, 2), Coordinate.UNDEFINED) == 0


def test_coordinate_comparer_sort_key():
    unordered = [Coordinate(2, 0), Coordinate(0, 5), Coordinate(0, 1), Coordinate(1, 9)]

    ordered = sorted(unordered, key=CoordinateComparer().key)

    assert ordered == [Coordinate(0, 1), Coordinate(0, 5), Coordinate(1, 9), Coordinate(2, 0)]


def test_coordinate_comparer_rejects_none():
    with pytest.raises(ArgumentNullError):
        CoordinateComparer().compare(None, Coordinate(0, 0))


def test_geometry_kind_lookup():
    assert geometry_kind(Point(Coordinate(0, 0))) is GeometryKind.POINT
    assert geometry_kind(ring((0, 0))) is GeometryKind.LINEAR_RING
    with pytest.raises(TypeError):
        geometry_kind(object())


def test_kinds_order_by_precedence():
    comparer = GeometryComparer()
    point = Point(Coordinate(9, 9))
    multi_point = MultiPoint([Point(Coordinate(0, 0))])
    polygon = Polygon(ring((0, 0), (1, 0), (1, 1)))

    assert comparer.compare(point, multi_point) == -1
    assert comparer.compare(multi_point, point) == 1
    assert comparer.compare(polygon, line((0, 0))) == 1
    assert comparer.compare(ring((5, 5)), line((0, 0))) == -1


def test_points_compare_by_coordinate():
    comparer = GeometryComparer()

    assert comparer.compare(Point(Coordinate(0, 0)), Point(Coordinate(0, 1))) == -1
    assert comparer.compare(Point(Coordinate(3, 3)), Point(Coordinate(3, 3))) == 0


def test_line_strings_compare_member_by_member():
    comparer = GeometryComparer()

    assert comparer.compare(line((0, 0), (1, 1)), line((0, 0), (1, 2))) == -1
    assert comparer.compare(line((0, 0), (2, 0)), line((0, 0), (1, 9))) == 1
    assert comparer.compare(line((0, 0), (1, 1)), line((0, 0), (1, 1))) == 0


def test_strict_prefix_sorts_first():
    comparer = GeometryComparer()
    short = line((0, 0), (1, 1))
    long = line((0, 0), (1, 1), (2, 2))

    assert comparer.compare(short, long) == -1
    assert comparer.compare(long, short) == 1


def test_polygons_compare_shell_then_holes():
    comparer = GeometryComparer()
    shell = ring((0, 0), (10, 0), (10, 10))
    plain = Polygon(shell)
    holed = Polygon(shell, [ring((1, 1), (2, 1), (2, 2))])
    other_hole = Polygon(shell, [ring((1, 1), (3, 1), (2, 2))])

    assert comparer.compare(plain, holed) == -1
    assert comparer.compare(holed, other_hole) == -1
    assert comparer.compare(Polygon(ring((0, 0), (9, 0), (10, 10))), plain) == -1


def test_collections_compare_members():
    comparer = GeometryComparer()
    first = MultiPoint([Point(Coordinate(0, 0)), Point(Coordinate(1, 1))])
    second = MultiPoint([Point(Coordinate(0, 0)), Point(Coordinate(2, 0))])

    assert comparer.compare(first, second) == -1
    assert comparer.compare(second, first) == 1
    assert comparer.compare(first, MultiPoint(first)) == 0


def test_geometry_sort_key():
    geometries = [line((1, 0)), Point(Coordinate(5, 5)), line((0, 0)), Point(Coordinate(1, 1))]

    ordered = sorted(geometries, key=GeometryComparer().key)

    assert ordered == [Point(Coordinate(1, 1)), Point(Coordinate(5, 5)), line((0, 0)), line((1, 0))]


def test_geometry_comparer_rejects_none():
    with pytest.raises(ArgumentNullError):
        GeometryComparer().compare(Point(Coordinate(0, 0)), None)
    with pytest.raises(ArgumentNullError):
        GeometryComparer().compare_coordinates(None, [])
