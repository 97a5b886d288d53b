"""Axis-aligned bounding envelopes and their spatial relation predicates."""

from __future__ import annotations

import math
from typing import ClassVar, Iterable, Optional, Tuple

import numpy as np

from .coordinate import Coordinate, array_to_coordinates
from .errors import require

Bounds = Tuple[float, float, float, float, float, float]


def _min(first: float, second: float) -> float:
    if math.isnan(first) or math.isnan(second):
        return math.nan
    return first if first <= second else second


def _max(first: float, second: float) -> float:
    if math.isnan(first) or math.isnan(second):
        return math.nan
    return first if first >= second else second


class Envelope:
    """Immutable axis-aligned box given by a minimum and a maximum coordinate.

    The constructor takes the extent of every axis as an unordered pair and
    stores the per-axis minimum and maximum, so ``minimum <= maximum`` holds
    on each axis by construction.  Zero-extent envelopes are allowed and are
    reported as empty.
    """

    __slots__ = ("_minimum", "_maximum")

    INFINITY: ClassVar["Envelope"]

    def __init__(
        self,
        first_x: float,
        second_x: float,
        first_y: float,
        second_y: float,
        first_z: float = 0.0,
        second_z: float = 0.0,
    ) -> None:
        self._minimum = Coordinate(_min(first_x, second_x), _min(first_y, second_y), _min(first_z, second_z))
        self._maximum = Coordinate(_max(first_x, second_x), _max(first_y, second_y), _max(first_z, second_z))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_maximum"):
            raise AttributeError("Envelope is immutable")
        object.__setattr__(self, name, value)

    # accessors

    @property
    def minimum(self) -> Coordinate:
        return self._minimum

    @property
    def maximum(self) -> Coordinate:
        return self._maximum

    @property
    def min_x(self) -> float:
        return self._minimum.x

    @property
    def min_y(self) -> float:
        return self._minimum.y

    @property
    def min_z(self) -> float:
        return self._minimum.z

    @property
    def max_x(self) -> float:
        return self._maximum.x

    @property
    def max_y(self) -> float:
        return self._maximum.y

    @property
    def max_z(self) -> float:
        return self._maximum.z

    @property
    def center(self) -> Coordinate:
        return Coordinate(
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2,
            (self.min_z + self.max_z) / 2,
        )

    @property
    def is_empty(self) -> bool:
        return self._minimum.equals(self._maximum)

    @property
    def is_valid(self) -> bool:
        return self._minimum.is_valid and self._maximum.is_valid

    @property
    def is_planar(self) -> bool:
        return self.min_z == self.max_z

    @property
    def surface(self) -> float:
        """Planar area, or the box surface area for a three-dimensional envelope."""

        dx = self.max_x - self.min_x
        dy = self.max_y - self.min_y
        if self.is_planar:
            return dx * dy
        dz = self.max_z - self.min_z
        return 2 * dx * dy + 2 * dx * dz + 2 * dy * dz

    @property
    def volume(self) -> float:
        return (self.max_x - self.min_x) * (self.max_y - self.min_y) * (self.max_z - self.min_z)

    def _bounds(self) -> Bounds:
        return (self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z)

    # predicates

    def contains(self, other) -> bool:
        """Whether ``other`` (an envelope or a coordinate) lies inside, boundary included."""

        require(other, "other")
        if isinstance(other, Coordinate):
            return _bounds_contain_point(self._bounds(), other)
        return _bounds_contain(self._bounds(), _as_bounds(other))

    def disjoint(self, other: "Envelope") -> bool:
        require(other, "other")
        return _bounds_disjoint(self._bounds(), other._bounds())

    def intersects(self, other: "Envelope") -> bool:
        require(other, "other")
        return not self.disjoint(other)

    def crosses(self, other: "Envelope") -> bool:
        require(other, "other")
        return not self.disjoint(other) and not self.equals(other)

    def overlaps(self, other: "Envelope") -> bool:
        # same definition as crosses
        require(other, "other")
        return not self.disjoint(other) and not self.equals(other)

    def touches(self, other: "Envelope") -> bool:
        require(other, "other")
        return _bounds_touch(self._bounds(), other._bounds())

    def within(self, other: "Envelope") -> bool:
        require(other, "other")
        return other.contains(self)

    def equals(self, other: object) -> bool:
        if other is None or not isinstance(other, Envelope):
            return False
        if self is other:
            return True
        return self._minimum.equals(other._minimum) and self._maximum.equals(other._maximum)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Envelope):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._minimum, self._maximum))

    def __repr__(self) -> str:
        return (
            f"Envelope({self.min_x!r}, {self.max_x!r}, {self.min_y!r}, "
            f"{self.max_y!r}, {self.min_z!r}, {self.max_z!r})"
        )

    def __str__(self) -> str:
        if not self.is_valid:
            return "INVALID"
        if self.is_empty:
            return f"EMPTY ({self.min_x:g} {self.min_y:g} {self.min_z:g})"
        return (
            f"({self.min_x:g} {self.min_y:g} {self.min_z:g}, "
            f"{self.max_x:g} {self.max_y:g} {self.max_z:g})"
        )

    # reductions

    @classmethod
    def from_coordinates(cls, coordinates: Optional[Iterable[Optional[Coordinate]]]) -> Optional["Envelope"]:
        """Bounding envelope of ``coordinates``; ``None`` when there is nothing to bound."""

        if coordinates is None:
            return None
        bounds = _collect_bounds(coordinates)
        if bounds is None:
            return None
        return cls(*bounds)

    @classmethod
    def from_envelopes(cls, envelopes: Optional[Iterable[Optional["Envelope"]]]) -> Optional["Envelope"]:
        if envelopes is None:
            return None
        present = [envelope for envelope in envelopes if envelope is not None]
        if not present:
            return None
        return cls(
            min(envelope.min_x for envelope in present),
            max(envelope.max_x for envelope in present),
            min(envelope.min_y for envelope in present),
            max(envelope.max_y for envelope in present),
            min(envelope.min_z for envelope in present),
            max(envelope.max_z for envelope in present),
        )

    @classmethod
    def from_array(cls, values: np.ndarray) -> Optional["Envelope"]:
        """Bounding envelope of an ``(N, 2)`` or ``(N, 3)`` coordinate array."""

        return cls.from_coordinates(array_to_coordinates(values))


Envelope.INFINITY = Envelope(-math.inf, math.inf, -math.inf, math.inf, -math.inf, math.inf)


def _as_bounds(value: Envelope) -> Bounds:
    if not isinstance(value, Envelope):
        raise TypeError(f"expected an Envelope or a Coordinate, got {type(value).__name__}")
    return value._bounds()


def _pair_bounds(first: Coordinate, second: Coordinate) -> Bounds:
    return (
        _min(first.x, second.x),
        _max(first.x, second.x),
        _min(first.y, second.y),
        _max(first.y, second.y),
        _min(first.z, second.z),
        _max(first.z, second.z),
    )


def _collect_bounds(coordinates: Iterable[Optional[Coordinate]]) -> Optional[Bounds]:
    min_x = min_y = min_z = math.inf
    max_x = max_y = max_z = -math.inf
    seen = False
    for coordinate in coordinates:
        if coordinate is None:
            continue
        seen = True
        if coordinate.x < min_x:
            min_x = coordinate.x
        if coordinate.y < min_y:
            min_y = coordinate.y
        if coordinate.z < min_z:
            min_z = coordinate.z
        if coordinate.x > max_x:
            max_x = coordinate.x
        if coordinate.y > max_y:
            max_y = coordinate.y
        if coordinate.z > max_z:
            max_z = coordinate.z
    if not seen:
        return None
    return (min_x, max_x, min_y, max_y, min_z, max_z)


def _bounds_contain_point(bounds: Bounds, point: Coordinate) -> bool:
    min_x, max_x, min_y, max_y, min_z, max_z = bounds
    return min_x <= point.x <= max_x and min_y <= point.y <= max_y and min_z <= point.z <= max_z


def _bounds_contain(outer: Bounds, inner: Bounds) -> bool:
    return (
        outer[0] <= inner[0]
        and inner[1] <= outer[1]
        and outer[2] <= inner[2]
        and inner[3] <= outer[3]
        and outer[4] <= inner[4]
        and inner[5] <= outer[5]
    )


def _bounds_disjoint(first: Bounds, second: Bounds) -> bool:
    return (
        first[1] < second[0]
        or first[0] > second[1]
        or first[3] < second[2]
        or first[2] > second[3]
        or first[5] < second[4]
        or first[4] > second[5]
    )


def _bounds_equal(first: Bounds, second: Bounds) -> bool:
    return all(mine == theirs for mine, theirs in zip(first, second))


def _bounds_touch(first: Bounds, second: Bounds) -> bool:
    if _bounds_disjoint(first, second):
        return False
    for axis in range(3):
        low, high = 2 * axis, 2 * axis + 1
        if first[low] == second[high] or first[high] == second[low]:
            return True
    return False


# coordinate-pair overloads: each box is given by two opposite corners


def box_contains_coordinate(first: Coordinate, second: Coordinate, coordinate: Coordinate) -> bool:
    require(first, "first")
    require(second, "second")
    require(coordinate, "coordinate")
    return _bounds_contain_point(_pair_bounds(first, second), coordinate)


def contains_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    """Whether the box ``first``/``second`` contains the box ``third``/``fourth``."""

    _require_corners(first, second, third, fourth)
    return _bounds_contain(_pair_bounds(first, second), _pair_bounds(third, fourth))


def disjoint_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    _require_corners(first, second, third, fourth)
    return _bounds_disjoint(_pair_bounds(first, second), _pair_bounds(third, fourth))


def intersects_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    return not disjoint_coordinates(first, second, third, fourth)


def equals_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    _require_corners(first, second, third, fourth)
    return _bounds_equal(_pair_bounds(first, second), _pair_bounds(third, fourth))


def crosses_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    return not disjoint_coordinates(first, second, third, fourth) and not equals_coordinates(
        first, second, third, fourth
    )


def overlaps_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    return crosses_coordinates(first, second, third, fourth)


def touches_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    _require_corners(first, second, third, fourth)
    return _bounds_touch(_pair_bounds(first, second), _pair_bounds(third, fourth))


def within_coordinates(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> bool:
    return contains_coordinates(third, fourth, first, second)


def _require_corners(first: Coordinate, second: Coordinate, third: Coordinate, fourth: Coordinate) -> None:
    require(first, "first")
    require(second, "second")
    require(third, "third")
    require(fourth, "fourth")


# coordinate collection overloads


def collection_contains(coordinates: Optional[Iterable[Optional[Coordinate]]], coordinate: Coordinate) -> bool:
    """Whether ``coordinate`` lies in the bounding box of ``coordinates``."""

    require(coordinate, "coordinate")
    if coordinates is None:
        return False
    bounds = _collect_bounds(coordinates)
    if bounds is None:
        return False
    return _bounds_contain_point(bounds, coordinate)


def collections_disjoint(
    first: Iterable[Optional[Coordinate]], second: Iterable[Optional[Coordinate]]
) -> bool:
    require(first, "first")
    require(second, "second")
    first_bounds = _collect_bounds(first)
    second_bounds = _collect_bounds(second)
    if first_bounds is None or second_bounds is None:
        return True
    return _bounds_disjoint(first_bounds, second_bounds)


def collections_intersect(
    first: Iterable[Optional[Coordinate]], second: Iterable[Optional[Coordinate]]
) -> bool:
    return not collections_disjoint(first, second)


__all__ = [
    "Envelope",
    "box_contains_coordinate",
    "collection_contains",
    "collections_disjoint",
    "collections_intersect",
    "contains_coordinates",
    "crosses_coordinates",
    "disjoint_coordinates",
    "equals_coordinates",
    "intersects_coordinates",
    "overlaps_coordinates",
    "touches_coordinates",
    "within_coordinates",
]
