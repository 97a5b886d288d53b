"""Immutable coordinate value type and the free functions built on it."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable, List, Optional, Sequence, Union

import numpy as np

from .errors import ArgumentNullError, ArgumentOutOfRangeError, require

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .precision import PrecisionModel
    from .vector import CoordinateVector

logger = logging.getLogger(__name__)

_INVALID_STRING = "INVALID"


@dataclass(frozen=True, eq=False)
class Coordinate:
    """A location in up to three dimensions.

    Equality and hashing depend on the three components only.  A coordinate
    with a NaN component is *invalid*; ``(0, 0, 0)`` is *empty*.  The
    :attr:`UNDEFINED` sentinel is returned by operations that have no
    meaningful result (for example the centroid of no coordinates).
    """

    x: float
    y: float
    z: float = 0.0

    EMPTY: ClassVar["Coordinate"]
    UNDEFINED: ClassVar["Coordinate"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @property
    def is_empty(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    @property
    def is_valid(self) -> bool:
        return not (math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z))

    def equals(self, other: object) -> bool:
        """Componentwise equality against a coordinate or a vector."""

        if other is None:
            return False
        if self is other:
            return True
        components = _components(other)
        if components is None:
            return False
        return self.x == components[0] and self.y == components[1] and self.z == components[2]

    def __eq__(self, other: object) -> bool:
        if other is not None and _components(other) is None:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        if not self.is_valid:
            return _INVALID_STRING
        return f"({self.x:g} {self.y:g} {self.z:g})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def add(self, vector: "CoordinateVector") -> "Coordinate":
        """Return this coordinate translated by ``vector``."""

        require(vector, "vector")
        return Coordinate(self.x + vector.x, self.y + vector.y, self.z + vector.z)

    def subtract(self, other: Union["Coordinate", "CoordinateVector"]):
        """Translate by the negated vector, or take the difference of two coordinates.

        Subtracting a :class:`~geokernel.vector.CoordinateVector` yields a
        coordinate; subtracting a coordinate yields the displacement vector
        from ``other`` to ``self``.
        """

        from .vector import CoordinateVector

        require(other, "other")
        if isinstance(other, CoordinateVector):
            return Coordinate(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Coordinate):
            return CoordinateVector(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError(f"cannot subtract {type(other).__name__} from Coordinate")

    def __add__(self, other: object):
        from .vector import CoordinateVector

        if other is None:
            raise ArgumentNullError("vector")
        if not isinstance(other, CoordinateVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object):
        from .vector import CoordinateVector

        if other is None:
            raise ArgumentNullError("other")
        if not isinstance(other, (Coordinate, CoordinateVector)):
            return NotImplemented
        return self.subtract(other)

    def distance(self, other: "Coordinate") -> float:
        return distance(self, other)

    def to_vector(self) -> "CoordinateVector":
        from .vector import CoordinateVector

        return CoordinateVector(self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Coordinate":
        """Build a coordinate from a length 2 or 3 array-like."""

        require(values, "values")
        arr = np.asarray(values, dtype=float).reshape(-1)
        if arr.size not in (2, 3):
            raise ArgumentOutOfRangeError("values", f"expected 2 or 3 components, got {arr.size}")
        return cls(*arr.tolist())

    def with_dimension(self, dimension: object) -> "Coordinate":
        """Truncate to the spatial dimension of ``dimension``.

        ``dimension`` is either an integer in ``[0, 3]`` or an object exposing
        a ``dimension`` attribute, such as a reference system.
        """

        require(dimension, "dimension")
        value = getattr(dimension, "dimension", dimension)
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"dimension must be an integer, got {type(value).__name__}")
        if value == 3:
            return self
        if value == 2:
            return Coordinate(self.x, self.y, 0.0)
        if value == 1:
            return Coordinate(self.x, 0.0, 0.0)
        if value == 0:
            return Coordinate.EMPTY
        raise ArgumentOutOfRangeError("dimension", f"dimension must lie in [0, 3], got {value}")


Coordinate.EMPTY = Coordinate(0.0, 0.0, 0.0)
Coordinate.UNDEFINED = Coordinate(math.nan, math.nan, math.nan)


def _components(value: object):
    from .vector import CoordinateVector

    if isinstance(value, (Coordinate, CoordinateVector)):
        return (value.x, value.y, value.z)
    return None


def distance_2d(first_x: float, first_y: float, second_x: float, second_y: float) -> float:
    dx = first_x - second_x
    dy = first_y - second_y
    return math.sqrt(dx * dx + dy * dy)


def distance_3d(
    first_x: float, first_y: float, first_z: float, second_x: float, second_y: float, second_z: float
) -> float:
    dx = first_x - second_x
    dy = first_y - second_y
    dz = first_z - second_z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance(first: Coordinate, second: Coordinate) -> float:
    """Euclidean distance; exactly zero for equal coordinates."""

    require(first, "first")
    require(second, "second")
    if first.equals(second):
        return 0.0
    return distance_3d(first.x, first.y, first.z, second.x, second.y, second.z)


def centroid(
    coordinates: Iterable[Optional[Coordinate]], precision_model: Optional["PrecisionModel"] = None
) -> Coordinate:
    """Arithmetic mean of ``coordinates``, skipping ``None`` entries.

    Returns :attr:`Coordinate.UNDEFINED` when there is nothing to average.
    """

    require(coordinates, "coordinates")
    sum_x = sum_y = sum_z = 0.0
    count = 0
    for coordinate in coordinates:
        if coordinate is None:
            continue
        sum_x += coordinate.x
        sum_y += coordinate.y
        sum_z += coordinate.z
        count += 1
    if count == 0:
        logger.debug("centroid of no coordinates requested; returning UNDEFINED")
        return Coordinate.UNDEFINED
    result = Coordinate(sum_x / count, sum_y / count, sum_z / count)
    if precision_model is not None:
        return precision_model.make_precise(result)
    return result


def coordinates_to_array(coordinates: Iterable[Coordinate]) -> np.ndarray:
    """Stack ``coordinates`` into an ``(N, 3)`` float array."""

    require(coordinates, "coordinates")
    rows: List[List[float]] = []
    for index, coordinate in enumerate(coordinates):
        if coordinate is None:
            raise ArgumentNullError(f"coordinates[{index}]")
        rows.append([coordinate.x, coordinate.y, coordinate.z])
    if not rows:
        return np.empty((0, 3), dtype=float)
    return np.asarray(rows, dtype=float)


def array_to_coordinates(values: np.ndarray) -> List[Coordinate]:
    """Convert an ``(N, 2)`` or ``(N, 3)`` array into coordinates."""

    require(values, "values")
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ArgumentOutOfRangeError("values", f"expected an (N, 2) or (N, 3) array, got shape {arr.shape}")
    return [Coordinate(*row) for row in arr.tolist()]


__all__ = [
    "Coordinate",
    "array_to_coordinates",
    "centroid",
    "coordinates_to_array",
    "distance",
    "distance_2d",
    "distance_3d",
]
