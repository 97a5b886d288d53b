"""Immutable displacement vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional

import numpy as np

from .coordinate import Coordinate
from .errors import ArgumentNullError, require

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .precision import PrecisionModel

_INVALID_STRING = "INVALID"
_NULL_STRING = "NULL"


@dataclass(frozen=True, eq=False)
class CoordinateVector:
    """A displacement in up to three dimensions.

    Shares the component layout of :class:`~geokernel.coordinate.Coordinate`
    and compares equal to a coordinate with identical components.
    """

    x: float
    y: float
    z: float = 0.0

    NULL: ClassVar["CoordinateVector"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @property
    def is_null(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    @property
    def is_valid(self) -> bool:
        return not (math.isnan(self.x) or math.isnan(self.y) or math.isnan(self.z))

    @property
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def equals(self, other: object) -> bool:
        if other is None:
            return False
        if self is other:
            return True
        if not isinstance(other, (Coordinate, CoordinateVector)):
            return False
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __eq__(self, other: object) -> bool:
        if other is not None and not isinstance(other, (Coordinate, CoordinateVector)):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # identical to Coordinate so cross-type equal values hash alike
        return hash((self.x, self.y, self.z))

    def __str__(self) -> str:
        if self.is_null:
            return _NULL_STRING
        if not self.is_valid:
            return _INVALID_STRING
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def add(self, other: "CoordinateVector") -> "CoordinateVector":
        require(other, "other")
        return CoordinateVector(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "CoordinateVector") -> "CoordinateVector":
        require(other, "other")
        return CoordinateVector(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> "CoordinateVector":
        require(scalar, "scalar")
        return CoordinateVector(scalar * self.x, scalar * self.y, scalar * self.z)

    def dot(self, other: "CoordinateVector") -> float:
        require(other, "other")
        return dot_product_3d(self.x, self.y, self.z, other.x, other.y, other.z)

    def perp_dot(self, other: "CoordinateVector") -> float:
        """Planar cross product ``x1 * y2 - y1 * x2``."""

        require(other, "other")
        return perp_dot_product(self.x, self.y, other.x, other.y)

    def cross(self, other: "CoordinateVector") -> "CoordinateVector":
        require(other, "other")
        return cross_product_3d(self.x, self.y, self.z, other.x, other.y, other.z)

    def normalize(self) -> "CoordinateVector":
        """Return the unit vector; the null vector normalizes to NaN components."""

        length = self.length
        if length == 0:
            return CoordinateVector(math.nan, math.nan, math.nan)
        return CoordinateVector(self.x / length, self.y / length, self.z / length)

    def distance(self, other: "CoordinateVector") -> float:
        require(other, "other")
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def is_parallel(self, other: "CoordinateVector", precision_model: Optional["PrecisionModel"] = None) -> bool:
        """Every component of the cross product lies within the tolerance."""

        require(other, "other")
        model = _model_or_default(precision_model)
        tolerance = model.tolerance(self, other)
        product = self.cross(other)
        return abs(product.x) <= tolerance and abs(product.y) <= tolerance and abs(product.z) <= tolerance

    def is_perpendicular(
        self, other: "CoordinateVector", precision_model: Optional["PrecisionModel"] = None
    ) -> bool:
        require(other, "other")
        model = _model_or_default(precision_model)
        return abs(self.dot(other)) <= model.tolerance(self, other)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def __add__(self, other: object):
        if other is None:
            raise ArgumentNullError("other")
        if not isinstance(other, CoordinateVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object):
        if other is None:
            raise ArgumentNullError("other")
        if not isinstance(other, CoordinateVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object):
        if other is None:
            raise ArgumentNullError("other")
        if isinstance(other, CoordinateVector):
            return self.dot(other)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: object):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.multiply(other)
        return NotImplemented

    def __neg__(self) -> "CoordinateVector":
        return CoordinateVector(-self.x, -self.y, -self.z)


CoordinateVector.NULL = CoordinateVector(0.0, 0.0, 0.0)


def _model_or_default(precision_model: Optional["PrecisionModel"]) -> "PrecisionModel":
    from .precision import PrecisionModel

    return precision_model if precision_model is not None else PrecisionModel.default()


def dot_product_2d(first_x: float, first_y: float, second_x: float, second_y: float) -> float:
    return first_x * second_x + first_y * second_y


def dot_product_3d(
    first_x: float, first_y: float, first_z: float, second_x: float, second_y: float, second_z: float
) -> float:
    return first_x * second_x + first_y * second_y + first_z * second_z


def perp_dot_product(first_x: float, first_y: float, second_x: float, second_y: float) -> float:
    return first_x * second_y - first_y * second_x


def cross_product_3d(
    first_x: float, first_y: float, first_z: float, second_x: float, second_y: float, second_z: float
) -> CoordinateVector:
    return CoordinateVector(
        first_y * second_z - first_z * second_y,
        first_z * second_x - first_x * second_z,
        first_x * second_y - first_y * second_x,
    )


__all__ = [
    "CoordinateVector",
    "cross_product_3d",
    "dot_product_2d",
    "dot_product_3d",
    "perp_dot_product",
]
