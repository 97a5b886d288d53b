"""Orientation and angle predicates over coordinate triples."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from .coordinate import Coordinate, distance
from .errors import require
from .precision import PrecisionModel, default_precision_model


class Orientation(Enum):
    UNDEFINED = "undefined"
    COLLINEAR = "collinear"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


def orientation(
    origin: Coordinate,
    first: Coordinate,
    second: Coordinate,
    precision_model: Optional[PrecisionModel] = None,
) -> Orientation:
    """Classify the turn ``origin -> first -> second``.

    The sign of the planar cross product ``(first - origin) x (second -
    origin)`` decides the turn.  Determinants whose magnitude does not exceed
    ``precision_model.tolerance(origin, first, second)`` are collinear, so the
    threshold follows the magnitude of the operands rather than a fixed
    epsilon.  A NaN determinant is :attr:`Orientation.UNDEFINED`.
    """

    model = precision_model if precision_model is not None else default_precision_model()
    require(origin, "origin")
    require(first, "first")
    require(second, "second")

    det = (first.x - origin.x) * (second.y - origin.y) - (first.y - origin.y) * (second.x - origin.x)
    if math.isnan(det):
        return Orientation.UNDEFINED
    if abs(det) <= model.tolerance(origin, first, second):
        return Orientation.COLLINEAR
    if det > 0:
        return Orientation.COUNTERCLOCKWISE
    return Orientation.CLOCKWISE


def angle(origin: Coordinate, first: Coordinate, second: Coordinate) -> float:
    """Angle in radians between the rays ``origin -> first`` and ``origin -> second``.

    Uses the law of cosines on the three pairwise distances.  The cosine is
    not clamped: a zero-length ray or a ratio pushed outside ``[-1, 1]`` by
    rounding yields NaN.
    """

    require(origin, "origin")
    require(first, "first")
    require(second, "second")

    origin_first = distance(origin, first)
    origin_second = distance(origin, second)
    first_second = distance(first, second)
    denominator = 2 * origin_first * origin_second
    if denominator == 0 or math.isnan(denominator):
        return math.nan
    ratio = (origin_first * origin_first + origin_second * origin_second - first_second * first_second) / denominator
    if not -1.0 <= ratio <= 1.0:
        return math.nan
    return math.acos(ratio)


__all__ = ["Orientation", "angle", "orientation"]
