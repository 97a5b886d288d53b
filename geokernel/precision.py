"""Precision models: how coordinates are rounded and compared."""

from __future__ import annotations

import logging
import math
import numbers
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from .coordinate import Coordinate
from .errors import ArgumentNullError, ArgumentOutOfRangeError, require
from .vector import CoordinateVector

logger = logging.getLogger(__name__)

# largest integers exactly representable in double and single precision
_DOUBLE_PRECISE_LIMIT = 9007199254740992.0
_SINGLE_PRECISE_LIMIT = 8388607.0


class PrecisionModelType(Enum):
    FLOATING = "floating"
    FLOATING_SINGLE = "floating_single"
    FIXED = "fixed"


@dataclass(frozen=True, eq=False)
class PrecisionModel:
    """Rounding and tolerance policy shared by a family of geometries.

    ``PrecisionModel()`` is full double precision, ``PrecisionModel(scale=s)``
    rounds to a grid of ``1 / s``, and
    ``PrecisionModel(PrecisionModelType.FLOATING_SINGLE)`` rounds through
    single precision.  All derived quantities are computed once here.
    """

    model_type: PrecisionModelType = PrecisionModelType.FLOATING
    scale: Optional[float] = None
    maximum_significant_digits: int = field(init=False)
    maximum_precise_value: float = field(init=False)
    epsilon: float = field(init=False)
    base_tolerance: float = field(init=False)

    def __post_init__(self) -> None:
        model_type = self.model_type
        scale = self.scale
        if model_type is None:
            raise ArgumentNullError("model_type")
        if scale is not None:
            if model_type not in (PrecisionModelType.FIXED, PrecisionModelType.FLOATING):
                raise ValueError(f"a scale cannot be combined with {model_type.value} precision")
            scale = float(scale)
            if math.isnan(scale) or scale <= 0:
                raise ArgumentOutOfRangeError("scale", f"scale must be positive, got {scale}")
            model_type = PrecisionModelType.FIXED
        elif model_type is PrecisionModelType.FIXED:
            scale = 1.0

        if model_type is PrecisionModelType.FIXED:
            digits = 1 + max(0, math.ceil(math.log10(scale)))
            precise_value = math.floor(_DOUBLE_PRECISE_LIMIT * scale / scale)
            epsilon = scale
            tolerance = 0.5 / scale
        elif model_type is PrecisionModelType.FLOATING_SINGLE:
            digits = 6
            precise_value = _SINGLE_PRECISE_LIMIT
            epsilon = float(np.nextafter(np.float32(0.0), np.float32(1.0)))
            tolerance = 1.0 / 10 ** (digits - 1)
        else:
            digits = 16
            precise_value = _DOUBLE_PRECISE_LIMIT
            epsilon = float(np.nextafter(0.0, 1.0))
            tolerance = 1.0 / 10 ** (digits - 1)

        object.__setattr__(self, "model_type", model_type)
        object.__setattr__(self, "scale", scale)
        object.__setattr__(self, "maximum_significant_digits", digits)
        object.__setattr__(self, "maximum_precise_value", float(precise_value))
        object.__setattr__(self, "epsilon", epsilon)
        object.__setattr__(self, "base_tolerance", tolerance)

    @classmethod
    def default(cls) -> "PrecisionModel":
        return default_precision_model()

    # rounding

    def make_precise(self, value):
        """Round ``value`` according to this model.

        Accepts a float, a coordinate, a vector, a numpy array or an iterable
        of those; the result has the same shape (iterables become tuples).
        ``None`` is returned unchanged and NaN passes through.
        """

        if value is None:
            return None
        if isinstance(value, Coordinate):
            if self.model_type is PrecisionModelType.FLOATING:
                return value
            return Coordinate(self._round(value.x), self._round(value.y), self._round(value.z))
        if isinstance(value, CoordinateVector):
            if self.model_type is PrecisionModelType.FLOATING:
                return value
            return CoordinateVector(self._round(value.x), self._round(value.y), self._round(value.z))
        if isinstance(value, np.ndarray):
            return self._round_array(value)
        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return self._round(float(value))
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return tuple(self.make_precise(item) for item in value)
        raise TypeError(f"cannot make {type(value).__name__} precise")

    def _round(self, value: float) -> float:
        if self.model_type is PrecisionModelType.FLOATING or math.isnan(value):
            return value
        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            with np.errstate(over="ignore"):
                return float(np.float32(value))
        if math.isinf(value):
            return value
        return math.floor(value * self.scale + 0.5) / self.scale

    def _round_array(self, values: np.ndarray) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if self.model_type is PrecisionModelType.FLOATING:
            return arr.copy()
        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            with np.errstate(over="ignore"):
                return arr.astype(np.float32).astype(float)
        return np.floor(arr * self.scale + 0.5) / self.scale

    # comparison

    def tolerance(self, *values) -> float:
        """Largest difference still treated as equal for ``values``.

        Fixed models use the constant base tolerance; floating models scale
        it by the largest absolute component among ``values``.  A single
        iterable argument is expanded.
        """

        if self.model_type is PrecisionModelType.FIXED:
            return self.base_tolerance
        if len(values) == 1 and _is_collection(values[0]):
            values = tuple(values[0])
        magnitude = None
        for component in _magnitudes(values):
            if magnitude is None or component > magnitude:
                magnitude = component
        if magnitude is None:
            return self.base_tolerance
        return magnitude * self.base_tolerance

    def are_equal(self, first, second) -> bool:
        """Tolerance-aware equality of two floats, coordinates or vectors."""

        if first is None and second is None:
            return True
        if first is None or second is None:
            return False
        if isinstance(first, (Coordinate, CoordinateVector)) and isinstance(second, (Coordinate, CoordinateVector)):
            return (
                self._values_equal(first.x, second.x)
                and self._values_equal(first.y, second.y)
                and self._values_equal(first.z, second.z)
            )
        if isinstance(first, (Coordinate, CoordinateVector)) or isinstance(second, (Coordinate, CoordinateVector)):
            raise TypeError("cannot compare a coordinate with a scalar")
        return self._values_equal(float(first), float(second))

    def _values_equal(self, first: float, second: float) -> bool:
        if first == second:
            return True
        return abs(first - second) < self.base_tolerance

    # ordering by significant digits

    def compare_to(self, other: "PrecisionModel") -> int:
        require(other, "other")
        if self is other:
            return 0
        if self.maximum_significant_digits < other.maximum_significant_digits:
            return -1
        if self.maximum_significant_digits > other.maximum_significant_digits:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.model_type is other.model_type and self.scale == other.scale

    def __hash__(self) -> int:
        return hash((self.model_type, self.scale))

    def __str__(self) -> str:
        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            return "FLOATING (SINGLE)"
        if self.model_type is PrecisionModelType.FIXED:
            return f"FIXED ({self.scale:g})"
        return "FLOATING"


def _is_collection(value: object) -> bool:
    if isinstance(value, (Coordinate, CoordinateVector, str, bytes)):
        return False
    return isinstance(value, (Iterable, np.ndarray))


def _magnitudes(values: Tuple[object, ...]) -> Iterator[float]:
    for index, value in enumerate(values):
        if value is None:
            raise ArgumentNullError(f"values[{index}]")
        if isinstance(value, (Coordinate, CoordinateVector)):
            components = (value.x, value.y, value.z)
        elif isinstance(value, np.ndarray):
            components = tuple(np.asarray(value, dtype=float).reshape(-1).tolist())
        else:
            components = (float(value),)
        for component in components:
            if not math.isnan(component):
                yield abs(component)


_DEFAULT_MODEL: Optional[PrecisionModel] = None
_DEFAULT_LOCK = threading.Lock()


def default_precision_model() -> PrecisionModel:
    """Return the shared double-precision model, creating it on first use."""

    global _DEFAULT_MODEL
    model = _DEFAULT_MODEL
    if model is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_MODEL is None:
                _DEFAULT_MODEL = PrecisionModel(PrecisionModelType.FLOATING)
                logger.debug("Created default precision model %s", _DEFAULT_MODEL)
            model = _DEFAULT_MODEL
    return model


def _check_models(models: Tuple[PrecisionModel, ...]) -> None:
    if not models:
        raise ValueError("at least one precision model is required")
    for index, model in enumerate(models):
        if model is None:
            raise ArgumentNullError(f"models[{index}]")


def least_precise(*models: PrecisionModel) -> PrecisionModel:
    """Return the model with the fewest significant digits (first on ties).

    The result follows the name; the inverted comparison found in some
    geometry libraries is not reproduced.
    """

    _check_models(models)
    result = models[0]
    for model in models[1:]:
        if model.compare_to(result) < 0:
            result = model
    return result


def most_precise(*models: PrecisionModel) -> PrecisionModel:
    """Return the model with the most significant digits (first on ties).

    The result follows the name, as in :func:`least_precise`.
    """

    _check_models(models)
    result = models[0]
    for model in models[1:]:
        if model.compare_to(result) > 0:
            result = model
    return result


__all__ = [
    "PrecisionModel",
    "PrecisionModelType",
    "default_precision_model",
    "least_precise",
    "most_precise",
]
