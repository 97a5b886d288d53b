"""Total orders over coordinates and over composite geometry structures."""

from __future__ import annotations

import functools
import logging
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

from .coordinate import Coordinate
from .errors import require
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GeometryKind(IntEnum):
    """Structural kinds in comparison precedence order."""

    POINT = 0
    MULTI_POINT = 1
    LINEAR_RING = 2
    LINE_STRING = 3
    MULTI_LINE_STRING = 4
    POLYGON = 5
    MULTI_POLYGON = 6
    COLLECTION = 7


_COORDINATE_SEQUENCE_KINDS = {GeometryKind.LINEAR_RING, GeometryKind.LINE_STRING}


class CoordinateComparer:
    """Orders coordinates by ``x`` and then ``y``.

    Coordinates with a NaN component compare equal to every coordinate, so
    the order is only total over valid coordinates.
    """

    def compare(self, first: Coordinate, second: Coordinate) -> int:
        require(first, "first")
        require(second, "second")
        if first is second or not first.is_valid or not second.is_valid:
            return 0
        if first.x != second.x:
            return -1 if first.x < second.x else 1
        if first.y != second.y:
            return -1 if first.y < second.y else 1
        return 0

    def __call__(self, first: Coordinate, second: Coordinate) -> int:
        return self.compare(first, second)

    @property
    def key(self) -> Callable[[Coordinate], Any]:
        """Sort key usable with :func:`sorted`."""

        return functools.cmp_to_key(self.compare)


def _compare_sequences(first: Iterable[T], second: Iterable[T], compare: Callable[[T, T], int]) -> int:
    first_iter = iter(first)
    second_iter = iter(second)
    sentinel = object()
    while True:
        mine = next(first_iter, sentinel)
        theirs = next(second_iter, sentinel)
        if mine is sentinel and theirs is sentinel:
            return 0
        if mine is sentinel:
            return -1
        if theirs is sentinel:
            return 1
        comparison = compare(mine, theirs)
        if comparison != 0:
            return comparison


def geometry_kind(geometry: Any) -> GeometryKind:
    """Read the structural kind advertised by ``geometry``."""

    kind = getattr(geometry, "geometry_kind", None)
    if kind is None:
        raise TypeError(f"{type(geometry).__name__} does not declare a geometry_kind")
    if isinstance(kind, GeometryKind):
        return kind
    if isinstance(kind, str):
        try:
            return GeometryKind[kind.upper()]
        except KeyError as exc:
            raise TypeError(f"unsupported geometry kind {kind!r}") from exc
    return GeometryKind(kind)


class GeometryComparer:
    """Structural order over geometries.

    Geometries expose ``geometry_kind`` together with ``coordinate`` (points),
    ``coordinates`` (rings and line strings), ``shell`` and ``holes``
    (polygons) or iteration over their members (every collection kind).
    Different kinds order by :class:`GeometryKind`; equal kinds compare
    member by member, and a strict prefix sorts first.
    """

    def __init__(self, coordinate_comparer: Optional[CoordinateComparer] = None) -> None:
        self._coordinates = coordinate_comparer or CoordinateComparer()

    def compare(self, first: Any, second: Any) -> int:
        require(first, "first")
        require(second, "second")
        if first is second:
            return 0

        first_kind = geometry_kind(first)
        second_kind = geometry_kind(second)
        if first_kind != second_kind:
            return -1 if first_kind < second_kind else 1

        if first_kind is GeometryKind.POINT:
            return self._coordinates.compare(first.coordinate, second.coordinate)
        if first_kind in _COORDINATE_SEQUENCE_KINDS:
            return self.compare_coordinates(first.coordinates, second.coordinates)
        if first_kind is GeometryKind.POLYGON:
            return self.compare_polygons(first, second)
        return self.compare_members(first, second)

    def compare_coordinates(self, first: Sequence[Coordinate], second: Sequence[Coordinate]) -> int:
        require(first, "first")
        require(second, "second")
        return _compare_sequences(first, second, self._coordinates.compare)

    def compare_polygons(self, first: Any, second: Any) -> int:
        require(first, "first")
        require(second, "second")
        shell = self.compare(first.shell, second.shell)
        if shell != 0:
            return shell
        return _compare_sequences(first.holes, second.holes, self.compare)

    def compare_members(self, first: Iterable[Any], second: Iterable[Any]) -> int:
        require(first, "first")
        require(second, "second")
        return _compare_sequences(first, second, self.compare)

    def __call__(self, first: Any, second: Any) -> int:
        return self.compare(first, second)

    @property
    def key(self) -> Callable[[Any], Any]:
        return functools.cmp_to_key(self.compare)


apply_debug_logging(globals(), logger=logger, skip={"key", "GeometryKind"})


__all__ = [
    "CoordinateComparer",
    "GeometryComparer",
    "GeometryKind",
    "geometry_kind",
]
