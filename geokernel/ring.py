"""Canonical closed coordinate rings."""

from __future__ import annotations

import logging
import math
from collections import Counter
from typing import Iterable, Iterator, List, Sequence, Tuple

from .coordinate import Coordinate
from .errors import ArgumentNullError, ArgumentOutOfRangeError, UniqueAnchorError, require
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def _axis_key(value: float) -> Tuple[bool, float]:
    # NaN sorts before every number
    if math.isnan(value):
        return (False, 0.0)
    return (True, value)


def _sort_key(coordinate: Coordinate) -> Tuple[Tuple[bool, float], ...]:
    return (_axis_key(coordinate.x), _axis_key(coordinate.y), _axis_key(coordinate.z))


def canonical_anchor(elements: Sequence[Coordinate]) -> int:
    """Return the stored index the canonical traversal starts from.

    The anchor is the smallest coordinate in ``(x, y, z)`` order that occurs
    exactly once; runs of repeated coordinates are skipped.  Rings with at
    most one vertex anchor at ``0``.
    """

    count = len(elements)
    if count <= 1:
        return 0

    ordered = sorted(elements, key=_sort_key)
    multiplicity = Counter(elements)
    position = 0
    while position < count:
        occurrences = multiplicity[ordered[position]]
        if occurrences == 1:
            break
        position += occurrences

    if position >= count:
        logger.warning("No uniquely occurring coordinate among %d ring vertices", count)
        raise UniqueAnchorError("CoordinateRing is not implemented for inputs with no unique coordinate")

    anchor = elements.index(ordered[position])
    logger.debug("Ring of %d vertices anchored at stored index %d (%s)", count, anchor, ordered[position])
    return anchor


class CoordinateRing:
    """Read-only closed ring with a rotation and direction independent identity.

    An explicit closing coordinate (last equal to first) is dropped, so each
    vertex is stored once.  Indexing and iteration start at the canonical
    anchor chosen by :func:`canonical_anchor`; two rings are equal when their
    canonical traversals agree forwards or backwards.
    """

    __slots__ = ("_elements", "_shift")

    def __init__(self, coordinates: Iterable[Coordinate]) -> None:
        require(coordinates, "coordinates")
        elements: List[Coordinate] = list(coordinates)
        for index, element in enumerate(elements):
            if element is None:
                raise ArgumentNullError(f"coordinates[{index}]")
        if len(elements) > 1 and elements[0] == elements[-1]:
            elements.pop()
        self._elements: Tuple[Coordinate, ...] = tuple(elements)
        self._shift = canonical_anchor(self._elements)

    @property
    def origin(self) -> Tuple[Coordinate, ...]:
        """Vertices in the order they were supplied."""

        return self._elements

    @property
    def shift(self) -> int:
        return self._shift

    def __len__(self) -> int:
        return len(self._elements)

    def _position(self, index: int) -> int:
        count = len(self._elements)
        if index < 0:
            index += count
        if index < 0 or index >= count:
            raise IndexError(f"ring index {index} out of range for {count} vertices")
        return (self._shift + index) % count

    def __getitem__(self, index: int) -> Coordinate:
        return self._elements[self._position(index)]

    def __iter__(self) -> Iterator[Coordinate]:
        for index in range(len(self._elements)):
            yield self._elements[self._position(index)]

    def __reversed__(self) -> Iterator[Coordinate]:
        for index in range(len(self._elements) - 1, -1, -1):
            yield self._elements[self._position(index)]

    def _iter_reversed_from_anchor(self) -> Iterator[Coordinate]:
        count = len(self._elements)
        if count == 0:
            return
        yield self._elements[self._position(0)]
        for index in range(count - 1, 0, -1):
            yield self._elements[self._position(index)]

    def __contains__(self, item: object) -> bool:
        return item in self._elements

    def index(self, item: Coordinate) -> int:
        """Position of ``item`` in the canonical traversal."""

        for position, element in enumerate(self):
            if element == item:
                return position
        raise ValueError(f"{item} is not in ring")

    def copy_to(self, target: List[Coordinate], start: int = 0) -> None:
        """Write the canonical traversal into ``target`` beginning at ``start``."""

        require(target, "target")
        if start < 0 or start + len(self._elements) > len(target):
            raise ArgumentOutOfRangeError(
                "start", f"cannot copy {len(self._elements)} vertices into {len(target)} slots from {start}"
            )
        for offset, element in enumerate(self):
            target[start + offset] = element

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or not isinstance(other, CoordinateRing):
            return False
        if len(self) != len(other):
            return False
        if all(mine == theirs for mine, theirs in zip(self, other)):
            return True
        return all(mine == theirs for mine, theirs in zip(self._iter_reversed_from_anchor(), other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinateRing):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((len(self._elements), frozenset(Counter(self._elements).items())))

    def __repr__(self) -> str:
        return f"CoordinateRing([{', '.join(str(coordinate) for coordinate in self)}])"


apply_debug_logging(globals(), logger=logger)


__all__ = ["CoordinateRing", "canonical_anchor"]
