"""
Shape descriptor and row-major index arithmetic.

`ShapeIndex` is the dimension-count-agnostic description of an array's
layout: an immutable, ordered sequence of per-axis extents (outermost axis
first). It derives the row-major strides and the total element count, and maps
logical coordinates to linear storage offsets (and back).

A single code path serves rank-1, rank-2 and rank-N arrays; there are no
per-rank specialized types.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Sequence

from ._dtype import INT64_MAX
from ._errors import IndexOutOfBoundsError, InvalidShapeError, ShapeOverflowError


class ShapeIndex:
    """
    Immutable ordered sequence of positive per-axis extents.

    Parameters
    ----------
    extents : Sequence[int]
        Extents, outermost axis first. Must be non-empty; every extent must be
        an integer >= 1 (zero-extent arrays are not supported).

    Raises
    ------
    InvalidShapeError
        If the sequence is empty or an extent is not a positive integer.
    ShapeOverflowError
        If the element count exceeds the int64 range.

    Notes
    -----
    - Strides are measured in elements, not bytes.
    - Instances never change after construction; reshaping creates a new
      `ShapeIndex`.
    """

    __slots__ = ("_extents", "_strides", "_count")

    def __init__(self, extents: Sequence[int]) -> None:
        try:
            raw = tuple(extents)
        except TypeError:
            raise InvalidShapeError((extents,), "extents must be a sequence") from None
        if not raw:
            raise InvalidShapeError(raw, "at least one axis is required")

        normalized = []
        for e in raw:
            if isinstance(e, bool):
                raise InvalidShapeError(raw, f"extent {e!r} is not an integer")
            try:
                n = operator.index(e)
            except TypeError:
                raise InvalidShapeError(raw, f"extent {e!r} is not an integer") from None
            if n < 1:
                raise InvalidShapeError(raw, f"extent {n} must be >= 1")
            normalized.append(n)

        count = 1
        for n in normalized:
            count *= n
            if count > INT64_MAX:
                raise ShapeOverflowError(normalized, INT64_MAX)

        strides = [1] * len(normalized)
        for i in range(len(normalized) - 2, -1, -1):
            strides[i] = strides[i + 1] * normalized[i + 1]

        self._extents: tuple[int, ...] = tuple(normalized)
        self._strides: tuple[int, ...] = tuple(strides)
        self._count: int = count

    @classmethod
    def from_extents(cls, extents: Sequence[int]) -> "ShapeIndex":
        """
        Build a `ShapeIndex` from a sequence of positive extents.
        """
        return cls(extents)

    @property
    def extents(self) -> tuple[int, ...]:
        return self._extents

    @property
    def rank(self) -> int:
        """
        Number of axes.
        """
        return len(self._extents)

    def strides(self) -> tuple[int, ...]:
        """
        Return row-major strides (innermost stride is 1).

        ``stride[i] == stride[i + 1] * extent[i + 1]``
        """
        return self._strides

    def element_count(self) -> int:
        """
        Return the product of all extents.
        """
        return self._count

    def linear_offset(self, coordinate: Sequence[int]) -> int:
        """
        Map a logical coordinate to its offset in flat row-major storage.

        Parameters
        ----------
        coordinate : Sequence[int]
            One index per axis; ``0 <= coordinate[i] < extents[i]``.

        Returns
        -------
        int
            ``sum(coordinate[i] * strides[i])``.

        Raises
        ------
        IndexOutOfBoundsError
            If the coordinate has the wrong length, a non-integer entry, or any
            entry outside its axis range. Negative indices are not wrapped.
        """
        coord = tuple(coordinate)
        if len(coord) != len(self._extents):
            raise IndexOutOfBoundsError(coord, self._extents)

        offset = 0
        for c, extent, stride in zip(coord, self._extents, self._strides):
            if isinstance(c, bool):
                raise IndexOutOfBoundsError(coord, self._extents)
            try:
                i = operator.index(c)
            except TypeError:
                raise IndexOutOfBoundsError(coord, self._extents) from None
            if i < 0 or i >= extent:
                raise IndexOutOfBoundsError(coord, self._extents)
            offset += i * stride
        return offset

    def coordinate_of(self, offset: int) -> tuple[int, ...]:
        """
        Inverse of `linear_offset`: map a flat offset back to a coordinate.

        Raises
        ------
        IndexOutOfBoundsError
            If `offset` is not an integer or is outside
            ``[0, element_count())``.
        """
        if isinstance(offset, bool):
            raise IndexOutOfBoundsError(offset, (self._count,))
        try:
            rest = operator.index(offset)
        except TypeError:
            raise IndexOutOfBoundsError(offset, (self._count,)) from None
        if rest < 0 or rest >= self._count:
            raise IndexOutOfBoundsError(offset, (self._count,))
        coord = []
        for stride in self._strides:
            q, rest = divmod(rest, stride)
            coord.append(q)
        return tuple(coord)

    def coordinates(self) -> Iterator[tuple[int, ...]]:
        """
        Iterate over every coordinate in row-major order.

        The i-th yielded coordinate maps to linear offset i.
        """
        coord = [0] * len(self._extents)
        for _ in range(self._count):
            yield tuple(coord)
            # odometer increment, innermost axis fastest
            for axis in range(len(coord) - 1, -1, -1):
                coord[axis] += 1
                if coord[axis] < self._extents[axis]:
                    break
                coord[axis] = 0

    def without_axis(self, axis: int) -> "ShapeIndex":
        """
        Return the shape obtained by dropping `axis` (used by axis reductions).

        The caller must ensure the result keeps at least one axis.
        """
        return ShapeIndex(self._extents[:axis] + self._extents[axis + 1 :])

    def __len__(self) -> int:
        return len(self._extents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._extents)

    def __getitem__(self, axis: int) -> int:
        return self._extents[axis]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ShapeIndex):
            return self._extents == other._extents
        if isinstance(other, tuple):
            return self._extents == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._extents)

    def __repr__(self) -> str:
        return f"ShapeIndex({self._extents})"
