"""
Array shape and indexing mixin.

This module defines `ArrayShapeAndIndexingMixin`, which implements the
shape-transforming and coordinate-indexing methods of the concrete `Array`:

- `reshape`      : reinterpret the flat storage under new extents
- `__getitem__`  : read one element by coordinate
- `__setitem__`  : write one element by coordinate
- `coordinates`  : iterate all coordinates in row-major order

Design notes
------------
- Coordinates are translated to linear offsets by `ShapeIndex.linear_offset`;
  storage is never addressed through nested containers.
- `reshape` always copies the storage, so the result is independently owned
  and mutating it can never be observed through the source.
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Iterator, Sequence, Union

from ...domain._array import IArray
from ...domain._errors import IncompatibleReshapeError, InvalidShapeError
from ...domain._shape_index import ShapeIndex

logger = logging.getLogger(__name__)

Number = Union[int, float]


class ArrayShapeAndIndexingMixin:
    """
    Shape and indexing operations for the concrete `Array`.

    Notes
    -----
    Methods assume the host class provides ``_shape_index``, ``_dtype`` and
    ``_storage`` and a constructor ``(shape, dtype, *, storage=None)``.
    """

    def _resolve_reshape(self, new_shape: Any) -> tuple[int, ...]:
        if isinstance(new_shape, ShapeIndex):
            return new_shape.extents
        if isinstance(new_shape, int) and not isinstance(new_shape, bool):
            new_shape = (new_shape,)
        try:
            target = tuple(new_shape)
        except TypeError:
            raise InvalidShapeError((new_shape,), "extents must be a sequence") from None
        source = self._shape_index.extents
        count = self._shape_index.element_count()

        try:
            normalized = [operator.index(e) for e in target]
        except TypeError:
            # non-integer extents are reported by ShapeIndex
            return target

        inferred = [i for i, e in enumerate(normalized) if e == -1]
        if len(inferred) > 1:
            raise IncompatibleReshapeError(source, target)
        if inferred:
            known = 1
            for i, e in enumerate(normalized):
                if i != inferred[0]:
                    known *= e
            if known <= 0 or count % known != 0:
                raise IncompatibleReshapeError(source, target)
            normalized[inferred[0]] = count // known
        return tuple(normalized)

    def reshape(self, new_shape: Union[Sequence[int], int]) -> IArray:
        """
        Return a new array with the same elements under different extents.

        Parameters
        ----------
        new_shape : Sequence[int] or int
            Target extents. One entry may be ``-1``; it is inferred from the
            element count.

        Returns
        -------
        Array
            A new array whose row-major element sequence equals the source's.

        Raises
        ------
        IncompatibleReshapeError
            If the target element count differs from the source's, or ``-1``
            cannot be resolved.
        InvalidShapeError
            If the target contains zero or non-integer extents.
        """
        extents = self._resolve_reshape(new_shape)
        target = ShapeIndex.from_extents(extents)
        if target.element_count() != self._shape_index.element_count():
            raise IncompatibleReshapeError(self._shape_index.extents, extents)

        logger.debug("reshape %s -> %s", self._shape_index.extents, target.extents)
        return type(self)(target, self._dtype, storage=self._storage.copy())

    def _offset(self, coordinate: Any) -> int:
        if not isinstance(coordinate, tuple):
            coordinate = (coordinate,)
        return self._shape_index.linear_offset(coordinate)

    def __getitem__(self, coordinate: Any) -> Number:
        """
        Read the element at a full coordinate, e.g. ``a[1, 2]``.

        Rank-1 arrays also accept a bare integer. Slicing is not supported.

        Raises
        ------
        IndexOutOfBoundsError
            If the coordinate has the wrong rank or lies outside the extents.
        """
        return self._storage.get(self._offset(coordinate))

    def __setitem__(self, coordinate: Any, value: Number) -> None:
        """
        Write the element at a full coordinate, e.g. ``a[1, 2] = 7``.
        """
        self._storage.set(self._offset(coordinate), value)

    def coordinates(self) -> Iterator[tuple[int, ...]]:
        """
        Iterate every coordinate in row-major order.
        """
        return self._shape_index.coordinates()
