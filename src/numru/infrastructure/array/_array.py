"""
Concrete Array implementation (NumPy-backed flat storage).

This module provides the concrete `Array` that satisfies the domain-level
`IArray` protocol. An array is a `ShapeIndex` (extents and row-major strides)
paired with a `NumericStorage` holding exactly ``element_count`` values of a
single kind (int64 or float64).

Behavior is assembled from mixins:

- `ArrayMixinArithmetic`        : element-wise ``+ - * /``
- `ArrayMixinReduction`         : deferred ``mean`` / ``min`` / ``max``
- `ArrayShapeAndIndexingMixin`  : ``reshape``, coordinate get/set
- `ArrayMemoryMixin`            : factories, ``fill``, ``clone``, conversions

Design notes
------------
- There is no broadcasting and no views: every operation that produces an
  array produces an independently owned one.
- Kind-specific behavior is selected through the dtype control-path manager
  rather than branching inside each operation.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from ...domain._array import IArray
from ...domain._dtype import DType
from ...domain._errors import DtypeMismatchError, ShapeMismatchError
from ...domain._shape_index import ShapeIndex
from ..storage._numeric_storage import NumericStorage
from ._memory import ArrayMemoryMixin
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.reduction import ArrayMixinReduction

Number = Union[int, float]


class Array(
    ArrayMixinArithmetic,
    ArrayMixinReduction,
    ArrayShapeAndIndexingMixin,
    ArrayMemoryMixin,
    IArray,
):
    """
    N-dimensional, row-major array of int64 or float64 values.

    Parameters
    ----------
    shape : ShapeIndex or Sequence[int]
        Array extents; every extent must be a positive integer.
    dtype : DType or str, optional
        Element kind. Defaults to float64.
    storage : NumericStorage, optional
        Pre-built storage to adopt. It must match `dtype` and hold exactly
        ``prod(shape)`` elements. When omitted, a zero-filled storage is
        allocated.

    Raises
    ------
    InvalidShapeError
        If `shape` is empty or has a non-positive extent.
    DtypeMismatchError
        If `storage` holds a different kind than `dtype`.
    ShapeMismatchError
        If `storage` length differs from the shape's element count.
    """

    def __init__(
        self,
        shape: Union[ShapeIndex, Sequence[int]],
        dtype: Any = DType.FLOAT64,
        *,
        storage: Optional[NumericStorage] = None,
    ) -> None:
        shape_index = shape if isinstance(shape, ShapeIndex) else ShapeIndex(shape)
        kind = DType.parse(dtype)
        count = shape_index.element_count()

        if storage is None:
            storage = NumericStorage.allocate(kind, count)
        else:
            if storage.dtype is not kind:
                raise DtypeMismatchError(kind.value, storage.dtype.value)
            if storage.length() != count:
                raise ShapeMismatchError((count,), (storage.length(),))

        self._shape_index: ShapeIndex = shape_index
        self._dtype: DType = kind
        self._storage: NumericStorage = storage

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the array extents as a tuple.
        """
        return self._shape_index.extents

    @property
    def shape_index(self) -> ShapeIndex:
        """
        Return the `ShapeIndex` describing this array's layout.
        """
        return self._shape_index

    @property
    def dtype(self) -> DType:
        """
        Return the element kind (also the control-path dispatch key).
        """
        return self._dtype

    @property
    def ndim(self) -> int:
        return self._shape_index.rank

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Row-major strides in elements (not bytes).
        """
        return self._shape_index.strides()

    def numel(self) -> int:
        """
        Return the number of stored elements.
        """
        return self._shape_index.element_count()

    def visualize(self):
        """
        Start building a text rendering of this array.

        Returns
        -------
        VisualizeBuilder
            Unexecuted builder; configure it with ``.decimal_points(n)`` and
            call ``.execute()`` (print and return) or ``.render()`` (return
            only).
        """
        from ..visualization._visualize_builder import VisualizeBuilder

        return VisualizeBuilder(self)

    def __repr__(self) -> str:
        return f"Array(shape={self.shape}, dtype={self._dtype})"

    def __str__(self) -> str:
        return self.visualize().render()
