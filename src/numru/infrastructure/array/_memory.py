"""
Array construction and memory mixin.

This module defines `ArrayMemoryMixin`, which groups the factory constructors
(literal, zeros/ones/full, NumPy interop) and the memory utilities (fill,
clone, conversion back to Python/NumPy) of the concrete `Array`.

Design notes
------------
- To avoid circular imports, factories construct arrays via ``cls`` and
  instance methods via ``type(self)``.
- Every factory validates its inputs completely before any storage is
  allocated; there is no partially-built array on failure.
- Conversions (`to_numpy`, `tolist`, `clone`) always copy.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Type, Union

import numpy as np

from ...domain._array import IArray
from ...domain._dtype import DType
from ...domain._errors import DtypeMismatchError
from ...domain._literal import describe_literal, validate_literal
from ...domain._shape_index import ShapeIndex
from ..storage._numeric_storage import NumericStorage

logger = logging.getLogger(__name__)

Number = Union[int, float]


class ArrayMemoryMixin:
    """
    Factory constructors and memory helpers for the concrete `Array`.

    Notes
    -----
    Methods assume the host class provides:
    - ``__init__(shape, dtype, *, storage=None)``
    - ``_shape_index``, ``_dtype`` and ``_storage`` attributes
    """

    @classmethod
    def from_literal(
        cls: Type[IArray], literal: Any, dtype: Optional[Any] = None
    ) -> IArray:
        """
        Build an array from a nested literal.

        Parameters
        ----------
        literal : Any
            Nested lists/tuples of scalars, e.g. ``[[1, 2], [3, 4]]``. A flat
            sequence yields a rank-1 array.
        dtype : optional
            Requested kind. If omitted it is inferred: float64 if any scalar is
            a float, otherwise int64.

        Returns
        -------
        Array
            A new array owning a row-major copy of the values.

        Raises
        ------
        RaggedArrayError
            If sibling sub-sequences have different shapes.
        InvalidShapeError
            If the literal is a bare scalar or contains an empty sequence.
        DtypeMismatchError
            If float values are given with ``dtype=int64``.
        """
        if isinstance(literal, np.ndarray):
            return cls.from_numpy(literal, dtype=dtype)

        desc = describe_literal(literal)
        shape = validate_literal(desc.values, desc.extents)
        kind = DType.infer(desc.values) if dtype is None else DType.parse(dtype)

        storage = NumericStorage(kind, desc.values)
        logger.debug("built %s array of shape %s from literal", kind, shape.extents)
        return cls(shape, kind, storage=storage)

    @classmethod
    def from_numpy(cls: Type[IArray], arr: Any, dtype: Optional[Any] = None) -> IArray:
        """
        Build an array from a NumPy array (copied).

        Integer arrays map to int64 and floating arrays to float64 unless
        `dtype` is given.

        Raises
        ------
        DtypeMismatchError
            For unsupported NumPy dtypes (bool, complex, object, ...).
        InvalidShapeError
            For 0-d arrays or arrays with a zero extent.
        """
        arr = np.asarray(arr)
        if dtype is None:
            if arr.dtype.kind in "iu":
                dtype = DType.INT64
            elif arr.dtype.kind == "f":
                dtype = DType.FLOAT64
            else:
                raise DtypeMismatchError("int64 or float64", str(arr.dtype))
        kind = DType.parse(dtype)
        shape = ShapeIndex.from_extents(arr.shape)
        return cls(shape, kind, storage=NumericStorage(kind, arr))

    @classmethod
    def full(
        cls: Type[IArray],
        shape: Sequence[int],
        value: Number,
        dtype: Optional[Any] = None,
    ) -> IArray:
        """
        Create an array with every element set to `value`.

        When `dtype` is omitted it is inferred from `value` (int -> int64,
        float -> float64).
        """
        kind = DType.infer([value]) if dtype is None else DType.parse(dtype)
        out = cls(shape, kind)
        out.fill(value)
        return out

    @classmethod
    def zeros(cls: Type[IArray], shape: Sequence[int], dtype: Any = DType.FLOAT64) -> IArray:
        """
        Create a zero-filled array.
        """
        return cls(shape, dtype)

    @classmethod
    def ones(cls: Type[IArray], shape: Sequence[int], dtype: Any = DType.FLOAT64) -> IArray:
        """
        Create an array filled with ones.
        """
        return cls.full(shape, 1, dtype=dtype)

    def fill(self, value: Number) -> None:
        """
        Set every element to `value`, in place.

        The scalar is validated against the array's dtype first (a float into
        an int64 array raises `DtypeMismatchError`), so a rejected value
        leaves the array unchanged.
        """
        self._storage.fill(value)

    def clone(self) -> IArray:
        """
        Return an independently owned copy with the same shape and dtype.
        """
        return type(self)(self._shape_index, self._dtype, storage=self._storage.copy())

    def to_numpy(self) -> np.ndarray:
        """
        Return a writable N-d NumPy copy of the data.
        """
        return self._storage.read_all().reshape(self._shape_index.extents).copy()

    def tolist(self) -> list:
        """
        Return the data as nested Python lists (inverse of `from_literal`).
        """
        return self.to_numpy().tolist()
