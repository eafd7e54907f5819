"""
Flat numeric storage (NumPy backend).

`NumericStorage` is the arena an `Array` indexes into: one contiguous,
exclusively owned, one-dimensional NumPy buffer of a single `DType`. Shapes
and strides are layered on top by the array; storage only knows linear
offsets.

Design notes
------------
- Element access (`get` / `set`) is bounds-checked against `length()`.
- Bulk reads go through `read_all()`, which returns a *read-only* view.
  All array operations read storage exclusively through `get` and
  `read_all`, so a subclass can observe every read.
- Bulk writes go through `write_all()` / `fill()`; values are validated by
  the storage's dtype first, so a failed write leaves the buffer untouched.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np

from ...domain._dtype import DType, INT64_MAX, INT64_MIN
from ...domain._errors import (
    DtypeMismatchError,
    IndexOutOfBoundsError,
    IntegerOverflowError,
    ShapeMismatchError,
)

Number = Union[int, float]


class NumericStorage:
    """
    Contiguous 1-D buffer of int64 or float64 scalars.

    Parameters
    ----------
    dtype : DType
        Storage kind.
    values : array-like
        Initial scalars in linear order. They are always copied.

    Raises
    ------
    TypeError
        If a value is not a real number.
    DtypeMismatchError
        If non-integral values are given for an int64 storage.
    IntegerOverflowError
        If an integral value does not fit in int64.
    """

    __slots__ = ("_dtype", "_buffer")

    def __init__(self, dtype: DType, values: Any) -> None:
        self._dtype = DType.parse(dtype)
        self._buffer = self._to_buffer(self._dtype, values)

    @classmethod
    def allocate(cls, dtype: DType, length: int) -> "NumericStorage":
        """
        Create a zero-initialized storage of `length` elements.
        """
        dtype = DType.parse(dtype)
        return cls._adopt(dtype, np.zeros((int(length),), dtype=dtype.numpy_dtype))

    @classmethod
    def _adopt(cls, dtype: DType, buffer: np.ndarray) -> "NumericStorage":
        """
        Wrap a freshly computed buffer without copying it.

        Internal: the caller guarantees that nobody else holds `buffer`.
        """
        obj = cls.__new__(cls)
        obj._dtype = dtype
        obj._buffer = np.ascontiguousarray(buffer, dtype=dtype.numpy_dtype).reshape(-1)
        return obj

    @staticmethod
    def _to_buffer(dtype: DType, values: Any) -> np.ndarray:
        if isinstance(values, np.ndarray):
            return NumericStorage._from_ndarray(dtype, values)
        coerced = [dtype.coerce(v) for v in values]
        return np.array(coerced, dtype=dtype.numpy_dtype).reshape(-1)

    @staticmethod
    def _from_ndarray(dtype: DType, arr: np.ndarray) -> np.ndarray:
        if arr.dtype == dtype.numpy_dtype:
            return np.array(arr, dtype=dtype.numpy_dtype, copy=True).reshape(-1)

        kind = arr.dtype.kind
        if dtype.is_floating and kind in "iuf":
            return arr.astype(np.float64).reshape(-1)
        if dtype.is_integral and kind in "iu":
            if arr.size and (int(arr.min()) < INT64_MIN or int(arr.max()) > INT64_MAX):
                raise IntegerOverflowError("storage conversion")
            return arr.astype(np.int64).reshape(-1)
        raise DtypeMismatchError(dtype.value, str(arr.dtype))

    @property
    def dtype(self) -> DType:
        return self._dtype

    def length(self) -> int:
        """
        Return the number of stored scalars.
        """
        return int(self._buffer.shape[0])

    def __len__(self) -> int:
        return self.length()

    def _check_offset(self, offset: int) -> int:
        if isinstance(offset, bool) or not isinstance(offset, (int, np.integer)):
            raise IndexOutOfBoundsError(offset, (self.length(),))
        if offset < 0 or offset >= self.length():
            raise IndexOutOfBoundsError(offset, (self.length(),))
        return int(offset)

    def get(self, offset: int) -> Number:
        """
        Read one scalar at a linear offset.

        Returns
        -------
        int or float
            A Python scalar of the storage's kind.

        Raises
        ------
        IndexOutOfBoundsError
            If `offset` is outside ``[0, length())``.
        """
        return self._buffer[self._check_offset(offset)].item()

    def set(self, offset: int, value: Number) -> None:
        """
        Write one scalar at a linear offset.

        The value is validated by `DType.coerce` before the buffer is touched.
        """
        i = self._check_offset(offset)
        self._buffer[i] = self._dtype.coerce(value)

    def read_all(self) -> np.ndarray:
        """
        Return a read-only 1-D view of the whole buffer.
        """
        view = self._buffer.view()
        view.flags.writeable = False
        return view

    def write_all(self, values: np.ndarray) -> None:
        """
        Replace every element with `values` (same length, compatible dtype).

        Raises
        ------
        ShapeMismatchError
            If the number of values differs from `length()`.
        """
        buffer = self._to_buffer(self._dtype, values)
        if buffer.shape[0] != self.length():
            raise ShapeMismatchError(f"{self.length()} values", f"{buffer.shape[0]} values")
        self._buffer[...] = buffer

    def fill(self, value: Number) -> None:
        """
        Set every element to `value` (validated by the storage's dtype).
        """
        self._buffer.fill(self._dtype.coerce(value))

    def copy(self) -> "NumericStorage":
        """
        Return an independent copy (no shared bytes).
        """
        return NumericStorage._adopt(self._dtype, self.read_all().copy())

    def __repr__(self) -> str:
        return f"NumericStorage(dtype={self._dtype}, length={self.length()})"
