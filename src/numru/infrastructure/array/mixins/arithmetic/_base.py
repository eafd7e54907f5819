"""
Arithmetic mixin defining element-wise Array operators.

This module declares :class:`ArrayMixinArithmetic`, the mixin that specifies
the public API and semantics of element-wise addition, subtraction,
multiplication and division.

The operator methods themselves are interface declarations: concrete int64 and
float64 implementations live in sibling modules and are registered through
the dtype control-path manager. The mixin also provides the shared operand
validation used by every implementation.
"""

from __future__ import annotations

from abc import ABC
from numbers import Real
from typing import Union

import numpy as np

from .....domain._array import IArray
from .....domain._errors import DtypeMismatchError, ShapeMismatchError
from ....storage._numeric_storage import NumericStorage

Number = Union[int, float]


class ArrayMixinArithmetic(ABC):
    """
    Abstract mixin defining element-wise arithmetic for arrays.

    Notes
    -----
    - Operands must have exactly the same shape; there is no broadcasting.
    - Operands must share the same dtype; mixed int64/float64 operations
      raise `DtypeMismatchError`.
    - A Python scalar operand is lifted to an array of the receiver's shape
      and dtype before the operation.
    - Each output element depends only on the input elements at the same
      linear offset.
    - Results are new arrays; operands are never modified.
    """

    def _as_array_like(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Return `other` as an array compatible with `self`.

        Raises
        ------
        TypeError
            If `other` is neither an array nor a real scalar.
        DtypeMismatchError
            If a float scalar is combined with an int64 array.
        """
        if isinstance(other, ArrayMixinArithmetic):
            return other
        if isinstance(other, Real) and not isinstance(other, (bool, np.bool_)):
            return type(self).full(self.shape, other, dtype=self.dtype)
        raise TypeError(f"Unsupported operand type: {type(other)!r}")

    def _binary_operands(
        self: IArray, other: Union[IArray, Number]
    ) -> tuple[np.ndarray, np.ndarray]:
        """
        Validate a binary operation and return both flat buffers.

        Shapes are checked before dtypes.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        DtypeMismatchError
            If the dtypes differ.
        """
        other_a = self._as_array_like(other)
        if self.shape != other_a.shape:
            raise ShapeMismatchError(self.shape, other_a.shape)
        if self.dtype is not other_a.dtype:
            raise DtypeMismatchError(self.dtype.value, other_a.dtype.value)
        return self._storage.read_all(), other_a._storage.read_all()

    def _from_result(self: IArray, buffer: np.ndarray) -> IArray:
        """
        Wrap a freshly computed flat buffer as an array shaped like `self`.
        """
        storage = NumericStorage._adopt(self.dtype, buffer)
        return type(self)(self.shape_index, self.dtype, storage=storage)

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Element-wise addition.

        Parameters
        ----------
        other : Union[IArray, Number]
            Right-hand operand of the same shape and dtype, or a scalar.

        Returns
        -------
        IArray
            New array holding ``self + other``.

        Notes
        -----
        - int64: exact, raises `IntegerOverflowError` instead of wrapping.
        - float64: IEEE-754 (inf/nan propagate).
        """
        ...

    def __radd__(self: IArray, other: Number) -> IArray:
        """
        Right-hand addition (``scalar + array``).

        Addition is commutative, so this delegates to :meth:`__add__`.
        """
        return self.__add__(other)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Element-wise subtraction ``self - other``.

        Notes
        -----
        Overflow policy matches :meth:`__add__`.
        """
        ...

    def __rsub__(self: IArray, other: Number) -> IArray:
        """
        Right-hand subtraction (``scalar - array``).

        The scalar is lifted to an array compatible with ``self`` first.
        """
        return self._as_array_like(other).__sub__(self)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Element-wise multiplication ``self * other``.
        """
        ...

    def __rmul__(self: IArray, other: Number) -> IArray:
        return self.__mul__(other)

    # ----------------------------
    # Division
    # ----------------------------
    def __truediv__(self: IArray, other: Union[IArray, Number]) -> IArray:
        """
        Element-wise division ``self / other``.

        The result keeps the operands' dtype.

        Notes
        -----
        - int64: floor division (``7 / 2 == 3``, ``-7 / 2 == -4``). A zero
          divisor anywhere raises `DivisionByZeroError` before any result is
          produced; ``INT64_MIN / -1`` raises `IntegerOverflowError`.
        - float64: IEEE-754; ``x / 0`` yields ``±inf`` or ``nan`` and never
          raises.
        """
        ...

    def __rtruediv__(self: IArray, other: Number) -> IArray:
        """
        Right-hand division (``scalar / array``).
        """
        return self._as_array_like(other).__truediv__(self)
