"""
Module-level convenience functions mirroring the `Array` surface.

These are thin wrappers so callers can write ``numru.array([[1, 2], [3, 4]])``
or ``numru.apply("add", a, b)`` without going through the class.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from ..domain._dtype import DType
from ..domain._ops import BinaryOp
from .array._array import Array

Number = Union[int, float]


def array(literal: Any, dtype: Optional[Any] = None) -> Array:
    """
    Build an array from a nested literal or a NumPy array.

    See `Array.from_literal`.
    """
    return Array.from_literal(literal, dtype=dtype)


def zeros(shape: Sequence[int], dtype: Any = DType.FLOAT64) -> Array:
    return Array.zeros(shape, dtype=dtype)


def ones(shape: Sequence[int], dtype: Any = DType.FLOAT64) -> Array:
    return Array.ones(shape, dtype=dtype)


def full(shape: Sequence[int], value: Number, dtype: Optional[Any] = None) -> Array:
    return Array.full(shape, value, dtype=dtype)


def reshape(a: Array, new_shape: Union[Sequence[int], int]) -> Array:
    """
    Return `a` reshaped to `new_shape` (always a copy).
    """
    return a.reshape(new_shape)


def apply(op: Union[BinaryOp, str], a: Array, b: Union[Array, Number]) -> Array:
    """
    Apply an element-wise binary operator.

    Parameters
    ----------
    op : BinaryOp or str
        ``"add"``, ``"subtract"``, ``"multiply"`` or ``"divide"`` (or the
        matching `BinaryOp` member).
    a : Array
        Left operand.
    b : Array or scalar
        Right operand; must have ``a``'s shape and dtype.

    Raises
    ------
    ValueError
        If `op` is not a known operator name.
    ShapeMismatchError, DtypeMismatchError, DivisionByZeroError
        As raised by the operator itself.
    """
    return getattr(a, BinaryOp.parse(op).value)(b)
