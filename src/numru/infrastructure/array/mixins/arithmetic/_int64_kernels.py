"""
Checked int64 element-wise kernels.

int64 arithmetic is computed exactly on Python integers (NumPy ``object``
arrays) and then narrowed back to int64. Any result outside the int64 range
raises `IntegerOverflowError` instead of wrapping.
"""

from __future__ import annotations

import operator
from typing import Callable

import numpy as np

from .....domain._dtype import INT64_MAX, INT64_MIN
from .....domain._errors import DivisionByZeroError, IntegerOverflowError


def checked_binary(
    op_name: str,
    fn: Callable[[np.ndarray, np.ndarray], np.ndarray],
    a: np.ndarray,
    b: np.ndarray,
) -> np.ndarray:
    """
    Apply `fn` exactly to two int64 buffers and narrow the result to int64.

    Parameters
    ----------
    op_name : str
        Operation name used in the overflow error.
    fn : Callable
        Element-wise function over ``object`` arrays (e.g. `operator.add`).
    a, b : np.ndarray
        Flat int64 buffers of equal length.

    Raises
    ------
    IntegerOverflowError
        If any exact result leaves the int64 range.
    """
    exact = fn(a.astype(object), b.astype(object))
    for offset, v in enumerate(exact):
        if v < INT64_MIN or v > INT64_MAX:
            raise IntegerOverflowError(f"{op_name} at linear offset {offset}", v)
    return exact.astype(np.int64)


def checked_floor_divide(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Exact int64 floor division with zero-divisor and overflow checks.

    Raises
    ------
    DivisionByZeroError
        At the first linear offset whose divisor is zero.
    """
    zeros = np.flatnonzero(b == 0)
    if zeros.size:
        raise DivisionByZeroError(int(zeros[0]))
    return checked_binary("divide", operator.floordiv, a, b)
