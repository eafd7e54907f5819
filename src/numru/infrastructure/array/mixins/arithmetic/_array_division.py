"""
Dtype-specific implementations of Array division via control-path dispatch.

The two kinds deliberately differ on a zero divisor:

- int64 raises `DivisionByZeroError` and produces no result;
- float64 follows IEEE-754 (``1/0 == inf``, ``-1/0 == -inf``, ``0/0 == nan``).
"""

from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain._dtype import DType
from ._base import ArrayMixinArithmetic as AMA
from ._int64_kernels import checked_floor_divide

Number = Union[int, float]


@array_control_path_manager(AMA, AMA.__truediv__, DType.INT64)
def array_div_int64(self: IArray, other: Union[IArray, Number]) -> IArray:
    """
    int64 control path for element-wise division (floor division).

    Raises
    ------
    DivisionByZeroError
        If any divisor is zero.
    IntegerOverflowError
        For ``INT64_MIN / -1``.
    """
    a, b = self._binary_operands(other)
    return self._from_result(checked_floor_divide(a, b))


@array_control_path_manager(AMA, AMA.__truediv__, DType.FLOAT64)
def array_div_float64(self: IArray, other: Union[IArray, Number]) -> IArray:
    """
    float64 control path for element-wise division.

    NumPy's divide/invalid/overflow warnings are suppressed: non-finite
    results are values, not errors.
    """
    a, b = self._binary_operands(other)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        out = a / b
    return self._from_result(out)
