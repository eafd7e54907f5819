"""
Dtype-specific implementations of Array addition via control-path dispatch.

The public operator entrypoint is `ArrayMixinArithmetic.__add__`; this module
registers its int64 (checked) and float64 (IEEE) control paths.
"""

import operator
from typing import Union

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain._dtype import DType
from ._base import ArrayMixinArithmetic as AMA
from ._int64_kernels import checked_binary

Number = Union[int, float]


@array_control_path_manager(AMA, AMA.__add__, DType.INT64)
def array_add_int64(self: IArray, other: Union[IArray, Number]) -> IArray:
    """
    int64 control path for element-wise addition.

    Raises
    ------
    IntegerOverflowError
        If any sum leaves the int64 range.
    """
    a, b = self._binary_operands(other)
    return self._from_result(checked_binary("add", operator.add, a, b))


@array_control_path_manager(AMA, AMA.__add__, DType.FLOAT64)
def array_add_float64(self: IArray, other: Union[IArray, Number]) -> IArray:
    """
    float64 control path for element-wise addition.

    Overflow to ``inf`` and ``inf + -inf == nan`` follow IEEE-754 silently.
    """
    a, b = self._binary_operands(other)
    with np.errstate(over="ignore", invalid="ignore"):
        out = a + b
    return self._from_result(out)
