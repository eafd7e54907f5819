"""
Dtype-specific implementations of Array subtraction via control-path dispatch.
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


@array_control_path_manager(AMA, AMA.__sub__, DType.INT64)
def array_sub_int64(self: IArray, other: Union[IArray, Number]) -> IArray:
    a, b = self._binary_operands(other)
    return self._from_result(checked_binary("subtract", operator.sub, a, b))


@array_control_path_manager(AMA, AMA.__sub__, DType.FLOAT64)
def array_sub_float64(self: IArray, other: Union[IArray, Number]) -> IArray:
    a, b = self._binary_operands(other)
    with np.errstate(over="ignore", invalid="ignore"):
        out = a - b
    return self._from_result(out)
