"""
Dtype-specific implementations of the max reduction.

Mirror of the min reduction: int64 returns exact integers, float64 propagates
NaN per lane.
"""

from typing import Optional, Union

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain._dtype import DType
from ._base import ArrayMixinReduction as AMR

Number = Union[int, float]


@array_control_path_manager(AMR, AMR._reduce_max, DType.INT64)
def array_max_int64(self: IArray, axis: Optional[int] = None) -> Union[Number, IArray]:
    data = self._reduction_input("max")
    if axis is None:
        return int(np.maximum.reduce(data.reshape(-1)))
    return self._reduction_output(np.maximum.reduce(data, axis=axis), axis, DType.INT64)


@array_control_path_manager(AMR, AMR._reduce_max, DType.FLOAT64)
def array_max_float64(self: IArray, axis: Optional[int] = None) -> Union[Number, IArray]:
    data = self._reduction_input("max")
    with np.errstate(invalid="ignore"):
        if axis is None:
            return float(np.maximum.reduce(data.reshape(-1)))
        out = np.maximum.reduce(data, axis=axis)
    return self._reduction_output(out, axis, DType.FLOAT64)
