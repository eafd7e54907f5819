"""
Dtype-specific implementations of the min reduction.

The float64 path relies on `numpy.minimum` semantics: a NaN anywhere in a
reduced lane makes that lane's result NaN.
"""

from typing import Optional, Union

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain._dtype import DType
from ._base import ArrayMixinReduction as AMR

Number = Union[int, float]


@array_control_path_manager(AMR, AMR._reduce_min, DType.INT64)
def array_min_int64(self: IArray, axis: Optional[int] = None) -> Union[Number, IArray]:
    data = self._reduction_input("min")
    if axis is None:
        return int(np.minimum.reduce(data.reshape(-1)))
    return self._reduction_output(np.minimum.reduce(data, axis=axis), axis, DType.INT64)


@array_control_path_manager(AMR, AMR._reduce_min, DType.FLOAT64)
def array_min_float64(self: IArray, axis: Optional[int] = None) -> Union[Number, IArray]:
    """
    float64 min; NaN-propagating (never skips NaN like ``nanmin``).
    """
    data = self._reduction_input("min")
    with np.errstate(invalid="ignore"):
        if axis is None:
            return float(np.minimum.reduce(data.reshape(-1)))
        out = np.minimum.reduce(data, axis=axis)
    return self._reduction_output(out, axis, DType.FLOAT64)
