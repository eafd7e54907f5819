"""
Dtype-specific implementations of the mean reduction.

- int64: values are promoted to float64 before summation.
- float64: NaN and infinities propagate per IEEE-754.

Both kinds sum with NumPy's fixed-order reduction and divide by the number of
reduced elements, so results are deterministic across calls.
"""

from typing import Optional, Union

import numpy as np

from ..._array_builder import array_control_path_manager
from .....domain._array import IArray
from .....domain._dtype import DType
from ._base import ArrayMixinReduction as AMR


def _mean(data: np.ndarray, axis: Optional[int]) -> Union[float, np.ndarray]:
    with np.errstate(over="ignore", invalid="ignore"):
        if axis is None:
            return float(np.add.reduce(data.reshape(-1)) / data.size)
        return np.add.reduce(data, axis=axis) / data.shape[axis]


@array_control_path_manager(AMR, AMR._reduce_mean, DType.INT64)
def array_mean_int64(self: IArray, axis: Optional[int] = None) -> Union[float, IArray]:
    """
    int64 mean; promotes to float64 so large sums cannot wrap.
    """
    data = self._reduction_input("mean").astype(np.float64)
    out = _mean(data, axis)
    if axis is None:
        return out
    return self._reduction_output(out, axis, DType.FLOAT64)


@array_control_path_manager(AMR, AMR._reduce_mean, DType.FLOAT64)
def array_mean_float64(self: IArray, axis: Optional[int] = None) -> Union[float, IArray]:
    data = self._reduction_input("mean")
    out = _mean(data, axis)
    if axis is None:
        return out
    return self._reduction_output(out, axis, DType.FLOAT64)
