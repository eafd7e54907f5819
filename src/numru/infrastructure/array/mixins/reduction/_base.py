"""
Reduction mixin defining the public Array reduction API.

This module declares :class:`ArrayMixinReduction`. Its public methods
(`mean`, `min`, `max`) do no numerical work: they return a deferred
`ReductionBuilder` bound to the array. The builder later calls one of the
private kernels (`_reduce_mean`, `_reduce_min`, `_reduce_max`), whose int64 and
float64 implementations are registered through the dtype control-path
manager.
"""

from __future__ import annotations

from abc import ABC
from typing import Optional, Union

import numpy as np

from .....domain._array import IArray
from .....domain._dtype import DType
from .....domain._errors import EmptyReductionError
from .....domain._ops import ReductionKind
from ....storage._numeric_storage import NumericStorage
from ._reduction_builder import ReductionBuilder

Number = Union[int, float]


class ArrayMixinReduction(ABC):
    """
    Abstract mixin defining reductions for arrays.

    Notes
    -----
    - `mean` on int64 data promotes to float64 before summing; its result is
      always float64.
    - float64 `min`/`max`/`mean` propagate NaN: if any reduced element is NaN,
      the result is NaN.
    - Summation order is fixed by NumPy's reduction and identical on every
      call, so repeated executions give bit-identical results.
    """

    def mean(self: IArray) -> ReductionBuilder:
        """
        Start building an arithmetic-mean reduction.

        Returns
        -------
        ReductionBuilder
            Unexecuted builder; call ``.compute()`` (optionally after
            ``.axis(k)``) to obtain the result.
        """
        return ReductionBuilder(self, ReductionKind.MEAN)

    def min(self: IArray) -> ReductionBuilder:
        """
        Start building a minimum reduction.
        """
        return ReductionBuilder(self, ReductionKind.MIN)

    def max(self: IArray) -> ReductionBuilder:
        """
        Start building a maximum reduction.
        """
        return ReductionBuilder(self, ReductionKind.MAX)

    # ------------------------------------------------------------------
    # Kernel hooks (dispatched on dtype)
    # ------------------------------------------------------------------
    def _reduce_mean(self: IArray, axis: Optional[int] = None) -> Union[float, IArray]:
        """
        Compute the mean over all elements, or along `axis`.
        """
        ...

    def _reduce_min(self: IArray, axis: Optional[int] = None) -> Union[Number, IArray]:
        """
        Compute the minimum over all elements, or along `axis`.
        """
        ...

    def _reduce_max(self: IArray, axis: Optional[int] = None) -> Union[Number, IArray]:
        """
        Compute the maximum over all elements, or along `axis`.
        """
        ...

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------
    def _reduction_input(self: IArray, op: str) -> np.ndarray:
        """
        Read the storage once as an N-d read-only view.

        Raises
        ------
        EmptyReductionError
            If the storage holds no elements.
        """
        data = self._storage.read_all()
        if data.size == 0:
            raise EmptyReductionError(op)
        return data.reshape(self.shape)

    def _reduction_output(
        self: IArray, result: np.ndarray, axis: int, dtype: DType
    ) -> Union[Number, IArray]:
        """
        Wrap an axis-reduction result.

        A rank-1 source collapses to a Python scalar; otherwise a new array of
        the source shape with `axis` removed is returned.
        """
        if self.ndim == 1:
            return np.asarray(result).astype(dtype.numpy_dtype).item()
        shape = self.shape_index.without_axis(axis)
        storage = NumericStorage._adopt(dtype, np.asarray(result).reshape(-1))
        return type(self)(shape, dtype, storage=storage)
