"""
Deferred reduction builder.

A `ReductionBuilder` is a bound-but-not-executed reduction: it records the
source array, the reduction kind (mean/min/max) and an optional axis. No
element is read until `compute()` (or its synonym `execute()`) is called.

Typical usage
-------------
    a.max().compute()            # scalar over all elements
    a.mean().axis(1).compute()   # array reduced along axis 1
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, replace
from typing import Optional, Union

from .....domain._array import IArray
from .....domain._errors import InvalidAxisError
from .....domain._ops import ReductionKind

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True, eq=False, repr=False)
class ReductionBuilder:
    """
    Reduction bound to a source array, executed on demand.

    Attributes
    ----------
    source : IArray
        Array to reduce. The builder holds a reference only; it never
        mutates the source.
    kind : ReductionKind
        Which reduction to perform.
    reduce_axis : Optional[int]
        Axis to reduce along, or None to reduce over all elements.

    Notes
    -----
    - Construction and `axis()` only inspect the source's shape; they never
      read storage.
    - Each `compute()` call traverses the storage again and is deterministic:
      repeated calls return identical results.
    """

    source: IArray
    kind: ReductionKind
    reduce_axis: Optional[int] = None

    def axis(self, axis: int) -> "ReductionBuilder":
        """
        Return a builder reducing along `axis` instead of over all elements.

        Raises
        ------
        InvalidAxisError
            If `axis` is not an integer in ``[0, source.ndim)``.
        """
        if isinstance(axis, bool):
            raise InvalidAxisError(axis, self.source.ndim)
        try:
            ax = operator.index(axis)
        except TypeError:
            raise InvalidAxisError(axis, self.source.ndim) from None
        if ax < 0 or ax >= self.source.ndim:
            raise InvalidAxisError(axis, self.source.ndim)
        return replace(self, reduce_axis=ax)

    def compute(self) -> Union[Number, IArray]:
        """
        Execute the reduction.

        Returns
        -------
        int, float or IArray
            Without an axis: a Python scalar (``float`` for mean, the source's
            kind for min/max). With an axis: a new array with that axis
            removed, or a scalar when the source is rank-1.

        Raises
        ------
        EmptyReductionError
            If the source holds no elements.
        """
        logger.debug(
            "executing %s over %s (axis=%s)",
            self.kind.value,
            self.source.shape,
            self.reduce_axis,
        )
        impl = getattr(self.source, f"_reduce_{self.kind.value}")
        return impl(self.reduce_axis)

    def execute(self) -> Union[Number, IArray]:
        """
        Synonym of `compute`.
        """
        return self.compute()

    def __repr__(self) -> str:
        return (
            f"ReductionBuilder(kind={self.kind.value}, source={self.source!r}, "
            f"axis={self.reduce_axis})"
        )

