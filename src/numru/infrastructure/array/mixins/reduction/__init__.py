"""
Reduction mixin, deferred builder and dtype-specific kernels.

- ``mean`` : arithmetic mean (int64 promoted to float64)
- ``min``  : minimum (NaN-propagating on float64)
- ``max``  : maximum (NaN-propagating on float64)

The kernel modules are imported for their side effect of registering control
paths; the public names are the mixin and `ReductionBuilder`.
"""

from ._array_max import *
from ._array_mean import *
from ._array_min import *
from ._base import ArrayMixinReduction
from ._reduction_builder import ReductionBuilder

__all__ = [
    ArrayMixinReduction.__name__,
    ReductionBuilder.__name__,
]
