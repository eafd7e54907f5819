"""
Arithmetic mixin and dtype-specific implementations for Array operations.

This package aggregates the arithmetic Array mixin and its concrete
control-path implementations:

- addition        (``__add__`` / ``__radd__``)
- subtraction     (``__sub__`` / ``__rsub__``)
- multiplication  (``__mul__`` / ``__rmul__``)
- division        (``__truediv__`` / ``__rtruediv__``)

Implementation modules are imported for their side effect of registering
int64 and float64 control paths; only the mixin is public.
"""

from ._array_addition import *
from ._array_subtraction import *
from ._array_multiplication import *
from ._array_division import *
from ._base import ArrayMixinArithmetic

__all__ = [
    ArrayMixinArithmetic.__name__,
]
