"""
numru: a small N-dimensional array library with NumPy-like semantics.

Arrays are built from nested literals, hold int64 or float64 values in flat
row-major storage, and expose element-wise arithmetic plus deferred
("builder-style") reductions and visualization::

    >>> import numru
    >>> a = numru.array([[1.5, -2.0], [3.25, 4.0]])
    >>> a.max().compute()
    4.0
    >>> text = a.visualize().decimal_points(1).render()
"""

import logging

from .domain import (
    ArrayError,
    BinaryOp,
    DivisionByZeroError,
    DType,
    DtypeMismatchError,
    EmptyReductionError,
    IncompatibleReshapeError,
    IndexOutOfBoundsError,
    IntegerOverflowError,
    InvalidAxisError,
    InvalidShapeError,
    RaggedArrayError,
    ReductionKind,
    ShapeIndex,
    ShapeMismatchError,
    ShapeOverflowError,
)
from .infrastructure import (
    Array,
    NumericStorage,
    PrintOptions,
    ReductionBuilder,
    VisualizeBuilder,
    apply,
    array,
    full,
    get_print_options,
    ones,
    print_options,
    reshape,
    set_print_options,
    zeros,
)

int64 = DType.INT64
float64 = DType.FLOAT64

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
