"""
Backend-agnostic contracts and value types for numru.
"""

from ._errors import (
    ArrayError,
    InvalidShapeError,
    ShapeOverflowError,
    IndexOutOfBoundsError,
    RaggedArrayError,
    ShapeMismatchError,
    IncompatibleReshapeError,
    DtypeMismatchError,
    DivisionByZeroError,
    EmptyReductionError,
    IntegerOverflowError,
    InvalidAxisError,
)
from ._dtype import DType
from ._shape_index import ShapeIndex
from ._ops import BinaryOp, ReductionKind
from ._literal import LiteralDescription, describe_literal, validate_literal
from ._array import IArray
