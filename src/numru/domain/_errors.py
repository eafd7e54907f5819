"""
Array-related exceptions for numru.

This module defines the error kinds raised by array construction, indexing,
reshaping, element-wise arithmetic and reductions. Every operation validates
its preconditions eagerly and fails with one of these types instead of
producing a partially-built array or silently truncating data.

Each error derives from `ArrayError` and from the closest builtin exception
(e.g. `ValueError`, `IndexError`) so callers can catch either the specific
numru type or the generic Python one.

Floating-point domain issues (NaN, Infinity) are *not* errors; they propagate
through arithmetic and reductions per IEEE-754.
"""

from __future__ import annotations

from typing import Any, Sequence


class ArrayError(Exception):
    """
    Base class of all numru array errors.
    """


class InvalidShapeError(ArrayError, ValueError):
    """
    Raised when a shape has no axes, or an extent is zero, negative or not
    an integer.

    Attributes
    ----------
    extents : tuple
        The rejected extents, as given by the caller.
    """

    def __init__(self, extents: Sequence[Any], reason: str) -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        extents : Sequence[Any]
            The extents that failed validation.
        reason : str
            Human-readable description of the violated rule.
        """
        super().__init__(f"Invalid shape {tuple(extents)!r}: {reason}")
        self.extents = tuple(extents)


class ShapeOverflowError(ArrayError, OverflowError):
    """
    Raised when the product of a shape's extents does not fit in a signed
    64-bit integer.
    """

    def __init__(self, extents: Sequence[int], limit: int) -> None:
        super().__init__(
            f"Element count of shape {tuple(extents)} exceeds the limit {limit}."
        )
        self.extents = tuple(extents)
        self.limit = limit


class IndexOutOfBoundsError(ArrayError, IndexError):
    """
    Raised when a coordinate or linear offset lies outside the valid range.

    Attributes
    ----------
    index : Any
        The offending coordinate tuple or linear offset.
    bounds : tuple
        The extents (or storage length) the index was checked against.
    """

    def __init__(self, index: Any, bounds: Sequence[int]) -> None:
        super().__init__(f"Index {index!r} is out of bounds for {tuple(bounds)}.")
        self.index = index
        self.bounds = tuple(bounds)


class RaggedArrayError(ArrayError, ValueError):
    """
    Raised when sibling sub-sequences of a nested literal report different
    shapes at the same nesting depth.

    Attributes
    ----------
    depth : int
        Nesting depth (0 = outermost) at which the siblings disagree.
    expected : tuple[int, ...]
        Shape reported by the first sibling.
    actual : tuple[int, ...]
        Shape reported by the first disagreeing sibling.
    """

    def __init__(
        self, depth: int, expected: tuple[int, ...], actual: tuple[int, ...]
    ) -> None:
        super().__init__(
            f"Ragged nested sequence at depth {depth}: "
            f"expected sub-shape {expected}, got {actual}."
        )
        self.depth = depth
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(ArrayError, ValueError):
    """
    Raised when two shapes (or a shape and a value count) must agree and do not.

    Used both for binary element-wise operations (no broadcasting) and for
    validating flat values against declared extents.
    """

    def __init__(self, expected: Any, actual: Any) -> None:
        super().__init__(f"Shape mismatch: {expected} vs {actual}")
        self.expected = expected
        self.actual = actual


class IncompatibleReshapeError(ArrayError, ValueError):
    """
    Raised when a reshape target cannot hold exactly the source's elements.
    """

    def __init__(self, source: tuple[int, ...], target: Sequence[int]) -> None:
        super().__init__(f"Cannot reshape array of shape {source} into {tuple(target)}")
        self.source = source
        self.target = tuple(target)


class DtypeMismatchError(ArrayError, TypeError):
    """
    Raised when operands or values do not share the required dtype.

    Attributes
    ----------
    expected : str
        Name of the required dtype.
    actual : str
        Name (or description) of the dtype actually supplied.
    """

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"dtype mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class DivisionByZeroError(ArrayError, ZeroDivisionError):
    """
    Raised by integer element-wise division when a divisor is zero.

    Float division never raises; it follows IEEE-754 (±inf / nan).
    """

    def __init__(self, offset: int) -> None:
        super().__init__(f"Integer division by zero at linear offset {offset}.")
        self.offset = offset


class EmptyReductionError(ArrayError, ValueError):
    """
    Raised when a reduction is executed over zero elements.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} of an empty array is undefined.")
        self.op = op


class IntegerOverflowError(ArrayError, OverflowError):
    """
    Raised when an int64 value or arithmetic result leaves the int64 range.

    Integer arithmetic is checked: results are computed exactly and rejected
    rather than wrapped or saturated.
    """

    def __init__(self, op: str, value: Any = None) -> None:
        detail = "" if value is None else f" (value {value!r})"
        super().__init__(f"int64 overflow in {op}{detail}.")
        self.op = op
        self.value = value


class InvalidAxisError(ArrayError, ValueError):
    """
    Raised when an axis argument is not a valid axis of the array.
    """

    def __init__(self, axis: Any, ndim: int) -> None:
        super().__init__(f"axis {axis!r} is out of bounds for array of rank {ndim}")
        self.axis = axis
        self.ndim = ndim
