"""
Nested literal shape inference.

Turns a nested literal description (a scalar, or homogeneous nested lists /
tuples of scalars) into a flat row-major value list plus the per-level
extents, and validates that description before an array is built from it.

Two steps are kept separate:

- `describe_literal` walks the nested structure, determines the extent of
  every nesting level and rejects ragged input.
- `validate_literal` checks a ``(flat_values, extents)`` pair, wherever it came
  from, before storage is allocated: the extents must form a valid
  `ShapeIndex` and describe exactly ``len(flat_values)`` elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ._errors import RaggedArrayError, ShapeMismatchError
from ._shape_index import ShapeIndex


@dataclass(frozen=True)
class LiteralDescription:
    """
    Flattened literal.

    Attributes
    ----------
    values : tuple
        Scalars in row-major order.
    extents : tuple[int, ...]
        Extent of each nesting level, outermost first. A bare scalar has
        ``extents == ()``.
    """

    values: tuple
    extents: tuple[int, ...]


def _is_nested(node: Any) -> bool:
    return isinstance(node, (list, tuple))


def _walk(node: Any, depth: int, out: list) -> tuple[int, ...]:
    if not _is_nested(node):
        out.append(node)
        return ()

    sub_shape: tuple[int, ...] | None = None
    for child in node:
        child_shape = _walk(child, depth + 1, out)
        if sub_shape is None:
            sub_shape = child_shape
        elif child_shape != sub_shape:
            raise RaggedArrayError(depth + 1, sub_shape, child_shape)

    return (len(node),) + (sub_shape or ())


def describe_literal(literal: Any) -> LiteralDescription:
    """
    Flatten a nested literal and infer its extents.

    Parameters
    ----------
    literal : Any
        A scalar or arbitrarily nested lists/tuples of scalars.

    Returns
    -------
    LiteralDescription
        Flat values and per-level extents.

    Raises
    ------
    RaggedArrayError
        If sibling sub-sequences at the same depth have different shapes
        (including a scalar next to a sequence). Nothing is padded or
        truncated.

    Examples
    --------
    >>> describe_literal([[1, 2, 3], [4, 5, 6]]).extents
    (2, 3)
    """
    values: list = []
    extents = _walk(literal, 0, values)
    return LiteralDescription(values=tuple(values), extents=extents)


def validate_literal(values: Sequence[Any], extents: Sequence[int]) -> ShapeIndex:
    """
    Validate a flattened literal against its declared extents.

    Returns
    -------
    ShapeIndex
        The validated shape.

    Raises
    ------
    InvalidShapeError
        If the extents are empty or contain a non-positive extent.
    ShapeMismatchError
        If ``len(values) != product(extents)``.
    """
    shape = ShapeIndex.from_extents(extents)
    if len(values) != shape.element_count():
        raise ShapeMismatchError(
            f"{shape.element_count()} elements for shape {shape.extents}",
            f"{len(values)} values",
        )
    return shape
