"""
Operation tags for element-wise arithmetic and reductions.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class BinaryOp(Enum):
    """
    Element-wise binary operators.

    The value of each member is the Python operator method it maps to on
    arrays, so ``getattr(a, op.value)(b)`` applies it.
    """

    ADD = "__add__"
    SUBTRACT = "__sub__"
    MULTIPLY = "__mul__"
    DIVIDE = "__truediv__"

    @classmethod
    def parse(cls, op: Union["BinaryOp", str]) -> "BinaryOp":
        """
        Accept a `BinaryOp` or a lowercase name such as ``"add"``.

        Raises
        ------
        ValueError
            If the name is unknown.
        """
        if isinstance(op, BinaryOp):
            return op
        try:
            return cls[str(op).upper()]
        except KeyError:
            raise ValueError(
                f"Unknown binary op {op!r}; expected one of "
                f"{[m.name.lower() for m in cls]}"
            ) from None


class ReductionKind(Enum):
    """
    Reductions supported by `ReductionBuilder`.
    """

    MEAN = "mean"
    MIN = "min"
    MAX = "max"
