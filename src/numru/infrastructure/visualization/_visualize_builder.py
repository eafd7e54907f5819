"""
Deferred, configurable array formatter.

`VisualizeBuilder` binds a source array and an optional float precision. It
produces text only when `render()` (pure) or `execute()` (render and print) is
called.

Layout
------
- Rank-1 arrays render as one bracketed, separator-joined row::

      [42, -17, 256, 3, 99, -8]

- Rank >= 2 arrays render recursively: every axis above the innermost opens
  a bracket on its own line and indents its children by ``indent`` spaces;
  innermost rows are left-aligned and padded per column::

      [
         [6.3 , -3.1, 1.6 ]
         [2.7 , 1.0 , -7.4]
      ]

Column widths are the longest rendered value in each innermost column across
*all* rows of the array, so every value is formatted before any line is
built.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from ...domain._array import IArray
from ...domain._dtype import DType
from ..array._array_builder import array_control_path_manager
from ._options import PrintOptions, get_print_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class VisualizeBuilder:
    """
    Visualization bound to a source array, executed on demand.

    Attributes
    ----------
    source : IArray
        Array to render; only read during `render()` / `execute()`.
    precision : Optional[int]
        Decimal points for float64 values. ``None`` defers to the global
        print options.
    """

    source: IArray
    precision: Optional[int] = None

    @property
    def dtype(self) -> DType:
        """
        Storage kind of the source (dispatch key for value formatting).
        """
        return self.source.dtype

    def decimal_points(self, points: int) -> "VisualizeBuilder":
        """
        Return a builder that renders floats with `points` decimals.

        Integer arrays ignore the setting.

        Raises
        ------
        TypeError
            If `points` is not an integer.
        ValueError
            If `points` is negative.
        """
        if isinstance(points, bool):
            raise TypeError(f"decimal_points must be an int, got {points!r}")
        try:
            n = operator.index(points)
        except TypeError:
            raise TypeError(f"decimal_points must be an int, got {points!r}") from None
        if n < 0:
            raise ValueError(f"decimal_points must be >= 0, got {n}")
        return replace(self, precision=n)

    def _format_cells(self, values: np.ndarray, precision: Optional[int]) -> list[str]:
        """
        Render every stored value to text, in linear order.
        """
        ...

    def render(self) -> str:
        """
        Return the formatted text without printing it.

        Repeated calls with unchanged options return identical text.
        """
        options = get_print_options()
        precision = self.precision if self.precision is not None else options.decimal_points

        shape = self.source.shape_index
        cells = self._format_cells(self.source._storage.read_all(), precision)

        cols = shape.extents[-1]
        widths = [0] * cols
        for i, cell in enumerate(cells):
            j = i % cols
            if len(cell) > widths[j]:
                widths[j] = len(cell)

        lines: list[str] = []
        self._emit(cells, shape.extents, shape.strides(), widths, options, 0, 0, lines)
        return "\n".join(lines)

    @staticmethod
    def _emit(
        cells: list[str],
        extents: tuple[int, ...],
        strides: tuple[int, ...],
        widths: list[int],
        options: PrintOptions,
        axis: int,
        start: int,
        lines: list[str],
    ) -> None:
        pad = " " * (options.indent * axis)
        if axis == len(extents) - 1:
            row = options.separator.join(
                cells[start + j].ljust(widths[j]) for j in range(extents[axis])
            )
            lines.append(f"{pad}[{row}]")
            return

        lines.append(f"{pad}[")
        for i in range(extents[axis]):
            VisualizeBuilder._emit(
                cells,
                extents,
                strides,
                widths,
                options,
                axis + 1,
                start + i * strides[axis],
                lines,
            )
        lines.append(f"{pad}]")

    def execute(self) -> str:
        """
        Render the array, print it to standard output and return the text.

        Every call prints again.
        """
        text = self.render()
        logger.debug("visualized array of shape %s", self.source.shape)
        print(text)
        return text

    def __repr__(self) -> str:
        return f"VisualizeBuilder(source={self.source!r}, decimal_points={self.precision})"


@array_control_path_manager(
    VisualizeBuilder, VisualizeBuilder._format_cells, DType.INT64
)
def format_cells_int64(
    self: VisualizeBuilder, values: np.ndarray, precision: Optional[int]
) -> list[str]:
    # precision does not apply to integers
    return [str(v) for v in values.tolist()]


@array_control_path_manager(
    VisualizeBuilder, VisualizeBuilder._format_cells, DType.FLOAT64
)
def format_cells_float64(
    self: VisualizeBuilder, values: np.ndarray, precision: Optional[int]
) -> list[str]:
    """
    Fixed-point text with `precision` decimals, or the shortest round-trip
    form when `precision` is None. ``nan`` / ``inf`` / ``-inf`` are kept
    as-is.
    """
    if precision is None:
        return [repr(v) for v in values.tolist()]
    return [f"{v:.{precision}f}" for v in values.tolist()]
