"""
Global print options for array visualization.

Options are held in a single module-level `PrintOptions` record and read by
`VisualizeBuilder` at execution time (never when a builder is created).

Fields
------
decimal_points : Optional[int]
    Digits after the decimal point for float64 values. ``None`` renders each
    float in its natural (shortest round-trip) form.
indent : int
    Spaces added per bracket nesting level.
separator : str
    Text placed between elements of a row.
"""

from __future__ import annotations

import operator
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class PrintOptions:
    """
    Immutable set of visualization defaults.
    """

    decimal_points: Optional[int] = None
    indent: int = 3
    separator: str = ", "

    def __post_init__(self) -> None:
        if self.decimal_points is not None:
            object.__setattr__(
                self, "decimal_points", _non_negative("decimal_points", self.decimal_points)
            )
        object.__setattr__(self, "indent", _non_negative("indent", self.indent))
        if not isinstance(self.separator, str):
            raise TypeError(f"separator must be a str, got {type(self.separator)!r}")


def _non_negative(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    try:
        n = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an int, got {value!r}") from None
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}")
    return n


_OPTIONS = PrintOptions()
_FIELD_NAMES = frozenset(f.name for f in fields(PrintOptions))


def get_print_options() -> PrintOptions:
    """
    Return the current print options.
    """
    return _OPTIONS


def set_print_options(**overrides: Any) -> PrintOptions:
    """
    Replace selected print options and return the new set.

    Raises
    ------
    TypeError
        On unknown option names or wrongly typed values.
    ValueError
        On negative `decimal_points` / `indent`.
    """
    global _OPTIONS
    unknown = set(overrides) - _FIELD_NAMES
    if unknown:
        raise TypeError(f"Unknown print option(s): {sorted(unknown)}")
    _OPTIONS = replace(_OPTIONS, **overrides)
    return _OPTIONS


@contextmanager
def print_options(**overrides: Any) -> Iterator[PrintOptions]:
    """
    Temporarily override print options within a ``with`` block.
    """
    global _OPTIONS
    previous = _OPTIONS
    try:
        yield set_print_options(**overrides)
    finally:
        _OPTIONS = previous
