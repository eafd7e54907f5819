"""
NumPy-backed implementation of the numru array engine.
"""

from .storage import NumericStorage
from .array import Array, ReductionBuilder
from .visualization import (
    PrintOptions,
    VisualizeBuilder,
    get_print_options,
    print_options,
    set_print_options,
)
from ._functional import apply, array, full, ones, reshape, zeros
